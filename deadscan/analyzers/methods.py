"""Rules for finding functions and methods that are never called."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import FrozenSet, Sequence

from .base import AnalyzerRules, RegexSymbolExtractor
from ..config import DEFAULT_CRUD_NAMES, DEFAULT_EXCLUDED_MARKERS, DeadScanConfig
from ..mangling import mangle_method_name

FUNCTION_DECLARATION = r"function\s+([^ ]+?)\s*\("
CALL_TEMPLATE = "(->|::){name}"

_HOOK_GROUPS_RE = re.compile(r"(Middleware|Listeners|Commands)")


@dataclass(frozen=True)
class MethodIgnorePolicy:
    """Framework callbacks that are invoked by Laravel rather than by application code."""

    crud_names: FrozenSet[str] = field(default_factory=lambda: frozenset(DEFAULT_CRUD_NAMES))
    excluded_markers: tuple[str, ...] = DEFAULT_EXCLUDED_MARKERS

    def should_consider(self, path: str) -> bool:
        # Service providers, policies and observers register themselves.
        return not any(marker in path for marker in self.excluded_markers)

    def ignores(self, name: str, path: str) -> bool:
        if name == "handle" and _HOOK_GROUPS_RE.search(path):
            return True
        if name == "broadcastOn" and "Events" in path:
            return True
        return name in self.crud_names and "Controller" in path


def build_method_rules(config: DeadScanConfig | None = None) -> AnalyzerRules:
    """Return rules that flag methods never invoked through ``->`` or ``::``."""
    policy = _policy_from_config(config)
    return AnalyzerRules(
        name="methods",
        label="functions",
        extractor=RegexSymbolExtractor(FUNCTION_DECLARATION),
        usage_template=CALL_TEMPLATE,
        accepts_file=policy.should_consider,
        ignore=policy.ignores,
        mangle=mangle_method_name,
        multi_file=True,
        description="Find methods with no call site.",
    )


def _policy_from_config(config: DeadScanConfig | None) -> MethodIgnorePolicy:
    if config is None:
        return MethodIgnorePolicy()
    return MethodIgnorePolicy(
        crud_names=frozenset(config.methods.crud_names),
        excluded_markers=_as_tuple(config.methods.excluded_markers),
    )


def _as_tuple(values: Sequence[str]) -> tuple[str, ...]:
    return tuple(value for value in values if value)


__all__ = [
    "CALL_TEMPLATE",
    "FUNCTION_DECLARATION",
    "MethodIgnorePolicy",
    "build_method_rules",
]
