"""Dead symbol analyzers and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Iterable, List, Sequence, Set

from .base import AnalyzerRules, RegexSymbolExtractor, SymbolExtractor
from .classes import build_class_rules
from .engine import DeadCodeEngine
from .methods import build_method_rules
from ..config import DeadScanConfig

_ENTRY_POINT_GROUP = "deadscan.analyzers"

RulesFactory = Callable[[DeadScanConfig | None], AnalyzerRules]

_BUILTIN_FACTORIES: dict[str, RulesFactory] = {
    "classes": build_class_rules,
    "methods": build_method_rules,
}


def discover_analyzers(
    enabled: Sequence[str] | None = None,
    config: DeadScanConfig | None = None,
) -> List[AnalyzerRules]:
    """Return analyzer rules, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}

    analyzers: List[AnalyzerRules] = []
    seen: Set[str] = set()

    def _add(name: str, factory: RulesFactory) -> None:
        key = name.lower()
        if enabled_set is not None and key not in enabled_set:
            return
        if key in seen:
            return
        rules = factory(config)
        if not isinstance(rules, AnalyzerRules):
            raise TypeError(f"Analyzer factory for '{name}' did not return AnalyzerRules")
        analyzers.append(rules)
        seen.add(key)
        if enabled_set is not None:
            enabled_set.discard(key)

    for name, factory in _BUILTIN_FACTORIES.items():
        _add(name, factory)

    for entry in _iter_entry_points():
        name = entry.name
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - plugin import failure
            raise RuntimeError(f"Failed to load analyzer entry point '{name}': {exc}") from exc

        def _factory(cfg: DeadScanConfig | None, obj: object = loaded) -> AnalyzerRules:
            return _coerce_rules(obj, cfg)

        _add(name, _factory)

    if enabled_set:
        missing = ", ".join(sorted(enabled_set))
        raise ValueError(f"Unknown analyzers requested: {missing}")

    return analyzers


def get_analyzer(name: str, config: DeadScanConfig | None = None) -> AnalyzerRules:
    """Return the rules for a single analyzer by name."""
    return discover_analyzers([name], config)[0]


def _coerce_rules(obj: object, config: DeadScanConfig | None) -> AnalyzerRules:
    if isinstance(obj, AnalyzerRules):
        return obj
    if callable(obj):
        rules = obj(config)
        if isinstance(rules, AnalyzerRules):
            return rules
    raise TypeError("Analyzer entry point must be AnalyzerRules or a factory returning them")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "AnalyzerRules",
    "DeadCodeEngine",
    "RegexSymbolExtractor",
    "SymbolExtractor",
    "discover_analyzers",
    "get_analyzer",
]
