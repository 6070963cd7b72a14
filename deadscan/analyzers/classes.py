"""Rules for finding controller classes nothing refers to."""

from __future__ import annotations

from .base import AnalyzerRules, RegexSymbolExtractor
from ..config import DeadScanConfig

CLASS_DECLARATION = r"class\s+(\w+)"


def build_class_rules(config: DeadScanConfig | None = None) -> AnalyzerRules:
    """Return rules that flag classes absent from the corpus and the route table.

    Only the first ``class`` declaration in each file is considered, and the
    name is anonymized in that file before it joins the usage corpus.
    """
    return AnalyzerRules(
        name="classes",
        label="classes",
        extractor=RegexSymbolExtractor(CLASS_DECLARATION, first_only=True),
        usage_template="{name}",
        anonymize_declarations=True,
        uses_routes=True,
        description="Find controller classes with no reference or route binding.",
    )


__all__ = ["CLASS_DECLARATION", "build_class_rules"]
