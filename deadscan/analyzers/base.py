"""Building blocks shared by the dead symbol analyzers."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List, Pattern

from ..models import SourceFile


class SymbolExtractor(ABC):
    """Contract for components that discover declared symbol names in a file."""

    @abstractmethod
    def extract(self, source: SourceFile) -> List[str]:
        """Return declared names in the order they appear in ``source``."""


class RegexSymbolExtractor(SymbolExtractor):
    """Finds declarations with a single-group regular expression."""

    def __init__(self, pattern: str | Pattern[str], *, first_only: bool = False) -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.first_only = first_only

    def extract(self, source: SourceFile) -> List[str]:
        if self.first_only:
            match = self.pattern.search(source.text)
            return [match.group(1)] if match else []
        return [match.group(1) for match in self.pattern.finditer(source.text)]


def _accept_all(path: str) -> bool:
    return True


def _ignore_nothing(name: str, path: str) -> bool:
    return False


def _identity(name: str) -> str:
    return name


@dataclass(frozen=True)
class AnalyzerRules:
    """Everything that distinguishes one dead symbol analyzer from another.

    ``usage_template`` is formatted with the (mangled) symbol name and searched
    in the usage corpus as a regular expression. ``multi_file`` keeps every
    declaring file per name instead of the last one. ``anonymize_declarations``
    replaces each file's declared names with a random token before the text
    joins the corpus, so a declaration cannot count as its own use.
    """

    name: str
    label: str
    extractor: SymbolExtractor
    usage_template: str = "{name}"
    accepts_file: Callable[[str], bool] = _accept_all
    ignore: Callable[[str, str], bool] = _ignore_nothing
    mangle: Callable[[str], str] = _identity
    multi_file: bool = False
    anonymize_declarations: bool = False
    uses_routes: bool = False
    description: str = field(default="", compare=False)

    def usage_pattern(self, symbol: str) -> str:
        return self.usage_template.format(name=self.mangle(symbol))


__all__ = ["AnalyzerRules", "RegexSymbolExtractor", "SymbolExtractor"]
