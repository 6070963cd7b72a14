"""Core data models shared across deadscan components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Union

# A class maps to its single owning file; a method maps to every declaring file.
Evidence = Union[str, List[str]]


@dataclass(frozen=True)
class SourceFile:
    """A scanned source file and its full text."""

    path: Path
    text: str


@dataclass(frozen=True)
class ClassCollision:
    """A class name declared again in a different file."""

    name: str
    previous: str
    current: str


@dataclass
class ScanSession:
    """Mutable state for a single scan, threaded through extraction and filtering."""

    symbols: Dict[str, Evidence] = field(default_factory=dict)
    corpus_chunks: List[str] = field(default_factory=list)
    collisions: List[ClassCollision] = field(default_factory=list)
    files_scanned: int = 0
    _corpus: str | None = field(default=None, init=False, repr=False)

    def append_text(self, text: str) -> None:
        if self._corpus is not None:
            raise RuntimeError("Usage corpus is frozen once filtering has started")
        self.corpus_chunks.append(text)

    @property
    def corpus(self) -> str:
        """Concatenated text of every scanned file, built on first access."""
        if self._corpus is None:
            self._corpus = "".join(self.corpus_chunks)
            self.corpus_chunks = []
        return self._corpus


@dataclass
class ScanResult:
    """Symbols left without usage evidence after filtering."""

    analyzer: str
    symbols: Dict[str, Evidence]
    files_scanned: int = 0
    declared: int = 0
    collisions: List[ClassCollision] = field(default_factory=list)

    def rows(self) -> List[tuple[str, str]]:
        """Return ``(name, file)`` pairs, using the first file for multi-file evidence."""
        rows: List[tuple[str, str]] = []
        for name, evidence in self.symbols.items():
            if isinstance(evidence, list):
                rows.append((name, evidence[0] if evidence else ""))
            else:
                rows.append((name, evidence))
        return rows
