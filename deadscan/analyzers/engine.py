"""Generic dead symbol detection: extraction, corpus building and usage filtering."""

from __future__ import annotations

import re
import secrets
import string
from pathlib import Path
from typing import AbstractSet, Callable, Dict, Iterable

from .base import AnalyzerRules
from ..logging import get_logger
from ..models import ClassCollision, Evidence, ScanResult, ScanSession
from ..source_scanner import SourceWalker

_TOKEN_ALPHABET = string.ascii_letters + string.digits
TOKEN_LENGTH = 16


def random_token(length: int = TOKEN_LENGTH) -> str:
    return "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(length))


class DeadCodeEngine:
    """Runs one analyzer's rules over a set of scan roots."""

    def __init__(
        self,
        walker: SourceWalker | None = None,
        token_factory: Callable[[], str] | None = None,
    ) -> None:
        self.walker = walker or SourceWalker()
        self._token_factory = token_factory or random_token
        self.logger = get_logger("engine")

    def scan(
        self,
        rules: AnalyzerRules,
        roots: Iterable[Path],
        known_used: AbstractSet[str] = frozenset(),
    ) -> ScanResult:
        """Return the symbols declared under ``roots`` with no usage evidence."""
        session = ScanSession()
        for root in roots:
            self.extract(rules, root, session)
        declared = len(session.symbols)
        self.logger.debug(
            "%s: scanned %d files, declared %d symbols",
            rules.name,
            session.files_scanned,
            declared,
        )

        unused = self.filter_used(rules, session, known_used)
        self.logger.debug("%s: %d symbols without usage evidence", rules.name, len(unused))
        return ScanResult(
            analyzer=rules.name,
            symbols=unused,
            files_scanned=session.files_scanned,
            declared=declared,
            collisions=list(session.collisions),
        )

    def extract(self, rules: AnalyzerRules, root: Path, session: ScanSession) -> None:
        """Record declarations under ``root`` and append its text to the corpus."""
        for path in self.walker.iter_files(root):
            path_str = str(path)
            if not rules.accepts_file(path_str):
                continue
            source = self.walker.read(path)
            session.files_scanned += 1

            text = source.text
            for name in rules.extractor.extract(source):
                if rules.ignore(name, path_str):
                    continue
                self._record(rules, session, name, path_str)
                if rules.anonymize_declarations:
                    text = text.replace(name, self._token_factory())

            session.append_text(text)

    def filter_used(
        self,
        rules: AnalyzerRules,
        session: ScanSession,
        known_used: AbstractSet[str] = frozenset(),
    ) -> Dict[str, Evidence]:
        """Drop every symbol with corpus or ``known_used`` evidence.

        The symbol name is interpolated into the usage pattern unescaped, so
        names holding regex metacharacters match loosely or raise ``re.error``.
        """
        corpus = session.corpus
        self.logger.debug("%s: usage corpus holds %d characters", rules.name, len(corpus))
        unused: Dict[str, Evidence] = {}
        for name, evidence in session.symbols.items():
            if re.search(rules.usage_pattern(name), corpus) or name in known_used:
                continue
            unused[name] = evidence
        return unused

    def _record(self, rules: AnalyzerRules, session: ScanSession, name: str, path: str) -> None:
        if rules.multi_file:
            files = session.symbols.get(name)
            if not isinstance(files, list):
                files = session.symbols[name] = []
            files.append(path)
            return

        previous = session.symbols.get(name)
        if isinstance(previous, str) and previous != path:
            session.collisions.append(ClassCollision(name=name, previous=previous, current=path))
            self.logger.warning(
                "%s is declared in both %s and %s; reporting only the latter",
                name,
                previous,
                path,
            )
        session.symbols[name] = path


__all__ = ["DeadCodeEngine", "TOKEN_LENGTH", "random_token"]
