"""Scan root resolution and source file enumeration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from .logging import get_logger
from .models import SourceFile

logger = get_logger("source_scanner")


@dataclass
class IgnoreRule:
    """Represents a gitignore-style exclusion parsed from .deadscan.yml."""

    pattern: str
    directory_only: bool
    anchored: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            if self.directory_only and rel_path.startswith(f"{self.pattern}/"):
                return True
            return False

        for part in rel_path.split("/"):
            if fnmatchcase(part, self.pattern):
                return True
        return False


def build_ignore_rule(pattern: str) -> IgnoreRule | None:
    pattern = pattern.strip()
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        has_slash="/" in pattern,
    )


def build_ignore_rules(patterns: Iterable[str]) -> List[IgnoreRule]:
    rules: List[IgnoreRule] = []
    for pattern in patterns:
        rule = build_ignore_rule(pattern)
        if rule is not None:
            rules.append(rule)
    return rules


def resolve_roots(paths: Sequence[str | Path] | None, defaults: Sequence[str | Path]) -> List[Path]:
    """Return absolute scan roots, substituting ``defaults`` when ``paths`` is empty."""
    chosen = list(paths) if paths else list(defaults)
    roots: List[Path] = []
    for entry in chosen:
        root = Path(entry).expanduser()
        if not root.is_absolute():
            root = Path.cwd() / root
        roots.append(Path(os.path.normpath(root)))
    return roots


class SourceWalker:
    """Enumerates source files beneath scan roots in a stable order."""

    def __init__(
        self,
        extension: str = ".php",
        rules: Sequence[IgnoreRule] = (),
        base: Path | None = None,
    ) -> None:
        self.extension = extension
        self.rules = list(rules)
        self.base = base

    def iter_files(self, root: Path) -> Iterator[Path]:
        """Yield files under ``root`` whose name ends with the source extension.

        Hidden entries (names starting with ``.``) are skipped along with
        everything beneath hidden directories.
        """
        if not root.is_dir():
            logger.debug("Scan root %s does not exist; skipping", root)
            return

        for dirpath, dirnames, filenames in os.walk(root):
            current_dir = Path(dirpath)
            dirnames[:] = sorted(
                name
                for name in dirnames
                if not name.startswith(".")
                and not self._ignored(root, current_dir / name, True)
            )
            for filename in sorted(filenames):
                if filename.startswith(".") or not filename.endswith(self.extension):
                    continue
                path = current_dir / filename
                if self._ignored(root, path, False):
                    continue
                yield path

    def read(self, path: Path) -> SourceFile:
        text = path.read_text(encoding="utf-8", errors="replace")
        return SourceFile(path=path, text=text)

    def _ignored(self, root: Path, path: Path, is_dir: bool) -> bool:
        if not self.rules:
            return False
        rel_path = self._relative(root, path)
        return any(rule.matches(rel_path, is_dir) for rule in self.rules)

    def _relative(self, root: Path, path: Path) -> str:
        if self.base is not None:
            try:
                return path.relative_to(self.base).as_posix()
            except ValueError:
                pass
        return path.relative_to(root).as_posix()


__all__ = [
    "IgnoreRule",
    "SourceWalker",
    "build_ignore_rule",
    "build_ignore_rules",
    "resolve_roots",
]
