"""Pipeline orchestration for a dead code scan."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Sequence, Set

from .analyzers import AnalyzerRules, DeadCodeEngine, get_analyzer
from .config import DeadScanConfig, load_config
from .logging import get_logger
from .models import ScanResult
from .routes import RouteTableLoader, harvest_controller_names
from .source_scanner import SourceWalker, build_ignore_rules, resolve_roots


class DeadScanner:
    """Coordinates root resolution, route harvesting and the analyzer engine."""

    def __init__(
        self,
        config: DeadScanConfig | None = None,
        route_loader: RouteTableLoader | None = None,
        token_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self._config = config
        self.route_loader = route_loader or RouteTableLoader()
        self._token_factory = token_factory
        self.logger = get_logger("scanner")

    def run(
        self,
        analyzer: str | AnalyzerRules,
        paths: Sequence[str | Path] | None = None,
        *,
        project: str | Path = ".",
        routes_file: Path | None = None,
        use_artisan: bool | None = None,
    ) -> ScanResult:
        """Scan ``paths`` (or the analyzer defaults) and return unused symbols."""
        project_root = Path(project).expanduser().resolve()
        config = self._config or load_config(project_root)
        rules = analyzer if isinstance(analyzer, AnalyzerRules) else get_analyzer(analyzer, config)

        roots = resolve_roots(paths, config.default_roots(rules.name))
        self.logger.info("Scanning %s in %s", rules.label, ", ".join(str(root) for root in roots))

        known_used: Set[str] = set()
        if rules.uses_routes:
            known_used = self._route_bindings(config, project_root, routes_file, use_artisan)

        walker = SourceWalker(
            extension=config.extension,
            rules=build_ignore_rules(config.exclude_paths),
            base=config.root,
        )
        engine = DeadCodeEngine(walker=walker, token_factory=self._token_factory)
        return engine.scan(rules, roots, known_used)

    def _route_bindings(
        self,
        config: DeadScanConfig,
        project_root: Path,
        routes_file: Path | None,
        use_artisan: bool | None,
    ) -> Set[str]:
        routes = self.route_loader.load(
            project_root,
            routes_file=routes_file or config.routes.file,
            use_artisan=config.routes.artisan if use_artisan is None else use_artisan,
            php=config.routes.php,
        )
        bindings = harvest_controller_names(routes, config.app_namespace)
        self.logger.debug("Route table binds %d controllers", len(bindings))
        return bindings


__all__ = ["DeadScanner"]
