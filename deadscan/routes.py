"""Route table loading and controller name harvesting."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any, Callable, Iterable, List, Mapping, Sequence, Set

from .logging import get_logger

RouteRecord = Mapping[str, Any]

_CLOSURE_ACTION = "Closure"


class RouteTableError(RuntimeError):
    """Raised when a route table file cannot be interpreted."""


def controller_reference(route: RouteRecord) -> str | None:
    """Return the ``Class@method`` controller reference bound to ``route``, if any.

    ``Route::getAction()`` exposes the action as a mapping with a ``controller``
    key, while ``route:list --json`` flattens it to a string.
    """
    action = route.get("action")
    if isinstance(action, Mapping):
        controller = action.get("controller")
        return controller if isinstance(controller, str) else None
    if isinstance(action, str) and action and action != _CLOSURE_ACTION:
        return action
    return None


def class_basename(reference: str) -> str:
    return reference.replace("/", "\\").rsplit("\\", 1)[-1]


def harvest_controller_names(routes: Iterable[RouteRecord], namespace: str = "App") -> Set[str]:
    """Collect base names of application controllers reachable through ``routes``."""
    names: Set[str] = set()
    for route in routes:
        controller = controller_reference(route)
        if controller is None or namespace not in controller:
            continue
        class_ref = controller.split("@", 1)[0]
        names.add(class_basename(class_ref))
    return names


class RouteTableLoader:
    """Obtains the application's route table from a file or from artisan."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("routes")

    def load(
        self,
        project_root: Path,
        *,
        routes_file: Path | None = None,
        use_artisan: bool = True,
        php: str = "php",
    ) -> List[RouteRecord]:
        """Return route records, preferring an explicit file over artisan."""
        if routes_file is not None:
            routes = self.load_file(routes_file)
            self.logger.debug("Loaded %d routes from %s", len(routes), routes_file)
            return routes

        if use_artisan and (project_root / "artisan").is_file():
            return self.load_from_artisan(project_root, php=php)

        self.logger.debug("No route source available for %s", project_root)
        return []

    def load_file(self, path: Path) -> List[RouteRecord]:
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise RouteTableError(f"Route file {path} is not valid JSON: {exc}") from exc
        return _coerce_routes(payload, source=str(path))

    def load_from_artisan(self, project_root: Path, *, php: str = "php") -> List[RouteRecord]:
        args = [php, "artisan", "route:list", "--json"]
        try:
            output = self._runner(args, cwd=project_root)
        except (OSError, subprocess.CalledProcessError) as exc:
            self.logger.warning("Could not read routes via artisan (%s); continuing without routes", exc)
            return []

        try:
            payload = json.loads(output or "[]")
        except json.JSONDecodeError:
            self.logger.warning("artisan route:list did not return JSON; continuing without routes")
            return []
        routes = _coerce_routes(payload, source="artisan route:list")
        self.logger.debug("Loaded %d routes via artisan", len(routes))
        return routes

    @staticmethod
    def _default_runner(args: Sequence[str], *, cwd: Path) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=True,
        )
        return completed.stdout


def _coerce_routes(payload: Any, *, source: str) -> List[RouteRecord]:
    if not isinstance(payload, list):
        raise RouteTableError(f"Route table from {source} must be a JSON list")
    return [route for route in payload if isinstance(route, Mapping)]


__all__ = [
    "RouteTableError",
    "RouteTableLoader",
    "class_basename",
    "controller_reference",
    "harvest_controller_names",
]
