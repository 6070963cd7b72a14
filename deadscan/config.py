"""Configuration loading for deadscan (.deadscan.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".deadscan.yml"

DEFAULT_CRUD_NAMES = ("edit", "update", "create", "store", "destroy", "index", "show")
DEFAULT_EXCLUDED_MARKERS = ("ServiceProvider", "Policies", "Observers")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class PathsConfig:
    """Default scan roots per analyzer, relative to the project root."""

    classes: List[str] = field(default_factory=lambda: ["app/Http/Controllers"])
    methods: List[str] = field(default_factory=lambda: ["app", "resources/views"])

    def for_analyzer(self, name: str) -> List[str]:
        if name == "classes":
            return list(self.classes)
        if name == "methods":
            return list(self.methods)
        return []


@dataclass
class RoutesConfig:
    """Where the route table comes from."""

    file: Optional[Path] = None
    artisan: bool = True
    php: str = "php"


@dataclass
class MethodsConfig:
    """Ignore policy tuning for the methods analyzer."""

    crud_names: List[str] = field(default_factory=lambda: list(DEFAULT_CRUD_NAMES))
    excluded_markers: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDED_MARKERS))


@dataclass
class DeadScanConfig:
    """Represents the settings defined in .deadscan.yml."""

    root: Path
    app_namespace: str = "App"
    extension: str = ".php"
    paths: PathsConfig = field(default_factory=PathsConfig)
    exclude_paths: List[str] = field(default_factory=list)
    routes: RoutesConfig = field(default_factory=RoutesConfig)
    methods: MethodsConfig = field(default_factory=MethodsConfig)

    def default_roots(self, analyzer: str) -> List[Path]:
        """Return the analyzer's default scan roots as absolute paths."""
        return [self.root / rel for rel in self.paths.for_analyzer(analyzer)]


def load_config(config_path: Path) -> DeadScanConfig:
    """Load configuration from a project directory or an explicit file."""
    config_file, root = _resolve_config_path(config_path)

    if not config_file.exists():
        return DeadScanConfig(root=root)

    data = _read_config(config_file)
    if data is None:
        return DeadScanConfig(root=root)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = DeadScanConfig(root=root)
    config.app_namespace = _as_str(data.get("app_namespace")) or config.app_namespace

    extension = _as_str(data.get("extension"))
    if extension:
        config.extension = extension if extension.startswith(".") else f".{extension}"

    paths_data = _as_dict(data.get("paths"))
    if "classes" in paths_data:
        config.paths.classes = _as_str_list(paths_data.get("classes"))
    if "methods" in paths_data:
        config.paths.methods = _as_str_list(paths_data.get("methods"))

    config.exclude_paths = _as_str_list(data.get("exclude_paths"))

    routes_data = _as_dict(data.get("routes"))
    if routes_data:
        routes_file = _as_str(routes_data.get("file"))
        artisan = _as_bool(routes_data.get("artisan"))
        config.routes = RoutesConfig(
            file=root / routes_file if routes_file else None,
            artisan=True if artisan is None else artisan,
            php=_as_str(routes_data.get("php")) or "php",
        )

    methods_data = _as_dict(data.get("methods"))
    if "crud_names" in methods_data:
        config.methods.crud_names = _as_str_list(methods_data.get("crud_names"))
    if "excluded_markers" in methods_data:
        config.methods.excluded_markers = _as_str_list(methods_data.get("excluded_markers"))

    return config


def _resolve_config_path(config_path: Path) -> tuple[Path, Path]:
    """Return ``(config_file, project_root)`` for a directory or file argument."""
    config_path = config_path.expanduser()
    if config_path.is_file() or config_path.name == CONFIG_FILENAME:
        return config_path, config_path.parent.resolve()
    root = config_path.resolve()
    return root / CONFIG_FILENAME, root


def _read_config(config_file: Path) -> Any:
    try:
        text = config_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {config_file}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_file}: {exc}") from exc


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "ConfigError",
    "DeadScanConfig",
    "MethodsConfig",
    "PathsConfig",
    "RoutesConfig",
    "load_config",
]
