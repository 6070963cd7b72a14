"""Tests for deadscan.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from deadscan.config import (
    DEFAULT_CRUD_NAMES,
    ConfigError,
    DeadScanConfig,
    load_config,
)


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, DeadScanConfig)
    assert config.root == tmp_path.resolve()
    assert config.app_namespace == "App"
    assert config.extension == ".php"
    assert config.paths.classes == ["app/Http/Controllers"]
    assert config.paths.methods == ["app", "resources/views"]
    assert config.exclude_paths == []
    assert config.routes.file is None
    assert config.routes.artisan is True
    assert config.methods.crud_names == list(DEFAULT_CRUD_NAMES)
    assert config.default_roots("methods") == [
        tmp_path.resolve() / "app",
        tmp_path.resolve() / "resources/views",
    ]


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / ".deadscan.yml").write_text(
        """
app_namespace: Acme
extension: inc
paths:
  classes: [src/Controllers]
  methods:
    - src
exclude_paths:
  - "vendor/"
routes:
  file: build/routes.json
  artisan: "no"
  php: /usr/bin/php8.2
methods:
  crud_names: [index]
  excluded_markers: [Providers]
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.app_namespace == "Acme"
    assert config.extension == ".inc"
    assert config.paths.classes == ["src/Controllers"]
    assert config.paths.methods == ["src"]
    assert config.exclude_paths == ["vendor/"]
    assert config.routes.file == tmp_path.resolve() / "build" / "routes.json"
    assert config.routes.artisan is False
    assert config.routes.php == "/usr/bin/php8.2"
    assert config.methods.crud_names == ["index"]
    assert config.methods.excluded_markers == ["Providers"]


def test_load_config_accepts_empty_file(tmp_path: Path) -> None:
    (tmp_path / ".deadscan.yml").write_text("", encoding="utf-8")

    assert load_config(tmp_path).app_namespace == "App"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".deadscan.yml").write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".deadscan.yml").write_text("paths: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_treats_missing_directory_as_project_root(tmp_path: Path) -> None:
    missing = tmp_path / "typo_app"

    config = load_config(missing)

    assert config.root == missing.resolve()
    assert config.default_roots("classes") == [missing.resolve() / "app/Http/Controllers"]


def test_load_config_accepts_explicit_config_file(tmp_path: Path) -> None:
    config_file = tmp_path / "settings.yml"
    config_file.write_text("app_namespace: Acme\n", encoding="utf-8")

    config = load_config(config_file)

    assert config.root == tmp_path.resolve()
    assert config.app_namespace == "Acme"
