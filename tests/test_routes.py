"""Tests for deadscan.routes."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path

import pytest

from deadscan.routes import (
    RouteTableError,
    RouteTableLoader,
    class_basename,
    harvest_controller_names,
)


def test_harvest_collects_application_controller_basenames() -> None:
    routes = [
        {"action": {"controller": "App\\Http\\Controllers\\UserController@show"}},
        {"action": {"controller": "App\\Http\\Controllers\\UserController@index"}},
        {"action": {"controller": "App\\Http\\Controllers\\Admin\\PostController@edit"}},
        {"action": {"uses": "Closure"}},
        {"action": {"controller": "Vendor\\Package\\HealthController@check"}},
    ]

    assert harvest_controller_names(routes) == {"UserController", "PostController"}


def test_harvest_accepts_route_list_string_actions() -> None:
    routes = [
        {"action": "App\\Http\\Controllers\\InvokableController"},
        {"action": "Closure"},
        {"uri": "no-action"},
    ]

    assert harvest_controller_names(routes) == {"InvokableController"}


def test_harvest_uses_configured_namespace() -> None:
    routes = [{"action": {"controller": "Acme\\Http\\Controllers\\HomeController@index"}}]

    assert harvest_controller_names(routes) == set()
    assert harvest_controller_names(routes, namespace="Acme") == {"HomeController"}


def test_class_basename_strips_namespace() -> None:
    assert class_basename("App\\Http\\Controllers\\UserController") == "UserController"
    assert class_basename("UserController") == "UserController"


def test_loader_prefers_explicit_file(tmp_path: Path) -> None:
    (tmp_path / "artisan").write_text("<?php\n", encoding="utf-8")
    routes_file = tmp_path / "routes.json"
    routes_file.write_text(json.dumps([{"action": "App\\X@y"}]), encoding="utf-8")

    def runner(args, *, cwd):  # pragma: no cover - must not be called
        raise AssertionError("artisan should not run when a route file is given")

    routes = RouteTableLoader(runner=runner).load(tmp_path, routes_file=routes_file)

    assert routes == [{"action": "App\\X@y"}]


def test_loader_runs_artisan_route_list(tmp_path: Path) -> None:
    (tmp_path / "artisan").write_text("<?php\n", encoding="utf-8")
    calls = []

    def runner(args, *, cwd):
        calls.append((list(args), Path(cwd)))
        return json.dumps([{"action": "App\\Http\\Controllers\\HomeController@index"}])

    routes = RouteTableLoader(runner=runner).load(tmp_path, php="php8.2")

    assert calls == [(["php8.2", "artisan", "route:list", "--json"], tmp_path)]
    assert harvest_controller_names(routes) == {"HomeController"}


def test_loader_tolerates_failing_artisan(tmp_path: Path) -> None:
    (tmp_path / "artisan").write_text("<?php\n", encoding="utf-8")

    def runner(args, *, cwd):
        raise subprocess.CalledProcessError(1, list(args))

    assert RouteTableLoader(runner=runner).load(tmp_path) == []


def test_loader_skips_artisan_when_disabled_or_missing(tmp_path: Path) -> None:
    def runner(args, *, cwd):  # pragma: no cover - must not be called
        raise AssertionError("artisan should not run")

    loader = RouteTableLoader(runner=runner)
    assert loader.load(tmp_path) == []

    (tmp_path / "artisan").write_text("<?php\n", encoding="utf-8")
    assert loader.load(tmp_path, use_artisan=False) == []


def test_loader_rejects_non_list_route_file(tmp_path: Path) -> None:
    routes_file = tmp_path / "routes.json"
    routes_file.write_text(json.dumps({"action": "App\\X@y"}), encoding="utf-8")

    with pytest.raises(RouteTableError):
        RouteTableLoader().load_file(routes_file)
