# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the cmdresolver command line interface."""

from __future__ import annotations

import json
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from cmdresolver.cli import app
from cmdresolver.cli.bundled import run_bundled
from cmdresolver.cli.install_help import run_install_help
from cmdresolver.cli.resolve import run_resolve
from cmdresolver.config import CONFIG_FILENAME

from .conftest import FakeFileSystem, FakeRunner, ResolverFactory


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    console = Console(file=buffer, force_terminal=False, color_system=None, emoji=False, width=400)
    return console, buffer


def test_resolve_command_reports_available_command(
    monkeypatch: pytest.MonkeyPatch,
    fake_runner: FakeRunner,
    make_resolver: ResolverFactory,
) -> None:
    fake_runner.succeeding.add("node")
    fake_runner.lookups["node"] = "/usr/bin/node\n"
    resolver = make_resolver()
    seen: dict[str, object] = {}

    def fake_prepare(root: Path, *, verbose: bool = False):
        seen["verbose"] = verbose
        return resolver

    monkeypatch.setattr("cmdresolver.cli.resolve.prepare_resolver", fake_prepare)

    result = CliRunner().invoke(app, ["resolve", "node", "--version"])

    assert result.exit_code == 0
    assert "/usr/bin/node" in result.output
    assert seen["verbose"] is False
    assert fake_runner.spawned == [["node", "--version"]]


def test_resolve_command_shows_guidance_when_unavailable(
    monkeypatch: pytest.MonkeyPatch,
    make_resolver: ResolverFactory,
) -> None:
    resolver = make_resolver()
    monkeypatch.setattr("cmdresolver.cli.resolve.prepare_resolver", lambda root, *, verbose=False: resolver)

    result = CliRunner().invoke(app, ["resolve", "npx", "-y", "some-package"])

    assert result.exit_code == 1
    assert "Node.js Required" in result.output
    assert "npx -y some-package" in resolver.get_cached_resolutions()


def test_run_resolve_json_for_bundled_server(
    fake_runner: FakeRunner,
    fake_fs: FakeFileSystem,
    make_resolver: ResolverFactory,
) -> None:
    entry_point = "/app/node_modules/@modelcontextprotocol/server-github/dist/index.js"
    fake_fs.files.add(entry_point)
    fake_runner.lookups["node"] = "/usr/bin/node\n"
    console, buffer = _console()

    exit_code = run_resolve(
        "npx",
        ["-y", "@modelcontextprotocol/server-github"],
        Path("/app"),
        as_json=True,
        console=console,
        resolver=make_resolver(),
    )

    assert exit_code == 0
    payload = json.loads(buffer.getvalue())
    assert payload == {
        "command": "/usr/bin/node",
        "args": [entry_point],
        "available": True,
        "resolved_path": "/usr/bin/node",
        "fallback_used": "bundled-server",
    }


def test_run_resolve_reports_configuration_errors(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("probe_timeout = 0\n", encoding="utf-8")
    console, buffer = _console()

    exit_code = run_resolve("node", [], tmp_path, console=console)

    assert exit_code == 1
    assert "Failed to load configuration" in buffer.getvalue()


def test_run_bundled_json_lists_registry(fake_fs: FakeFileSystem, make_resolver: ResolverFactory) -> None:
    entry_point = "/app/node_modules/@modelcontextprotocol/server-filesystem/index.js"
    fake_fs.files.add(entry_point)
    console, buffer = _console()

    exit_code = run_bundled(Path("/app"), as_json=True, console=console, resolver=make_resolver())

    assert exit_code == 0
    payload = json.loads(buffer.getvalue())
    assert payload["npx @modelcontextprotocol/server-filesystem"]["bundled_path"] == entry_point
    assert payload["npx @modelcontextprotocol/server-github"]["bundled_path"] is None


def test_run_bundled_table(make_resolver: ResolverFactory) -> None:
    console, buffer = _console()

    exit_code = run_bundled(Path("/app"), console=console, resolver=make_resolver())

    assert exit_code == 0
    output = buffer.getvalue()
    assert "Bundled Servers" in output
    assert "not shipped" in output


def test_run_install_help_json() -> None:
    console, buffer = _console()

    exit_code = run_install_help("foo", as_json=True, console=console)

    assert exit_code == 0
    assert json.loads(buffer.getvalue()) == {
        "title": "foo Not Found",
        "message": (
            "The command 'foo' was not found on your system. "
            "Please install it and ensure it's available in your PATH."
        ),
        "actions": [],
    }


def test_install_help_command_renders_panel() -> None:
    result = CliRunner().invoke(app, ["install-help", "uvx"])

    assert result.exit_code == 0
    assert "uv Required" in result.output


def test_resolve_command_notes_fallback_strategy(
    monkeypatch: pytest.MonkeyPatch,
    fake_runner: FakeRunner,
    fake_fs: FakeFileSystem,
    make_resolver: ResolverFactory,
) -> None:
    fake_fs.files.add("/usr/local/bin/npx")
    fake_runner.succeeding.add("/usr/local/bin/npx")
    resolver = make_resolver()
    monkeypatch.setattr("cmdresolver.cli.resolve.prepare_resolver", lambda root, *, verbose=False: resolver)

    result = CliRunner().invoke(app, ["resolve", "npx", "some-package"])

    assert result.exit_code == 0
    assert "using system-path" in result.output
