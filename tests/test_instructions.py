# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for installation guidance."""

from __future__ import annotations

import pytest

from cmdresolver.resolution.instructions import get_installation_instructions


@pytest.mark.parametrize("command", ["npx", "npm", "node"])
def test_node_commands_share_curated_guidance(command: str) -> None:
    instructions = get_installation_instructions(command)

    assert instructions.title == "Node.js Required"
    assert "Node.js" in instructions.message
    assert instructions.actions[0].url == "https://nodejs.org/en/download/"
    assert any(action.command == "brew install node" for action in instructions.actions)


def test_uv_guidance_covers_uvx() -> None:
    assert get_installation_instructions("uvx") == get_installation_instructions("uv")
    assert get_installation_instructions("uvx").title == "uv Required"


def test_unknown_command_gets_generic_message() -> None:
    instructions = get_installation_instructions("foo")

    assert instructions.title == "foo Not Found"
    assert "'foo'" in instructions.message
    assert "PATH" in instructions.message
    assert instructions.actions == ()
