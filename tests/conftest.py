"""Pytest configuration and fixtures."""

import copy
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

MINIMAL_TOOL: dict[str, Any] = {
    "name": "echo",
    "description": "",
    "inputs": {"type": "object", "properties": {}, "required": []},
    "outputs": {"type": "string"},
    "callTemplate": {"type": "cli", "command": "echo"},
}

MINIMAL_MANUAL: dict[str, Any] = {
    "version": "1.0.0",
    "provider": {"name": "local", "description": ""},
    "tools": [],
}


@pytest.fixture
def make_tool() -> Callable[..., dict[str, Any]]:
    """Factory for minimally valid tools; keyword arguments replace fields."""

    def _make(name: str = "echo", **fields: Any) -> dict[str, Any]:
        tool = copy.deepcopy(MINIMAL_TOOL)
        tool["name"] = name
        tool.update(fields)
        return tool

    return _make


@pytest.fixture
def make_manual() -> Callable[..., dict[str, Any]]:
    """Factory for minimally valid manuals holding the given tools."""

    def _make(*tools: dict[str, Any], **fields: Any) -> dict[str, Any]:
        manual = copy.deepcopy(MINIMAL_MANUAL)
        manual["tools"] = list(tools)
        manual.update(fields)
        return manual

    return _make


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and cwd at an empty directory so no real config is read."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("MANUALCHECK_"):
            monkeypatch.delenv(key)
    return work
