"""Shared pytest fixtures for the Stencil test suite.

Provides reusable fixtures for:
- Sample template trees
- Install commands backed by the running interpreter
- A clean environment with no ``STENCIL_*`` overrides
"""

from __future__ import annotations

import shlex
import sys
from pathlib import Path

import pytest

from stencil.config import Config


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any ``STENCIL_*`` overrides from the developer's shell."""
    monkeypatch.delenv("STENCIL_TEMPLATE_DIR", raising=False)
    monkeypatch.delenv("STENCIL_INSTALL_COMMAND", raising=False)


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------

@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A small template tree with a nested directory and a binary file.

    Layout::

        package.json
        src/index.js
        a/b/file.txt
        assets/logo.bin
    """
    root = tmp_path / "template"
    (root / "src").mkdir(parents=True)
    (root / "a" / "b").mkdir(parents=True)
    (root / "assets").mkdir()

    (root / "package.json").write_text(
        '{\n  "name": "app",\n  "version": "0.1.0"\n}\n', encoding="utf-8"
    )
    (root / "src" / "index.js").write_text('console.log("hi");\n', encoding="utf-8")
    (root / "a" / "b" / "file.txt").write_text("nested\n", encoding="utf-8")
    (root / "assets" / "logo.bin").write_bytes(bytes(range(256)))
    return root


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty directory that new projects are created in."""
    ws = tmp_path / "workspace"
    ws.mkdir()
    return ws


# ---------------------------------------------------------------------------
# Install commands
# ---------------------------------------------------------------------------

def python_command(code: str) -> str:
    """Shell-quoted command that runs *code* with the current interpreter."""
    return shlex.join([sys.executable, "-c", code])


@pytest.fixture
def succeeding_install() -> str:
    """Install command that records its working directory and exits 0."""
    return python_command(
        "import os, pathlib; pathlib.Path('.installed').write_text(os.getcwd())"
    )


@pytest.fixture
def failing_install() -> str:
    """Install command that exits with status 7."""
    return python_command("import sys; sys.exit(7)")


@pytest.fixture
def config(template_dir: Path, succeeding_install: str) -> Config:
    """Config pointing at the sample template with a succeeding install."""
    return Config(template_dir=template_dir, install_command=succeeding_install)
