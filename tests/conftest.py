"""Test configuration and fixtures for dir2summary."""

import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


def _build(base: Path, layout: dict) -> Path:
    """Create files and directories from a nested dict.

    Values that are dicts become directories, bytes are written as binary files and
    strings as text files.
    """
    for name, content in layout.items():
        path = base / name
        if isinstance(content, dict):
            path.mkdir(parents=True, exist_ok=True)
            _build(path, content)
        elif isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return base


@pytest.fixture
def sample_project(tmp_path):
    """A small project with text, binary, hidden and dependency files."""
    root = tmp_path / "project"
    root.mkdir()
    _build(
        root,
        {
            "README.md": "# Sample\n\nA sample project.\n",
            "Makefile": "all:\n\tcargo build\n",
            "src": {
                "main.rs": 'fn main() {\n    println!("hi");\n}\n',
                "lib": {"mod.rs": "pub mod util;\n"},
            },
            "assets": {"logo.png": b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"},
            "node_modules": {"left-pad": {"index.js": "module.exports = 1;\n"}},
            ".env": "SECRET=1\n",
        },
    )
    return root


@pytest.fixture
def make_tree():
    """Return a helper building a directory layout from a nested dict."""
    return _build


@pytest.fixture
def symlinks_supported(tmp_path):
    """Skip the test when the platform does not allow creating symlinks."""
    link = tmp_path / "symlink-check"
    try:
        os.symlink("nowhere", link)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks are not supported here")
    link.unlink()
