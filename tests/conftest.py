"""Pytest fixtures for redactcheck tests.

This module provides reusable fixtures for testing redactcheck components,
including the default rule registry, sample file trees with fake secrets
and network identifiers, and a fixed clock for report timestamps.
"""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

import pytest

from redactcheck.detectors import PatternRegistry
from redactcheck.detectors.classifier import FileClassifier

FIXED_TIME = datetime(2024, 5, 17, 9, 30, 0)

# A few bytes of a PNG header followed by nulls
BINARY_CONTENT = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x01\x00" + bytes(range(256))


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run every test from its own directory with no REDACTCHECK_ variables set.

    Keeps config file discovery and environment overrides from leaking in
    from the machine running the tests.
    """
    for name in list(os.environ):
        if name.startswith("REDACTCHECK_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def registry() -> PatternRegistry:
    """Return the default compiled rule registry."""
    return PatternRegistry.default()


@pytest.fixture
def classifier(registry: PatternRegistry) -> FileClassifier:
    """Return a classifier over the default registry."""
    return FileClassifier(registry)


@pytest.fixture
def fixed_clock():
    """Return a clock that always reads FIXED_TIME."""
    return lambda: FIXED_TIME


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a directory with one binary, one clean and one flagged file.

    The flagged file holds two Tier-1 findings and no Tier-2 findings.

    Returns:
        Path to the directory.
    """
    root = tmp_path / "share"
    root.mkdir()
    (root / "logo.png").write_bytes(BINARY_CONTENT)
    (root / "notes.txt").write_text("Meeting moved to Thursday.\nBring the slides.\n")
    (root / "settings.conf").write_text(
        "# service settings\npassword=hunter2\napi_key: abc123def456\n"
    )
    return root


@pytest.fixture
def network_file(tmp_path: Path) -> Path:
    """Create a file holding only Tier-2 (RESTRICTED) content.

    Returns:
        Path to a file with three Tier-2 findings.
    """
    path = tmp_path / "topology.txt"
    path.write_text(
        "gateway 192.168.1.1\n"
        "core switch 10.20.30.40\n"
        "uplink mac 00:1A:2B:3C:4D:5E\n"
    )
    return path


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Create a directory tree with a secret only in a subdirectory.

    Returns:
        Path to the root of the tree.
    """
    root = tmp_path / "project"
    (root / "deploy" / "prod").mkdir(parents=True)
    (root / "README.md").write_text("Deployment notes live in deploy/.\n")
    (root / "deploy" / "prod" / "vault.env").write_text("MASTER_KEY=Zm9vYmFy\n")
    return root
