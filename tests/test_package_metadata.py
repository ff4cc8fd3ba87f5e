"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import hexgrid


def _load_pyproject() -> dict:
    with Path("pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    poetry = pyproject["tool"]["poetry"]

    assert poetry["name"] == "hexgrid"
    assert poetry["version"] == hexgrid.__version__
    assert {"include": "hexgrid"} in poetry["packages"]

    dependencies = poetry["dependencies"]
    for dependency in ("numpy", "pydantic", "rich"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"


def test_public_names_are_exported() -> None:
    for name in hexgrid.__all__:
        assert hasattr(hexgrid, name), name
