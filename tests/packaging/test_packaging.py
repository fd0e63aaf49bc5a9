"""Packaging correctness verification for a11y-description.

Validates:
- The top-level import exposes the public API
- The py.typed marker ships with the package
- Every public module imports without optional extras
"""

from __future__ import annotations

import importlib
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent
PACKAGE_DIR = PROJECT_ROOT / "src" / "a11y_description"


class TestBaseInstall:
    def test_public_api(self) -> None:
        import a11y_description

        assert a11y_description.__version__ == "0.1.0"
        for name in a11y_description.__all__:
            assert hasattr(a11y_description, name), name

    def test_synthesize_basic(self) -> None:
        from a11y_description import Node, synthesize

        assert synthesize(Node(label="Title")).description == "Title"

    @pytest.mark.parametrize(
        "module",
        [
            "a11y_description.api",
            "a11y_description.builder",
            "a11y_description.config",
            "a11y_description.context",
            "a11y_description.formatting",
            "a11y_description.node",
            "a11y_description.protocols",
            "a11y_description.result",
            "a11y_description.strings",
            "a11y_description.synthesizer",
            "a11y_description.text",
            "a11y_description.traits",
        ],
    )
    def test_modules_import(self, module: str) -> None:
        assert importlib.import_module(module) is not None


class TestPackageFiles:
    def test_py_typed_present(self) -> None:
        assert (PACKAGE_DIR / "py.typed").is_file()
