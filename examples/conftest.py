"""Shared pytest configuration for vellum examples.

Each example directory holds an ``app.py`` that builds components at import
time and exposes the rendered ``tree`` and its HTML ``output``.

``example_app`` executes that file in an isolated module namespace, with
option fallbacks escalated to errors: an example that passes an invalid
option value fails its tests instead of silently rendering the default.
"""

import importlib.util
import warnings
from pathlib import Path
from types import ModuleType

import pytest

from vellum import Element, Markup, configure, render_html


def load_example(app_path: Path) -> ModuleType:
    """Execute ``app_path`` as a fresh module and return it."""
    module_name = f"example_{app_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, app_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    with configure(fallback_policy="warn"), warnings.catch_warnings():
        warnings.simplefilter("error", UserWarning)
        spec.loader.exec_module(module)
    return module


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> ModuleType:
    """Load a fresh module from the sibling app.py next to the test file."""
    module = load_example(Path(request.path).parent / "app.py")
    assert isinstance(module.tree, Element), "app.py must expose the rendered tree"
    assert isinstance(module.output, Markup)
    return module


@pytest.fixture
def example_tree(example_app: ModuleType) -> Element:
    """The example's rendered tree, checked against its printed output."""
    assert render_html(example_app.tree) == example_app.output
    return example_app.tree
