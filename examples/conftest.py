"""Shared pytest configuration for waymark examples.

``example_app`` loads the ``app.py`` file next to the test as a fresh
module; ``example_router`` is that module's ``router``. Each call
re-executes app.py in an isolated namespace, so every test starts with
clean state (e.g. the people store is empty).
"""

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> ModuleType:
    """Load the sibling app.py next to the test file."""
    app_path = Path(request.path).parent / "app.py"
    module_name = f"example_{app_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, app_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def example_router(example_app: ModuleType):
    return example_app.router
