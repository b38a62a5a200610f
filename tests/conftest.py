"""
Pytest configuration and shared fixtures for namescope tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import textwrap
from pathlib import Path

import pytest
import torch

from namescope import Scope, get_profile
from namescope.locator import BuildDescription
from namescope.utils.config import set_config


# Configuration isolation
@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch):
    """Keep environment overrides and the global config from leaking between tests."""
    for var in ("NAMESCOPE_CONFIG", "NAMESCOPE_PROFILE", "NAMESCOPE_LOG_LEVEL",
                "NAMESCOPE_FILE", "NAMESCOPE_LINE"):
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    yield
    set_config(None)


# Scope fixtures
@pytest.fixture
def root_scope():
    """Create a fresh root scope with default policies."""
    return Scope()


@pytest.fixture
def scope_chain(root_scope):
    """Create a root -> function -> block chain of scopes."""
    function_scope = root_scope.derive()
    block_scope = function_scope.derive()
    return root_scope, function_scope, block_scope


@pytest.fixture
def python_profile():
    """The built-in Python language profile."""
    return get_profile("python")


# Locator fixtures
SAMPLE_SOURCE = textwrap.dedent(
    '''\
    """Sample module for locator tests."""

    import dataclasses

    LIMIT = 10


    # generate: accessors
    @dataclasses.dataclass
    class Person:
        name: str
        age: int


    def helper():
        return LIMIT


    # generate: accessors
    def not_a_type():
        pass


    class Table:
        rows: list
    '''
)


@pytest.fixture
def sample_source_dir(tmp_path):
    """Create a directory with one Python source file to search."""
    package = tmp_path / "models"
    package.mkdir()
    (package / "people.py").write_text(SAMPLE_SOURCE, encoding="utf-8")
    (package / "__init__.py").write_text("", encoding="utf-8")
    return package


@pytest.fixture
def sample_build(sample_source_dir):
    """BuildDescription covering the sample source directory."""
    return BuildDescription([sample_source_dir])


@pytest.fixture
def find_line():
    """Return a helper giving the 1-based line of the first line containing a marker."""
    def line_of(path: Path, marker: str, occurrence: int = 1) -> int:
        seen = 0
        for number, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
            if marker in line:
                seen += 1
                if seen == occurrence:
                    return number
        raise AssertionError(f"{marker!r} not found in {path}")

    return line_of


# PyTorch model fixtures
@pytest.fixture
def elementwise_torch_model():
    """Create an elementwise operations model."""
    class ElementwiseModel(torch.nn.Module):
        def forward(self, x, y):
            z = torch.add(x, y)
            z = torch.relu(z)
            return torch.relu(z * y)

    return ElementwiseModel()


@pytest.fixture
def linear_torch_model():
    """Create a model with a submodule."""
    class LinearModel(torch.nn.Module):
        def __init__(self):
            super().__init__()
            self.linear = torch.nn.Linear(10, 5)

        def forward(self, x):
            return torch.relu(self.linear(x))

    return LinearModel()


# FX Graph fixtures
@pytest.fixture
def elementwise_fx_graph(elementwise_torch_model):
    """Create FX graph for elementwise model."""
    return torch.fx.symbolic_trace(elementwise_torch_model)


@pytest.fixture
def linear_fx_graph(linear_torch_model):
    """Create FX graph for linear model."""
    return torch.fx.symbolic_trace(linear_torch_model)


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test path."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take a long time to run"
    )
