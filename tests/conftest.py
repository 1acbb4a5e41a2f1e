"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # End-to-end generator runs

Fixtures are centralized in tests/fixtures/ for reuse across all test modules.
"""

import copy
import json
import os
import sys

import pytest

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

# Import centralized fixtures
from fixtures import (
    # RefOntoUML fixtures
    SIMPLE_REFONTOUML,
    DERIVATION_REFONTOUML,
    PHASE_PARTITION_REFONTOUML,

    # Object Model fixtures
    SIMPLE_OBJECT_MODEL,
    RELATOR_OBJECT_MODEL,
    TYPE_MAPPING,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: End-to-end generator runs")


@pytest.fixture(autouse=True)
def reset_form_registry():
    """Give every test a fresh shared form registry."""
    from ontogen.plugins.registry import FormRegistry
    FormRegistry.reset_instance()
    yield
    FormRegistry.reset_instance()


# =============================================================================
# RefOntoUML Fixtures
# =============================================================================

@pytest.fixture
def simple_refontouml():
    """Person, Man, Husband and Marriage in a nested package."""
    return SIMPLE_REFONTOUML


@pytest.fixture
def derivation_refontouml():
    """Student and University related through the Enrollment relator."""
    return DERIVATION_REFONTOUML


@pytest.fixture
def temp_refontouml_file(tmp_path):
    """Create a temporary RefOntoUML file for testing."""
    model_file = tmp_path / "model.refontouml"
    model_file.write_text(SIMPLE_REFONTOUML, encoding='utf-8')
    return str(model_file)


@pytest.fixture
def temp_phase_refontouml_file(tmp_path):
    """Create a temporary RefOntoUML file with a phase partition."""
    model_file = tmp_path / "phases.refontouml"
    model_file.write_text(PHASE_PARTITION_REFONTOUML, encoding='utf-8')
    return str(model_file)


# =============================================================================
# Object Model Fixtures
# =============================================================================

@pytest.fixture
def simple_object_model_data():
    """Object Model dictionary with a single class."""
    return copy.deepcopy(SIMPLE_OBJECT_MODEL)


@pytest.fixture
def relator_object_model_data():
    """Object Model dictionary with a relator and a derived relation."""
    return copy.deepcopy(RELATOR_OBJECT_MODEL)


@pytest.fixture
def temp_object_model_file(tmp_path):
    """Create a temporary Object Model JSON file for testing."""
    model_file = tmp_path / "model.json"
    model_file.write_text(json.dumps(RELATOR_OBJECT_MODEL, indent=2), encoding='utf-8')
    return str(model_file)


@pytest.fixture
def temp_type_mapping_file(tmp_path):
    """Create a temporary primitive type mapping file."""
    mapping_file = tmp_path / "types.json"
    mapping_file.write_text(json.dumps(TYPE_MAPPING), encoding='utf-8')
    return str(mapping_file)
