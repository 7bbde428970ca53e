"""
Pytest configuration and shared fixtures for declgen tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import re
import shutil
import tempfile

import pytest

from declgen.codegen import (
    ClassName,
    FunSpec,
    ParameterSpec,
    PropertySpec,
    TypeSpec,
    INT,
    STRING,
)
from declgen.utils.config import set_config


# Test configuration
@pytest.fixture(scope="session")
def test_config():
    """Global test configuration."""
    return {
        'temp_dir': None,
        'enable_performance_tests': True,
        'max_nesting_depth': 50,
    }


@pytest.fixture(scope="session")
def temp_test_dir(test_config):
    """Create temporary directory for test artifacts."""
    temp_dir = tempfile.mkdtemp(prefix="declgen_test_")
    test_config['temp_dir'] = temp_dir
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def default_render_config(monkeypatch):
    """Render every test with the default two-space indent."""
    monkeypatch.delenv("DECLGEN_INDENT_SIZE", raising=False)
    set_config(None)
    yield
    set_config(None)


# Type name fixtures
@pytest.fixture
def runnable_type():
    """Interface type used as a superinterface."""
    return ClassName("java.lang", "Runnable")


@pytest.fixture
def base_type():
    """Class type used as a superclass."""
    return ClassName("com.example", "Base")


# Member fixtures
@pytest.fixture
def point_constructor():
    """Primary constructor taking x and y."""
    return (
        FunSpec.constructor_builder()
        .add_parameter("x", INT)
        .add_parameter("y", INT)
        .build()
    )


@pytest.fixture
def point_properties():
    """Properties initialized from the matching constructor parameters."""
    return [
        PropertySpec.builder("x", INT).initializer("%N", "x").build(),
        PropertySpec.builder("y", INT).initializer("%N", "y").build(),
    ]


@pytest.fixture
def point_spec(point_constructor, point_properties):
    """Class whose properties all fold into the primary constructor."""
    return (
        TypeSpec.class_builder("Point")
        .primary_constructor(point_constructor)
        .add_properties(point_properties)
        .build()
    )


@pytest.fixture
def direction_spec():
    """Enum with two plain constants."""
    return (
        TypeSpec.enum_builder("Direction")
        .add_enum_constant("NORTH")
        .add_enum_constant("SOUTH")
        .build()
    )


@pytest.fixture
def greeter_spec():
    """Class with a plain property, a function and a companion object."""
    companion = (
        TypeSpec.companion_object_builder()
        .add_function(
            FunSpec.builder("create")
            .returns(ClassName("", "Greeter"))
            .add_statement("return Greeter(%S)", "hello")
            .build()
        )
        .build()
    )
    return (
        TypeSpec.class_builder("Greeter")
        .primary_constructor(
            FunSpec.constructor_builder()
            .add_parameter(ParameterSpec.builder("greeting", STRING).build())
            .build()
        )
        .companion_object(companion)
        .add_property(PropertySpec.builder("greeting", STRING).initializer("%N", "greeting").build())
        .add_function(
            FunSpec.builder("greet")
            .add_parameter("name", STRING)
            .add_statement("println(greeting + name)")
            .build()
        )
        .build()
    )


def assert_output_contains_pattern(output: str, pattern: str, description: str = ""):
    """
    Assert that rendered output contains a specific pattern.

    Args:
        output: Rendered source text
        pattern: Regex pattern to match
        description: Description of what the pattern checks
    """
    if not re.search(pattern, output, re.MULTILINE):
        pytest.fail(f"Output pattern check failed: {description}\nPattern: {pattern}\nOutput:\n{output}")


def assert_output_not_contains_pattern(output: str, pattern: str, description: str = ""):
    """
    Assert that rendered output does NOT contain a specific pattern.

    Args:
        output: Rendered source text
        pattern: Regex pattern that should not match
        description: Description of what the pattern checks
    """
    if re.search(pattern, output, re.MULTILINE):
        pytest.fail(f"Output negative pattern check failed: {description}\nPattern: {pattern}\nOutput:\n{output}")


# Pytest hooks for test collection and reporting
def pytest_collection_modifyitems(config, items):
    """Add markers based on test path."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "filecheck" in str(item.fspath):
            item.add_marker(pytest.mark.filecheck)
        elif "performance" in str(item.fspath):
            item.add_marker(pytest.mark.performance)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "filecheck: FileCheck-style rendered output validation tests"
    )
    config.addinivalue_line(
        "markers", "performance: Rendering cost and nesting depth tests"
    )
