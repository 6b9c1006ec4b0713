"""Shared pytest fixtures."""

import pytest

from photo_delivery.validators import ValidationEngine, ValidatorConfig
from tests.builders import make_package


@pytest.fixture
def engine():
    """A fresh engine with default options."""
    return ValidationEngine()


@pytest.fixture
def config():
    return ValidatorConfig()


@pytest.fixture
def valid_package():
    """Scenario 1: one well-formed, representative photo."""
    return make_package()
