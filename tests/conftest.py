"""Global pytest fixtures for JSONCLEAN."""

import pytest

from jsonclean.adapters.sanitizer import ControlCharSanitizer
from jsonclean.interfaces.sanitizer import Sanitizer


@pytest.fixture
def sanitizer() -> Sanitizer:
    """Return the production sanitizer."""
    return ControlCharSanitizer()
