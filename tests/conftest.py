from __future__ import annotations

# Third Party Imports
import pytest

# epochal Imports
from epochal.common.behavioral_config import BehavioralConfig


@pytest.fixture(autouse=True)
def _resetBehavioralConfig():
    """Make sure each test function starts from, and leaves behind, the default configuration.

    Note:
        Building a :class:`.BehavioralConfig` from a custom file replaces the shared instance,
        which would otherwise leak into later tests.
    """
    yield
    BehavioralConfig()
