"""Unit test configuration.

Unit tests should be fast and isolated - no network, no bundled app.
"""

import pytest


# Mark all tests in this directory as unit tests
pytestmark = pytest.mark.unit
