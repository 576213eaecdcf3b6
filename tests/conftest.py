"""
Copyright (c) 2019, the Decred developers
See LICENSE for details
"""

import random

import pytest

from seedcurve.util import helpers


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture
def randBytes():
    def _randBytes(low=0, high=50):
        return bytes(random.randint(0, 255) for _ in range(random.randint(low, high)))

    return _randBytes


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


@pytest.fixture
def noSettings(tmp_path):
    """A settings file path that does not exist."""
    return str(tmp_path / "seedsearch.conf")
