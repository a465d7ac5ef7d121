"""Global configuration for pytest"""

import numpy as np
import pytest


@pytest.fixture(autouse=True, scope="session")
def numerical_exceptions():
    """
    Make numpy raise on numerical errors, so the reference computations in
    the tests (np.linalg.inv, np.linalg.det) never produce inf or nan silently.
    """
    np.seterr(all="raise")
