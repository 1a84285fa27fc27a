import pytest
import numpy as np
from pathlib import Path
import tempfile

from structure.config import build_params
from structure.api import build_geometry, build_structure


# nx=64, lx=1 -> ds = 1/128, 77 points per wall, 308 points in total
SMALL_PARAMS = {"struct_name": "small_tube", "nx": 64, "lx": 1.0}


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def small_params():
    """Resolved parameters for a coarse but complete structure."""
    return build_params(SMALL_PARAMS)


@pytest.fixture
def small_geometry(small_params):
    """Gut/leg geometry built from the coarse parameters."""
    return build_geometry(small_params)


@pytest.fixture
def small_structure(small_params):
    """Geometry plus all topology tables for the coarse parameters."""
    return build_structure(small_params)


@pytest.fixture
def ccw_square():
    """Unit square, counter-clockwise, not closed (first point not repeated)."""
    return np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
