import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so qr_layout and app import without install
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from qr_layout.geometry import MAX_STANDARD_VERSION, MAX_VERSION, MIN_VERSION  # noqa: E402

ALL_VERSIONS = list(range(MIN_VERSION, MAX_VERSION + 1))
STANDARD_VERSIONS = list(range(MIN_VERSION, MAX_STANDARD_VERSION + 1))
COMPACT_VERSIONS = list(range(MAX_STANDARD_VERSION + 1, MAX_VERSION + 1))


# Common test fixtures
@pytest.fixture
def client():
    """Flask test client for the layout viewer."""
    from app import app

    app.config.update(TESTING=True)
    with app.test_client() as test_client:
        yield test_client
