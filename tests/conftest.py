import pytest

from procure_client.logging_config import error_tally
from tests.fixtures.fake_http import FakeSession, RecordingTransport

# Settings read from the environment must not leak from the developer shell
_ENV_VARS = (
    "PROCURE_API_BASE_URL",
    "PROCURE_DEFAULT_PROD_API",
    "PROCURE_ENV",
    "PROCURE_PAGE_ORIGIN",
    "PROCURE_REQUEST_TIMEOUT",
    "PROCURE_SESSION_COOKIE",
    "PROCURE_USERNAME",
    "PROCURE_PASSWORD",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def _reset_error_tally():
    """Keep error counts from one test out of the next."""
    error_tally.reset()
    yield
    error_tally.reset()


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def recording_transport():
    return RecordingTransport()
