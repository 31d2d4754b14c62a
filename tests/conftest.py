# pylint: disable=redefined-outer-name
import os
import tempfile
from unittest.mock import MagicMock, patch

import pytest

os.environ.setdefault("SESSION_SECRET", "test-secret")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="product_portal_logs_"))
os.environ["LEDGER_API_URL"] = "http://ledger.test"
os.environ["PRODUCER_ID"] = "PROD-001"

from app import app as flask_app  # noqa: E402
from ledger_client import ProductAPI  # noqa: E402
from tests.fakes import FakeLedgerSession  # noqa: E402


@pytest.fixture
def fake_session():
    return FakeLedgerSession()


@pytest.fixture
def ledger_api(fake_session):
    return ProductAPI(base_url="http://ledger.test", session=fake_session)


@pytest.fixture
def app():
    flask_app.config["TESTING"] = True
    flask_app.extensions["transaction_feed"].clear()
    yield flask_app
    flask_app.extensions["transaction_feed"].clear()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def mock_api():
    """ProductAPI double returned by ProductAPI.from_config in every view"""
    api = MagicMock(spec=ProductAPI)
    api.__enter__.return_value = api
    api.__exit__.return_value = False
    with patch.object(ProductAPI, "from_config", return_value=api):
        yield api
