"""Unit tests for the ledger /products API client."""
from unittest.mock import MagicMock

import pytest
import requests

from ledger_client import ProductAPI, LedgerAPIError, DEFAULT_LEDGER_API_URL
from models import Product, ProductDraft
from tests.fakes import make_response


def make_draft(product_id="P-1001", name="Widget"):
    return ProductDraft(id=product_id, name=name, producer_id="PROD-001", manufacture_date="2024-01-01")


def api_with_response(response):
    session = MagicMock()
    session.headers = {}
    session.request.return_value = response
    return ProductAPI(base_url="http://ledger.test/", session=session), session


class TestCreateProduct:

    def test_posts_camel_case_draft(self, ledger_api, fake_session):
        ledger_api.create_product(make_draft())

        method, url, body = fake_session.calls[0]
        assert method == "POST"
        assert url == "http://ledger.test/products"
        assert body["producerId"] == "PROD-001"
        assert "blockchainTxId" not in body

    def test_returns_response_body_unchanged(self, ledger_api):
        body = ledger_api.create_product(make_draft())
        assert body["message"] == "Product creation requested"
        assert body["product"]["id"] == "P-1001"

    def test_strips_blockchain_tx_id_from_dict_drafts(self, ledger_api, fake_session):
        ledger_api.create_product({"id": "P-1", "name": "Widget", "blockchainTxId": "tx"})
        assert "blockchainTxId" not in fake_session.calls[0][2]

    def test_empty_success_body_returns_empty_dict(self):
        api, _ = api_with_response(make_response(201))
        assert api.create_product(make_draft()) == {}

    def test_backend_error_message_is_exposed(self, ledger_api):
        ledger_api.create_product(make_draft())
        with pytest.raises(LedgerAPIError) as exc_info:
            ledger_api.create_product(make_draft())

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Failed to save to DB: duplicate key"

    def test_error_without_structured_message(self):
        api, _ = api_with_response(make_response(502, raw="<html>Bad Gateway</html>"))
        with pytest.raises(LedgerAPIError) as exc_info:
            api.create_product(make_draft())

        assert exc_info.value.message is None
        assert exc_info.value.user_message("Failed to create product.") == "Failed to create product."

    def test_transport_failure_is_wrapped(self):
        session = MagicMock()
        session.headers = {}
        session.request.side_effect = requests.ConnectionError("connection refused")
        api = ProductAPI(base_url="http://ledger.test", session=session)

        with pytest.raises(LedgerAPIError) as exc_info:
            api.create_product(make_draft())

        assert exc_info.value.status_code is None
        assert exc_info.value.message is None
        assert "connection refused" in str(exc_info.value)


class TestGetProduct:

    def test_create_then_get_returns_same_id(self, ledger_api):
        draft = make_draft("P-2002", "Gadget")
        ledger_api.create_product(draft)

        product = ledger_api.get_product("P-2002")

        assert isinstance(product, Product)
        assert product.id == draft.id
        assert product.name == "Gadget"

    def test_unknown_id_raises_not_found(self, ledger_api):
        with pytest.raises(LedgerAPIError) as exc_info:
            ledger_api.get_product("missing")

        assert exc_info.value.is_not_found
        assert exc_info.value.message == "Product not found"

    def test_id_is_url_quoted(self, ledger_api, fake_session):
        fake_session.add_product({"id": "A/B 1", "name": "Odd"})

        product = ledger_api.get_product("A/B 1")

        assert product.name == "Odd"
        assert fake_session.calls[-1][1] == "http://ledger.test/products/A%2FB%201"

    def test_invalid_json_raises(self):
        api, _ = api_with_response(make_response(200, raw="not json"))
        with pytest.raises(LedgerAPIError):
            api.get_product("P-1")

    def test_non_object_body_raises(self):
        api, _ = api_with_response(make_response(200, body=["P-1"]))
        with pytest.raises(LedgerAPIError):
            api.get_product("P-1")


class TestGetAllProducts:

    def test_empty_ledger_returns_empty_list(self, ledger_api):
        assert ledger_api.get_all_products() == []

    def test_null_body_returns_empty_list(self):
        api, _ = api_with_response(make_response(200, raw="null"))
        assert api.get_all_products() == []

    def test_keeps_backend_order(self, ledger_api, fake_session):
        for product_id in ["P-3", "P-1", "P-2"]:
            fake_session.add_product({"id": product_id, "name": product_id})

        products = ledger_api.get_all_products()

        assert [p.id for p in products] == ["P-3", "P-1", "P-2"]

    def test_server_error_raises(self):
        api, _ = api_with_response(make_response(500, body={"error": "db down"}))
        with pytest.raises(LedgerAPIError) as exc_info:
            api.get_all_products()
        assert exc_info.value.message == "db down"


class TestConfiguration:

    def test_base_url_trailing_slash_is_dropped(self):
        api, session = api_with_response(make_response(200, body=[]))
        api.get_all_products()
        assert session.request.call_args[0][1] == "http://ledger.test/products"

    def test_timeout_is_passed_to_transport(self):
        session = MagicMock()
        session.headers = {}
        session.request.return_value = make_response(200, body=[])
        api = ProductAPI(base_url="http://ledger.test", timeout=5.0, session=session)

        api.get_all_products()

        assert session.request.call_args.kwargs["timeout"] == 5.0

    def test_default_timeout_is_transport_default(self, ledger_api):
        assert ledger_api.timeout is None

    def test_from_config(self):
        api = ProductAPI.from_config({
            "LEDGER_API_URL": "https://ledger.example:8443",
            "LEDGER_API_TIMEOUT": 3.0,
            "LEDGER_API_VERIFY_SSL": False,
        })
        assert api.base_url == "https://ledger.example:8443"
        assert api.timeout == 3.0
        assert api.session.verify is False
        api.close()

    def test_default_base_url(self, monkeypatch):
        monkeypatch.delenv("LEDGER_API_URL", raising=False)
        api = ProductAPI()
        assert api.base_url == DEFAULT_LEDGER_API_URL
        api.close()

    def test_context_manager_closes_session(self, fake_session):
        with ProductAPI(base_url="http://ledger.test", session=fake_session):
            pass
        assert fake_session.closed
