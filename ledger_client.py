import requests
import logging
import os
import urllib.parse
import urllib3

from models import Product

DEFAULT_LEDGER_API_URL = 'http://localhost:8081'

logger = logging.getLogger('ledger_api')


class LedgerAPIError(Exception):
    """A ledger call that did not succeed.

    message is the backend's own error text when the response carried one
    ({"error": "..."}); it is None for transport failures and unparseable
    error bodies.
    """

    def __init__(self, message=None, status_code=None, detail=None):
        super().__init__(message or detail or 'Ledger API request failed')
        self.message = message
        self.status_code = status_code
        self.detail = detail

    @property
    def is_not_found(self):
        return self.status_code == 404

    def user_message(self, fallback):
        """Text to show the end user: the backend message if any, else fallback"""
        return self.message or fallback


def extract_error_message(response):
    """Pull the 'error' string out of a JSON error body, if there is one"""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get('error')
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None


class ProductAPI:
    """Client for the ledger's /products REST API"""

    def __init__(self, base_url=None, timeout=None, verify=True, session=None):
        self.base_url = (base_url or os.environ.get('LEDGER_API_URL') or DEFAULT_LEDGER_API_URL).rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Content-Type': 'application/json'})
        self.session.verify = verify
        if not verify:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    @classmethod
    def from_config(cls, config):
        """Build a client from a Flask app config mapping"""
        return cls(
            base_url=config.get('LEDGER_API_URL'),
            timeout=config.get('LEDGER_API_TIMEOUT'),
            verify=config.get('LEDGER_API_VERIFY_SSL', True),
        )

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _request(self, method, path, **kwargs):
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Ledger API {method} {url} failed: {e}")
            raise LedgerAPIError(detail=str(e)) from e

        logger.info(f"{method} {path} -> {response.status_code}")
        if not response.ok:
            message = extract_error_message(response)
            logger.warning(f"Ledger API returned {response.status_code} for {method} {path}: {message or response.text[:200]}")
            raise LedgerAPIError(message=message, status_code=response.status_code,
                                 detail=f"HTTP {response.status_code}")
        return response

    @staticmethod
    def _decode(response):
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise LedgerAPIError(status_code=response.status_code,
                                 detail=f"Invalid JSON from ledger: {e}") from e

    def create_product(self, draft):
        """Register a new product.

        draft is a ProductDraft or a camelCase dict without blockchainTxId.
        Returns the ledger's response body unchanged.
        """
        payload = draft.to_payload() if hasattr(draft, 'to_payload') else dict(draft)
        payload.pop('blockchainTxId', None)
        logger.info(f"Creating product {payload.get('id')}")
        response = self._request('POST', '/products', json=payload)
        body = self._decode(response)
        return body if body is not None else {}

    def get_product(self, product_id):
        """Fetch one product by id"""
        quoted = urllib.parse.quote(str(product_id), safe='')
        response = self._request('GET', f"/products/{quoted}")
        data = self._decode(response)
        if not isinstance(data, dict):
            raise LedgerAPIError(status_code=response.status_code,
                                 detail='Ledger returned no product object')
        return Product.from_dict(data)

    def get_all_products(self):
        """Fetch every product, in the order the ledger returns them"""
        response = self._request('GET', '/products')
        data = self._decode(response)
        if data is None:
            return []
        if not isinstance(data, list):
            raise LedgerAPIError(status_code=response.status_code,
                                 detail='Ledger returned no product list')
        products = [Product.from_dict(item) for item in data if isinstance(item, dict)]
        logger.info(f"Retrieved {len(products)} products from ledger")
        return products
