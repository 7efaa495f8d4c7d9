"""
Client for the inventory service's stock-check endpoint.

GET {INVENTORY_SERVICE_URL}/api/inventory/check-stock/{product_code}?quantity={n}
answers {"inStock": bool}. ProductService only sees the StockChecker
interface; how failures are treated is decided here.
"""

from typing import Optional, Protocol
from urllib.parse import quote

import httpx

from shared.core import get_logger

logger = get_logger(__name__)

CHECK_STOCK_PATH = "/api/inventory/check-stock/{product_code}"


class StockChecker(Protocol):
    def check_stock(self, product_code: str, quantity: int = 1) -> bool:
        ...


class HttpInventoryClient:
    """
    Stock checks over HTTP.

    Every failure (connection error, timeout, non-2xx status, a body that is
    not JSON or lacks a boolean "inStock") is reported as False, without
    retrying. An unreachable inventory service therefore reads the same as
    "out of stock".
    """

    def __init__(self, base_url: str, timeout: float = 5.0, client: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # Injected client is used as-is and never closed here
        self._client = client

    def _url(self, product_code: str) -> str:
        return self.base_url + CHECK_STOCK_PATH.format(product_code=quote(product_code, safe=""))

    def _get(self, product_code: str, quantity: int) -> httpx.Response:
        params = {"quantity": quantity}
        if self._client is not None:
            return self._client.get(self._url(product_code), params=params, timeout=self.timeout)
        with httpx.Client(timeout=self.timeout) as client:
            return client.get(self._url(product_code), params=params)

    def check_stock(self, product_code: str, quantity: int = 1) -> bool:
        try:
            response = self._get(product_code, quantity)
            response.raise_for_status()
            in_stock = response.json().get("inStock", False)
        except Exception as e:
            logger.debug(f"Stock check for {product_code} failed, reporting not in stock: {e}")
            return False
        return in_stock is True
