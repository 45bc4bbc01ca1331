# sdk/store.py
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from .config import ClientSettings, PRODUCTS_PATH
from .errors import NetworkError, ServerError
from .models import Product

logger = logging.getLogger(__name__)


class ProductStore:
    """Async client for the /api/products CRUD endpoints.

    Every method either returns parsed data or raises one of the
    ``sdk.errors`` exceptions; callers never see raw httpx errors.
    """

    def __init__(self, settings: Optional[ClientSettings] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or ClientSettings()
        if transport is None:
            transport = httpx.AsyncHTTPTransport(retries=self.settings.retries)
        self.client = httpx.AsyncClient(
            base_url=self.settings.base_url.rstrip("/"),
            timeout=self.settings.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "ProductStore":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            r = await self.client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            raise NetworkError(f"{method} {url} failed: {e!r}") from e
        if r.is_error:
            raise ServerError(f"{method} {url} failed with status {r.status_code}", r.status_code)
        return r

    @staticmethod
    def _json(r: httpx.Response) -> Any:
        try:
            return r.json()
        except ValueError as e:
            raise ServerError(f"malformed JSON from {r.request.url}", r.status_code) from e

    @staticmethod
    def _product(data: Any) -> Product:
        try:
            return Product.model_validate(data)
        except PydanticValidationError as e:
            raise ServerError(f"malformed product record: {e}") from e

    # Products
    async def list_products(self) -> List[Product]:
        data = self._json(await self._request("GET", PRODUCTS_PATH))
        if not isinstance(data, list):
            raise ServerError("product list is not a JSON array")
        return [self._product(p) for p in data]

    async def create_product(self, payload: Dict[str, Any]) -> Product:
        r = await self._request("POST", PRODUCTS_PATH, json=payload)
        return self._product(self._json(r))

    async def update_product(self, product_id: str, field: str, value: Any) -> Product:
        r = await self._request("PATCH", f"{PRODUCTS_PATH}/{product_id}", json={field: value})
        return self._product(self._json(r))

    async def delete_product(self, product_id: str) -> None:
        await self._request("DELETE", f"{PRODUCTS_PATH}/{product_id}")

    # Utility: reset (for tests/demo)
    async def reset(self) -> None:
        await self._request("POST", "/reset")
