# src/api/client.py

"""HTTP client for the remote product catalog."""

import logging
from typing import Any

from curl_cffi import requests as curl_requests

from src.api.errors import (
    CatalogConnectionError,
    CatalogHTTPError,
    CatalogResponseError,
)
from src.config.settings import Settings
from src.models.product import Product, ProductDraft

logger = logging.getLogger("catalog.api")


class ProductApiClient:
    """Thin wrapper over the four product endpoints.

    Calls are blocking and make exactly one attempt; callers on the
    event loop run them through ``asyncio.to_thread``.
    """

    def __init__(self) -> None:
        self.settings = Settings()
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT

    def _request(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body."""
        logger.debug("%s %s payload=%r", method, url, payload)
        try:
            resp = self.session.request(
                method,
                url,
                headers=self.settings.DEFAULT_HEADERS,
                json=payload,
                timeout=self._request_timeout,
            )
        except Exception as exc:
            logger.warning(
                "%s %s failed: %s", method, url, exc, exc_info=True
            )
            raise CatalogConnectionError(str(exc)) from exc

        if not 200 <= resp.status_code < 300:
            logger.warning(
                "%s %s returned HTTP %d", method, url, resp.status_code
            )
            raise CatalogHTTPError(resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            logger.warning(
                "%s %s returned a non-JSON body", method, url
            )
            raise CatalogResponseError(
                "Response body is not valid JSON",
                status_code=resp.status_code,
            ) from exc

    @staticmethod
    def _to_product(body: Any) -> Product:
        """Decode a single product object."""
        if not isinstance(body, dict):
            raise CatalogResponseError(
                f"Expected a product object, got {type(body).__name__}"
            )
        return Product.from_api(body)

    def list_products(self) -> list[Product]:
        """Fetch the product collection.

        Accepts both the ``{"products": [...]}`` envelope and a bare
        JSON array.
        """
        body = self._request("GET", self.settings.products_url())
        items = body.get("products") if isinstance(body, dict) else body
        if not isinstance(items, list):
            raise CatalogResponseError(
                "Expected a list of products in the response"
            )
        products = [
            Product.from_api(item)
            for item in items
            if isinstance(item, dict)
        ]
        logger.info("Fetched %d products", len(products))
        return products

    def create_product(self, draft: ProductDraft) -> Product:
        """Create a product from form values."""
        body = self._request(
            "POST", self.settings.create_url(), draft.to_payload()
        )
        product = self._to_product(body)
        logger.info("Created product %s (%s)", product.id, product.title)
        return product

    def update_product(
        self, product_id: int | str, changes: dict[str, Any]
    ) -> Product:
        """Apply a partial update to a product."""
        body = self._request(
            "PUT", self.settings.product_url(product_id), changes
        )
        product = self._to_product(body)
        logger.info("Updated product %s (%s)", product_id, product.title)
        return product

    def delete_product(self, product_id: int | str) -> Product:
        """Delete a product and return the record the server echoes."""
        body = self._request(
            "DELETE", self.settings.product_url(product_id)
        )
        product = self._to_product(body)
        logger.info("Deleted product %s (%s)", product_id, product.title)
        return product

    def ping(self) -> int:
        """GET the collection and return the raw status code."""
        resp = self.session.get(
            self.settings.products_url(),
            headers=self.settings.DEFAULT_HEADERS,
            timeout=self._request_timeout,
        )
        status: int = resp.status_code
        return status
