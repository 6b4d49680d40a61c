# tests/test_api_client.py

"""Tests for the catalog HTTP client."""

import unittest
from typing import Any
from unittest.mock import MagicMock, patch

from src.api.client import ProductApiClient
from src.api.errors import (
    CatalogApiError,
    CatalogConnectionError,
    CatalogHTTPError,
    CatalogResponseError,
)
from src.config.settings import Settings
from src.models.product import ProductDraft


def _resp(status_code: int = 200, body: Any = None) -> MagicMock:
    """Build a fake curl_cffi response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = body
    return resp


@patch("src.api.client.curl_requests.Session")
class TestProductApiClient(unittest.TestCase):
    """Request shapes and response decoding."""

    def _client(
        self, mock_session_cls: MagicMock, resp: MagicMock
    ) -> tuple[ProductApiClient, MagicMock]:
        session = MagicMock()
        session.request.return_value = resp
        session.get.return_value = resp
        mock_session_cls.return_value = session
        return ProductApiClient(), session

    def test_list_reads_envelope(
        self, mock_session_cls: MagicMock,
    ) -> None:
        """The ``products`` array of the envelope is decoded."""
        client, session = self._client(
            mock_session_cls,
            _resp(body={
                "products": [
                    {"id": 1, "title": "Mascara", "price": 9.99},
                    {"id": 2, "title": "Lamp"},
                ],
                "total": 2,
                "skip": 0,
                "limit": 30,
            }),
        )
        products = client.list_products()
        self.assertEqual([p.title for p in products], ["Mascara", "Lamp"])
        method, url = session.request.call_args[0]
        self.assertEqual(method, "GET")
        self.assertEqual(url, Settings.products_url())

    def test_list_accepts_bare_array(
        self, mock_session_cls: MagicMock,
    ) -> None:
        """A plain JSON array is also accepted."""
        client, _ = self._client(
            mock_session_cls, _resp(body=[{"id": 5, "title": "Desk"}])
        )
        self.assertEqual(client.list_products()[0].id, 5)

    def test_list_rejects_unexpected_shape(
        self, mock_session_cls: MagicMock,
    ) -> None:
        """An object without a product list is a response error."""
        client, _ = self._client(
            mock_session_cls, _resp(body={"message": "hello"})
        )
        with self.assertRaises(CatalogResponseError):
            client.list_products()

    def test_create_posts_draft_payload(
        self, mock_session_cls: MagicMock,
    ) -> None:
        """Create POSTs the draft fields to /products/add."""
        client, session = self._client(
            mock_session_cls,
            _resp(201, {"id": 195, "title": "Desk", "price": "19"}),
        )
        draft = ProductDraft(title="Desk", price="19")
        product = client.create_product(draft)

        self.assertEqual(product.id, 195)
        method, url = session.request.call_args[0]
        self.assertEqual(method, "POST")
        self.assertEqual(url, Settings.create_url())
        self.assertEqual(
            session.request.call_args.kwargs["json"], draft.to_payload()
        )

    def test_update_puts_changes(
        self, mock_session_cls: MagicMock,
    ) -> None:
        """Update PUTs the change dict to the product URL."""
        client, session = self._client(
            mock_session_cls,
            _resp(body={"id": 3, "title": "Chair (Updated)"}),
        )
        product = client.update_product(3, {"title": "Chair (Updated)"})

        self.assertEqual(product.title, "Chair (Updated)")
        method, url = session.request.call_args[0]
        self.assertEqual(method, "PUT")
        self.assertEqual(url, Settings.product_url(3))
        self.assertEqual(
            session.request.call_args.kwargs["json"],
            {"title": "Chair (Updated)"},
        )

    def test_delete_returns_echoed_record(
        self, mock_session_cls: MagicMock,
    ) -> None:
        """Delete returns the record the server sends back."""
        client, session = self._client(
            mock_session_cls,
            _resp(body={"id": 4, "title": "Lamp", "isDeleted": True}),
        )
        product = client.delete_product(4)

        self.assertEqual(product.title, "Lamp")
        method, url = session.request.call_args[0]
        self.assertEqual(method, "DELETE")
        self.assertEqual(url, Settings.product_url(4))
        self.assertIsNone(session.request.call_args.kwargs["json"])

    def test_http_error_raises_with_status(
        self, mock_session_cls: MagicMock,
    ) -> None:
        """Non-2xx responses raise CatalogHTTPError."""
        client, _ = self._client(mock_session_cls, _resp(404))
        with self.assertRaises(CatalogHTTPError) as ctx:
            client.delete_product(999)
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(
            str(ctx.exception), "Request failed with status code 404"
        )

    def test_transport_error_wrapped(
        self, mock_session_cls: MagicMock,
    ) -> None:
        """Network failures surface as CatalogConnectionError."""
        session = MagicMock()
        session.request.side_effect = ConnectionError("Connection refused")
        mock_session_cls.return_value = session

        with self.assertRaises(CatalogConnectionError) as ctx:
            ProductApiClient().list_products()
        self.assertIn("Connection refused", str(ctx.exception))
        self.assertIsInstance(ctx.exception, CatalogApiError)

    def test_single_attempt_only(
        self, mock_session_cls: MagicMock,
    ) -> None:
        """A failing request is not retried."""
        client, session = self._client(mock_session_cls, _resp(500))
        with self.assertRaises(CatalogHTTPError):
            client.list_products()
        self.assertEqual(session.request.call_count, 1)

    def test_invalid_json_raises_response_error(
        self, mock_session_cls: MagicMock,
    ) -> None:
        """A body that is not JSON raises CatalogResponseError."""
        resp = _resp(200)
        resp.json.side_effect = ValueError("Expecting value")
        client, _ = self._client(mock_session_cls, resp)
        with self.assertRaises(CatalogResponseError):
            client.list_products()

    def test_non_object_product_raises(
        self, mock_session_cls: MagicMock,
    ) -> None:
        """A write answered with a non-object is a response error."""
        client, _ = self._client(mock_session_cls, _resp(body=["x"]))
        with self.assertRaises(CatalogResponseError):
            client.update_product(1, {"title": "x"})

    def test_ping_returns_status(
        self, mock_session_cls: MagicMock,
    ) -> None:
        """ping() reports the raw status code."""
        client, session = self._client(mock_session_cls, _resp(503))
        self.assertEqual(client.ping(), 503)
        session.get.assert_called_once()


if __name__ == "__main__":
    unittest.main()
