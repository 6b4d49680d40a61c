# src/api/errors.py

"""Exceptions raised while talking to the catalog API."""


class CatalogApiError(Exception):
    """Any failure talking to the catalog API."""

    def __init__(
        self, message: str, status_code: int | None = None
    ) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class CatalogConnectionError(CatalogApiError):
    """The request never got a response (DNS, refused, timeout)."""


class CatalogHTTPError(CatalogApiError):
    """The server answered with a non-2xx status."""

    def __init__(
        self, status_code: int, message: str | None = None
    ) -> None:
        super().__init__(
            message
            or f"Request failed with status code {status_code}",
            status_code=status_code,
        )


class CatalogResponseError(CatalogApiError):
    """The body was not the JSON shape the client expected."""
