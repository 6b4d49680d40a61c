# src/services/catalog_service.py

"""Cached product reads and cache-invalidating product writes."""

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from src.api.client import ProductApiClient
from src.api.errors import CatalogApiError
from src.config.settings import Settings
from src.filters.product_validator import ProductValidator
from src.models.product import Product, ProductDraft
from src.storage.query_cache import QueryCache, QueryKey

logger = logging.getLogger("catalog.service")

PRODUCTS_KEY: QueryKey = ("products",)

# Mutation kind -> past tense used in notifications
_PAST_TENSE: dict[str, str] = {
    "add": "added",
    "update": "updated",
    "delete": "deleted",
}


@dataclass
class QueryState:
    """Observable state of the product list read."""

    data: list[Product] | None = None
    is_loading: bool = False
    is_fetching: bool = False
    is_error: bool = False
    error: str = ""
    updated_at: float = 0.0


@dataclass
class MutationState:
    """Observable state of one kind of write (add, update or delete)."""

    in_flight: int = 0
    pending_ids: list[int | str] = field(
        default_factory=lambda: list[int | str]()
    )
    variables: Any = None
    error: str = ""

    @property
    def is_pending(self) -> bool:
        """True while any call of this kind is awaiting the server."""
        return self.in_flight > 0

    def is_pending_for(self, product_id: int | str) -> bool:
        """True while a call targeting *product_id* is in flight."""
        return product_id in self.pending_ids


@dataclass
class MutationOutcome:
    """What the UI should tell the user after a write."""

    ok: bool
    message: str
    severity: str = "information"
    product: Product | None = None


class CatalogService:
    """Coordinates the API client, the read cache, and request state.

    Reads go through the cache and are only refetched once stale or
    invalidated.  Every successful write invalidates the product list
    and refetches it.  Failures are recorded on the matching state
    object and reported once; nothing is retried.
    """

    def __init__(
        self,
        client: ProductApiClient | None = None,
        query_cache: QueryCache | None = None,
    ) -> None:
        self.settings = Settings()
        self.client = client or ProductApiClient()
        self.query_cache = query_cache or QueryCache()
        self.products = QueryState()
        self.mutations: dict[str, MutationState] = {
            kind: MutationState() for kind in _PAST_TENSE
        }
        self._listeners: list[Callable[[], None]] = []

    def subscribe(self, listener: Callable[[], None]) -> None:
        """Call *listener* whenever query or mutation state changes."""
        self._listeners.append(listener)

    def _changed(self) -> None:
        for listener in self._listeners:
            listener()

    # ── Reads ────────────────────────────────────────────

    @property
    def any_pending(self) -> bool:
        """True while any write of any kind is in flight."""
        return any(m.is_pending for m in self.mutations.values())

    def visible_products(self) -> list[Product]:
        """The slice of the list the UI renders."""
        return (self.products.data or [])[: self.settings.DISPLAY_LIMIT]

    async def fetch_products(self, force: bool = False) -> QueryState:
        """Load the product list, serving a fresh cached copy if any."""
        state = self.products
        if not force:
            cached = self.query_cache.get(PRODUCTS_KEY)
            if cached is not None:
                state.data = cached
                state.is_error = False
                state.error = ""
                self._changed()
                return state

        state.is_loading = state.data is None
        state.is_fetching = True
        self._changed()
        try:
            products = await asyncio.to_thread(self.client.list_products)
        except CatalogApiError as exc:
            logger.error(
                "Loading products failed: %s", exc, exc_info=True
            )
            state.is_error = True
            state.error = str(exc)
        else:
            self.query_cache.store(PRODUCTS_KEY, products)
            state.data = products
            state.is_error = False
            state.error = ""
            state.updated_at = time.time()
        finally:
            state.is_loading = False
            state.is_fetching = False
            self._changed()
        return state

    # ── Writes ───────────────────────────────────────────

    async def _mutate(
        self,
        kind: str,
        call: Callable[[], Product],
        variables: Any,
        product_id: int | str | None = None,
    ) -> MutationOutcome:
        """Run one write, then invalidate and refetch on success."""
        state = self.mutations[kind]
        state.variables = variables
        state.in_flight += 1
        if product_id is not None:
            state.pending_ids.append(product_id)
        self._changed()

        try:
            product = await asyncio.to_thread(call)
        except CatalogApiError as exc:
            logger.error(
                "Failed to %s product (%r): %s",
                kind,
                variables,
                exc,
                exc_info=True,
            )
            state.error = str(exc)
            return MutationOutcome(
                ok=False,
                message=f"Failed to {kind} product: {exc}",
                severity="error",
            )
        finally:
            state.in_flight -= 1
            if product_id is not None:
                state.pending_ids.remove(product_id)
            self._changed()

        state.error = ""
        self.query_cache.invalidate(PRODUCTS_KEY)
        await self.fetch_products(force=True)
        return MutationOutcome(
            ok=True,
            message=(
                f'Product "{product.title}" '
                f"{_PAST_TENSE[kind]} successfully!"
            ),
            product=product,
        )

    async def add_product(self, draft: ProductDraft) -> MutationOutcome:
        """Create a product; an empty title never reaches the network."""
        problem = ProductValidator.validate_draft(draft)
        if problem is not None:
            return MutationOutcome(
                ok=False, message=problem, severity="error"
            )
        return await self._mutate(
            "add",
            lambda: self.client.create_product(draft),
            draft,
        )

    async def update_product(
        self, product_id: int | str, changes: dict[str, Any]
    ) -> MutationOutcome:
        """Send a partial update for one product."""
        return await self._mutate(
            "update",
            lambda: self.client.update_product(product_id, changes),
            {"id": product_id, "updated_data": changes},
            product_id,
        )

    async def mark_updated(self, product: Product) -> MutationOutcome:
        """Append the "(Updated)" suffix to a product's title."""
        return await self.update_product(
            product.id,
            {"title": product.title + self.settings.UPDATED_SUFFIX},
        )

    async def delete_product(
        self, product_id: int | str
    ) -> MutationOutcome:
        """Delete one product."""
        return await self._mutate(
            "delete",
            lambda: self.client.delete_product(product_id),
            product_id,
            product_id,
        )
