# src/models/product.py

"""Product records as returned by the catalog API, and unsaved drafts."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Product:
    """A single product record owned by the remote catalog."""

    id: int | str
    title: str
    description: str = ""
    price: float | None = None
    thumbnail: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Product":
        """Build a Product from an API object, ignoring unknown keys."""
        return cls(
            id=data.get("id", ""),
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            price=data.get("price"),
            thumbnail=str(data.get("thumbnail") or ""),
        )

    @property
    def price_label(self) -> str:
        """Price as shown in the list, e.g. ``$9.99``."""
        return "" if self.price is None else f"${self.price}"


@dataclass
class ProductDraft:
    """Form values for a product that has not been created yet.

    Every field is kept as the raw text the user typed; ``price`` is
    forwarded to the API unparsed.
    """

    title: str = ""
    description: str = ""
    price: str = ""
    thumbnail: str = ""

    def to_payload(self) -> dict[str, str]:
        """JSON body for the create request."""
        return {
            "title": self.title,
            "description": self.description,
            "price": self.price,
            "thumbnail": self.thumbnail,
        }
