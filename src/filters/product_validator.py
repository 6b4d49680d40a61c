# src/filters/product_validator.py

"""Draft validation before a create request is issued."""

import logging

from src.models.product import ProductDraft

logger = logging.getLogger("catalog.filters")

TITLE_REQUIRED = "Title is required!"


class ProductValidator:
    """Check drafts for the one field the catalog UI insists on."""

    @staticmethod
    def validate_draft(draft: ProductDraft) -> str | None:
        """Return an error message when the title is missing, else None.

        Any non-empty title passes, whitespace included.  Every other
        field is left for the API to judge.
        """
        if not draft.title:
            logger.debug(
                "Rejected draft with empty title (description=%r)",
                draft.description[:40],
            )
            return TITLE_REQUIRED
        return None
