# tests/test_product_validator.py

"""Tests for draft validation."""

import unittest

from src.filters.product_validator import TITLE_REQUIRED, ProductValidator
from src.models.product import ProductDraft


class TestProductValidator(unittest.TestCase):
    """ProductValidator.validate_draft tests."""

    def test_title_present_passes(self) -> None:
        """A draft with a title is accepted."""
        self.assertIsNone(
            ProductValidator.validate_draft(ProductDraft(title="Desk"))
        )

    def test_empty_title_rejected(self) -> None:
        """An empty title yields the required-title message."""
        self.assertEqual(
            ProductValidator.validate_draft(ProductDraft()),
            "Title is required!",
        )

    def test_whitespace_title_accepted(self) -> None:
        """Only the empty string is rejected; spaces are sent as typed."""
        self.assertIsNone(
            ProductValidator.validate_draft(ProductDraft(title="   "))
        )

    def test_empty_title_uses_shared_message(self) -> None:
        """The rejection message is the module constant."""
        self.assertEqual(
            ProductValidator.validate_draft(ProductDraft(title="")),
            TITLE_REQUIRED,
        )

    def test_other_fields_not_checked(self) -> None:
        """Nonsense price or thumbnail is left for the API to judge."""
        draft = ProductDraft(title="Desk", price="abc", thumbnail="nope")
        self.assertIsNone(ProductValidator.validate_draft(draft))


if __name__ == "__main__":
    unittest.main()
