# src/ui/app.py

"""Terminal UI for browsing and editing the product catalog."""

import logging
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    LoadingIndicator,
    Static,
)

from src.config.settings import Settings
from src.filters.product_validator import ProductValidator
from src.models.product import Product, ProductDraft
from src.services.catalog_service import CatalogService, MutationOutcome

logger = logging.getLogger("catalog.ui")

_FORM_FIELDS: list[tuple[str, str, str]] = [
    ("title", "Title", "text"),
    ("description", "Description", "text"),
    ("price", "Price", "number"),
    ("thumbnail", "Thumbnail URL", "text"),
]


class CatalogApp(App[object]):
    """Terminal UI for the product catalog."""

    CSS_PATH = "styles.css"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("a", "add", "Add"),
        Binding("u", "update_selected", "Update"),
        Binding("d", "delete_selected", "Delete"),
        Binding("r", "refresh", "Refresh"),
    ]

    def __init__(self, service: CatalogService | None = None) -> None:
        super().__init__()
        self.settings = Settings()
        self.service = service or CatalogService()
        self.visible_products: list[Product] = []

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        yield Header()
        yield Container(
            Static("🛍️  Product Catalog", id="title"),

            # Add Product form
            Container(
                Static("Add Product", classes="section_title"),
                Static("Processing request...", id="processing"),
                Horizontal(
                    *(
                        Input(
                            placeholder=placeholder,
                            type=input_type,  # type: ignore[arg-type]
                            id=f"{name}_input",
                        )
                        for name, placeholder, input_type in _FORM_FIELDS
                    ),
                    id="form_fields",
                ),
                Button("Add Product", variant="primary", id="add_btn"),
                id="add_form",
            ),

            Static("", id="status"),
            LoadingIndicator(id="loader"),
            Static("", id="list_error"),
            cast(
                DataTable[str | Text],
                DataTable(
                    id="products_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            Horizontal(
                Button("Update", variant="success", id="update_btn"),
                Button("Delete", variant="error", id="delete_btn"),
                id="row_actions",
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Configure the table, hook up state changes, start loading."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )
        table.add_columns(
            "Title", "Description", "Price", "Thumbnail", "Status"
        )
        self.service.subscribe(self.refresh_view)
        self.refresh_view()
        self.run_worker(self.load_products(), group="query")

    # ── Rendering ────────────────────────────────────────

    def refresh_view(self) -> None:
        """Sync every widget with the service's request state."""
        if not self.is_running:
            return
        service = self.service
        self.query_one("#processing", Static).display = (
            service.any_pending
        )

        for kind, idle, busy in (
            ("add", "Add Product", "Adding..."),
            ("update", "Update", "Updating..."),
            ("delete", "Delete", "Deleting..."),
        ):
            pending = service.mutations[kind].is_pending
            button = self.query_one(f"#{kind}_btn", Button)
            button.label = busy if pending else idle
            button.disabled = pending

        query = service.products
        loader = self.query_one("#loader", LoadingIndicator)
        error_panel = self.query_one("#list_error", Static)
        table = self.query_one("#products_table", DataTable)
        status = self.query_one("#status", Static)

        loader.display = query.is_loading
        error_panel.display = query.is_error and not query.is_loading
        if query.is_error:
            error_panel.update(f"Error loading products: {query.error}")
        table.display = not query.is_loading and not query.is_error

        if query.is_loading:
            status.update("Loading...")
        elif query.is_fetching:
            status.update("🔄 Refreshing products...")
        elif query.data is not None:
            status.update(
                f"✅ Showing {len(service.visible_products())} "
                f"of {len(query.data)} products"
            )

        self.populate_table()

    def populate_table(self) -> None:
        """Fill the DataTable with the visible slice of products."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )
        cursor = table.cursor_row
        table.clear()
        self.visible_products = self.service.visible_products()
        updates = self.service.mutations["update"]
        deletes = self.service.mutations["delete"]

        for p in self.visible_products:
            if deletes.is_pending_for(p.id):
                row_status = Text("Deleting...", style="red")
            elif updates.is_pending_for(p.id):
                row_status = Text("Updating...", style="blue")
            else:
                row_status = Text("")
            table.add_row(
                p.title[:40],
                p.description[:60],
                Text(p.price_label, style="bold"),
                p.thumbnail[:50],
                row_status,
            )

        if self.visible_products:
            table.move_cursor(row=min(cursor, len(self.visible_products) - 1))

    def _notify(self, outcome: MutationOutcome) -> None:
        """Show a transient success or error toast."""
        self.notify(
            outcome.message,
            severity="error" if outcome.severity == "error" else "information",
            timeout=self.settings.NOTIFICATION_TIMEOUT,
        )

    # ── Form ─────────────────────────────────────────────

    def _read_form(self) -> ProductDraft:
        """Collect the current form values into a draft."""
        values = {
            name: self.query_one(f"#{name}_input", Input).value
            for name, _, _ in _FORM_FIELDS
        }
        return ProductDraft(**values)

    def _reset_form(self) -> None:
        for name, _, _ in _FORM_FIELDS:
            self.query_one(f"#{name}_input", Input).value = ""

    def _selected_product(self) -> Product | None:
        """The product under the table cursor, if any."""
        table = self.query_one("#products_table", DataTable)
        row = table.cursor_row
        if 0 <= row < len(self.visible_products):
            return self.visible_products[row]
        return None

    # ── Event handlers ───────────────────────────────────

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button click events."""
        if event.button.id == "add_btn":
            self.action_add()
        elif event.button.id == "update_btn":
            self.action_update_selected()
        elif event.button.id == "delete_btn":
            self.action_delete_selected()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in any form field submits the form."""
        self.action_add()

    def _busy(self, kind: str) -> bool:
        """True while a write of *kind* is in flight; its button is disabled."""
        if self.service.mutations[kind].is_pending:
            logger.debug("Ignoring %s request while one is pending", kind)
            return True
        return False

    def action_add(self) -> None:
        """Submit the add-product form."""
        if self._busy("add"):
            return
        self.run_worker(self.add_product(), group="mutations")

    def action_update_selected(self) -> None:
        """Mark the selected product as updated."""
        if self._busy("update"):
            return
        product = self._selected_product()
        if product is None:
            self.notify("Select a product first", severity="warning")
            return
        self.run_worker(self.update_product(product), group="mutations")

    def action_delete_selected(self) -> None:
        """Delete the selected product."""
        if self._busy("delete"):
            return
        product = self._selected_product()
        if product is None:
            self.notify("Select a product first", severity="warning")
            return
        self.run_worker(self.delete_product(product), group="mutations")

    def action_refresh(self) -> None:
        """Refetch the list, ignoring the cache."""
        self.run_worker(self.load_products(force=True), group="query")

    # ── Workers ──────────────────────────────────────────

    async def load_products(self, force: bool = False) -> None:
        """Fetch the product list through the cache."""
        await self.service.fetch_products(force=force)

    async def add_product(self) -> None:
        """Validate the form and create a product."""
        draft = self._read_form()
        problem = ProductValidator.validate_draft(draft)
        if problem is not None:
            self._notify(
                MutationOutcome(ok=False, message=problem, severity="error")
            )
            return
        self._reset_form()
        logger.info("Adding product '%s'", draft.title)
        self._notify(await self.service.add_product(draft))

    async def update_product(self, product: Product) -> None:
        """Append the "(Updated)" suffix to *product*'s title."""
        logger.info("Updating product %s", product.id)
        self._notify(await self.service.mark_updated(product))

    async def delete_product(self, product: Product) -> None:
        """Delete *product*."""
        logger.info("Deleting product %s", product.id)
        self._notify(await self.service.delete_product(product.id))
