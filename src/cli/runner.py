# src/cli/runner.py

"""Headless catalog commands — reuse the async catalog service."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.models.product import Product, ProductDraft
from src.services.catalog_service import (
    CatalogService,
    MutationOutcome,
)

logger = logging.getLogger("catalog.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _products_to_dicts(products: list[Product]) -> list[dict[str, object]]:
    """Serialise a product list to plain dicts for JSON output."""
    return [
        {
            "id": p.id,
            "title": p.title,
            "description": p.description,
            "price": p.price,
            "thumbnail": p.thumbnail,
        }
        for p in products
    ]


def _print_table(products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title="Products",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Title", max_width=40)
    table.add_column("Description", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Thumbnail", overflow="fold", style="dim")

    for p in products:
        table.add_row(
            str(p.id),
            p.title,
            p.description,
            p.price_label or "—",
            p.thumbnail,
        )

    Console().print(table)


def _report(outcome: MutationOutcome) -> int:
    """Print a write outcome and return the matching exit code."""
    if outcome.ok:
        _err.print(f"[green]✅ {outcome.message}[/green]")
        if outcome.product is not None:
            json.dump(
                _products_to_dicts([outcome.product])[0],
                sys.stdout,
                ensure_ascii=False,
                indent=2,
            )
            sys.stdout.write("\n")
        return 0
    _err.print(f"[red]❌ {outcome.message}[/red]")
    return 1


async def cli_list(
    output_format: str,
    show_all: bool = False,
    service: CatalogService | None = None,
) -> int:
    """Print the product list and return an exit code (0=ok, 1=fail)."""
    service = service or CatalogService()
    state = await service.fetch_products()
    if state.is_error:
        _err.print(f"[red]Error loading products: {state.error}[/red]")
        return 1

    products = (
        list(state.data or []) if show_all else service.visible_products()
    )
    _err.print(
        f"[green]✓ {len(products)} of {len(state.data or [])} "
        f"products[/green]"
    )

    if output_format == "table":
        _print_table(products)
    else:
        json.dump(
            _products_to_dicts(products),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")
    return 0


async def cli_add(
    draft: ProductDraft, service: CatalogService | None = None
) -> int:
    """Create a product from command-line values."""
    service = service or CatalogService()
    return _report(await service.add_product(draft))


async def cli_update(
    product_id: str,
    title: str | None,
    suffix: bool = False,
    service: CatalogService | None = None,
) -> int:
    """Update a product's title, or append the "(Updated)" suffix."""
    service = service or CatalogService()
    if suffix:
        state = await service.fetch_products()
        if state.is_error:
            _err.print(
                f"[red]Error loading products: {state.error}[/red]"
            )
            return 1
        match = next(
            (p for p in state.data or [] if str(p.id) == product_id),
            None,
        )
        if match is None:
            _err.print(f"[red]No product with id {product_id}[/red]")
            return 1
        return _report(await service.mark_updated(match))

    if not title:
        _err.print("[red]Nothing to update: pass --title or --suffix[/red]")
        return 1
    return _report(
        await service.update_product(product_id, {"title": title})
    )


async def cli_delete(
    product_id: str, service: CatalogService | None = None
) -> int:
    """Delete a product by id."""
    service = service or CatalogService()
    return _report(await service.delete_product(product_id))


async def run_health_check() -> int:
    """Run a connectivity health check against the catalog API."""
    from src.services.health_checker import HealthChecker

    _err.print("[bold]Running catalog API health check...[/bold]")
    result = await HealthChecker().check()

    table = Table(
        title="Catalog API Health",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Endpoint", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Latency", justify="right")
    table.add_column("Notes", style="dim")

    if result.status == "ok":
        status = "[green]✅ OK[/green]"
    elif result.status == "slow":
        status = "[yellow]⚠️  SLOW[/yellow]"
    else:
        status = "[red]❌ DOWN[/red]"

    latency = (
        f"{result.latency_ms:.0f}ms" if result.latency_ms > 0 else "—"
    )
    table.add_row(result.endpoint, status, latency, result.message)

    Console().print(table)
    return 1 if result.status == "down" else 0
