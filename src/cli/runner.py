# src/cli/runner.py

"""Headless CLI runner: search, detail lookup and health check."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.models.product import Product
from src.services.product_service import ProductNotFoundError, ProductService

logger = logging.getLogger("quickfind.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_table(products: list[Product], title: str) -> None:
    """Render a Rich table of products to stdout, in page order."""
    table = Table(
        title=title,
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("ID", style="dim")
    table.add_column("Title", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Rating", justify="center")
    table.add_column("Store", style="magenta")
    table.add_column("Link", overflow="fold", style="dim")

    for idx, p in enumerate(products, 1):
        table.add_row(
            str(idx),
            p.id,
            p.title[:60],
            p.price or "N/A",
            p.rating or "—",
            p.store_name,
            p.link,
        )

    Console().print(table)


def _dump_json(payload: object) -> None:
    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def cli_search(
    query: str,
    output_format: str,
    service: ProductService | None = None,
) -> int:
    """Run a headless search and return an exit code (0=ok, 1=fail)."""
    if not query:
        _err.print("[red]Query must not be empty.[/red]")
        return 1

    service = service or ProductService()
    _err.print(f"[bold]Searching:[/bold] {query}")

    result = service.search(query)
    if result.used_fallback:
        _err.print(
            f"[yellow]Live results unavailable ({result.error}); "
            "showing sample products.[/yellow]"
        )
    else:
        _err.print(f"[green]✓ {result.total_count} products[/green]")

    if output_format == "table":
        _print_table(result.products, f"Results for '{query}'")
    else:
        _dump_json(result.to_dict())
    return 0


def cli_product(
    product_id: str,
    output_format: str,
    service: ProductService | None = None,
) -> int:
    """Look up one product and return an exit code (0=ok, 1=fail)."""
    if not product_id:
        _err.print("[red]Product ID must not be empty.[/red]")
        return 1

    service = service or ProductService()
    _err.print(f"[bold]Fetching product:[/bold] {product_id}")

    try:
        product = service.get_detail(product_id)
    except ProductNotFoundError as exc:
        logger.warning("Product %s not found", exc.product_id)
        _err.print(f"[red]Product not found: {product_id}[/red]")
        return 1

    if output_format == "table":
        _print_table([product], "Product Detail")
    else:
        _dump_json(product.to_dict())
    return 0


async def run_health_check() -> int:
    """Run a connectivity health check against the store."""
    from src.services.health_checker import HealthChecker

    _err.print("[bold]Running store health check...[/bold]")
    checker = HealthChecker()
    r = await checker.check()

    table = Table(
        title="Store Health Check",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Store", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Latency", justify="right")
    table.add_column("Notes", style="dim")

    if r.status == "ok":
        status = "[green]✅ OK[/green]"
    elif r.status == "slow":
        status = "[yellow]⚠️  SLOW[/yellow]"
    else:
        status = "[red]❌ DOWN[/red]"

    latency = f"{r.latency_ms:.0f}ms" if r.latency_ms > 0 else "—"
    table.add_row(r.store_id, status, latency, r.message)

    Console().print(table)
    return 1 if r.status == "down" else 0
