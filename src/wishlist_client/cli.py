"""Command-line interface for the wishlist client.

Built with Typer for commands and Rich for output.
"""

import logging
from dataclasses import replace
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .api import WishlistError, WishlistHttpClient
from .config import Config, get_config
from .schemas import Wishlist, WishlistLine

# Create the main app
app = typer.Typer(
    name="wishlist",
    help="Manage wishlists on the remote wishlist service.",
    no_args_is_help=True,
)

# Rich console for pretty output
console = Console()


# ============================================================================
# Helper Functions
# ============================================================================


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_wishlist_table(wishlist: Wishlist) -> Table:
    """Create a rich table listing a wishlist's products."""
    table = Table(
        title=f"Wishlist {wishlist.id} (user {wishlist.user_id})",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Product", style="cyan")

    for position, line in enumerate(wishlist.lines, start=1):
        table.add_row(str(position), str(line.product_id))

    return table


def format_wishlists_table(wishlists: list[Wishlist], page: int) -> Table:
    """Create a rich table summarizing a page of wishlists."""
    table = Table(title=f"Wishlists (page {page})", show_header=True, header_style="bold magenta")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("User", justify="right", style="green")
    table.add_column("Items", justify="right")

    for wishlist in wishlists:
        table.add_row(str(wishlist.id), str(wishlist.user_id), str(len(wishlist.lines)))

    return table


def _effective_config(ctx: typer.Context) -> Config:
    """Apply global command-line overrides to the loaded config."""
    config = get_config()
    options = {k: v for k, v in (ctx.obj or {}).items() if v is not None}
    if "host" in options:
        options["host"] = options["host"].rstrip("/")
    return replace(config, **options)


def _client(ctx: typer.Context) -> WishlistHttpClient:
    """Build a client from config and global options."""
    config = _effective_config(ctx)
    return WishlistHttpClient(
        key=config.api_key or "",
        secret=config.api_secret or "",
        version=config.version,
        host=config.host,
        port=config.port,
    )


@app.callback()
def callback(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", help="Service host including scheme"),
    port: Optional[int] = typer.Option(None, "--port", help="Service port"),
    api_version: Optional[str] = typer.Option(None, "--api-version", help="API version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests"),
) -> None:
    """Manage wishlists on the remote wishlist service."""
    ctx.obj = {"host": host, "port": port, "version": api_version}
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


# ============================================================================
# Wishlist Commands
# ============================================================================


@app.command()
def show(
    ctx: typer.Context,
    wishlist_id: int = typer.Argument(..., help="Wishlist ID"),
) -> None:
    """Show the products in a wishlist."""
    try:
        with _client(ctx) as client:
            wishlist = client.wishlists.optional(wishlist_id)
    except WishlistError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if wishlist is None:
        print_error(f"Wishlist not found: {wishlist_id}")
        raise typer.Exit(1)

    if not wishlist.lines:
        console.print(f"[dim]Wishlist {wishlist.id} is empty.[/dim]")
        return

    console.print(format_wishlist_table(wishlist))


@app.command("list")
def list_wishlists(
    ctx: typer.Context,
    page: int = typer.Option(1, "--page", "-p", help="Page number"),
) -> None:
    """List the current user's wishlists."""
    try:
        with _client(ctx) as client:
            wishlists = client.wishlists.list(page)
    except WishlistError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if not wishlists:
        console.print("[dim]No wishlists found.[/dim]")
        return

    console.print(format_wishlists_table(wishlists, page))


@app.command()
def add(
    ctx: typer.Context,
    wishlist_id: int = typer.Argument(..., help="Wishlist ID"),
    product_id: int = typer.Argument(..., help="Product ID to add"),
) -> None:
    """Add a product to a wishlist."""
    line = WishlistLine(product_id=product_id, wishlist_id=wishlist_id)
    try:
        with _client(ctx) as client:
            wishlist = client.wishlists.add(line)
    except WishlistError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(f"Added product {product_id} to wishlist {wishlist.id}")
    console.print(format_wishlist_table(wishlist))


@app.command()
def remove(
    ctx: typer.Context,
    wishlist_id: int = typer.Argument(..., help="Wishlist ID"),
    product_id: int = typer.Argument(..., help="Product ID to remove"),
) -> None:
    """Remove a product from a wishlist."""
    line = WishlistLine(product_id=product_id, wishlist_id=wishlist_id)
    try:
        with _client(ctx) as client:
            wishlist = client.wishlists.remove(line)
    except WishlistError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(f"Removed product {product_id} from wishlist {wishlist.id}")
    console.print(format_wishlist_table(wishlist))


# ============================================================================
# Config Command
# ============================================================================


@app.command("config")
def show_config(ctx: typer.Context) -> None:
    """Show effective configuration, including global overrides."""
    config = _effective_config(ctx)

    table = Table(show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Base URL", config.base_url)
    table.add_row("User ID", str(config.user_id))
    table.add_row("API key", config.api_key or "[dim]not set[/dim]")
    table.add_row("API secret", "********" if config.api_secret else "[dim]not set[/dim]")
    table.add_row("Credentials", "configured" if config.has_credentials() else "[dim]missing[/dim]")
    table.add_row("Timeout", f"{config.timeout}s")
    console.print(table)

    for error in config.validate():
        console.print(f"[bold yellow]Warning:[/bold yellow] {error}")


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__

    console.print(f"wishlist-client version {__version__}")


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
