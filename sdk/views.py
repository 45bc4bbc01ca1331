from typing import List, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from .models import Product


def admin_order(products: Sequence[Product]) -> List[Product]:
    # sorted() is stable, so equal sortOrder values keep server order
    return sorted(products, key=lambda p: p.sort_order)


def format_price(price: float) -> str:
    return f"₹{int(price)}" if price == int(price) else f"₹{price:.2f}"


# ---------------------------
# Display helpers
# ---------------------------
def render_catalog(products: Sequence[Product]) -> Table:
    table = Table(
        title="📦 Catalog",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("Image", style="dim", overflow="fold")
    table.add_column("Name", style="bold")
    table.add_column("Price", justify="right")

    for p in products:
        table.add_row(p.image, p.name, format_price(p.price))
    return table


def render_admin(products: Sequence[Product]) -> Table:
    table = Table(
        title="🛠️ Admin",
        box=box.ROUNDED,
        header_style="bold yellow",
        title_style="bold yellow",
        show_lines=True
    )
    table.add_column("#", justify="right", width=4)
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold")
    table.add_column("Price", justify="right")
    table.add_column("Image", overflow="fold")
    table.add_column("Sort", justify="right", width=6)

    for pos, p in enumerate(admin_order(products), start=1):
        table.add_row(str(pos), p.id, p.name, format_price(p.price), p.image, str(p.sort_order))
    return table


class ConsoleProjection:
    """Prints a freshly built table every time it is handed products."""

    def __init__(self, console: Console, render):
        self.console = console
        self.render = render

    def __call__(self, products: Sequence[Product]) -> None:
        if not products:
            self.console.print("[italic yellow]No products found[/italic yellow]")
            return
        self.console.print(self.render(products))
