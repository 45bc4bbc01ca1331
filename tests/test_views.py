from rich.console import Console

from sdk.models import Product
from sdk.views import ConsoleProjection, admin_order, format_price, render_admin, render_catalog


def _products():
    return [
        Product(id="a", name="Zeta", price=10, image="https://x/a.png", sortOrder=3),
        Product(id="b", name="Alpha", price=1234.5, image="https://x/b.png", sortOrder=1),
        Product(id="c", name="Mid", price=5, image="https://x/c.png", sortOrder=3),
    ]


def _text(renderable):
    console = Console(record=True, width=200)
    console.print(renderable)
    return console.export_text()


def test_admin_order_sorts_by_sort_order_stably():
    assert [p.id for p in admin_order(_products())] == ["b", "a", "c"]


def test_render_admin_uses_sort_order():
    text = _text(render_admin(_products()))
    assert text.index("Alpha") < text.index("Zeta") < text.index("Mid")


def test_render_catalog_keeps_given_order():
    table = render_catalog(_products())
    assert table.row_count == 3
    text = _text(table)
    assert text.index("Zeta") < text.index("Alpha")
    assert "₹1234.50" in text


def test_format_price():
    assert format_price(10) == "₹10"
    assert format_price(1234.5) == "₹1234.50"
    assert format_price(1234567) == "₹1234567"
    assert format_price(25000000.0) == "₹25000000"


def test_console_projection_rebuilds_each_time():
    console = Console(record=True, width=200)
    show = ConsoleProjection(console, render_catalog)
    show(_products())
    show([])
    text = console.export_text()
    assert text.count("Zeta") == 1
    assert "No products found" in text
