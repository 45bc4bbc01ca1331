# tests/test_end_to_end.py
import asyncio

import httpx

from app.main import app
from sdk.admin import CatalogAdmin
from sdk.models import ProductForm
from sdk.state import CatalogState
from sdk.store import ProductStore


async def _session():
    store = ProductStore(transport=httpx.ASGITransport(app=app))
    await store.reset()
    return CatalogAdmin(CatalogState(store))


def test_add_edit_reorder_delete_against_the_app():
    async def scenario():
        admin = await _session()
        for i, name in enumerate(["Apple Pie", "Banana", "apple juice"], start=1):
            assert await admin.add_product(ProductForm(
                name=name, price=str(i * 100), image=f"https://img.example.com/{i}.png", sort_order=str(i)))
        a, b, c = admin.state.ids()

        assert await admin.commit_edit(b, "price", "₹45.50")
        assert await admin.reorder([c, a, b]) == []
        orders = {p.id: p.sort_order for p in admin.state.products}

        assert await admin.delete_product(a)
        remaining = admin.state.ids()
        listed = [p.id for p in await admin.store.list_products()]
        banana = next(p for p in admin.state.products if p.id == b)
        await admin.store.aclose()
        return (a, b, c), orders, remaining, listed, banana

    (a, b, c), orders, remaining, listed, banana = asyncio.run(scenario())
    assert orders == {c: 1, a: 2, b: 3}
    assert remaining == [b, c]
    assert listed == [b, c]
    assert banana.price == 45.5


def test_unknown_id_is_a_logged_failure():
    async def scenario():
        admin = await _session()
        ok = await admin.update_field("does-not-exist", "name", "x")
        await admin.store.aclose()
        return ok, admin.state.products

    ok, products = asyncio.run(scenario())
    assert ok is False
    assert products == ()
