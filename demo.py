#!/usr/bin/env python
import asyncio
import logging

from rich import print
from rich.logging import RichHandler

from sdk.admin import CatalogAdmin
from sdk.config import ClientSettings
from sdk.models import ProductForm
from sdk.state import CatalogState
from sdk.store import ProductStore
from sdk.views import render_admin, render_catalog


async def main():
    logging.basicConfig(level="INFO", format="%(message)s", handlers=[RichHandler(show_path=False)])
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with ProductStore(ClientSettings()) as store:
        state = CatalogState(store)
        admin = CatalogAdmin(state, render_catalog=lambda ps: print(render_catalog(ps)))

        # -----------------------------
        # Reset everything for demo
        # -----------------------------
        print("Resetting store...")
        await store.reset()

        # -----------------------------
        # Add products
        # -----------------------------
        print("\nAdding products...")
        for i, (name, price) in enumerate([("Apple Pie", "250"), ("Banana", "40"), ("apple juice", "120")], start=1):
            form = ProductForm(name=name, price=price, image=f"https://img.example.com/{i}.png", sort_order=str(i))
            await admin.add_product(form)
        print(render_admin(state.products))

        # -----------------------------
        # Inline edit
        # -----------------------------
        print("\nRepricing Banana from free text...")
        banana = next(p for p in state.products if p.name == "Banana")
        await admin.commit_edit(banana.id, "price", "₹45.50 per dozen")

        # -----------------------------
        # Search
        # -----------------------------
        print("\nSearching for 'apple'...")
        admin.handle_search("apple")

        # -----------------------------
        # Reorder: last card dropped at the top
        # -----------------------------
        print("\nMoving the last product to the top...")
        ids = state.ids()
        await admin.reorder(ids[-1:] + ids[:-1])
        print(render_admin(state.products))


if __name__ == "__main__":
    asyncio.run(main())
