import json

import httpx
import pytest

from sdk.admin import CatalogAdmin
from sdk.state import CatalogState
from sdk.store import ProductStore


class FakeRemote:
    """In-memory /api/products that records every request it sees."""

    def __init__(self, products=()):
        self.products = {p["id"]: dict(p) for p in products}
        self.calls = []
        self.fail = {}      # (method, product_id) -> status code
        self.down = False
        self._next_id = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        path = request.url.path
        self.calls.append((request.method, path, body))
        if self.down:
            raise httpx.ConnectError("connection refused", request=request)

        pid = path.rsplit("/", 1)[-1] if path.count("/") > 2 else None
        status = self.fail.get((request.method, pid))
        if status:
            return httpx.Response(status, json={"detail": "boom"})

        if request.method == "GET":
            return httpx.Response(200, json=list(self.products.values()))
        if request.method == "POST":
            self._next_id += 1
            record = {"id": f"new{self._next_id}", **body}
            self.products[record["id"]] = record
            return httpx.Response(201, json=record)
        if pid not in self.products:
            return httpx.Response(404, json={"detail": "product not found"})
        if request.method == "PATCH":
            self.products[pid] = {**self.products[pid], **body}
            return httpx.Response(200, json=self.products[pid])
        if request.method == "DELETE":
            del self.products[pid]
            return httpx.Response(200, json={"status": "deleted", "id": pid})
        return httpx.Response(405)

    def methods(self):
        return [(method, path.rsplit("/", 1)[-1], body) for method, path, body in self.calls]


def product(pid, name, price=10, sort_order=0):
    return {"id": pid, "name": name, "price": price,
            "image": f"https://img.example.com/{pid}.png", "sortOrder": sort_order}


@pytest.fixture
def remote():
    return FakeRemote([
        product("A", "Apple Pie", 250, 1),
        product("B", "Banana", 40, 2),
        product("C", "apple juice", 120, 3),
    ])


def make_admin(remote, render_catalog=None):
    """Build store/state/admin inside the running loop and load the first snapshot."""
    store = ProductStore(transport=httpx.MockTransport(remote))
    state = CatalogState(store)
    return CatalogAdmin(state, render_catalog=render_catalog)


async def loaded_admin(remote, render_catalog=None):
    admin = make_admin(remote, render_catalog)
    await admin.state.refresh()
    remote.calls.clear()
    return admin
