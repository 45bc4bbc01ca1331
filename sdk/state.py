import logging
from typing import Callable, List, Sequence, Tuple

from .errors import CatalogError, ServerError
from .models import Product
from .store import ProductStore

logger = logging.getLogger(__name__)

Listener = Callable[[Sequence[Product]], None]


class CatalogState:
    """The client's snapshot of every product, owned by a single writer.

    ``refresh`` is the only way the snapshot changes: it swaps in a new
    tuple from the store and then notifies the renderers. A failed fetch
    keeps the previous snapshot.
    """

    def __init__(self, store: ProductStore):
        self.store = store
        self._products: Tuple[Product, ...] = ()
        self._listeners: List[Listener] = []

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    def ids(self) -> List[str]:
        return [p.id for p in self._products]

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    async def refresh(self) -> bool:
        try:
            fetched = await self.store.list_products()
            seen = set()
            for p in fetched:
                if p.id in seen:
                    raise ServerError(f"duplicate product id {p.id} in list")
                seen.add(p.id)
        except CatalogError as e:
            logger.error("Failed to fetch products: %s", e)
            return False

        self._products = tuple(fetched)
        for listener in self._listeners:
            try:
                listener(self._products)
            except Exception:
                # a broken view must not stop the other views or the caller
                logger.exception("Rendering after refresh failed in %r", listener)
        return True
