"""Admin-side synchronization of the product catalog.

Edits, deletes, adds and reorders are sent to the store one request at a
time and are always followed by a full refresh of ``CatalogState``; the
local snapshot is never patched by hand. Every public coroutine here
swallows its own failures: it logs a diagnostic and returns a falsy value.
"""

import asyncio
import logging
import math
import re
from typing import Any, Callable, List, Optional, Sequence

from .errors import CatalogError, ValidationError
from .models import EDITABLE_FIELDS, Product, ProductForm
from .state import CatalogState

logger = logging.getLogger(__name__)

_NOT_PRICE_CHARS = re.compile(r"[^\d.]")
_LEADING_DECIMAL = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def normalize_price(raw: str) -> Optional[float]:
    """Pull a price out of free text: ``"₹1,234.50abc"`` gives ``1234.5``.

    Everything but digits and dots is dropped, then the leading decimal
    number is parsed, so ``"1.2.3"`` gives ``1.2``. Returns None when no
    number is left.
    """
    cleaned = _NOT_PRICE_CHARS.sub("", raw)
    m = _LEADING_DECIMAL.match(cleaned)
    if not m:
        return None
    return float(m.group())


def parse_leading_int(raw: str) -> Optional[int]:
    # "12.9" -> 12, "7 units" -> 7, "abc" -> None
    m = _LEADING_INT.match(raw or "")
    return int(m.group(1)) if m else None


def validate_field(product_id: str, field: str, value: Any) -> Any:
    """Check a single-field edit and return the value to send."""
    if not product_id or not field or value is None:
        raise ValidationError(f"incomplete edit: id={product_id!r} field={field!r} value={value!r}")
    if field not in EDITABLE_FIELDS:
        raise ValidationError(f"{field!r} is not an editable field")

    if field == "price":
        if isinstance(value, bool):
            raise ValidationError(f"price must be a number, got {value!r}")
        try:
            price = float(value)
        except (TypeError, ValueError):
            raise ValidationError(f"price must be a number, got {value!r}")
        if not math.isfinite(price) or price < 0:
            raise ValidationError(f"price must be a non-negative number, got {value!r}")
        return price

    if field == "image":
        if not isinstance(value, str) or not value.startswith("http"):
            raise ValidationError(f"image must be an http(s) URL, got {value!r}")

    return value


class CatalogAdmin:
    """Entry points behind the admin grid, the add form and the search box."""

    def __init__(self, state: CatalogState,
                 render_catalog: Optional[Callable[[Sequence[Product]], None]] = None):
        self.state = state
        self.store = state.store
        self.render_catalog = render_catalog
        self._reorder_lock = asyncio.Lock()

    # ---------------------------
    # Field updates
    # ---------------------------
    async def update_field(self, product_id: str, field: str, value: Any) -> bool:
        logger.info("Updating %s of %s to %r", field, product_id, value)
        try:
            value = validate_field(product_id, field, value)
        except ValidationError as e:
            logger.warning("Edit rejected: %s", e)
            return False

        try:
            await self.store.update_product(product_id, field, value)
        except CatalogError as e:
            logger.error("Failed to update %s of %s: %s", field, product_id, e)
            return False

        await self.state.refresh()
        return True

    async def update_price(self, product_id: str, raw: str) -> bool:
        price = normalize_price(raw.strip())
        if price is None:
            logger.warning('Invalid price input: "%s"', raw.strip())
            return False
        return await self.update_field(product_id, "price", price)

    async def commit_edit(self, product_id: str, field: str, raw: str) -> bool:
        """Blur handler of an inline-editable admin cell."""
        if field == "price":
            return await self.update_price(product_id, raw)
        return await self.update_field(product_id, field, raw.strip())

    # ---------------------------
    # Reorder (one call per drop)
    # ---------------------------
    async def reorder(self, ordered_ids: Sequence[str]) -> Optional[List[str]]:
        """Persist a dropped order as sortOrder 1..n, one awaited PATCH at a time.

        Returns the ids whose update failed (the rest stay updated), or None
        when the order does not cover exactly the products on screen.
        """
        async with self._reorder_lock:
            ordered_ids = list(ordered_ids)
            current = self.state.ids()
            if len(set(ordered_ids)) != len(ordered_ids) or set(ordered_ids) != set(current):
                logger.warning("Reorder rejected: %s does not match the admin grid %s",
                               ordered_ids, current)
                return None

            failed = []
            for position, product_id in enumerate(ordered_ids, start=1):
                if not await self.update_field(product_id, "sortOrder", position):
                    failed.append(product_id)

            if failed:
                logger.warning("Reordering finished with %d failed update(s): %s",
                               len(failed), failed)
            else:
                logger.info("Reordering complete")
            return failed

    # ---------------------------
    # Delete / add
    # ---------------------------
    async def delete_product(self, product_id: str) -> bool:
        try:
            await self.store.delete_product(product_id)
        except CatalogError as e:
            logger.error("Failed to delete product %s: %s", product_id, e)
            return False
        await self.state.refresh()
        return True

    async def add_product(self, form: ProductForm) -> bool:
        price = parse_leading_int(form.price)
        sort_order = parse_leading_int(form.sort_order)
        if price is None or sort_order is None:
            logger.warning("Failed to add product: price %r and sortOrder %r must be integers",
                           form.price, form.sort_order)
            return False

        product = {
            "name": form.name.strip(),
            "price": price,
            "image": form.image.strip(),
            "sortOrder": sort_order,
        }
        try:
            await self.store.create_product(product)
        except CatalogError as e:
            logger.error("Failed to add product: %s", e)
            return False

        form.reset()
        await self.state.refresh()
        return True

    # ---------------------------
    # Search (local only)
    # ---------------------------
    def handle_search(self, query: str) -> List[Product]:
        term = query.lower()
        filtered = [p for p in self.state.products if term in p.name.lower()]
        if self.render_catalog is not None:
            self.render_catalog(filtered)
        return filtered
