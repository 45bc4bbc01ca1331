import uuid
from typing import Dict, Any, List
from fastapi import HTTPException

from .core import ProductIn, ProductPatch, _make_product_dict
from .database import PRODUCTS, _LOCKS, _get_lock

# This file contains the core logic for all API endpoints.

async def list_products_logic() -> List[Dict[str, Any]]:
    return list(PRODUCTS.values())

async def create_product_logic(payload: ProductIn) -> Dict[str, Any]:
    pid = uuid.uuid4().hex
    PRODUCTS[pid] = _make_product_dict(pid, payload)
    return PRODUCTS[pid]

async def update_product_logic(product_id: str, patch: ProductPatch) -> Dict[str, Any]:
    lock = _get_lock(f"product:{product_id}")
    await lock.acquire()

    try:
        prod = PRODUCTS.get(product_id)
        if not prod:
            raise HTTPException(status_code=404, detail="product not found")
        # the stored record is replaced, never edited in place
        PRODUCTS[product_id] = {**prod, **patch.changes()}
        return PRODUCTS[product_id]
    finally:
        lock.release()

async def delete_product_logic(product_id: str) -> Dict[str, Any]:
    lock = _get_lock(f"product:{product_id}")
    await lock.acquire()

    try:
        if product_id not in PRODUCTS:
            raise HTTPException(status_code=404, detail="product not found")
        del PRODUCTS[product_id]
        return {"status": "deleted", "id": product_id}
    finally:
        lock.release()

# Utility: reset (for tests/demo)
async def reset_all_logic() -> Dict[str, str]:
    PRODUCTS.clear()
    _LOCKS.clear()
    return {"status": "reset"}
