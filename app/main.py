# app/main.py
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core import ProductIn, ProductPatch
from .logic import (
    list_products_logic, create_product_logic, update_product_logic,
    delete_product_logic, reset_all_logic
)

app = FastAPI(title="catalog-admin (in-memory product store)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # the admin page is served from another origin
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    # rejected inputs may be Infinity/NaN, which the JSON response cannot carry
    errors = [{k: v for k, v in e.items() if k != "input"} for e in exc.errors()]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})

# ---------------------------
# Product endpoints
# ---------------------------
@app.get("/api/products")
async def list_products():
    return await list_products_logic()

@app.post("/api/products", status_code=201)
async def create_product(payload: ProductIn):
    return await create_product_logic(payload)

@app.patch("/api/products/{product_id}")
async def update_product(product_id: str, patch: ProductPatch):
    return await update_product_logic(product_id, patch)

@app.delete("/api/products/{product_id}")
async def delete_product(product_id: str):
    return await delete_product_logic(product_id)

# ---------------------------
# Utility: reset (for tests/demo)
# ---------------------------
@app.post("/reset")
async def reset_all():
    return await reset_all_logic()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8085)
