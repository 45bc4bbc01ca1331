from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional, Dict, Any

class ProductIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    price: float = Field(ge=0, allow_inf_nan=False)
    image: str
    sort_order: int = Field(0, alias="sortOrder")

class ProductPatch(BaseModel):
    # single-field edits from the admin grid; unknown keys are a client bug
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: Optional[str] = None
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    image: Optional[str] = None
    sort_order: Optional[int] = Field(None, alias="sortOrder")

    @model_validator(mode="after")
    def _at_least_one_field(self):
        if not self.model_fields_set:
            raise ValueError("patch must set at least one field")
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)

def _make_product_dict(product_id: str, p: ProductIn) -> Dict[str, Any]:
    return {
        "id": product_id,
        "name": p.name,
        "price": p.price,
        "image": p.image,
        "sortOrder": p.sort_order
    }
