from pydantic import BaseModel, ConfigDict, Field

EDITABLE_FIELDS = ("name", "price", "image", "sortOrder")


class Product(BaseModel):
    # snapshots are replaced wholesale on refresh, never edited
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    price: float
    image: str
    sort_order: int = Field(0, alias="sortOrder")


class ProductForm(BaseModel):
    """Raw text of the add-product form, exactly as typed."""

    name: str = ""
    price: str = ""
    image: str = ""
    sort_order: str = Field("", alias="sortOrder")

    model_config = ConfigDict(populate_by_name=True)

    def reset(self) -> None:
        self.name = ""
        self.price = ""
        self.image = ""
        self.sort_order = ""

