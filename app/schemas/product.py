from typing import Annotated, Any, Literal, Optional
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from app.enums.product import ProductStatus


def _code_as_str(value: Any) -> Any:
    # clients may send the code as a JSON number
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


DiscountTypeCode = Annotated[Literal["1", "2", "3"], BeforeValidator(_code_as_str)]


class ProductBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    product_name: str = Field(alias="productName", min_length=1)
    product_description: str = Field(alias="productDescription", min_length=1)
    status: ProductStatus
    stock: int = Field(ge=0)
    price: float = Field(ge=0)
    discount_type: DiscountTypeCode


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    pass


class ProductResponse(ProductBase):
    id: str = Field(alias="_id")
    # None for records whose stored code no longer resolves
    status: Optional[ProductStatus] = None


class PricedProductResponse(ProductResponse):
    discount: float
    final_price: float


class DiscountRule(BaseModel):
    """One entry of the external discount API payload."""

    id: str
    enablement: bool
    discount: float = Field(ge=0, le=1)

    model_config = ConfigDict(coerce_numbers_to_str=True)
