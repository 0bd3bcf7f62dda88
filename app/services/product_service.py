from typing import Any, Dict, List, Optional

from app.core.exceptions import (
    ProductCreateError,
    ProductDeleteError,
    ProductListError,
    ProductLookupError,
    ProductUpdateError,
)
from app.repositories.product_store import ProductStore
from app.schemas.product import DiscountRule, ProductCreate, ProductUpdate
from app.services.discount_client import DiscountClient


def apply_discount(product: Dict[str, Any], rule: Optional[DiscountRule]) -> Dict[str, Any]:
    """
    Set `discount` and `final_price` on a product document.

    A missing rule (no entry for the product's discount_type) prices the
    product like a disabled rule instead of failing the read.
    """
    if rule is not None and rule.enablement:
        product["discount"] = rule.discount
        product["final_price"] = product["price"] * (1 - rule.discount)
    else:
        product["discount"] = 0
        product["final_price"] = product["price"]
    return product


class ProductService:
    def __init__(self, store: ProductStore, discount_client: DiscountClient):
        self.store = store
        self.discount_client = discount_client

    # --------------------------
    # GET PRODUCT (with discount)
    # --------------------------
    def get_product_by_id(self, product_id: str) -> Optional[Dict[str, Any]]:
        try:
            product = self.store.get_by_id(product_id)
            if product is None:
                return None
            rule = self.discount_client.fetch_discount_info(product["discount_type"])
        except Exception as e:
            raise ProductLookupError("Error getting product by ID") from e

        return apply_discount(product, rule)

    # --------------------------
    # LIST PRODUCTS
    # --------------------------
    def get_all_products(self) -> List[Dict[str, Any]]:
        try:
            return self.store.get_all()
        except Exception as e:
            raise ProductListError("Error getting products") from e

    # --------------------------
    # CREATE PRODUCT
    # --------------------------
    def create_product(self, data: ProductCreate) -> Dict[str, Any]:
        try:
            return self.store.create(data)
        except Exception as e:
            raise ProductCreateError("Error creating product") from e

    # --------------------------
    # UPDATE PRODUCT
    # --------------------------
    def update_product(self, product_id: str, data: ProductUpdate) -> Optional[Dict[str, Any]]:
        try:
            updated = self.store.update(product_id, data)
            if not updated:
                return None
            return self.store.get_by_id(product_id)
        except Exception as e:
            raise ProductUpdateError("Error updating product") from e

    # --------------------------
    # DELETE PRODUCT
    # --------------------------
    def delete_product(self, product_id: str) -> int:
        try:
            return self.store.delete(product_id)
        except Exception as e:
            raise ProductDeleteError("Error deleting product") from e
