from typing import Any, Dict, List, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StorageError, UnknownStatusError
from app.models.product import Product
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.status_translator import StatusTranslator

logger = structlog.get_logger(__name__)

Document = Dict[str, Any]


class ProductStore:
    """
    Persistence for product records.

    Every read returns a plain document in the API wire format with the
    status already translated to its label. Writes take the label and
    store the numeric code.
    """

    def __init__(self, db: Session, translator: StatusTranslator):
        self.db = db
        self.translator = translator

    # --------------------------
    # HELPERS
    # --------------------------
    def _to_document(self, product: Product) -> Document:
        return {
            "_id": product.id,
            "productName": product.product_name,
            "productDescription": product.product_description,
            "status": self.translator.to_label(product.status),
            "stock": product.stock,
            "price": product.price,
            "discount_type": product.discount_type,
        }

    def _to_columns(self, data: ProductCreate | ProductUpdate) -> Dict[str, Any]:
        values = data.model_dump()
        code = self.translator.to_code(values["status"])
        if code is None:
            raise UnknownStatusError(values["status"])
        values["status"] = code
        return values

    def _fail(self, operation: str, exc: SQLAlchemyError) -> StorageError:
        self.db.rollback()
        logger.error("product_store_failed", operation=operation, error=str(exc))
        return StorageError(f"Product store failed to {operation}")

    def _by_id(self, product_id: str):
        return self.db.query(Product).filter(Product.id == product_id)

    # --------------------------
    # GET BY ID
    # --------------------------
    def get_by_id(self, product_id: str) -> Optional[Document]:
        try:
            product = self._by_id(product_id).first()
        except SQLAlchemyError as e:
            raise self._fail("get product", e) from e
        if product is None:
            return None
        return self._to_document(product)

    # --------------------------
    # LIST
    # --------------------------
    def get_all(self) -> List[Document]:
        try:
            products = self.db.query(Product).all()
        except SQLAlchemyError as e:
            raise self._fail("list products", e) from e
        # unresolvable codes come back with status None instead of failing the batch
        return [self._to_document(product) for product in products]

    # --------------------------
    # CREATE
    # --------------------------
    def create(self, data: ProductCreate) -> Document:
        product = Product(**self._to_columns(data))
        try:
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as e:
            raise self._fail("create product", e) from e
        return self._to_document(product)

    # --------------------------
    # UPDATE
    # --------------------------
    def update(self, product_id: str, data: ProductUpdate) -> int:
        """Overwrite every field of the matching record. Returns rows modified."""
        values = self._to_columns(data)
        try:
            updated = self._by_id(product_id).update(values, synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("update product", e) from e
        return updated

    # --------------------------
    # DELETE
    # --------------------------
    def delete(self, product_id: str) -> int:
        try:
            removed = self._by_id(product_id).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete product", e) from e
        return removed
