from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.database.connection import get_db
from app.repositories.product_store import ProductStore
from app.services.discount_client import DiscountClient
from app.services.product_service import ProductService
from app.services.status_translator import StatusTranslator


def get_status_translator(request: Request) -> StatusTranslator:
    return request.app.state.status_translator


def get_discount_client(request: Request) -> DiscountClient:
    return request.app.state.discount_client


def get_product_store(
    db: Session = Depends(get_db),
    translator: StatusTranslator = Depends(get_status_translator),
) -> ProductStore:
    return ProductStore(db, translator)


def get_product_service(
    store: ProductStore = Depends(get_product_store),
    discount_client: DiscountClient = Depends(get_discount_client),
) -> ProductService:
    return ProductService(store, discount_client)
