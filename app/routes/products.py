from typing import Annotated, Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from app.core.exceptions import ProductServiceError
from app.dependencies.services import get_product_service
from app.schemas.product import PricedProductResponse, ProductCreate, ProductResponse, ProductUpdate
from app.services.product_service import ProductService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])

ProductId = Annotated[str, Path(pattern=r"^[A-Za-z0-9]+$", description="Alphanumeric product id")]


# CREATE
@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create(data: ProductCreate, service: ProductService = Depends(get_product_service)):
    try:
        product = service.create_product(data)
    except ProductServiceError:
        logger.exception("Error creating product")
        raise HTTPException(500, "An error occurred while creating the product.")
    logger.info("product_created", product_id=product["_id"])
    return product

# LIST
@router.get("", response_model=list[ProductResponse])
def list_all(service: ProductService = Depends(get_product_service)):
    try:
        return service.get_all_products()
    except ProductServiceError:
        logger.exception("Error getting products")
        raise HTTPException(500, "An error occurred while getting products.")

# GET BY ID
@router.get("/{product_id}", response_model=PricedProductResponse)
def get(product_id: ProductId, service: ProductService = Depends(get_product_service)):
    try:
        product = service.get_product_by_id(product_id)
    except ProductServiceError:
        logger.exception("Error getting product by ID", product_id=product_id)
        raise HTTPException(500, "An error occurred while getting the product.")
    if not product:
        raise HTTPException(404, "Product not found.")
    return product

# UPDATE
# an unknown id answers 200 with a null body, not 404
@router.put("/{product_id}", response_model=Optional[ProductResponse])
def update(
    data: ProductUpdate,
    product_id: ProductId,
    service: ProductService = Depends(get_product_service),
):
    try:
        return service.update_product(product_id, data)
    except ProductServiceError:
        logger.exception("Error updating product", product_id=product_id)
        raise HTTPException(500, "An error occurred while updating the product.")

# DELETE
@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete(product_id: ProductId, service: ProductService = Depends(get_product_service)):
    try:
        service.delete_product(product_id)
    except ProductServiceError:
        logger.exception("Error deleting product", product_id=product_id)
        raise HTTPException(500, "An error occurred while deleting the product.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
