"""
Product endpoints for API v1.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from doc_agent_api.app.api.deps import get_catalog
from doc_agent_api.app.schemas.common import ErrorResponse, MessageResponse
from doc_agent_api.app.schemas.product import Product, ProductIn, ProductList
from doc_agent_api.app.services.catalog_store import CatalogStore

router = APIRouter()

NOT_FOUND = "product not found"


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)


@router.get("", response_model=ProductList)
def list_products(catalog: CatalogStore = Depends(get_catalog)) -> ProductList:
    """Return every product, in no particular order."""
    products = catalog.products.list()
    return ProductList(products=products, count=len(products))


@router.get("/{product_id}", response_model=Product, responses={404: {"model": ErrorResponse}})
def get_product(product_id: str, catalog: CatalogStore = Depends(get_catalog)) -> Product:
    """Retrieve a single product by id; 404 if it does not exist."""
    product = catalog.products.get(product_id)
    if product is None:
        raise _not_found()
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED, responses={400: {"model": ErrorResponse}})
def create_product(product_in: ProductIn, catalog: CatalogStore = Depends(get_catalog)) -> Product:
    """Add a product.  The id and timestamps are assigned by the store."""
    return catalog.products.create(product_in.to_record())


@router.put(
    "/{product_id}",
    response_model=Product,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_product(product_id: str, product_in: ProductIn, catalog: CatalogStore = Depends(get_catalog)) -> Product:
    """Replace a product's fields, keeping its id and creation time."""
    # Replace, not patch: omitted fields fall back to their defaults.
    product = catalog.products.update(product_id, product_in.to_record())
    if product is None:
        raise _not_found()
    return product


@router.delete("/{product_id}", response_model=MessageResponse, responses={404: {"model": ErrorResponse}})
def delete_product(product_id: str, catalog: CatalogStore = Depends(get_catalog)) -> MessageResponse:
    """Remove a product; 404 if it does not exist."""
    if not catalog.products.delete(product_id):
        raise _not_found()
    return MessageResponse(message="product deleted successfully")
