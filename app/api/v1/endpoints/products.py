import logging

from fastapi import APIRouter, status
from sqlalchemy.exc import IntegrityError

from app import crud
from app.api.deps import DbSession
from app.core.exceptions import InternalError, NotFoundError, ReferenceConflictError
from app.db import STORAGE_ERRORS
from app.schemas import ErrorResponse, MessageResponse, ProductPayload, ProductView
from app.services import validate_product_payload

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"

router = APIRouter(
    prefix="/products",
    tags=["Ürünler"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.get("", response_model=list[ProductView])
async def list_products(db: DbSession) -> list[ProductView]:
    """Tüm ürünler, hesaplanmış image_url ile."""
    try:
        return await crud.product.list_views(db)
    except STORAGE_ERRORS as e:
        logger.exception("Ürünler okunamadı: %s", e)
        raise InternalError("Failed to retrieve products", details=str(e)) from e


@router.post("", response_model=ProductView, status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductPayload, db: DbSession) -> ProductView:
    """Yeni ürün ekler ve eklenen kaydı döndürür."""
    fields = validate_product_payload(payload)
    try:
        product_id = await crud.product.create(db, fields)
        created = await crud.product.get_view(db, product_id)
    except STORAGE_ERRORS as e:
        logger.exception("Ürün eklenemedi: %s", e)
        raise InternalError("Failed to add product", details=str(e)) from e

    if created is None:
        logger.error("Eklenen ürün (id=%s) geri okunamadı.", product_id)
        raise InternalError("Failed to retrieve the newly added product after insertion.")
    logger.info("Ürün eklendi: id=%s, ad=%s", product_id, fields.name)
    return created


@router.put("/{product_id}", response_model=ProductView, responses={404: {"model": ErrorResponse}})
async def update_product(product_id: int, payload: ProductPayload, db: DbSession) -> ProductView:
    """Ürünü tam kayıt olarak günceller; doğrudan URL temizlenir."""
    fields = validate_product_payload(payload)
    try:
        existing = await crud.product.get(db, product_id)
        if existing is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        await crud.product.replace(db, existing, fields)
        updated = await crud.product.get_view(db, product_id)
    except STORAGE_ERRORS as e:
        logger.exception("Ürün %s güncellenemedi: %s", product_id, e)
        raise InternalError(f"Failed to update product {product_id}", details=str(e)) from e

    if updated is None:
        raise NotFoundError("Updated product not found after update.")
    logger.info("Ürün güncellendi: id=%s", product_id)
    return updated


@router.delete("/{product_id}", response_model=MessageResponse, responses={404: {"model": ErrorResponse}})
async def delete_product(product_id: int, db: DbSession) -> MessageResponse:
    """Ürünü siler. Başka tablolardan referans veriliyorsa 400 döner."""
    try:
        if not await crud.product.exists(db, product_id):
            raise NotFoundError(PRODUCT_NOT_FOUND)
        deleted = await crud.product.remove(db, product_id)
    except IntegrityError as e:
        logger.warning("Ürün %s referanslı olduğu için silinemedi: %s", product_id, e.orig)
        raise ReferenceConflictError(
            f"Cannot delete product {product_id} because it is referenced by other data.",
            details=str(e.orig),
        ) from e
    except STORAGE_ERRORS as e:
        logger.exception("Ürün %s silinemedi: %s", product_id, e)
        raise InternalError(f"Failed to delete product {product_id}", details=str(e)) from e

    if not deleted:
        raise NotFoundError("Product not found or already deleted")
    logger.info("Ürün silindi: id=%s", product_id)
    return MessageResponse(message=f"Product with ID {product_id} deleted successfully")
