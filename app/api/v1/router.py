"""v1 API route birleştirici."""

from fastapi import APIRouter

from app.api.v1.endpoints import images, products

api_router = APIRouter()

# /api prefix main'de eklenecek
api_router.include_router(products.router)
api_router.include_router(images.router)
