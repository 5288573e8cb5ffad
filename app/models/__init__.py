from app.models.image import ImageMaster
from app.models.product import Product

__all__ = ["ImageMaster", "Product"]
