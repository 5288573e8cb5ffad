from app.crud.crud_image import image
from app.crud.crud_product import product

__all__ = ["image", "product"]
