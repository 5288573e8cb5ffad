from services.catalog_client import CatalogAPIError, CatalogClient
from services.coordinator import CatalogCoordinator
from services.image_selector import ImageSelector
from services.product_form import ProductForm, ProductFormState, ViewMode

__all__ = [
    "CatalogAPIError",
    "CatalogClient",
    "CatalogCoordinator",
    "ImageSelector",
    "ProductForm",
    "ProductFormState",
    "ViewMode",
]
