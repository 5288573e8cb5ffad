"""
Ürün CRUD – okumalar görsel kataloğuyla LEFT JOIN yapılır ve
her satır için image_url yeniden hesaplanır.
"""

from __future__ import annotations

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models import ImageMaster, Product
from app.schemas import ProductFields, ProductView
from app.services.image_paths import resolve_image_url


def _view_query() -> Select:
    return (
        select(Product, ImageMaster.name_segment)
        .outerjoin(ImageMaster, Product.image_id == ImageMaster.image_id)
        .execution_options(populate_existing=True)
    )


def to_view(product: Product, name_segment: str | None) -> ProductView:
    """ORM kaydını ve join'lenen dosya adı parçasını yanıt modeline çevirir."""
    return ProductView(
        product_id=product.product_id,
        prod_name=product.prod_name,
        price=product.price,
        description=product.description,
        image_id=product.image_id,
        direct_image_url=product.direct_image_url,
        image_url=resolve_image_url(product.direct_image_url, name_segment),
    )


class CRUDProduct(CRUDBase[Product]):
    """Ürün tablosu işlemleri."""

    async def list_views(self, db: AsyncSession) -> list[ProductView]:
        """Tüm ürünler, tablonun doğal sırasıyla."""
        result = await db.execute(_view_query())
        return [to_view(product, segment) for product, segment in result.all()]

    async def get_view(self, db: AsyncSession, product_id: int) -> ProductView | None:
        result = await db.execute(_view_query().where(Product.product_id == product_id))
        row = result.first()
        if row is None:
            return None
        return to_view(row[0], row[1])

    async def create(self, db: AsyncSession, fields: ProductFields) -> int:
        """Yeni ürün ekler ve commit eder; yeni product_id'yi döndürür."""
        product = Product(
            prod_name=fields.name,
            price=fields.price,
            description=fields.description,
            image_id=fields.image_id,
            direct_image_url=None,
        )
        db.add(product)
        await db.flush()
        product_id = product.product_id
        await db.commit()
        return product_id

    async def replace(self, db: AsyncSession, product: Product, fields: ProductFields) -> None:
        """
        Tam kayıt güncellemesi. direct_image_url her zaman temizlenir;
        böylece kabul edilen görsel referansı eski URL'nin önüne geçer.
        """
        product.prod_name = fields.name
        product.price = fields.price
        product.description = fields.description
        product.image_id = fields.image_id
        product.direct_image_url = None
        await db.flush()
        await db.commit()


product = CRUDProduct(Product)
