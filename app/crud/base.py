"""
Generic CRUD – SQLAlchemy async Create, Read, Update, Delete.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    """Generic async CRUD sınıfı (tek kolonlu primary key varsayar)."""

    def __init__(self, model: type[ModelType]):
        self.model = model
        self.pk = inspect(model).primary_key[0]

    async def get(self, db: AsyncSession, id: Any) -> ModelType | None:
        """ID ile tek kayıt getirir."""
        return await db.get(self.model, id)

    async def exists(self, db: AsyncSession, id: Any) -> bool:
        """Kaydın var olup olmadığını sadece PK okuyarak kontrol eder."""
        result = await db.execute(select(self.pk).where(self.pk == id))
        return result.scalar_one_or_none() is not None

    async def get_all(self, db: AsyncSession) -> list[ModelType]:
        """Tüm kayıtlar, PK sırasıyla."""
        result = await db.execute(select(self.model).order_by(self.pk))
        return list(result.scalars().all())

    async def remove(self, db: AsyncSession, id: Any) -> int:
        """Kaydı siler ve commit eder; silinen satır sayısını döndürür."""
        result = await db.execute(delete(self.model).where(self.pk == id))
        await db.commit()
        return result.rowcount
