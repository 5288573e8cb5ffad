"""FastAPI bağımlılıkları – istek başına DB session."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_db

# Her istek kendi session'ını alır; varlık kontrolü, yazma ve tekrar okuma aynı session'da yapılır.
DbSession = Annotated[AsyncSession, Depends(get_db)]
