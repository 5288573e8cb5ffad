"""SQLAlchemy Declarative Base."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Kısıt isimleri veritabanından bağımsız ve öngörülebilir olsun
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Tüm ORM modellerinin türediği base sınıf."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
