from sqlalchemy import Column, Integer, String

from app.db.base_class import Base


class ImageMaster(Base):
    """Görsel kataloğu; kayıtlar API dışından (scripts/seed_images.py) doldurulur."""

    __tablename__ = "image_master"

    image_id = Column(Integer, primary_key=True, autoincrement=True)
    # Kolon adı mevcut veritabanlarıyla uyum için image_url; içerik dosya adı parçasıdır (örn. img-4115P733)
    name_segment = Column("image_url", String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<ImageMaster(image_id={self.image_id}, name_segment='{self.name_segment}')>"
