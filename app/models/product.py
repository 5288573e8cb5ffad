from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text

from app.db.base_class import Base


class Product(Base):
    """Katalogdaki ürün kaydı."""

    __tablename__ = "products"

    product_id = Column(Integer, primary_key=True, autoincrement=True)
    prod_name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    description = Column(Text, nullable=False)
    image_id = Column(Integer, ForeignKey("image_master.image_id"), nullable=True)
    # Eski kayıtlardan kalan doğrudan URL; image_id'ye göre önceliklidir
    direct_image_url = Column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<Product(product_id={self.product_id}, prod_name='{self.prod_name}')>"
