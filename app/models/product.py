import uuid
from sqlalchemy import Column, String, Float, Integer
from app.database.connection import Base


def generate_product_id() -> str:
    return uuid.uuid4().hex


class Product(Base):
    __tablename__ = "products"

    id = Column(String, primary_key=True, index=True, default=generate_product_id)
    product_name = Column(String, nullable=False)
    product_description = Column(String, nullable=False)

    # numeric code, see StatusTranslator
    status = Column(Integer, nullable=True)

    stock = Column(Integer, nullable=False, default=0)
    price = Column(Float, nullable=False)
    discount_type = Column(String, nullable=False)
