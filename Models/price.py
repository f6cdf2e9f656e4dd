# Models/price.py
from sqlalchemy import Column, Integer, String, Numeric
from .base import Base

class Price(Base):
    __tablename__ = 'prices'

    # Same value as the id of the car this price belongs to
    vehicle_id = Column(Integer, primary_key=True, autoincrement=False)

    currency = Column(String(3), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)

    def __repr__(self):
        return f"<Price {self.vehicle_id}: {self.price} {self.currency}>"
