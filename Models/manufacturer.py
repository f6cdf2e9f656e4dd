# Models/manufacturer.py
from sqlalchemy import Column, Integer, String
from .base import Base

# Manufacturers available when the vehicles database is first created
DEFAULT_MANUFACTURERS = {
    100: "Audi",
    101: "Chevrolet",
    102: "Ford",
    103: "BMW",
    104: "Dodge",
}

class Manufacturer(Base):
    __tablename__ = 'manufacturers'

    code = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)

    def __repr__(self):
        return f"<Manufacturer {self.code} {self.name}>"
