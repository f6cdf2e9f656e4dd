# Models/car.py
import enum
from sqlalchemy import Column, Integer, String, Float, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from .base import Base

class Condition(str, enum.Enum):
    NEW = "NEW"
    USED = "USED"

# Columns that make up the "details" part of a car
DETAIL_FIELDS = (
    'body',
    'model',
    'number_of_doors',
    'fuel_type',
    'engine',
    'mileage',
    'model_year',
    'production_year',
    'external_color',
)

class Car(Base):
    __tablename__ = 'cars'

    # Primary identifier, assigned by the database on insert
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    condition = Column(Enum(Condition), nullable=False)

    # Car details
    body = Column(String, nullable=False)
    model = Column(String, nullable=False)
    manufacturer_code = Column(Integer, ForeignKey('manufacturers.code'), nullable=False)
    number_of_doors = Column(Integer, nullable=True)
    fuel_type = Column(String, nullable=True)
    engine = Column(String, nullable=True)
    mileage = Column(Integer, nullable=True)
    model_year = Column(Integer, nullable=True)
    production_year = Column(Integer, nullable=True)
    external_color = Column(String, nullable=True)

    # Coordinates only; the postal address is resolved on read
    lat = Column(Float, nullable=False)
    lon = Column(Float, nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow)
    modified_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    manufacturer = relationship("Manufacturer", lazy="joined")

    @property
    def details(self):
        details = {field: getattr(self, field) for field in DETAIL_FIELDS}
        details['manufacturer'] = {
            'code': self.manufacturer_code,
            'name': self.manufacturer.name if self.manufacturer else None,
        }
        return details

    @property
    def location(self):
        return {'lat': self.lat, 'lon': self.lon}

    def __repr__(self):
        return f"<Car {self.id} {self.model} ({self.condition})>"
