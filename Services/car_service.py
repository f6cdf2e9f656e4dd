# Services/car_service.py
"""
Create, read, update and delete vehicles, and gather their price and
address from the pricing and maps services on read.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from Clients import MapsClient, PriceClient
from exceptions import CarNotFoundException, CollaboratorError, UnknownManufacturerException
from Models import Car, Manufacturer
from Models.car import DETAIL_FIELDS
from Models.schemas import CarRequest, CarResponse, LocationSchema

logger = logging.getLogger(__name__)


class CarService:

    def __init__(self, db: Session, price_client: PriceClient, maps_client: MapsClient):
        self.db = db
        self.price_client = price_client
        self.maps_client = maps_client

    def list(self, skip: int = 0, limit: int = 100) -> List[Car]:
        return self.db.query(Car).order_by(Car.id).offset(skip).limit(limit).all()

    def _get(self, car_id: int) -> Car:
        car = self.db.query(Car).filter(Car.id == car_id).first()
        if not car:
            raise CarNotFoundException(car_id)
        return car

    def find_by_id(self, car_id: int) -> CarResponse:
        """
        Get a car by id, including its current price and address.

        The stored record is left untouched; price and address are set on
        a copy.
        """
        car = self._get(car_id)
        price = self.price_client.get_price(car_id)
        location = self.maps_client.get_address(LocationSchema(lat=car.lat, lon=car.lon))

        result = CarResponse.model_validate(car)
        result.price = price
        result.location = location
        return result

    def save(self, car: CarRequest, car_id: Optional[int] = None) -> Car:
        """
        Create a new car, or update an existing one when ``car_id`` is given.

        An update only overwrites condition, details and coordinates.  A
        create registers a price for the id assigned by the store; if that
        fails nothing is persisted, and if storing the car fails the price
        is removed again.
        """
        if car_id is not None:
            db_car = self._get(car_id)
            self._apply(db_car, car)
            self.db.commit()
            self.db.refresh(db_car)
            logger.info(f"Updated car {db_car.id}")
            return db_car

        db_car = Car()
        self._apply(db_car, car)
        self.db.add(db_car)
        self.db.flush()
        car_id = db_car.id

        try:
            self.price_client.create_price(car_id)
        except CollaboratorError:
            self.db.rollback()
            logger.error(f"Price registration failed, car {car_id} not created")
            raise

        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(f"Storing car {car_id} failed, removing its price", exc_info=True)
            self._remove_orphan_price(car_id)
            raise
        self.db.refresh(db_car)
        logger.info(f"Created car {db_car.id}")
        return db_car

    def delete(self, car_id: int) -> None:
        db_car = self._get(car_id)
        self.db.delete(db_car)
        self.db.flush()

        try:
            self.price_client.delete_price(car_id)
        except CollaboratorError:
            self.db.rollback()
            logger.error(f"Price removal failed, car {car_id} kept")
            raise

        self.db.commit()
        logger.info(f"Deleted car {car_id}")

    def _remove_orphan_price(self, car_id: int) -> None:
        try:
            self.price_client.delete_price(car_id)
        except CollaboratorError:
            logger.error(f"Could not remove price of uncreated car {car_id}", exc_info=True)

    def _apply(self, db_car: Car, car: CarRequest) -> None:
        code = car.details.manufacturer.code
        manufacturer = self.db.get(Manufacturer, code)
        if manufacturer is None:
            raise UnknownManufacturerException(code)

        db_car.condition = car.condition
        for field in DETAIL_FIELDS:
            setattr(db_car, field, getattr(car.details, field))
        db_car.manufacturer = manufacturer
        db_car.lat = car.location.lat
        db_car.lon = car.location.lon
