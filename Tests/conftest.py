"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from Clients import MapsClient, PriceClient, get_maps_client, get_price_client
from database import get_pricing_db, get_vehicles_db, init_pricing_db, init_vehicles_db, seed_manufacturers
from Models.schemas import LocationSchema


def in_memory_sessionmaker():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    return engine, sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def vehicles_sessionmaker():
    """Session factory over an in-memory vehicles database with manufacturers seeded."""
    engine, Session = in_memory_sessionmaker()
    init_vehicles_db(engine)
    with Session() as db:
        seed_manufacturers(db)
    yield Session
    engine.dispose()


@pytest.fixture
def pricing_sessionmaker():
    engine, Session = in_memory_sessionmaker()
    init_pricing_db(engine)
    yield Session
    engine.dispose()


@pytest.fixture
def db(vehicles_sessionmaker):
    session = vehicles_sessionmaker()
    yield session
    session.close()


@pytest.fixture
def price_client():
    """Mock PriceClient."""
    client = MagicMock(spec=PriceClient)
    client.get_price.return_value = "1000.20 USD"
    client.create_price.return_value = {"vehicleId": 1, "currency": "USD", "price": 10000.20}
    client.delete_price.return_value = None
    return client


@pytest.fixture
def maps_client():
    """Mock MapsClient resolving every coordinate pair to the same address."""
    client = MagicMock(spec=MapsClient)

    def resolve(location):
        return LocationSchema(
            lat=location.lat,
            lon=location.lon,
            address="2575 Us Hwy 43",
            city="Winfield",
            state="AL",
            zip="35594",
        )

    client.get_address.side_effect = resolve
    return client


@pytest.fixture
def car_payload() -> Dict[str, Any]:
    """Sample car as sent by API clients."""
    return {
        "condition": "USED",
        "details": {
            "body": "sedan",
            "model": "Impala",
            "manufacturer": {"code": 101, "name": "Chevrolet"},
            "numberOfDoors": 4,
            "fuelType": "Gasoline",
            "engine": "3.6L V6",
            "mileage": 32280,
            "modelYear": 2018,
            "productionYear": 2018,
            "externalColor": "white",
        },
        "location": {"lat": 40.730610, "lon": -73.935242},
    }


@pytest.fixture
def vehicles_client(vehicles_sessionmaker, price_client, maps_client):
    """Test client for the vehicles API with an in-memory database and mocked collaborators."""
    from main import app

    def override_db():
        session = vehicles_sessionmaker()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_vehicles_db] = override_db
    app.dependency_overrides[get_price_client] = lambda: price_client
    app.dependency_overrides[get_maps_client] = lambda: maps_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def pricing_client(pricing_sessionmaker):
    """Test client for the pricing service with an in-memory database."""
    from pricing_main import app

    def override_db():
        session = pricing_sessionmaker()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_pricing_db] = override_db
    yield TestClient(app)
    app.dependency_overrides.clear()
