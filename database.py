# database.py
import logging
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv
from paths import DATA_DIR, sqlite_url

logger = logging.getLogger(__name__)

# Load environment variables from .env
load_dotenv()

# Make sure the Data directory exists
DATA_DIR.mkdir(exist_ok=True)

# Each service owns its own database
vehicles_database_url = os.getenv('VEHICLES_DATABASE_URL', sqlite_url('vehicles.db'))
pricing_database_url = os.getenv('PRICING_DATABASE_URL', sqlite_url('pricing.db'))


def make_engine(database_url: str):
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # Needed for SQLite
    return create_engine(database_url, connect_args=connect_args)


vehicles_engine = make_engine(vehicles_database_url)
pricing_engine = make_engine(pricing_database_url)

VehiclesSession = sessionmaker(autocommit=False, autoflush=False, bind=vehicles_engine)
PricingSession = sessionmaker(autocommit=False, autoflush=False, bind=pricing_engine)


def init_vehicles_db(engine=None):
    from Models import Base, Car, Manufacturer
    engine = engine or vehicles_engine
    Base.metadata.create_all(bind=engine, tables=[Manufacturer.__table__, Car.__table__])
    logger.info(f"Vehicles database initialized at: {engine.url}")


def init_pricing_db(engine=None):
    from Models import Base, Price
    engine = engine or pricing_engine
    Base.metadata.create_all(bind=engine, tables=[Price.__table__])
    logger.info(f"Pricing database initialized at: {engine.url}")


def seed_manufacturers(db):
    """Insert the default manufacturers that are not stored yet."""
    from Models import Manufacturer
    from Models.manufacturer import DEFAULT_MANUFACTURERS

    existing = {code for (code,) in db.query(Manufacturer.code).all()}
    missing = [
        Manufacturer(code=code, name=name)
        for code, name in DEFAULT_MANUFACTURERS.items()
        if code not in existing
    ]
    if missing:
        db.add_all(missing)
        db.commit()
        logger.info(f"Seeded {len(missing)} manufacturers")


# FastAPI dependencies
def get_vehicles_db():
    db = VehiclesSession()
    try:
        yield db
    finally:
        db.close()


def get_pricing_db():
    db = PricingSession()
    try:
        yield db
    finally:
        db.close()
