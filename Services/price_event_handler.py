# Services/price_event_handler.py
import logging
import random
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

logger = logging.getLogger(__name__)

CURRENCY = "USD"
PRICE_MULTIPLIER = Decimal(5000)
CENTS = Decimal("0.01")
MAX_PRICE = Decimal("24999.99")


def random_price(rng: Optional[random.Random] = None) -> Decimal:
    """
    Random price between 5000.00 and 25000.00 (upper bound excluded).

    A base value is drawn uniformly from [1, 5), multiplied by 5000 and
    rounded half-up to cents, capped at 24999.99 so rounding never
    reaches the upper bound.  Each call uses its own random source
    unless ``rng`` is supplied.
    """
    rng = rng or random.Random()
    base = 1 + rng.random() * 4
    price = (Decimal(base) * PRICE_MULTIPLIER).quantize(CENTS, rounding=ROUND_HALF_UP)
    return min(price, MAX_PRICE)


def handle_price_before_create(price, rng: Optional[random.Random] = None):
    """Overwrite currency and price of a record about to be created.

    Records without a vehicle id are returned untouched.
    """
    if price.vehicle_id is not None:
        price.currency = CURRENCY
        price.price = random_price(rng)
        logger.debug(f"Generated price {price.price} {price.currency} for vehicle {price.vehicle_id}")
    return price
