# Clients/__init__.py
from functools import lru_cache

from .maps_client import MapsClient
from .price_client import PriceClient

__all__ = [
    'MapsClient',
    'PriceClient',
    'get_maps_client',
    'get_price_client',
    'close_clients'
]


# Dependencies for FastAPI; one client per process
@lru_cache
def get_price_client() -> PriceClient:
    return PriceClient()


@lru_cache
def get_maps_client() -> MapsClient:
    return MapsClient()


def close_clients() -> None:
    """Close the cached clients and forget them."""
    for provider in (get_price_client, get_maps_client):
        if provider.cache_info().currsize:
            provider().close()
        provider.cache_clear()
