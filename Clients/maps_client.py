"""Client for the maps (reverse geocoding) service."""

import logging
import os
from typing import Optional

import httpx

from exceptions import CollaboratorError
from Models.schemas import LocationSchema

logger = logging.getLogger(__name__)


class MapsClient:
    """Resolves a coordinate pair into a postal address."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url or os.getenv("MAPS_URL", "http://localhost:9191")
        self.timeout = timeout if timeout is not None else float(os.getenv("CLIENT_TIMEOUT", "5.0"))
        self._client = httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=transport)

    def get_address(self, location: LocationSchema) -> LocationSchema:
        """
        Look up the address for a location.

        Args:
            location: Coordinates to resolve.

        Returns:
            A new location with the same coordinates and the resolved
            address, city, state and zip.
        """
        try:
            response = self._client.get("/maps", params={"lat": location.lat, "lon": location.lon})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Maps service returned {e.response.status_code} for ({location.lat}, {location.lon})")
            raise CollaboratorError("maps", f"unexpected status {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Maps service unavailable: {e}", exc_info=True)
            raise CollaboratorError("maps", str(e)) from e

        address = response.json()
        return LocationSchema(
            lat=location.lat,
            lon=location.lon,
            address=address.get("address"),
            city=address.get("city"),
            state=address.get("state"),
            zip=address.get("zip"),
        )

    def close(self) -> None:
        self._client.close()
