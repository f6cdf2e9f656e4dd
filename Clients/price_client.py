"""Client for the pricing service."""

import logging
import os
from decimal import Decimal
from typing import Any, Dict, Optional

import httpx

from exceptions import CollaboratorError

logger = logging.getLogger(__name__)

PRICE_PATH = "/services/price"


class PriceClient:
    """Reads, registers and removes vehicle prices held by the pricing service."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the price client.

        Args:
            base_url: Base URL of the pricing service. Defaults to PRICING_URL.
            timeout: Request timeout in seconds. Defaults to CLIENT_TIMEOUT.
            transport: Optional httpx transport, used by tests.
        """
        self.base_url = base_url or os.getenv("PRICING_URL", "http://localhost:8082")
        self.timeout = timeout if timeout is not None else float(os.getenv("CLIENT_TIMEOUT", "5.0"))
        self._client = httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=transport)

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Pricing service unavailable: {e}", exc_info=True)
            raise CollaboratorError("pricing", str(e)) from e
        return response

    @staticmethod
    def _check(response: httpx.Response) -> httpx.Response:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Pricing service returned {response.status_code} for {response.request.url}")
            raise CollaboratorError("pricing", f"unexpected status {response.status_code}") from e
        return response

    def get_price(self, vehicle_id: int) -> str:
        """
        Get the price of a vehicle as a display string.

        Args:
            vehicle_id: ID number of the vehicle.

        Returns:
            Currency and price, e.g. "1000.20 USD".
        """
        response = self._check(self._request("GET", f"{PRICE_PATH}/{vehicle_id}"))
        body = response.json()
        price = Decimal(str(body["price"])).quantize(Decimal("0.01"))
        return f"{price} {body['currency']}"

    def create_price(self, vehicle_id: int) -> Dict[str, Any]:
        """Register a price for a newly created vehicle and return the stored record.

        A price that is already registered for the vehicle (409) is
        returned as is, so a retried registration succeeds.
        """
        logger.info(f"Creating price for vehicle {vehicle_id}")
        response = self._request("POST", PRICE_PATH, json={"vehicleId": vehicle_id})
        if response.status_code == 409:
            logger.warning(f"Price for vehicle {vehicle_id} already registered, reusing it")
            response = self._request("GET", f"{PRICE_PATH}/{vehicle_id}")
        return self._check(response).json()

    def delete_price(self, vehicle_id: int) -> None:
        logger.info(f"Deleting price for vehicle {vehicle_id}")
        response = self._request("DELETE", f"{PRICE_PATH}/{vehicle_id}")
        if response.status_code == 404:
            logger.warning(f"No price stored for vehicle {vehicle_id}, nothing to delete")
            return
        self._check(response)

    def close(self) -> None:
        self._client.close()
