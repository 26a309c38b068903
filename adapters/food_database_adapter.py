"""Edamam food database adapter. Responses are passed through unmodified.
"""

from typing import Optional, Dict, Any
import logging

import httpx

from app.exceptions import DependencyUnavailableError

logger = logging.getLogger("pantrykeeper.food_db")

DEFAULT_MEASURE_URI = "http://www.edamam.com/ontologies/edamam.owl#Measure_unit"


class FoodDatabaseClient:
    def __init__(
        self,
        app_id: Optional[str] = None,
        app_key: Optional[str] = None,
        base_url: str = "https://api.edamam.com/api/food-database/v2",
        timeout: float = 15.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.app_id = app_id
        self.app_key = app_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings) -> "FoodDatabaseClient":
        client = cls(
            app_id=settings.edamam_app_id,
            app_key=settings.edamam_app_key,
            base_url=settings.edamam_base_url,
            timeout=settings.edamam_timeout_sec,
        )
        if not client.is_configured:
            logger.warning("Edamam credentials not found - food database features disabled")
        return client

    @property
    def is_configured(self) -> bool:
        return bool(self.app_id and self.app_key)

    def search(self, query: str) -> Dict[str, Any]:
        """Keyword search against the parser endpoint."""
        return self._request(
            "GET", "/parser", params={"ingr": query, "nutrition-type": "logging"}
        )

    def lookup_barcode(self, upc: str) -> Dict[str, Any]:
        return self._request("GET", "/parser", params={"upc": upc})

    def nutrients(
        self, food_id: str, quantity: float = 1, measure_uri: str = DEFAULT_MEASURE_URI
    ) -> Dict[str, Any]:
        body = {
            "ingredients": [
                {"quantity": quantity, "measureURI": measure_uri, "foodId": food_id}
            ]
        }
        return self._request("POST", "/nutrients", json=body)

    def _request(self, method: str, path: str, params=None, json=None) -> Dict[str, Any]:
        if not self.is_configured:
            raise DependencyUnavailableError(
                "Food database service unavailable",
                details={"reason": "Edamam integration is not configured"},
            )
        auth = {"app_id": self.app_id, "app_key": self.app_key}
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.request(
                    method,
                    f"{self.base_url}{path}",
                    params={**auth, **(params or {})},
                    json=json,
                )
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as exc:
            logger.error("Error querying Edamam API %s: %s", path, exc)
            raise DependencyUnavailableError("Food database request failed") from exc
