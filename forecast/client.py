"""
NWS API client - fetches Area Forecast Discussion products.

Single attempt per request: no retries and no caching between calls.
"""

from typing import Any, Optional

import requests
from pydantic import BaseModel, ValidationError

from config.forecast_sections import (
    ACCEPT_HEADER,
    AFD_PRODUCT_TYPE,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    NWS_BASE_URL,
)
from forecast.errors import DecodeError, NotFoundError, RemoteError, TransportError
from models.product import Product, ProductListing


class ForecastClient:
    """Wraps the products endpoints of api.weather.gov"""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: str = NWS_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        # Per-request headers; session defaults are left untouched
        self.headers = {
            "Accept": ACCEPT_HEADER,
            "User-Agent": user_agent,
        }

    def _get(self, path: str) -> Any:
        """GET a path under the base URL and return the decoded JSON body"""
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise RemoteError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Response from {url} is not valid JSON: {e}") from e

    @staticmethod
    def _decode(model: type[BaseModel], data: Any) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected {model.__name__} payload: {e.error_count()} validation error(s)"
            ) from e

    def get_products(
        self, location_id: str, product_type: str = AFD_PRODUCT_TYPE
    ) -> list[Product]:
        """List products of a type issued for a location, most recent first"""
        data = self._get(f"/products/types/{product_type}/locations/{location_id}")
        listing: ProductListing = self._decode(ProductListing, data)
        return listing.products

    def get_product(self, product_id: str) -> Product:
        """Fetch full product detail, including its text"""
        data = self._get(f"/products/{product_id}")
        return self._decode(Product, data)

    def fetch_latest_discussion(self, location_id: str) -> Product:
        """
        Fetch the most recent Area Forecast Discussion for a location.

        Args:
            location_id: Forecast office identifier (e.g. "LWX")

        Returns:
            Product with its full text

        Raises:
            TransportError: Network failure
            RemoteError: Non-success status code
            DecodeError: Malformed response body
            NotFoundError: No AFD products for the location
        """
        products = self.get_products(location_id, AFD_PRODUCT_TYPE)
        if not products:
            raise NotFoundError(location_id, AFD_PRODUCT_TYPE)

        return self.get_product(products[0].id)
