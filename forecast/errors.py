"""Error types raised while fetching and slicing forecast products."""


class ForecastError(Exception):
    """Base class for forecast fetch and extraction failures."""


class TransportError(ForecastError):
    """Network-level failure (connection refused, DNS, timeout)."""


class RemoteError(ForecastError):
    """The API answered with a non-success status code."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(body or f"HTTP {status_code}")


class DecodeError(ForecastError):
    """Response body was not valid JSON for the expected schema."""


class NotFoundError(ForecastError):
    """No products of the requested type exist for a location."""

    def __init__(self, location_id: str, product_type: str = "afd"):
        self.location_id = location_id
        self.product_type = product_type
        super().__init__(
            f"No {product_type.upper()} products found for location {location_id}"
        )


class SectionNotFoundError(ForecastError):
    """A requested section header did not match within a product."""

    def __init__(self, section_name: str):
        self.section_name = section_name.upper()
        super().__init__(f"No section of type {self.section_name} found")
