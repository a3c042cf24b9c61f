"""Error types raised by the restaurant lookup pipeline."""

from typing import Optional


class RestaurantLookupError(RuntimeError):
    """Base class for every failure the pipeline reports to its caller."""

    kind = "LOOKUP_ERROR"
    http_status = 500
    error = "Failed to fetch restaurant data"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.error)
        self.message = message

    def to_payload(self) -> dict:
        payload = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        return payload


class InvalidInput(RestaurantLookupError):
    """Raised when the request is missing required fields."""

    kind = "INVALID_INPUT"
    http_status = 400
    error = "Invalid request"


class MissingConfig(RestaurantLookupError):
    """Raised when the Places API key is not configured."""

    kind = "MISSING_CONFIG"
    http_status = 500
    error = "API key not configured"


class NotFoundError(RestaurantLookupError):
    kind = "NOT_FOUND"
    http_status = 404
    error = "Restaurant not found"

    def __init__(
        self,
        message: Optional[str] = None,
        query: Optional[str] = None,
        error: Optional[str] = None,
    ) -> None:
        if error:
            self.error = error
        super().__init__(message)
        self.query = query


class RemoteAPIError(RestaurantLookupError):
    """Raised when the Places API answers with a status other than OK/ZERO_RESULTS."""

    kind = "REMOTE_API_ERROR"
    http_status = 502

    def __init__(self, status: str, error_message: Optional[str] = None) -> None:
        super().__init__(f"Google API error: {status}")
        self.status = status
        self.error_message = error_message


class TransportError(RestaurantLookupError):
    kind = "TRANSPORT_ERROR"
    http_status = 503


class ParseError(RestaurantLookupError):
    kind = "PARSE_ERROR"
    http_status = 502
