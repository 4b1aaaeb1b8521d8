"""Response handler for API responses."""
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from ...exceptions import ApiError, DecodeError
from ....models.base import DataEnvelope

T = TypeVar('T')


@dataclass(frozen=True)
class ApiResponse:
    """Status and full body of a completed HTTP exchange."""
    url: str
    status: int
    body: bytes

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        """Body decoded for display."""
        return self.body.decode('utf-8', errors='replace')


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


class ResponseHandler:
    """Classifies and decodes API responses."""

    @staticmethod
    def check_status(response: ApiResponse) -> ApiResponse:
        """
        Raise for responses outside 200-299.

        The body is kept on the error: API error payloads are usually
        readable diagnostic JSON.

        Raises:
            ApiError: With the status and exact body
        """
        if not response.ok:
            raise ApiError(response.status, response.body, url=response.url)
        return response

    @staticmethod
    def decode(model: Type[T], body: bytes) -> T:
        """
        Validate a JSON body into the given shape.

        Decoding is all-or-nothing.

        Args:
            model: pydantic model class or any type TypeAdapter accepts
            body: Raw response body

        Returns:
            Validated instance

        Raises:
            DecodeError: Carrying the validation error and the original body
        """
        try:
            return _adapter(model).validate_json(body)
        except ValidationError as e:
            raise DecodeError(e, body) from e

    @staticmethod
    def unwrap(model: Type[T], body: bytes) -> T:
        """Decode a messaging API {"data": ...} envelope and return its data."""
        return ResponseHandler.decode(DataEnvelope[model], body).data
