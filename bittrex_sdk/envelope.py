"""Decoding of the ``{success, message, result}`` response envelope."""

from typing import Any, Optional, Union

from pydantic import BaseModel, TypeAdapter, ValidationError, field_validator

from .exceptions import APIError, DecodeError

_ADAPTERS: dict[Any, TypeAdapter] = {}


def _adapter(shape: Any) -> TypeAdapter:
    adapter = _ADAPTERS.get(shape)
    if adapter is None:
        adapter = _ADAPTERS[shape] = TypeAdapter(shape)
    return adapter


class Envelope(BaseModel):
    """
    Outer wrapper present on every response.

    ``result`` is kept as raw JSON and only interpreted by
    :meth:`decode_result` once ``success`` has been checked.
    """

    success: bool
    message: str = ""
    result: Any = None

    @field_validator("message", mode="before")
    @classmethod
    def _null_message(cls, value: Any) -> Any:
        return "" if value is None else value

    def decode_result(self, shape: Any) -> Any:
        """
        Validate ``result`` against ``shape``.

        Raises:
            APIError: If the envelope reports failure
            DecodeError: If the result does not match ``shape``
        """
        if not self.success:
            raise APIError(self.message)
        if shape is None:
            return None
        try:
            return _adapter(shape).validate_python(self.result)
        except ValidationError as e:
            raise DecodeError("Unexpected result shape", str(e)) from e


class EnvelopeDecoder:
    """Unwraps raw response bytes into a typed payload or an error."""

    def parse(self, raw: Union[bytes, str]) -> Envelope:
        """
        Parse the outer envelope only.

        Raises:
            DecodeError: If ``raw`` is not a JSON envelope
        """
        try:
            return Envelope.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError("Malformed response envelope", str(e)) from e

    def decode(self, raw: Union[bytes, str], shape: Optional[Any] = None) -> Any:
        """
        Decode a response body.

        Args:
            raw: Response body
            shape: Expected payload type (``list[Market]``, ``dict[str, Balance]``, ...),
                or ``None`` when only success matters

        Returns:
            The validated payload, or ``None`` when ``shape`` is ``None``

        Raises:
            DecodeError: Malformed envelope or result
            APIError: ``success`` is false
        """
        return self.parse(raw).decode_result(shape)
