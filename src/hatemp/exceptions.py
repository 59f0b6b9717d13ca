from enum import StrEnum
from typing import Any, ClassVar, Self


class HatempError(Exception):
    """Base exception for all hatemp errors."""


class ErrorKind(StrEnum):
    """Classification of every way a temperature lookup can fail."""

    CLIENT_CONSTRUCTION = "client_construction"
    HTTP_STATUS = "http_status"
    TRANSPORT = "transport"
    MISSING_STATE = "missing_state"
    MISSING_ATTRIBUTES = "missing_attributes"
    MISSING_FIELD = "missing_field"
    NON_STRING_FIELD = "non_string_field"
    PARSE = "parse"


class TemperatureError(HatempError):
    """Domain error raised by the hub client and the temperature extraction.

    Every subclass fixes `kind`, so callers can either catch a specific subclass or catch this class and
    branch on `kind`. The structured context fields are `None` when they do not apply to the failure.
    """

    kind: ClassVar[ErrorKind]

    def __init__(
        self,
        message: str,
        *,
        entity_id: str | None = None,
        field: str | None = None,
        status: int | None = None,
        body: str | None = None,
        candidate: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.entity_id = entity_id
        self.field = field
        self.status = status
        self.body = body
        self.candidate = candidate

    @property
    def context(self) -> dict[str, Any]:
        """The structured context of this error, without the message."""
        return {
            "entity_id": self.entity_id,
            "field": self.field,
            "status": self.status,
            "body": self.body,
            "candidate": self.candidate,
        }

    def with_context(self, prefix: str, **fields: Any) -> Self:
        """Return a copy of this error with `prefix` prepended to the message.

        Args:
            prefix: Description of the step that failed, e.g. "failed to create client".
            **fields: Context fields to set on the copy, merged over the existing ones.

        Returns:
            A new error of the same class. The caller is expected to chain it with `raise ... from`.
        """
        context = self.context | fields
        return type(self)(f"{prefix}: {self.message}", **context)

    def __repr__(self) -> str:
        context = ", ".join(f"{k}={v!r}" for k, v in self.context.items() if v is not None)
        return f"{type(self).__name__}({self.message!r}{', ' + context if context else ''})"


class ClientConstructionError(TemperatureError):
    """The hub client could not be built from the given base URL and token."""

    kind = ErrorKind.CLIENT_CONSTRUCTION


class BaseUrlRequiredError(ClientConstructionError):
    """The base_url is empty or has no host."""


class SchemeRequiredInBaseUrlError(ClientConstructionError):
    """The base_url must include a scheme (http:// or https://)."""


class InvalidTokenError(ClientConstructionError):
    """The token cannot be sent as an Authorization header value."""


class HttpStatusError(TemperatureError):
    """The hub answered with a non-2xx status."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, message: str, *, status: int, body: str, **context: Any):
        super().__init__(message, status=status, body=body, **context)

    @classmethod
    def from_response(cls, method: str, url: str, status: int, body: str) -> Self:
        return cls(f"{method} {url} returned {status}: {body}", status=status, body=body)


class TransportError(TemperatureError):
    """Network failure, timeout, or a response body that could not be decoded."""

    kind = ErrorKind.TRANSPORT


class MissingStateError(TemperatureError):
    """The entity has no state value to read."""

    kind = ErrorKind.MISSING_STATE


class MissingAttributesError(TemperatureError):
    """The entity has no attributes to read a field from."""

    kind = ErrorKind.MISSING_ATTRIBUTES


class MissingFieldError(TemperatureError):
    """The configured field is absent from the entity's attributes."""

    kind = ErrorKind.MISSING_FIELD


class NonStringFieldError(TemperatureError):
    """The configured field holds something other than a string."""

    kind = ErrorKind.NON_STRING_FIELD


class ParseError(TemperatureError):
    """The candidate string is not a finite floating-point literal."""

    kind = ErrorKind.PARSE
