"""Uniform result envelope returned in place of raised exceptions.

Every service operation returns either a domain entity (or a list of them) or
an :class:`ErrorResponse`. Callers tell the two apart by the presence of an
``errors`` attribute.
"""

from enum import StrEnum

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    BAD_INPUT = "E_BAD_INPUT"
    API_ERROR = "E_API_ERROR"
    NO_PERMISSION = "E_NO_PERMISSION"
    INFO = "I_INFO"

    # Reserved for a token-based authenticator
    AUTH_TOKEN_MISSING = "I_AUTHTOKEN_MISSING"
    AUTH_TYPE_INVALID = "E_AUTHTYPE_INVALID"
    DECODE = "E_DECODE"
    TOKEN_EXPIRED = "I_TOKEN_EXPIRED"


class ModuleError(BaseModel):
    """Error reported by the persistence backend."""

    code: str = Field(description="Backend error code")
    message: str = Field(description="Backend error message")
    attr_names: list[str] = Field(
        default_factory=list, description="Attributes the backend complained about"
    )


class ErrorDetail(BaseModel):
    """A single structured error record."""

    code: str
    message: str
    attr_name: str | None = None
    row: int | None = None
    module_error: ModuleError | None = None


class ErrorResponse(BaseModel):
    """Error envelope: an ordered sequence of error records."""

    errors: list[ErrorDetail]

    @classmethod
    def single(cls, code: str, message: str, **kwargs) -> "ErrorResponse":
        return cls(errors=[ErrorDetail(code=code, message=message, **kwargs)])


class PersistenceError(Exception):
    """Raised by repositories when the backend rejects an operation."""

    def __init__(self, code: str, message: str, attr_names: list[str] | None = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.attr_names = attr_names or []


def is_error(result: object) -> bool:
    """Discriminate a service result by the presence of an ``errors`` attribute."""
    return hasattr(result, "errors")


def bad_input(attr_name: str, message: str) -> ErrorResponse:
    return ErrorResponse.single(ErrorCode.BAD_INPUT, message, attr_name=attr_name)


def info(message: str) -> ErrorResponse:
    return ErrorResponse.single(ErrorCode.INFO, message)


def not_found(entity_name: str, record_id: object) -> ErrorResponse:
    return info(f"No {entity_name} exists with the requested Id: {record_id}")


def no_permission(scope: str) -> ErrorResponse:
    return ErrorResponse.single(
        ErrorCode.NO_PERMISSION, f"Expected resource Authorization: {scope}"
    )


def api_error(message: str, err: Exception) -> ErrorResponse:
    """Wrap a backend exception, keeping its code and attribute names when known."""
    if isinstance(err, PersistenceError):
        module_error = ModuleError(
            code=err.code, message=err.message, attr_names=err.attr_names
        )
    else:
        module_error = ModuleError(code="E_ERROR", message=str(err))
    return ErrorResponse.single(ErrorCode.API_ERROR, message, module_error=module_error)
