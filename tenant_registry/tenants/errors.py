# tenant_registry/tenants/errors.py
from fastapi import status
from pydantic import BaseModel, Field
from typing import Dict, List, Union


class TenantError(BaseModel):
    """Base class for error results returned (not raised) by the tenant service.

    Each subclass carries a stable machine-readable code and a human-readable
    message, which together form the JSON error body sent to API clients.
    """
    code: str
    message: str

    def to_response_body(self) -> Dict[str, object]:
        return {"error": self.code, "message": self.message}


class TenantValidationError(TenantError):
    """The caller supplied malformed input, e.g. an empty tenant name."""
    code: str = "validation_error"
    message: str = "Invalid tenant request."
    details: List[str] = Field(default_factory=list)

    def to_response_body(self) -> Dict[str, object]:
        body = super().to_response_body()
        if self.details:
            body["details"] = list(self.details)
        return body


class TenantNotFound(TenantError):
    """No tenant exists with the requested id."""
    code: str = "tenant_not_found"
    tenant_id: int
    message: str = ""

    def model_post_init(self, __context) -> None:
        if not self.message:
            self.message = f"Tenant not found with id {self.tenant_id}"


class InfrastructureError(Exception):
    """Raised when the backing storage cannot serve a request."""


class TenantStoreUnavailableError(InfrastructureError):
    """The tenant store could not read or write its records."""

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        message = f"Tenant store unavailable during '{operation}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


# Error kind -> HTTP status, consulted only at the API boundary
ERROR_STATUS_CODES: Dict[type, int] = {
    TenantValidationError: status.HTTP_400_BAD_REQUEST,
    TenantNotFound: status.HTTP_404_NOT_FOUND,
    InfrastructureError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(error: Union[TenantError, Exception]) -> int:
    """Resolve the HTTP status for an error result or exception via its class hierarchy."""
    for klass in type(error).__mro__:
        if klass in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[klass]
    return status.HTTP_500_INTERNAL_SERVER_ERROR
