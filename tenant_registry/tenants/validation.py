# tenant_registry/tenants/validation.py
"""Explicit request validation for the tenant API.

Each parser returns either the parsed value or a TenantValidationError;
nothing here raises for bad input.
"""
import re
from typing import Any, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from .errors import TenantValidationError
from .models import TenantCreate

_TENANT_ID_PATTERN = re.compile(r"-?[0-9]+")


def normalize_name(name: Any) -> Union[str, TenantValidationError]:
    """Return the stripped name, or an error when it is missing, blank or not text."""
    if name is None:
        return TenantValidationError(message="Tenant name is required.", details=["name: field required"])
    if not isinstance(name, str):
        return TenantValidationError(message="Tenant name must be a string.", details=["name: must be a string"])
    stripped = name.strip()
    if not stripped:
        return TenantValidationError(message="Tenant name must not be empty.", details=["name: must not be blank"])
    return stripped


def normalize_domain(domain: Optional[str]) -> Optional[str]:
    # Domains are free-form; only blank strings collapse to None
    if domain is None:
        return None
    stripped = domain.strip()
    return stripped or None


def parse_tenant_create(payload: Any) -> Union[TenantCreate, TenantValidationError]:
    """Validate a decoded JSON request body for tenant creation."""
    if not isinstance(payload, dict):
        return TenantValidationError(
            message="Request body must be a JSON object.",
            details=["body: expected an object"],
        )

    name = normalize_name(payload.get("name"))
    if isinstance(name, TenantValidationError):
        return name

    domain = payload.get("domain")
    if domain is not None and not isinstance(domain, str):
        return TenantValidationError(
            message="Tenant domain must be a string or null.",
            details=["domain: must be a string"],
        )

    try:
        return TenantCreate(name=name, domain=normalize_domain(domain))
    except PydanticValidationError as e:
        return TenantValidationError(
            details=[f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        )


def parse_tenant_id(raw: str) -> Union[int, TenantValidationError]:
    """Parse a tenant id taken from the URL path.

    Only an optional minus sign followed by ASCII digits is accepted, so
    spellings such as "1_0", "+7" or " 7" are rejected rather than aliased.
    """
    if isinstance(raw, str) and _TENANT_ID_PATTERN.fullmatch(raw):
        return int(raw)
    return TenantValidationError(
        message=f"Tenant id must be an integer, got '{raw}'.",
        details=["id: must be an integer"],
    )
