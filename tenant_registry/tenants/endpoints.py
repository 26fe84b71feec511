# tenant_registry/tenants/endpoints.py
import logging
from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.responses import JSONResponse
from typing import List, Annotated

from .errors import TenantError, TenantNotFound, TenantValidationError, status_code_for
from .models import TenantView
from .service import TenantService
from .validation import parse_tenant_create, parse_tenant_id

logger = logging.getLogger(__name__)

tenants_router = APIRouter(prefix="/api/tenants", tags=["Tenants"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"description": "Malformed request"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Tenant storage unavailable"},
}


def get_tenant_service(request: Request) -> TenantService:
    """Return the TenantService constructed at application startup."""
    return request.app.state.tenant_service


def error_response(error: TenantError) -> JSONResponse:
    return JSONResponse(status_code=status_code_for(error), content=error.to_response_body())


@tenants_router.get("", response_model=List[TenantView])
@tenants_router.get("/", response_model=List[TenantView], include_in_schema=False)
async def list_tenants_endpoint(
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """List all registered tenants."""
    return await service.list_tenants()


@tenants_router.get(
    "/{tenant_id}",
    response_model=TenantView,
    responses={**_ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"description": "Tenant not found"}},
)
async def get_tenant_endpoint(
    tenant_id: Annotated[str, Path(description="The numeric id of the tenant to retrieve")],
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """Retrieve a specific tenant by id. Returns 404 if it does not exist."""
    parsed_id = parse_tenant_id(tenant_id)
    if isinstance(parsed_id, TenantValidationError):
        logger.warning(f"API: Rejected tenant lookup: {parsed_id.message}")
        return error_response(parsed_id)

    result = await service.get_tenant(parsed_id)
    if isinstance(result, TenantNotFound):
        return error_response(result)
    return result


@tenants_router.post(
    "",
    response_model=TenantView,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
@tenants_router.post(
    "/",
    response_model=TenantView,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_tenant_endpoint(
    request: Request,
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """Create a new tenant from a JSON body of the form {"name": ..., "domain": ...}."""
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("API: Tenant creation request body is not valid JSON")
        return error_response(TenantValidationError(
            message="Request body must be valid JSON.",
            details=["body: invalid JSON"],
        ))

    parsed = parse_tenant_create(payload)
    if isinstance(parsed, TenantValidationError):
        logger.warning(f"API: Tenant creation rejected: {parsed.message}")
        return error_response(parsed)

    logger.info(f"API: Received request to create tenant: {parsed.model_dump()}")
    result = await service.create_tenant(parsed.name, parsed.domain)
    if isinstance(result, TenantValidationError):
        return error_response(result)
    return result
