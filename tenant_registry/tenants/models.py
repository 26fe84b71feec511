# tenant_registry/tenants/models.py
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime


class TenantBase(BaseModel):
    """Fields supplied by the caller when registering a tenant."""
    name: str = Field(min_length=1, description="Display name of the tenant.")
    domain: Optional[str] = Field(
        default=None,
        description="Optional domain associated with the tenant (not validated)."
    )


class TenantCreate(TenantBase):
    """Validated input for tenant creation."""
    pass


class TenantInDB(TenantBase):
    """Tenant record as stored, including server-assigned fields."""
    id: int = Field(gt=0)
    created_at: datetime

    class Config:
        from_attributes = True
        frozen = True


class TenantView(BaseModel):
    """API-facing representation of a tenant, serialized with camelCase keys."""
    id: int
    name: str
    domain: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
        frozen = True
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_record(cls, record: TenantInDB) -> "TenantView":
        return cls(
            id=record.id,
            name=record.name,
            domain=record.domain,
            created_at=record.created_at,
        )
