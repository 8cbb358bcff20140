from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, field_validator
from typing import List, Optional

from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class SpaceBase(EmptyStringModel):
    title: Optional[str] = None
    description: Optional[str] = None
    space_type: Optional[str] = None
    capacity: Optional[int] = None
    street_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None


class SpaceCreate(SpaceBase):
    pass


class SpaceUpdate(SpaceBase):
    is_active: Optional[bool] = None

    @field_validator("is_active", mode="before")
    @classmethod
    def coerce_is_active(cls, value):
        # Forms send the flag as the literal strings "true"/"false"
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered == "true":
                return True
            if lowered == "false":
                return False
            raise ValueError("is_active must be true or false")
        return value


class SpaceOut(BaseModel):
    space_id: UUID
    host_id: UUID
    title: str
    description: Optional[str] = None
    space_type: str
    capacity: int
    street_address: str
    city: str
    state: str
    zip_code: str
    country: str
    is_active: bool
    is_deleted: bool
    tenant_count: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SpaceRequest(CommonQueryParams):
    space_type: Optional[str] = None
    city: Optional[str] = None
    capacity: Optional[int] = None
    host_id: Optional[UUID] = None


class SpaceListResponse(BaseModel):
    spaces: List[SpaceOut]
    total: int

    model_config = {"from_attributes": True}


class SpaceMetrics(BaseModel):
    total_spaces: int
    active_spaces: int
    total_tenants: int
    monthly_revenue: float

    model_config = {"from_attributes": True}
