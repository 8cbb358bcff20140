# app/schemas/leasing_tenants/tenants_schemas.py
from uuid import UUID
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class TenantBase(EmptyStringModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    rent_amount: Optional[Decimal] = None
    security_deposit: Optional[Decimal] = None
    notes: Optional[str] = None


class TenantCreate(TenantBase):
    space_id: Optional[UUID] = None


class TenantUpdate(TenantBase):
    pass


class TenantOut(BaseModel):
    tenant_id: UUID
    space_id: UUID
    space_title: Optional[str] = None
    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    start_date: date
    end_date: date
    rent_amount: Decimal
    security_deposit: Decimal
    notes: Optional[str] = None
    status: str
    is_deleted: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # lease window flags, computed on read
    days_until_end: Optional[int] = None
    is_ending_soon: Optional[bool] = None
    is_overdue: Optional[bool] = None

    model_config = {"from_attributes": True}


class TenantListResponse(BaseModel):
    tenants: List[TenantOut]
    total: int


class TenantMetrics(BaseModel):
    total_tenants: int
    active_tenants: int
    monthly_rent: float
    leases_ending_soon: int

    model_config = {
        "from_attributes": True
    }
