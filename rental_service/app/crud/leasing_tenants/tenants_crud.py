# app/crud/leasing_tenants/tenants_crud.py
import logging
from datetime import date, timedelta
from typing import Optional
from uuid import UUID

from sqlalchemy import and_, case, func
from sqlalchemy.orm import Session

from shared.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from shared.helpers.db_helper import commit_or_raise

from ...enum.rental_enum import TenantStatus
from ...models.leasing_tenants.tenants import Tenant
from ...models.space_sites.spaces import Space
from ...schemas.leasing_tenants.tenants_schemas import (
    TenantCreate,
    TenantListResponse,
    TenantOut,
    TenantUpdate,
)
from ..space_sites.spaces_crud import get_owned_space
from .lease_status import (
    LEASE_ENDING_SOON_DAYS,
    LEASE_LIST_ENDING_SOON_DAYS,
    lease_window_flags,
)

logger = logging.getLogger(__name__)

REQUIRED_TENANT_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "space_id",
    "start_date",
    "end_date",
)

# ------------------------------------------------------------


def validate_lease_window(start_date: date, end_date: date):
    if end_date <= start_date:
        raise ValidationError(
            "End date must be after start date", {"field": "end_date"})


def to_tenant_out(tenant: Tenant, space_title: Optional[str] = None, today: Optional[date] = None) -> TenantOut:
    data = {
        **tenant.__dict__,
        "space_title": space_title,
        **lease_window_flags(tenant, LEASE_LIST_ENDING_SOON_DAYS, today),
    }
    return TenantOut.model_validate(data)


def tenant_with_space_query(db: Session):
    return (
        db.query(Tenant, Space.title.label("space_title"))
        .join(Space, Tenant.space_id == Space.space_id)
    )


def get_tenant_by_id(db: Session, tenant_id: UUID) -> Optional[Tenant]:
    return db.query(Tenant).filter(
        Tenant.tenant_id == tenant_id,
        Tenant.is_deleted == False
    ).first()


def get_owned_tenant(db: Session, tenant_id: UUID, host_id: UUID, action: str = "manage") -> Tenant:
    """Load a tenant and check the actor hosts the tenant's space."""
    tenant = get_tenant_by_id(db, tenant_id)
    if not tenant:
        raise NotFoundError("Tenant not found")

    space = db.query(Space).filter(Space.space_id == tenant.space_id).first()
    if not space or space.host_id != host_id:
        raise AuthorizationError(f"Not authorized to {action} this tenant")

    return tenant


# ----------------- Listing -----------------


def get_host_tenants(db: Session, host_id: UUID, today: Optional[date] = None) -> TenantListResponse:
    rows = (
        tenant_with_space_query(db)
        .filter(Space.host_id == host_id, Tenant.is_deleted == False)
        .order_by(Tenant.status.desc(), Tenant.last_name, Tenant.first_name)
        .all()
    )
    tenants = [to_tenant_out(tenant, title, today) for tenant, title in rows]
    return {"tenants": tenants, "total": len(tenants)}


def get_space_tenants(db: Session, space_id: UUID, host_id: UUID, today: Optional[date] = None) -> TenantListResponse:
    get_owned_space(db, space_id, host_id, "view tenants for")

    rows = (
        tenant_with_space_query(db)
        .filter(Tenant.space_id == space_id, Tenant.is_deleted == False)
        .order_by(Tenant.status.desc(), Tenant.last_name, Tenant.first_name)
        .all()
    )
    tenants = [to_tenant_out(tenant, title, today) for tenant, title in rows]
    return {"tenants": tenants, "total": len(tenants)}


def get_tenant(db: Session, tenant_id: UUID, host_id: UUID, today: Optional[date] = None) -> TenantOut:
    tenant = get_owned_tenant(db, tenant_id, host_id, "view")
    return to_tenant_out(tenant, tenant.space.title, today)


def get_tenant_metrics(db: Session, host_id: UUID, today: Optional[date] = None) -> dict:
    today = today or date.today()
    soon = today + timedelta(days=LEASE_ENDING_SOON_DAYS)
    is_active = Tenant.status == TenantStatus.active.value

    row = (
        db.query(
            func.count(Tenant.tenant_id).label("total_tenants"),
            func.count(case((is_active, 1))).label("active_tenants"),
            func.coalesce(
                func.sum(case((is_active, Tenant.rent_amount), else_=0)), 0
            ).label("monthly_rent"),
            func.count(case((
                and_(is_active, Tenant.end_date >= today, Tenant.end_date <= soon), 1
            ))).label("leases_ending_soon"),
        )
        .join(Space, Tenant.space_id == Space.space_id)
        .filter(Space.host_id == host_id, Tenant.is_deleted == False)
        .one()
    )

    return {
        "total_tenants": int(row.total_tenants or 0),
        "active_tenants": int(row.active_tenants or 0),
        "monthly_rent": float(row.monthly_rent or 0),
        "leases_ending_soon": int(row.leases_ending_soon or 0),
    }


# ----------------- Create Tenant -----------------


def create_tenant(db: Session, host_id: UUID, tenant: TenantCreate) -> TenantOut:
    for field in REQUIRED_TENANT_FIELDS:
        if getattr(tenant, field) is None:
            raise ValidationError(
                f"Missing required field: {field}", {"field": field})

    space = get_owned_space(db, tenant.space_id, host_id, "add tenants to")
    validate_lease_window(tenant.start_date, tenant.end_date)

    tenant_data = tenant.model_dump()
    tenant_data["rent_amount"] = tenant.rent_amount or 0
    tenant_data["security_deposit"] = tenant.security_deposit or 0

    db_tenant = Tenant(
        **tenant_data,
        status=TenantStatus.active.value,
        is_deleted=False,
    )
    db.add(db_tenant)
    commit_or_raise(db, "creating tenant")
    db.refresh(db_tenant)

    logger.info("Tenant %s added to space %s",
                db_tenant.tenant_id, space.space_id)
    return to_tenant_out(db_tenant, space.title)


# ----------------- Update Tenant -----------------


def update_tenant(db: Session, tenant_id: UUID, host_id: UUID, tenant: TenantUpdate) -> TenantOut:
    db_tenant = get_owned_tenant(db, tenant_id, host_id, "update")

    update_data = {
        key: value
        for key, value in tenant.model_dump(exclude_unset=True).items()
        if value is not None
    }

    validate_lease_window(
        update_data.get("start_date", db_tenant.start_date),
        update_data.get("end_date", db_tenant.end_date),
    )

    for key, value in update_data.items():
        setattr(db_tenant, key, value)
    db_tenant.updated_at = func.now()

    commit_or_raise(db, "updating tenant")
    db.refresh(db_tenant)
    return to_tenant_out(db_tenant, db_tenant.space.title)


# ---------------- Delete Tenant ----------------


def delete_tenant(db: Session, tenant_id: UUID, host_id: UUID) -> TenantOut:
    """Soft delete, matching what the space cascade does to its tenants."""
    db_tenant = get_owned_tenant(db, tenant_id, host_id, "delete")

    db_tenant.status = TenantStatus.deleted.value
    db_tenant.is_deleted = True
    db_tenant.updated_at = func.now()

    commit_or_raise(db, "deleting tenant")
    db.refresh(db_tenant)

    logger.info("Tenant %s deleted by host %s", tenant_id, host_id)
    return to_tenant_out(db_tenant, db_tenant.space.title)
