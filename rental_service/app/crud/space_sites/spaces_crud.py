import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import case, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from shared.helpers.db_helper import commit_or_raise

from ...enum.rental_enum import TenantStatus
from ...models.leasing_tenants.tenants import Tenant
from ...models.space_sites.spaces import Space
from ...schemas.space_sites.spaces_schemas import (
    SpaceCreate,
    SpaceListResponse,
    SpaceOut,
    SpaceRequest,
    SpaceUpdate,
)

logger = logging.getLogger(__name__)

# Checked in this order; the first missing one is reported
REQUIRED_SPACE_FIELDS = (
    "title",
    "space_type",
    "capacity",
    "street_address",
    "city",
    "state",
    "zip_code",
    "country",
)

# ----------------------------------------------------------------------
# HELPERS
# ----------------------------------------------------------------------


def active_tenant_filters(space_id=None):
    filters = [
        Tenant.status == TenantStatus.active.value,
        Tenant.is_deleted == False,
    ]
    if space_id is not None:
        filters.append(Tenant.space_id == space_id)
    return filters


def tenant_count_column():
    return (
        select(func.count(Tenant.tenant_id))
        .where(Tenant.space_id == Space.space_id, *active_tenant_filters())
        .correlate(Space)
        .scalar_subquery()
        .label("tenant_count")
    )


def count_active_tenants(db: Session, space_id: UUID) -> int:
    return (
        db.query(func.count(Tenant.tenant_id))
        .filter(*active_tenant_filters(space_id))
        .scalar() or 0
    )


def to_space_out(space: Space, tenant_count: Optional[int] = None) -> SpaceOut:
    data = {**space.__dict__, "tenant_count": tenant_count}
    return SpaceOut.model_validate(data)


def validate_capacity(capacity: int):
    if capacity is None or capacity <= 0:
        raise ValidationError(
            "Capacity must be a positive integer", {"field": "capacity"})


def get_space_by_id(db: Session, space_id: UUID) -> Optional[Space]:
    return db.query(Space).filter(Space.space_id == space_id, Space.is_deleted == False).first()


def get_owned_space(db: Session, space_id: UUID, host_id: UUID, action: str = "manage") -> Space:
    db_space = get_space_by_id(db, space_id)
    if not db_space:
        raise NotFoundError("Space not found")

    if db_space.host_id != host_id:
        raise AuthorizationError(f"Not authorized to {action} this space")

    return db_space


# ----------------------------------------------------------------------
# QUERIES
# ----------------------------------------------------------------------


def build_space_filters(params: SpaceRequest):
    # Public browse only lists live spaces
    filters = [Space.is_active == True, Space.is_deleted == False]

    if params.space_type and params.space_type.lower() != "all":
        filters.append(Space.space_type == params.space_type)

    if params.city:
        filters.append(Space.city == params.city)

    if params.capacity:
        filters.append(Space.capacity >= params.capacity)

    if params.host_id:
        filters.append(Space.host_id == params.host_id)

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(or_(Space.title.ilike(search_term),
                           Space.city.ilike(search_term)))

    return filters


def get_spaces(db: Session, params: SpaceRequest) -> SpaceListResponse:
    filters = build_space_filters(params)
    total = db.query(func.count(Space.space_id)).filter(*filters).scalar()

    rows = (
        db.query(Space, tenant_count_column())
        .filter(*filters)
        .order_by(Space.created_at.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )

    spaces = [to_space_out(space, tenant_count) for space, tenant_count in rows]
    return {"spaces": spaces, "total": total}


def get_space(db: Session, space_id: UUID) -> SpaceOut:
    row = (
        db.query(Space, tenant_count_column())
        .filter(Space.space_id == space_id, Space.is_deleted == False)
        .first()
    )
    if not row:
        raise NotFoundError("Space not found")

    space, tenant_count = row
    return to_space_out(space, tenant_count)


def get_host_spaces(db: Session, host_id: UUID) -> List[SpaceOut]:
    rows = (
        db.query(Space, tenant_count_column())
        .filter(Space.host_id == host_id, Space.is_deleted == False)
        .order_by(Space.created_at.desc())
        .all()
    )
    return [to_space_out(space, tenant_count or 0) for space, tenant_count in rows]


def get_space_metrics(db: Session, host_id: UUID) -> dict:
    space_counts = (
        db.query(
            func.count(Space.space_id).label("total_spaces"),
            func.count(case((Space.is_active == True, 1))
                       ).label("active_spaces"),
        )
        .filter(Space.host_id == host_id, Space.is_deleted == False)
        .one()
    )

    tenant_totals = (
        db.query(
            func.count(Tenant.tenant_id).label("total_tenants"),
            func.coalesce(func.sum(Tenant.rent_amount), 0).label(
                "monthly_revenue"),
        )
        .join(Space, Tenant.space_id == Space.space_id)
        .filter(
            Space.host_id == host_id,
            Space.is_deleted == False,
            *active_tenant_filters(),
        )
        .one()
    )

    return {
        "total_spaces": int(space_counts.total_spaces or 0),
        "active_spaces": int(space_counts.active_spaces or 0),
        "total_tenants": int(tenant_totals.total_tenants or 0),
        "monthly_revenue": float(tenant_totals.monthly_revenue or 0),
    }


# ----------------------------------------------------------------------
# CRUD OPERATIONS
# ----------------------------------------------------------------------


def create_space(db: Session, host_id: UUID, space: SpaceCreate) -> SpaceOut:
    for field in REQUIRED_SPACE_FIELDS:
        if getattr(space, field) is None:
            raise ValidationError(
                f"Missing required field: {field}", {"field": field})

    validate_capacity(space.capacity)

    db_space = Space(
        host_id=host_id,
        is_active=True,
        is_deleted=False,
        **space.model_dump(),
    )
    db.add(db_space)
    commit_or_raise(db, "creating space")
    db.refresh(db_space)

    logger.info("Space %s created by host %s", db_space.space_id, host_id)
    return to_space_out(db_space, 0)


def update_space(db: Session, space_id: UUID, host_id: UUID, space: SpaceUpdate) -> SpaceOut:
    db_space = get_owned_space(db, space_id, host_id, "update")

    # Fields not supplied (or supplied blank) keep their stored value
    update_data = {
        key: value
        for key, value in space.model_dump(exclude_unset=True).items()
        if value is not None
    }

    if "capacity" in update_data:
        validate_capacity(update_data["capacity"])

    for key, value in update_data.items():
        setattr(db_space, key, value)
    db_space.updated_at = func.now()

    commit_or_raise(db, "updating space")
    db.refresh(db_space)
    return to_space_out(db_space, count_active_tenants(db, space_id))


def soft_delete_space_tenants(db: Session, space_id: UUID) -> int:
    return (
        db.query(Tenant)
        .filter(Tenant.space_id == space_id)
        .update({
            "status": TenantStatus.deleted.value,
            "is_deleted": True,
            "updated_at": func.now(),
        }, synchronize_session=False)
    )


def mark_space_deleted(db: Session, db_space: Space):
    db_space.is_deleted = True
    db_space.is_active = False
    db_space.updated_at = func.now()
    db.flush()


def delete_space(db: Session, space_id: UUID, host_id: UUID) -> SpaceOut:
    """
    Soft delete a space together with its tenants in one transaction.

    Refused with ConflictError while the space still has active tenants. The
    tenant cascade and the space flag commit together or not at all.
    """
    db_space = get_owned_space(db, space_id, host_id, "delete")

    try:
        active_tenants = count_active_tenants(db, space_id)
        if active_tenants > 0:
            logger.info(
                "Refusing to delete space %s: %s active tenant(s)", space_id, active_tenants)
            raise ConflictError(
                f"Cannot delete space with {active_tenants} active tenant(s)",
                {"activeTenantsCount": active_tenants},
            )

        cascaded = soft_delete_space_tenants(db, space_id)
        mark_space_deleted(db, db_space)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Delete of space %s rolled back", space_id)
        raise PersistenceError("Database error while deleting space") from exc
    except Exception:
        db.rollback()
        raise

    db.refresh(db_space)
    logger.info("Space %s deleted by host %s (%s tenant row(s) cascaded)",
                space_id, host_id, cascaded)
    return to_space_out(db_space, 0)
