# app/router/leasing_tenants/tenants_router.py
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from shared.core.database import get_db
from shared.core.auth import validate_current_token
from shared.core.schemas import UserToken

from ...schemas.leasing_tenants.tenants_schemas import (
    TenantListResponse,
    TenantMetrics,
    TenantOut,
    TenantCreate,
    TenantUpdate,
)
from ...crud.leasing_tenants import tenants_crud as crud

router = APIRouter(
    prefix="/api/tenants",
    tags=["tenants"],
    dependencies=[Depends(validate_current_token)],
)

# Metrics


@router.get("/metrics", response_model=TenantMetrics)
def tenant_metrics(
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.get_tenant_metrics(db, current_user.user_uuid)

# ------------all


@router.get("/", response_model=TenantListResponse)
def host_tenants(
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.get_host_tenants(db, current_user.user_uuid)


@router.get("/space/{space_id}", response_model=TenantListResponse)
def space_tenants(
    space_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.get_space_tenants(db, space_id, current_user.user_uuid)


@router.get("/{tenant_id}", response_model=TenantOut)
def get_tenant(
    tenant_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.get_tenant(db, tenant_id, current_user.user_uuid)

# ----------------- Create Tenant -----------------


@router.post("/", response_model=TenantOut, status_code=status.HTTP_201_CREATED)
def create_tenant_endpoint(
    tenant: TenantCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.create_tenant(db, current_user.user_uuid, tenant)


# ----------------- Update Tenant -----------------
@router.put("/{tenant_id}", response_model=TenantOut)
def update_tenant(
    tenant_id: UUID,
    update_data: TenantUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.update_tenant(db, tenant_id, current_user.user_uuid, update_data)


# ---------------- Delete Tenant ----------------
@router.delete("/{tenant_id}", response_model=TenantOut)
def delete_tenant_route(
    tenant_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.delete_tenant(db, tenant_id, current_user.user_uuid)
