from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from shared.core.database import get_db
from shared.core.auth import validate_current_token
from shared.core.schemas import UserToken
from ...schemas.space_sites.spaces_schemas import SpaceListResponse, SpaceMetrics, SpaceOut, SpaceCreate, SpaceRequest, SpaceUpdate
from ...crud.space_sites import spaces_crud as crud

router = APIRouter(
    prefix="/api/spaces",
    tags=["spaces"],
    dependencies=[Depends(validate_current_token)]
)

# -----------------------------------------------------------------


@router.get("/", response_model=SpaceListResponse)
def get_spaces(
        params: SpaceRequest = Depends(),
        db: Session = Depends(get_db)):
    return crud.get_spaces(db, params)


# host routes must be declared before /{space_id}
@router.get("/host/metrics", response_model=SpaceMetrics)
def get_space_metrics(
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    return crud.get_space_metrics(db, current_user.user_uuid)


@router.get("/host/my-spaces", response_model=List[SpaceOut])
def get_host_spaces(
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(validate_current_token)):
    return crud.get_host_spaces(db, current_user.user_uuid)


@router.get("/{space_id}", response_model=SpaceOut)
def get_space(space_id: UUID, db: Session = Depends(get_db)):
    return crud.get_space(db, space_id)


@router.post("/", response_model=SpaceOut, status_code=status.HTTP_201_CREATED)
def create_space(
    space: SpaceCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.create_space(db, current_user.user_uuid, space)


@router.put("/{space_id}", response_model=SpaceOut)
def update_space(
    space_id: UUID,
    space: SpaceUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.update_space(db, space_id, current_user.user_uuid, space)


@router.delete("/{space_id}", response_model=SpaceOut)
def delete_space(
    space_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)
):
    return crud.delete_space(db, space_id, current_user.user_uuid)
