from pydantic import BaseModel
from typing import Generic, Optional, TypeVar
from uuid import UUID

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

# Shared properties
T = TypeVar("T")


class UserToken(BaseModel):
    user_id: str
    email: Optional[str] = None
    name: Optional[str] = None
    exp: Optional[int] = None

    @property
    def user_uuid(self) -> UUID:
        return UUID(self.user_id)


class CommonQueryParams(EmptyStringModel):
    search: Optional[str] = None
    skip: Optional[int] = 0
    limit: Optional[int] = 100


class JsonOutResult(BaseModel, Generic[T]):
    data: Optional[T] = None
    status: str
    status_code: str
    message: str
