from enum import Enum


class TenantStatus(str, Enum):
    active = "active"
    deleted = "deleted"


class BookingStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    canceled = "canceled"
    completed = "completed"
