from datetime import date
from typing import Optional

from ...enum.rental_enum import TenantStatus
from ...models.leasing_tenants.tenants import Tenant

# Dashboard metric: leases ending within the next 30 days
LEASE_ENDING_SOON_DAYS = 30
# Tenant list/detail rows flag a lease as ending soon 60 days out
LEASE_LIST_ENDING_SOON_DAYS = 60


def days_until_end(end_date: date, today: Optional[date] = None) -> int:
    today = today or date.today()
    return (end_date - today).days


def lease_window_flags(tenant: Tenant, threshold_days: int, today: Optional[date] = None) -> dict:
    """
    Derive the lease window badges shown next to a tenant.

    ending soon: active, not deleted, 0 < days_until_end <= threshold_days
    overdue:     not deleted, days_until_end < 0
    """
    days = days_until_end(tenant.end_date, today)
    is_live = not tenant.is_deleted
    return {
        "days_until_end": days,
        "is_ending_soon": (
            is_live
            and tenant.status == TenantStatus.active.value
            and 0 < days <= threshold_days
        ),
        "is_overdue": is_live and days < 0,
    }
