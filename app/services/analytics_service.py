"""
Dashboard derivations - pure functions over already-loaded records.

Nothing here touches the database or caches results; every call recomputes
from the records it is given.
"""
from __future__ import annotations

from collections import OrderedDict
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, Hashable, Iterable, Optional, TypeVar, Union


T = TypeVar("T")
DateLike = Union[date, datetime, str]

ENDING_SOON_DAYS = 90


class LeaseStatus(str, Enum):
    ACTIVE = "Active"
    ENDING_SOON = "Ending Soon"
    EXPIRED = "Expired"
    NOT_AVAILABLE = "N/A"


def _to_date(value: DateLike) -> date:
    """Midnight-normalise a date, datetime or ISO string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])


def days_until(target: DateLike, now: Optional[DateLike] = None) -> int:
    """Whole days from `now` (default today) until `target`; negative once past."""
    today = _to_date(now) if now is not None else date.today()
    return (_to_date(target) - today).days


def lease_status(
    lease_end: Optional[DateLike],
    now: Optional[DateLike] = None,
    ending_soon_days: int = ENDING_SOON_DAYS,
) -> LeaseStatus:
    """
    Classify a lease by days remaining:
      < 0                      -> Expired
      0 .. ending_soon_days    -> Ending Soon (a lease ending today is Ending Soon)
      > ending_soon_days       -> Active
    """
    if not lease_end:
        return LeaseStatus.NOT_AVAILABLE

    remaining = days_until(lease_end, now)
    if remaining < 0:
        return LeaseStatus.EXPIRED
    if remaining <= ending_soon_days:
        return LeaseStatus.ENDING_SOON
    return LeaseStatus.ACTIVE


def occupancy_rate(property_obj: Any) -> float:
    """Occupied units / total units, 0.0 for a property without units."""
    units = list(property_obj.units)
    if not units:
        return 0.0
    occupied = sum(1 for u in units if u.tenant_id is not None)
    return occupied / len(units)


def potential_rent(property_obj: Any) -> float:
    """Monthly rent of the occupied units."""
    return sum(u.rent for u in property_obj.units if u.tenant_id is not None)


def aggregate_by(
    records: Iterable[T],
    key_fn: Callable[[T], Hashable],
    amount_fn: Callable[[T], float],
) -> Dict[Hashable, float]:
    """
    Group records by key_fn and sum amount_fn per group.
    Keys keep the order in which they first appear.
    """
    totals: Dict[Hashable, float] = OrderedDict()
    for record in records:
        key = key_fn(record)
        totals[key] = totals.get(key, 0.0) + amount_fn(record)
    return totals
