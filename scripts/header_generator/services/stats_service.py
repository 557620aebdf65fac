#------------------------------------------------------------
#                      stats_service.py
#      Derives the display statistics shown in the header.

import math
from datetime import datetime, timezone
from typing import Optional
from ..config import (
    COMMITS_THOUSANDS_THRESHOLD,
    MIN_YEARS_ACTIVE,
    SECONDS_PER_YEAR,
    THOUSANDS_SUFFIX,
)
from ..models import AccountSnapshot, HeaderStats

# This function does count whole 365.25-day years since account creation.
# Accounts younger than a year still report one year.
# Naive timestamps are taken as UTC.
def years_active(created_at: datetime, now: Optional[datetime] = None) -> int:
    now = now or datetime.now(timezone.utc)
    created_at = _as_utc(created_at)
    now = _as_utc(now)
    elapsed = (now - created_at).total_seconds()
    return max(MIN_YEARS_ACTIVE, math.floor(elapsed / SECONDS_PER_YEAR))

def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment

def format_commit_count(count: int) -> str:
    if count >= COMMITS_THOUSANDS_THRESHOLD:
        return f"{count // COMMITS_THOUSANDS_THRESHOLD}{THOUSANDS_SUFFIX}"
    return str(count)

def derive_stats(snapshot: AccountSnapshot, now: Optional[datetime] = None) -> HeaderStats:
    return HeaderStats(
        years_active=years_active(snapshot.created_at, now),
        repository_count=snapshot.repository_count,
        commit_label=format_commit_count(snapshot.total_commit_contributions),
    )
