#------------------------------------------------------------
#                          models.py
#    Defines dataclasses used by the header pipeline.

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple
from .config import STAT_SUFFIX

@dataclass(frozen=True)
class HeaderConfig:
    github_username: str
    github_token: str
    template_path: str

@dataclass(frozen=True)
class DayRecord:
    contribution_count: int
    date: str
    weekday: int

@dataclass(frozen=True)
class WeekRecord:
    contribution_days: Tuple[DayRecord, ...]

@dataclass(frozen=True)
class ContributionCalendar:
    total_contributions: int
    weeks: Tuple[WeekRecord, ...]

@dataclass(frozen=True)
class AccountSnapshot:
    created_at: datetime
    repository_count: int
    total_commit_contributions: int
    contribution_calendar: ContributionCalendar

@dataclass(frozen=True)
class RenderedCell:
    x: int
    y: int
    fill: str
    opacity: float
    animation_delay: float

@dataclass(frozen=True)
class HeaderStats:
    years_active: int
    repository_count: int
    commit_label: str

    @property
    def years_display(self) -> str:
        return f"{self.years_active}{STAT_SUFFIX}"

    @property
    def repositories_display(self) -> str:
        return f"{self.repository_count}{STAT_SUFFIX}"

    @property
    def commits_display(self) -> str:
        return f"{self.commit_label}{STAT_SUFFIX}"
