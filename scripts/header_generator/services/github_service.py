#------------------------------------------------------------
#                      github_service.py
#          Handles the GitHub GraphQL request and
#                      response shaping.

from typing import Dict, List
import requests
from dateutil import parser as date_parser
from ..config import (
    GITHUB_CONTENT_TYPE,
    GITHUB_GRAPHQL_URL,
    GITHUB_REPOSITORIES_PAGE_SIZE,
    GITHUB_REQUEST_TIMEOUT_SECONDS,
    GITHUB_USER_AGENT,
)
from ..errors import ConfigurationError, RemoteRejectionError, ResponseFormatError, TransportError
from ..models import AccountSnapshot, ContributionCalendar, DayRecord, HeaderConfig, WeekRecord

USER_QUERY = """
query($username: String!) {
  user(login: $username) {
    createdAt
    repositories(first: %d, ownerAffiliations: OWNER) {
      totalCount
    }
    contributionsCollection {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            contributionCount
            date
            weekday
          }
        }
      }
      totalCommitContributions
    }
  }
}
""" % GITHUB_REPOSITORIES_PAGE_SIZE

MISSING_CREDENTIALS_MESSAGE = "GitHub username and token are both required"
TRANSPORT_ERROR_TEMPLATE = "GitHub request failed: {error}"
HTTP_ERROR_TEMPLATE = "GitHub returned HTTP {status}: {body}"
REMOTE_ERRORS_TEMPLATE = "GitHub GraphQL returned errors: {errors}"
INVALID_JSON_MESSAGE = "GitHub response is not valid JSON"
MISSING_FIELD_TEMPLATE = "GitHub response is missing {field}"
INVALID_FIELD_TEMPLATE = "GitHub response has an invalid {field}: {value!r}"
HTTP_BODY_PREVIEW_CHARS = 200

class GitHubService:

    # This function does store the runtime configuration.
    # Credentials are checked here so nothing is sent without them.
    def __init__(self, config: HeaderConfig):
        if not config.github_username or not config.github_token:
            raise ConfigurationError(MISSING_CREDENTIALS_MESSAGE)
        self.config = config

    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": GITHUB_CONTENT_TYPE,
            "Authorization": f"Bearer {self.config.github_token}",
            "User-Agent": GITHUB_USER_AGENT,
        }

    # This function does send the single GraphQL query for the user.
    # It returns the raw `data.user` mapping or raises a typed error.
    def fetch_user(self) -> dict:
        body = {"query": USER_QUERY, "variables": {"username": self.config.github_username}}
        try:
            response = requests.post(
                GITHUB_GRAPHQL_URL,
                json=body,
                headers=self.headers(),
                timeout=GITHUB_REQUEST_TIMEOUT_SECONDS,
            )
        except requests.RequestException as exc:
            raise TransportError(TRANSPORT_ERROR_TEMPLATE.format(error=exc)) from exc

        if response.status_code >= 400:
            raise RemoteRejectionError(
                HTTP_ERROR_TEMPLATE.format(
                    status=response.status_code,
                    body=(response.text or "")[:HTTP_BODY_PREVIEW_CHARS],
                ),
                details=response.text,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ResponseFormatError(INVALID_JSON_MESSAGE) from exc

        if not isinstance(payload, dict):
            raise ResponseFormatError(INVALID_FIELD_TEMPLATE.format(field="body", value=payload))

        # any top-level errors field, even an empty one, is a rejection
        errors = payload.get("errors")
        if errors is not None:
            raise RemoteRejectionError(REMOTE_ERRORS_TEMPLATE.format(errors=errors), details=errors)

        data = payload.get("data")
        if not isinstance(data, dict):
            raise ResponseFormatError(MISSING_FIELD_TEMPLATE.format(field="data"))
        user = data.get("user")
        if not isinstance(user, dict):
            raise ResponseFormatError(MISSING_FIELD_TEMPLATE.format(field="data.user"))
        return user

    def fetch_account_snapshot(self) -> AccountSnapshot:
        return parse_account_snapshot(self.fetch_user())

# This function does turn a GraphQL `user` mapping into a snapshot.
# It raises ResponseFormatError for any missing or mistyped field.
def parse_account_snapshot(user: dict) -> AccountSnapshot:
    raw_created_at = _require(user, "createdAt", "createdAt")
    if not isinstance(raw_created_at, str):
        raise ResponseFormatError(INVALID_FIELD_TEMPLATE.format(field="createdAt", value=raw_created_at))
    try:
        created_at = date_parser.isoparse(raw_created_at)
    except ValueError as exc:
        raise ResponseFormatError(
            INVALID_FIELD_TEMPLATE.format(field="createdAt", value=raw_created_at)
        ) from exc

    repositories = _require(user, "repositories", "repositories")
    collection = _require(user, "contributionsCollection", "contributionsCollection")
    calendar = _require(collection, "contributionCalendar", "contributionsCollection.contributionCalendar")

    return AccountSnapshot(
        created_at=created_at,
        repository_count=_count(repositories, "totalCount", "repositories.totalCount"),
        total_commit_contributions=_count(
            collection, "totalCommitContributions", "contributionsCollection.totalCommitContributions"
        ),
        contribution_calendar=_parse_calendar(calendar),
    )

def _parse_calendar(calendar: dict) -> ContributionCalendar:
    raw_weeks = _require(calendar, "weeks", "contributionCalendar.weeks")
    if not isinstance(raw_weeks, list):
        raise ResponseFormatError(INVALID_FIELD_TEMPLATE.format(field="contributionCalendar.weeks", value=raw_weeks))

    weeks: List[WeekRecord] = []
    for raw_week in raw_weeks:
        raw_days = _require(raw_week, "contributionDays", "week.contributionDays")
        if not isinstance(raw_days, list):
            raise ResponseFormatError(INVALID_FIELD_TEMPLATE.format(field="week.contributionDays", value=raw_days))
        weeks.append(WeekRecord(contribution_days=tuple(_parse_day(raw_day) for raw_day in raw_days)))

    return ContributionCalendar(
        total_contributions=_count(calendar, "totalContributions", "contributionCalendar.totalContributions"),
        weeks=tuple(weeks),
    )

def _parse_day(raw_day: dict) -> DayRecord:
    weekday = _count(raw_day, "weekday", "contributionDay.weekday")
    if weekday > 6:
        raise ResponseFormatError(INVALID_FIELD_TEMPLATE.format(field="contributionDay.weekday", value=weekday))
    return DayRecord(
        contribution_count=_count(raw_day, "contributionCount", "contributionDay.contributionCount"),
        date=str(_require(raw_day, "date", "contributionDay.date")),
        weekday=weekday,
    )

def _require(container, key: str, field: str):
    if not isinstance(container, dict) or container.get(key) is None:
        raise ResponseFormatError(MISSING_FIELD_TEMPLATE.format(field=field))
    return container[key]

def _count(container, key: str, field: str) -> int:
    value = _require(container, key, field)
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ResponseFormatError(INVALID_FIELD_TEMPLATE.format(field=field, value=value))
    return value
