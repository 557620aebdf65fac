"""
Shared payload builders and a fake requests response so the suite never
touches the network.
"""
import json

import pytest


def make_weeks(week_count, count=0, days_per_week=7):
    return [
        {
            "contributionDays": [
                {"contributionCount": count, "date": f"2024-W{week:02d}-{day}", "weekday": day}
                for day in range(days_per_week)
            ]
        }
        for week in range(week_count)
    ]


def make_user(created_at="2020-01-01T00:00:00Z", repositories=12, commits=4532, weeks=None):
    weeks = make_weeks(52) if weeks is None else weeks
    return {
        "createdAt": created_at,
        "repositories": {"totalCount": repositories},
        "contributionsCollection": {
            "contributionCalendar": {
                "totalContributions": sum(
                    day["contributionCount"] for week in weeks for day in week["contributionDays"]
                ),
                "weeks": weeks,
            },
            "totalCommitContributions": commits,
        },
    }


class FakeResp:
    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = json.dumps(payload) if text is None else text

    def json(self):
        if self.payload is None:
            return json.loads(self.text)
        return self.payload


TEMPLATE = (
    "<svg>\n"
    "    <text>{{YEARS_CODING}}</text>\n"
    "    <text>{{REPOSITORIES}}</text>\n"
    "    <text>{{COMMITS}}</text>\n"
    "\n"
    "    <!-- Contribution grid: 52 weeks x 7 days -->\n"
    '    <g transform="translate(266, 330)">\n'
    '      <rect class="old"/>\n'
    "    </g>\n"
    "\n"
    "    <!-- Month labels -->\n"
    "    <g></g>\n"
    "</svg>\n"
)


@pytest.fixture
def template_file(tmp_path):
    path = tmp_path / "header-complete.svg"
    path.write_text(TEMPLATE, encoding="utf-8")
    return path
