#------------------------------------------------------------
#                        controller.py
#        Coordinates fetching, rendering and writing of
#                    the header SVG.

import os
import sys
from typing import Mapping, Optional
from .config import (
    ENV_GITHUB_REPOSITORY_OWNER,
    ENV_GITHUB_TOKEN,
    ENV_HEADER_SVG_PATH,
    USERNAME_ENV_NAMES,
    resolve_header_svg_path,
)
from .errors import ConfigurationError, HeaderGeneratorError
from .models import HeaderConfig
from .services.github_service import GitHubService
from .services.stats_service import derive_stats
from .services.template_service import load_template, save_template, splice_template
from .views.svg_view import render_contribution_grid

MISSING_CONFIG_MESSAGE = f"{ENV_GITHUB_REPOSITORY_OWNER} and {ENV_GITHUB_TOKEN} must be set"
FETCHING_MESSAGE_TEMPLATE = "Fetching user data for {username}..."
SUCCESS_MESSAGE_TEMPLATE = "Successfully generated {path} with live data"
ERROR_MESSAGE_TEMPLATE = "Error: {error}"

# This function does build the run configuration from the environment.
# It fails before any network activity when a credential is missing.
def load_config(environ: Optional[Mapping[str, str]] = None) -> HeaderConfig:
    environ = os.environ if environ is None else environ
    username = ""
    for name in USERNAME_ENV_NAMES:
        username = environ.get(name, "").strip()
        if username:
            break
    token = environ.get(ENV_GITHUB_TOKEN, "").strip()
    if not username or not token:
        raise ConfigurationError(MISSING_CONFIG_MESSAGE)

    return HeaderConfig(
        github_username=username,
        github_token=token,
        template_path=resolve_header_svg_path(environ.get(ENV_HEADER_SVG_PATH, "")),
    )

# This function does execute the full generation workflow end-to-end.
# The template is only written once every step before it has succeeded.
def run_generation(config: HeaderConfig) -> None:
    github_service = GitHubService(config)
    print(FETCHING_MESSAGE_TEMPLATE.format(username=config.github_username))
    snapshot = github_service.fetch_account_snapshot()
    calendar = snapshot.contribution_calendar

    stats = derive_stats(snapshot)
    print(f"Years Coding: {stats.years_active}")
    print(f"Repositories: {stats.repository_count}")
    print(f"Commits: {snapshot.total_commit_contributions}")
    print(f"Total contributions: {calendar.total_contributions}")
    print(f"Weeks of data: {len(calendar.weeks)}")

    grid_markup = render_contribution_grid(calendar)
    template = load_template(config.template_path)
    header_svg = splice_template(template, stats, grid_markup)
    save_template(config.template_path, header_svg)
    print(SUCCESS_MESSAGE_TEMPLATE.format(path=os.path.basename(config.template_path)))

def main(environ: Optional[Mapping[str, str]] = None) -> int:
    try:
        run_generation(load_config(environ))
    except HeaderGeneratorError as exc:
        print(ERROR_MESSAGE_TEMPLATE.format(error=exc), file=sys.stderr)
        return 1
    return 0
