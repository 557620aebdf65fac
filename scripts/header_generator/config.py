#------------------------------------------------------------
#                          config.py
#   Centralizes environment names, file paths, SVG markers
#              and GitHub API constants.

import os

# Environment variable names for configuration
ENV_GITHUB_REPOSITORY_OWNER = "GITHUB_REPOSITORY_OWNER"
ENV_USERNAME = "USERNAME"
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
ENV_HEADER_SVG_PATH = "HEADER_SVG_PATH"

# Username sources, first non-empty wins.
USERNAME_ENV_NAMES = (ENV_GITHUB_REPOSITORY_OWNER, ENV_USERNAME)

# Constants for GitHub API interaction
GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
GITHUB_USER_AGENT = "GitHub-Profile-Generator"
GITHUB_CONTENT_TYPE = "application/json"
GITHUB_REQUEST_TIMEOUT_SECONDS = 30
GITHUB_REPOSITORIES_PAGE_SIZE = 100

# Statistics derivation
SECONDS_PER_YEAR = 365.25 * 24 * 60 * 60
MIN_YEARS_ACTIVE = 1
COMMITS_THOUSANDS_THRESHOLD = 1000
STAT_SUFFIX = "+"
THOUSANDS_SUFFIX = "k"

# Contribution grid geometry
GRID_WEEKS = 52
CELL_SIZE = 12
CELL_RADIUS = 2
CELL_X_STEP = 14
CELL_Y_STEP = 15
ANIMATION_DELAY_START = 0.10
ANIMATION_DELAY_STEP = 0.01

# Contribution colors (blue gradient only)
COLOR_EMPTY = "#1a1a3e"
COLOR_DIM = "#0d3d56"
COLOR_BRIGHT = "#00d4ff"

# (exclusive upper bound, color, opacity); counts at or above the last bound use COLOR_BRIGHT at full opacity.
CONTRIBUTION_BUCKETS = (
    (1, COLOR_EMPTY, 1.0),
    (3, COLOR_DIM, 1.0),
    (6, COLOR_BRIGHT, 0.5),
    (9, COLOR_BRIGHT, 0.8),
)
TOP_BUCKET = (COLOR_BRIGHT, 1.0)

# Placeholder tokens replaced in the SVG template.
YEARS_CODING_PLACEHOLDER = "{{YEARS_CODING}}"
REPOSITORIES_PLACEHOLDER = "{{REPOSITORIES}}"
COMMITS_PLACEHOLDER = "{{COMMITS}}"

# Markers used in the SVG template to identify the contribution grid region.
GRID_START_MARKER = "    <!-- Contribution grid: 52 weeks"
GRID_END_MARKER = "    </g>\n\n    <!-- Month labels -->"
GRID_HEADER_LINE = "    <!-- Contribution grid: 52 weeks (auto-generated) -->\n"
GRID_GROUP_OPEN = '    <g transform="translate(266, 330)">\n'

# Directory paths for the project and the template file.
SCRIPTS_DIR = os.path.dirname(os.path.dirname(__file__))
ROOT_DIR = os.path.dirname(SCRIPTS_DIR)
DEFAULT_HEADER_SVG_FILENAME = "header-complete.svg"

# This function does resolve the SVG template path.
# Relative overrides are taken from the repository root.
def resolve_header_svg_path(configured: str = "") -> str:
    configured = (configured or "").strip()
    if configured:
        if os.path.isabs(configured):
            return configured
        return os.path.join(ROOT_DIR, configured)
    return os.path.join(ROOT_DIR, DEFAULT_HEADER_SVG_FILENAME)
