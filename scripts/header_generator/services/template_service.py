#------------------------------------------------------------
#                     template_service.py
#       Provides helpers to read, write, and splice the
#                   header SVG template.
#
# Required template structure:
#   - a line starting with GRID_START_MARKER
#   - GRID_END_MARKER somewhere after it
# Everything between the two is regenerated on every run.

import os
import stat
import sys
import tempfile
from ..config import (
    COMMITS_PLACEHOLDER,
    GRID_END_MARKER,
    GRID_GROUP_OPEN,
    GRID_HEADER_LINE,
    GRID_START_MARKER,
    REPOSITORIES_PLACEHOLDER,
    YEARS_CODING_PLACEHOLDER,
)
from ..errors import FileFormatError, FileIOError
from ..models import HeaderStats

MISSING_GRID_MARKERS_MESSAGE = "Could not find contribution grid markers in SVG template"
MISSING_PLACEHOLDER_WARNING_TEMPLATE = "WARNING: placeholder not found: {placeholder!r}"
READ_ERROR_TEMPLATE = "Could not read SVG template {path!r}: {error}"
WRITE_ERROR_TEMPLATE = "Could not write SVG template {path!r}: {error}"
TEMP_FILE_SUFFIX = ".tmp"

# This function does replace every occurrence of the stat placeholders.
# Placeholders that are absent only produce a warning.
def replace_placeholders(content: str, stats: HeaderStats) -> str:
    replacements = (
        (YEARS_CODING_PLACEHOLDER, stats.years_display),
        (REPOSITORIES_PLACEHOLDER, stats.repositories_display),
        (COMMITS_PLACEHOLDER, stats.commits_display),
    )
    for placeholder, value in replacements:
        if placeholder not in content:
            print(MISSING_PLACEHOLDER_WARNING_TEMPLATE.format(placeholder=placeholder), file=sys.stderr)
            continue
        content = content.replace(placeholder, value)
    return content

# This function does regenerate the marker-delimited contribution grid.
# The start marker line is replaced by GRID_HEADER_LINE; the end marker is kept as is.
def replace_grid_section(content: str, grid_markup: str) -> str:
    grid_start = content.find(GRID_START_MARKER)
    grid_end = content.find(GRID_END_MARKER, grid_start) if grid_start >= 0 else -1
    if grid_start < 0 or grid_end < 0:
        raise FileFormatError(MISSING_GRID_MARKERS_MESSAGE)

    before_grid = content[:grid_start]
    after_grid = content[grid_end + len(GRID_END_MARKER):]
    return before_grid + GRID_HEADER_LINE + GRID_GROUP_OPEN + grid_markup + GRID_END_MARKER + after_grid

def splice_template(content: str, stats: HeaderStats, grid_markup: str) -> str:
    return replace_placeholders(replace_grid_section(content, grid_markup), stats)

# This function does load template text from the given path.
# It reads file content as UTF-8 and returns it.
def load_template(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as file_handle:
            return file_handle.read()
    except OSError as exc:
        raise FileIOError(READ_ERROR_TEMPLATE.format(path=path, error=exc)) from exc

# This function does save template text to the given path.
# Content goes to a sibling temp file that then replaces the target,
# so a failed write leaves the previous file untouched.
def save_template(path: str, content: str) -> None:
    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=os.path.dirname(os.path.abspath(path)),
            prefix=os.path.basename(path) + ".",
            suffix=TEMP_FILE_SUFFIX,
            delete=False,
        ) as file_handle:
            temp_path = file_handle.name
            file_handle.write(content)
        if os.path.exists(path):
            os.chmod(temp_path, stat.S_IMODE(os.stat(path).st_mode))
        os.replace(temp_path, path)
    except (OSError, UnicodeError) as exc:
        if temp_path and os.path.exists(temp_path):
            os.remove(temp_path)
        raise FileIOError(WRITE_ERROR_TEMPLATE.format(path=path, error=exc)) from exc
