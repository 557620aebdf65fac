import os
import stat

import pytest

from conftest import TEMPLATE
from header_generator.config import GRID_END_MARKER, GRID_GROUP_OPEN, GRID_HEADER_LINE
from header_generator.errors import FileFormatError, FileIOError
from header_generator.models import HeaderStats
from header_generator.services import template_service
from header_generator.services.template_service import (
    load_template,
    replace_grid_section,
    replace_placeholders,
    save_template,
    splice_template,
)

STATS = HeaderStats(years_active=6, repository_count=42, commit_label="4k")
GRID = '      <rect class="contrib-cell"/>\n'


def test_placeholders_replaced_everywhere():
    content = "{{YEARS_CODING}} {{REPOSITORIES}} {{COMMITS}} | {{YEARS_CODING}} {{REPOSITORIES}} {{COMMITS}}"
    assert replace_placeholders(content, STATS) == "6+ 42+ 4k+ | 6+ 42+ 4k+"


def test_missing_placeholder_only_warns(capsys):
    assert replace_placeholders("{{COMMITS}}", STATS) == "4k+"
    err = capsys.readouterr().err
    assert "{{YEARS_CODING}}" in err
    assert "{{REPOSITORIES}}" in err
    assert "{{COMMITS}}" not in err


def test_grid_region_is_regenerated_between_markers():
    result = replace_grid_section(TEMPLATE, GRID)

    assert 'class="old"' not in result
    assert GRID_HEADER_LINE + GRID_GROUP_OPEN + GRID + GRID_END_MARKER in result
    assert result.count(GRID_END_MARKER) == 1
    assert result.startswith("<svg>\n    <text>{{YEARS_CODING}}</text>")
    assert result.endswith("    <!-- Month labels -->\n    <g></g>\n</svg>\n")


def test_grid_replacement_can_run_again_on_its_own_output():
    once = replace_grid_section(TEMPLATE, GRID)
    assert replace_grid_section(once, GRID) == once


@pytest.mark.parametrize(
    "content",
    [
        TEMPLATE.replace("<!-- Contribution grid", "<!-- grid"),
        TEMPLATE.replace("<!-- Month labels -->", "<!-- labels -->"),
        # end marker only appears before the start marker
        "    </g>\n\n    <!-- Month labels -->\n    <!-- Contribution grid: 52 weeks -->\n",
    ],
)
def test_missing_grid_marker_raises(content):
    with pytest.raises(FileFormatError):
        replace_grid_section(content, GRID)


def test_splice_template_fills_stats_and_grid():
    result = splice_template(TEMPLATE, STATS, GRID)
    assert "<text>6+</text>" in result
    assert "<text>42+</text>" in result
    assert "<text>4k+</text>" in result
    assert GRID in result


def test_load_and_save_round_trip(template_file):
    save_template(str(template_file), "<svg/>")
    assert load_template(str(template_file)) == "<svg/>"


def test_load_missing_file_raises_file_io_error(tmp_path):
    with pytest.raises(FileIOError):
        load_template(str(tmp_path / "missing.svg"))


def test_save_into_missing_directory_raises_file_io_error(tmp_path):
    with pytest.raises(FileIOError):
        save_template(str(tmp_path / "nope" / "header.svg"), "<svg/>")


def test_failed_replace_keeps_original_file(template_file, monkeypatch):
    def fail_replace(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(template_service.os, "replace", fail_replace)

    with pytest.raises(FileIOError):
        save_template(str(template_file), "<svg>half")

    assert template_file.read_text(encoding="utf-8") == TEMPLATE
    assert [path.name for path in template_file.parent.iterdir()] == [template_file.name]


def test_failed_write_keeps_original_file(template_file):
    # lone surrogates cannot be encoded as UTF-8
    with pytest.raises(FileIOError):
        save_template(str(template_file), "<svg>\n" + "x" * 5000 + "\udc80")

    assert template_file.read_text(encoding="utf-8") == TEMPLATE
    assert [path.name for path in template_file.parent.iterdir()] == [template_file.name]


def test_save_keeps_file_permissions(template_file):
    os.chmod(template_file, 0o644)
    save_template(str(template_file), "<svg/>")
    assert stat.S_IMODE(os.stat(template_file).st_mode) == 0o644
