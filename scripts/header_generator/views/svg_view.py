#------------------------------------------------------------
#                        svg_view.py
#       Renders the contribution grid as SVG rect cells.

from typing import List, Tuple
from ..config import (
    ANIMATION_DELAY_START,
    ANIMATION_DELAY_STEP,
    CELL_RADIUS,
    CELL_SIZE,
    CELL_X_STEP,
    CELL_Y_STEP,
    CONTRIBUTION_BUCKETS,
    GRID_WEEKS,
    TOP_BUCKET,
)
from ..models import ContributionCalendar, RenderedCell

CELL_TEMPLATE = (
    '      <rect class="contrib-cell" x="{x}" y="{y}" width="{size}" height="{size}" rx="{radius}" '
    'fill="{fill}" opacity="{opacity:g}" style="animation-delay: {delay:.2f}s"/>\n'
)

# This function does map a daily contribution count to a color bucket.
# Buckets are checked lowest first and the first match wins.
def contribution_style(count: int) -> Tuple[str, float]:
    for upper_bound, color, opacity in CONTRIBUTION_BUCKETS:
        if count < upper_bound:
            return color, opacity
    return TOP_BUCKET

# This function does lay out one cell per day for the trailing 52 weeks.
# Weeks go oldest first; the animation delay keeps counting across weeks.
def build_cells(calendar: ContributionCalendar) -> List[RenderedCell]:
    cells: List[RenderedCell] = []
    days_rendered = 0
    for week_index, week in enumerate(calendar.weeks[-GRID_WEEKS:]):
        x = week_index * CELL_X_STEP
        for day in week.contribution_days:
            fill, opacity = contribution_style(day.contribution_count)
            cells.append(
                RenderedCell(
                    x=x,
                    y=day.weekday * CELL_Y_STEP,
                    fill=fill,
                    opacity=opacity,
                    animation_delay=ANIMATION_DELAY_START + ANIMATION_DELAY_STEP * days_rendered,
                )
            )
            days_rendered += 1
    return cells

def render_cell(cell: RenderedCell) -> str:
    return CELL_TEMPLATE.format(
        x=cell.x,
        y=cell.y,
        size=CELL_SIZE,
        radius=CELL_RADIUS,
        fill=cell.fill,
        opacity=cell.opacity,
        delay=cell.animation_delay,
    )

def render_contribution_grid(calendar: ContributionCalendar) -> str:
    return "".join(render_cell(cell) for cell in build_cells(calendar))
