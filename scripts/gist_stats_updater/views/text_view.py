#------------------------------------------------------------
#                        text_view.py
#              Renders fixed-width language lines
#                 with proportional progress bars.

import math
from typing import List, Optional
from ..config import (
    DURATION_WIDTH,
    EMPTY_STATS_MESSAGE,
    LANGUAGE_NAME_WIDTH,
    NO_STATS_MESSAGE,
    TOP_LANGUAGES_SHOWN,
)
from ..models import LanguageStat, ProgressStyle, StatsSnapshot

HOURS_TEMPLATE = "{hours} hrs"
MINUTES_TEMPLATE = "{minutes} mins"
ZERO_DURATION = "0 mins"
LANGUAGE_LINE_TEMPLATE = "{name} {duration} {bar}  {percent:.1f}%"

# This function does format a second count as hours and minutes.
# Leftover seconds are dropped; a zero duration reads "0 mins".
def format_duration(seconds: int) -> str:
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    parts = []
    if hours:
        parts.append(HOURS_TEMPLATE.format(hours=hours))
    if minutes:
        parts.append(MINUTES_TEMPLATE.format(minutes=minutes))
    return " ".join(parts) or ZERO_DURATION

# This function does draw a fixed-width bar for a percentage.
# Filled blocks are rounded half up and clamped to the bar width.
def create_progress_bar(percentage: float, style: ProgressStyle = ProgressStyle.DEFAULT) -> str:
    glyphs = style.glyphs
    filled = int(math.floor(percentage / 100 * glyphs.blocks + 0.5))
    filled = max(0, min(glyphs.blocks, filled))
    return glyphs.filled * filled + glyphs.empty * (glyphs.blocks - filled)

# This function does compute each language's share of total time.
# The denominator covers every language, not only the rendered ones.
def calculate_percentages(snapshot: StatsSnapshot) -> List[float]:
    total_seconds = snapshot.total_seconds
    if total_seconds == 0:
        return [0.0 for _ in snapshot.languages]
    return [(language.total_seconds / total_seconds) * 100 for language in snapshot.languages]

def render_language_line(language: LanguageStat, percentage: float, style: ProgressStyle) -> str:
    return LANGUAGE_LINE_TEMPLATE.format(
        name=language.name[:LANGUAGE_NAME_WIDTH].ljust(LANGUAGE_NAME_WIDTH),
        duration=format_duration(language.total_seconds).ljust(DURATION_WIDTH),
        bar=create_progress_bar(percentage, style),
        percent=percentage,
    )

# This function does render the gist body for a stats snapshot.
# It shows the top languages in API order or a placeholder message.
# An empty snapshot gets its own message; an empty PATCH would delete the file.
def render_stats(snapshot: Optional[StatsSnapshot], style: ProgressStyle = ProgressStyle.DEFAULT) -> str:
    if snapshot is None:
        return NO_STATS_MESSAGE
    if not snapshot.languages:
        return EMPTY_STATS_MESSAGE

    percentages = calculate_percentages(snapshot)
    rows = zip(snapshot.languages[:TOP_LANGUAGES_SHOWN], percentages)
    return "\n".join(render_language_line(language, percentage, style) for language, percentage in rows)
