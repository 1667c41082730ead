"""Playlist document export.

This module renders a filtered playlist into a paginated PDF with an
optional genre pie chart page. Rendering is done with matplotlib.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Sequence

from core.constants import (
    EXPORT_FILE_PREFIX,
    EXPORT_LINES_PER_PAGE,
    GENRE_COLORS,
    UNKNOWN_GENRE_COLOR,
)
from core.errors import AudiaDependencyError, AudiaExportError
from core.logging_config import get_logger
from core.types import FilterCriteria, GenreStat, TrackPlay
from transforms.track_filtering import is_active

_LOGGER = get_logger(__name__)
_PAGE_SIZE_INCHES = (8.27, 11.69)
_LINE_STEP = 0.022
_UNSAFE_FILE_CHARACTERS = re.compile(r"[^A-Za-z0-9_-]+")


def export_playlist_pdf(
    view: Sequence[TrackPlay],
    criteria: FilterCriteria,
    output_dir: Path,
    genre_stats: Sequence[GenreStat] = (),
) -> Path:
    """Write the display view as a PDF playlist report.

    Args:
        view: Display-view records in display order.
        criteria: Active criteria, used for title and subtitle.
        output_dir: Directory receiving the document.
        genre_stats: Optional chart-view distribution for a pie chart page.

    Returns:
        Path of the written PDF.

    Raises:
        AudiaExportError: If the view is empty or the file cannot be written.
        AudiaDependencyError: If matplotlib is missing.
    """
    if not view:
        raise AudiaExportError(
            "No tracks match the current filters, so there is nothing to export. "
            "Widen the station, date or hour selection and retry."
        )
    try:
        from matplotlib.backends.backend_pdf import PdfPages
        from matplotlib.figure import Figure
    except ImportError as error:
        raise AudiaDependencyError(
            "Playlist export requires matplotlib. Install matplotlib to export PDF reports."
        ) from error
    output_dir.mkdir(parents=True, exist_ok=True)
    document_path = output_dir / build_file_name(criteria)
    lines = [format_track_line(track) for track in view]
    try:
        with PdfPages(document_path) as pdf:
            for page_index, start in enumerate(range(0, len(lines), EXPORT_LINES_PER_PAGE)):
                figure = Figure(figsize=_PAGE_SIZE_INCHES)
                page_lines = lines[start : start + EXPORT_LINES_PER_PAGE]
                _draw_text_page(figure, page_lines, criteria, first_page=page_index == 0)
                pdf.savefig(figure)
            if genre_stats:
                figure = Figure(figsize=_PAGE_SIZE_INCHES)
                _draw_genre_chart(figure, genre_stats)
                pdf.savefig(figure)
    except OSError as error:
        raise AudiaExportError(
            f"Failed to write playlist report at {document_path}: {error}. "
            "Check the output directory permissions."
        ) from error
    _LOGGER.info(
        "playlist_exported",
        path=str(document_path),
        track_count=len(view),
        genre_slices=len(genre_stats),
    )
    return document_path


def build_title(criteria: FilterCriteria) -> str:
    station = criteria.station if is_active(criteria.station) else "All stations"
    return f"PLAYLIST - {station}"


def build_subtitle(criteria: FilterCriteria) -> str:
    date = criteria.date if is_active(criteria.date) else "All dates"
    hour = f"{criteria.hour_bucket}:00" if is_active(criteria.hour_bucket) else "Whole day"
    return f"Date: {date} | Hour: {hour}"


def build_file_name(criteria: FilterCriteria) -> str:
    """Build a file-system safe report name from the criteria."""
    station = criteria.station if is_active(criteria.station) else "all-stations"
    date = criteria.date if is_active(criteria.date) else "all-dates"
    parts = [EXPORT_FILE_PREFIX, station, date]
    if is_active(criteria.hour_bucket):
        parts.append(f"{criteria.hour_bucket}h")
    safe_parts = [_UNSAFE_FILE_CHARACTERS.sub("_", part).strip("_") for part in parts]
    return "_".join(safe_parts) + ".pdf"


def format_track_line(track: TrackPlay) -> str:
    return f"{track.play_time} - {track.artist} - {track.title} ({track.genre})"


def _draw_text_page(
    figure: Any,
    lines: Sequence[str],
    criteria: FilterCriteria,
    first_page: bool,
) -> None:
    y_position = 0.95
    if first_page:
        figure.text(0.08, y_position, build_title(criteria), fontsize=18, weight="bold")
        figure.text(0.08, y_position - 0.03, build_subtitle(criteria), fontsize=10)
        y_position -= 0.07
    for line in lines:
        figure.text(0.08, y_position, line, fontsize=10)
        y_position -= _LINE_STEP


def _draw_genre_chart(figure: Any, genre_stats: Sequence[GenreStat]) -> None:
    axis = figure.add_subplot(1, 1, 1)
    axis.pie(
        [stat.count for stat in genre_stats],
        labels=[f"{stat.name} ({stat.percentage}%)" for stat in genre_stats],
        colors=[GENRE_COLORS.get(stat.name, UNKNOWN_GENRE_COLOR) for stat in genre_stats],
        startangle=90,
        wedgeprops={"width": 0.4},
    )
    axis.set_title("Genres")
    axis.axis("equal")
