"""Core constants used across Audia modules.

This module centralizes feed, normalization, and aggregation constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

FEED_SHEET_ID = "1xFRBBHpmn38TiBdZcwN2556811FKkfbEEB3HmmdxT1s"
DEFAULT_FEED_URL = f"https://docs.google.com/spreadsheets/d/{FEED_SHEET_ID}/export?format=csv"
CACHE_BUST_PARAM = "cb"
DEFAULT_REFRESH_INTERVAL_SECONDS = 30.0
DEFAULT_REQUEST_TIMEOUT_SECONDS = 15.0
DEFAULT_TIMEZONE_NAME = "America/Sao_Paulo"

HEADER_ARTIST = "artista"
HEADER_TITLE = "musica"
HEADER_PLAYED_AT = "tocou_em"
HEADER_STATION = "radio"
HEADER_GENRE = "genero"

KNOWN_STATIONS = ("Metropolitana FM", "Antena 1", "Forbes Radio")
DEFAULT_STATION = "Metropolitana FM"
DEFAULT_OFFSET_STATION = "Forbes Radio"
DEFAULT_OFFSET_HOURS = 3
ISO_TIME_SEPARATOR = "T"

UNKNOWN_GENRE = "Unknown"
DEFAULT_TITLE = "Untitled"
DEFAULT_PLAY_TIME = "00:00"
DEFAULT_HOUR_BUCKET = "00"
UNORDERED_INSTANT = 0

ANY_VALUE = "any"
ALL_HOURS = "all"
HOUR_BUCKETS = tuple(f"{hour:02d}" for hour in range(24))

OTHER_GENRE = "Other"
DEFAULT_SMALL_GENRE_THRESHOLD = 3.0

DEFAULT_HISTORY_LIMIT = 10
HISTORY_PAGE_INCREMENT = 15

COVER_ART_SEARCH_URL = "https://itunes.apple.com/search"
COVER_ART_SOURCE_SIZE = "100x100"
COVER_ART_DISPLAY_SIZE = "400x400"

EXPORT_LINES_PER_PAGE = 36
EXPORT_FILE_PREFIX = "playlist"
UNKNOWN_GENRE_COLOR = "#D3D3D3"
GENRE_COLORS = {
    "Sertanejo": "#FF6B6B",
    "Pop": "#4ECDC4",
    "Rock": "#95E1D3",
    "MPB": "#F38181",
    "Funk": "#AA96DA",
    "Pagode": "#FCBAD3",
    "Rap/Hip Hop": "#A8D8EA",
    "Eletrônica": "#FFAAA6",
    "Gospel": "#FFD3B5",
    "Samba": "#FFA5BA",
    "Forró": "#FFB86F",
    "Reggae": "#5FD068",
    "Jazz": "#8E7CC3",
    UNKNOWN_GENRE: UNKNOWN_GENRE_COLOR,
}
