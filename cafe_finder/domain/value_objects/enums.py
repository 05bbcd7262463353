"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class GeolocationStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    DENIED = "denied"


class SearchStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"
    STALE = "stale"


class MarkerKind(str, Enum):
    USER = "user"
    SEARCH = "search"
    FAVORITE = "favorite"
