"""ISD archive package - holds the archive client and its errors."""

from .archive import ISDArchive
from .errors import ArchiveError, DecodeError, NetworkError, StationNotFoundError

__all__ = [
    "ArchiveError",
    "DecodeError",
    "ISDArchive",
    "NetworkError",
    "StationNotFoundError",
]
