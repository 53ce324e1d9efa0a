"""Loads a catalog of internet radio stations from extended M3U playlists."""

from radio_streams.domain import (
    DirectoryNotFound,
    FileReadFailed,
    InvalidFormat,
    NoStreamsFound,
    Stream,
    StreamError,
    StreamSource,
)
from radio_streams.adapters import M3UStreamLoader, load_streams, parse_playlist, scan_directory

__version__ = "0.1.0"
