import logging
from pathlib import Path
from typing import List, Optional, Tuple

from pymonad.either import Either, Left, Right

from radio_streams.domain.errors import FileReadFailed, InvalidFormat
from radio_streams.domain.models import Stream, is_absolute_uri

logger = logging.getLogger(__name__)

HEADER = "#EXTM3U"
METADATA_MARKER = "#EXTINF:"


def read_playlist(path: Path) -> Either[FileReadFailed, str]:
    """Reads a playlist file as UTF-8 text. A leading BOM is dropped."""
    try:
        with open(path, "r", encoding="utf-8-sig") as file:
            return Right(file.read())
    except (OSError, UnicodeDecodeError) as e:
        return Left(FileReadFailed(str(path), e))


def _entry_name(metadata_line: str) -> Optional[str]:
    """Extracts the display name of an #EXTINF line, None when malformed."""
    _, comma, name = metadata_line.partition(",")
    if not comma:
        return None
    return name.strip() or None


def _next_entry(lines: List[str], index: int, label: str) -> Tuple[Optional[Stream], int]:
    """
    Consumes the entry whose metadata line sits at `index`.

    Returns the parsed stream (None if the entry was skipped) and the index
    where scanning resumes.
    """
    name = _entry_name(lines[index])
    if name is None:
        logger.warning(f"Skipping malformed metadata line '{lines[index]}' in {label}.")
        return None, index + 1

    url_index = index + 1
    if url_index >= len(lines):
        logger.warning(f"No URL found for stream '{name}' in {label}.")
        return None, url_index

    candidate = lines[url_index]
    if candidate.startswith(METADATA_MARKER):
        logger.warning(f"No URL found for stream '{name}' in {label}.")
        return None, url_index
    if not is_absolute_uri(candidate):
        logger.warning(f"Invalid URL '{candidate}' for stream '{name}' in {label}.")
        return None, url_index + 1

    return Stream(name=name, url=candidate), url_index + 1


def parse_playlist(contents: str, label: str) -> Either[InvalidFormat, List[Stream]]:
    """
    Parses the text of an extended M3U playlist.

    The first non-blank line must be the #EXTM3U header. Each entry is an
    #EXTINF line carrying the display name after its first comma, followed by
    the stream URL on the next non-blank line. Malformed entries are logged
    and skipped; only a missing header fails the whole file.

    Args:
        contents: The raw playlist text.
        label: Name used to identify the playlist in errors and logs.

    Returns:
        Either: A Right(list of streams, possibly empty) or a Left(InvalidFormat).
    """
    lines = [line.strip() for line in contents.split("\n")]
    lines = [line for line in lines if line]

    if not lines or lines[0] != HEADER:
        return Left(InvalidFormat(label, f"missing {HEADER} header"))

    streams = []
    index = 1
    while index < len(lines):
        if not lines[index].startswith(METADATA_MARKER):
            index += 1
            continue
        stream, index = _next_entry(lines, index, label)
        if stream is not None:
            streams.append(stream)

    if not streams:
        logger.warning(f"Playlist {label} contains no streams.")
    return Right(streams)
