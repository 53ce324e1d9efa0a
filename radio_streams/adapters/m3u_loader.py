import asyncio
import logging
from pathlib import Path
from typing import List, Union

from pymonad.either import Either, Left, Right
from toolz import concat

from radio_streams.adapters.directory_scanner import scan_directory
from radio_streams.adapters.m3u_parser import parse_playlist, read_playlist
from radio_streams.domain.errors import NoStreamsFound, StreamError
from radio_streams.domain.models import Stream
from radio_streams.domain.ports import StreamSource

logger = logging.getLogger(__name__)


def _load_file(path: Path) -> List[Stream]:
    """Streams of one playlist file; a failing file contributes nothing."""
    result = read_playlist(path).bind(lambda text: parse_playlist(text, path.name))
    if result.is_left():
        error, _ = result.monoid
        logger.error(f"Error parsing file {path.name}: {error.message}")
        return []
    logger.info(f"Loaded {len(result.value)} stream(s) from {path.name}.")
    return result.value


def collect_streams(directory: Path, files: List[Path]) -> Either[StreamError, List[Stream]]:
    """Concatenates the streams of already scanned playlist files."""
    streams = list(concat(_load_file(path) for path in files))
    if not streams:
        logger.error(f"No streams found in '{directory}'.")
        return Left(NoStreamsFound(str(directory)))
    return Right(streams)


def load_streams(directory: Union[str, Path]) -> Either[StreamError, List[Stream]]:
    """
    Loads every stream of every playlist file in a directory.

    Files are processed in file-name order. A file that cannot be read or
    parsed is logged and skipped; the load fails only when the directory
    cannot be listed or when no stream at all was found.

    Returns:
        Either: A Right(non-empty list of streams) or a Left(StreamError).
    """
    dir_path = Path(directory)
    logger.info(f"Loading streams from '{dir_path}'...")
    return scan_directory(dir_path).bind(lambda files: collect_streams(dir_path, files))


class M3UStreamLoader(StreamSource):
    """Stream source reading the .m3u playlists of a fixed directory."""

    def __init__(self, streams_directory: Union[str, Path]):
        self._streams_directory = Path(streams_directory)

    @property
    def streams_directory(self) -> Path:
        return self._streams_directory

    def load_streams(self) -> Either[StreamError, List[Stream]]:
        return load_streams(self._streams_directory)

    async def load_streams_async(self) -> Either[StreamError, List[Stream]]:
        """Async wrapper for load_streams(), run on a worker thread."""
        return await asyncio.to_thread(self.load_streams)
