import logging
import stat
from pathlib import Path
from typing import List, Union

from pymonad.either import Either, Left, Right

from radio_streams.domain.errors import DirectoryNotFound

logger = logging.getLogger(__name__)

PLAYLIST_EXTENSION = ".m3u"


def _is_playlist(entry: Path) -> bool:
    if entry.name.startswith(".") or entry.suffix.lower() != PLAYLIST_EXTENSION:
        return False
    try:
        return stat.S_ISREG(entry.stat().st_mode)
    except OSError as e:
        logger.warning(f"Skipping '{entry.name}': {e}")
        return False


def scan_directory(directory: Union[str, Path]) -> Either[DirectoryNotFound, List[Path]]:
    """
    Lists the playlist files of a directory.

    Hidden entries are skipped and the extension match is case-insensitive.
    Entries that cannot be inspected are logged and skipped.

    Args:
        directory: The directory holding the playlist files.

    Returns:
        Either: A Right(paths sorted by file name) or a Left(DirectoryNotFound).
    """
    dir_path = Path(directory)
    try:
        if not stat.S_ISDIR(dir_path.stat().st_mode):
            logger.error(f"Streams directory '{dir_path}' is not a directory.")
            return Left(DirectoryNotFound(str(dir_path)))
        entries = list(dir_path.iterdir())
    except FileNotFoundError:
        logger.error(f"Streams directory '{dir_path}' not found.")
        return Left(DirectoryNotFound(str(dir_path)))
    except OSError as e:
        logger.error(f"Cannot list streams directory '{dir_path}': {e}")
        return Left(DirectoryNotFound(str(dir_path)))

    playlists = sorted((entry for entry in entries if _is_playlist(entry)), key=lambda p: p.name)
    logger.info(f"Found {len(playlists)} playlist file(s) in '{dir_path}'.")
    return Right(playlists)
