from .directory_scanner import scan_directory
from .m3u_loader import M3UStreamLoader, collect_streams, load_streams
from .m3u_parser import parse_playlist, read_playlist
