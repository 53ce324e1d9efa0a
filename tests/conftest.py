import pytest

from radio_streams.i18n import set_lang


@pytest.fixture
def valid_playlist():
    """A playlist with two well-formed entries."""
    return """#EXTM3U
#EXTINF:-1,Example Radio
http://example.com/stream
#EXTINF:-1,Jazz FM
https://jazz.example.org/live.mp3
"""


@pytest.fixture(autouse=True)
def english_messages():
    """Keeps user-facing messages in English whatever the host locale."""
    set_lang("en")
    yield
    set_lang("en")


@pytest.fixture
def write_playlist(tmp_path):
    """Writes a playlist file into tmp_path and returns its path."""

    def _write(name: str, contents: str):
        path = tmp_path / name
        path.write_text(contents, encoding="utf-8")
        return path

    return _write
