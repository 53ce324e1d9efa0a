from pathlib import Path

from radio_streams.adapters.m3u_parser import parse_playlist, read_playlist
from radio_streams.domain.errors import FileReadFailed, InvalidFormat
from radio_streams.domain.models import Stream
from radio_streams.logger_config import setup_logger

# Setup logger for tests
setup_logger()


def test_parse_single_entry():
    """
    Given a minimal playlist with one entry,
    When it is parsed,
    Then exactly one stream is returned.
    """
    result = parse_playlist("#EXTM3U\n#EXTINF:-1,Example Radio\nhttp://example.com/stream\n", "radio.m3u")

    assert result.is_right()
    assert result.value == [Stream(name="Example Radio", url="http://example.com/stream")]


def test_parse_keeps_entry_order_and_trims_whitespace():
    contents = (
        "  #EXTM3U  \r\n"
        "\r\n"
        "#EXTINF:-1,  First Station  \r\n"
        "\r\n"
        "\r\n"
        "   http://first.example.com/  \r\n"
        "#EXTINF:120, Second, with comma\r\n"
        "https://second.example.com/live\r\n"
    )

    result = parse_playlist(contents, "radio.m3u")

    assert result.value == [
        Stream(name="First Station", url="http://first.example.com/"),
        Stream(name="Second, with comma", url="https://second.example.com/live"),
    ]


def test_missing_header_is_invalid_format():
    result = parse_playlist("#EXTINF:-1,Example Radio\nhttp://example.com/stream\n", "broken.m3u")

    assert result.is_left()
    error, _ = result.monoid
    assert isinstance(error, InvalidFormat)
    assert error.label == "broken.m3u"
    assert "missing #EXTM3U header" in error.message


def test_empty_contents_is_invalid_format():
    result = parse_playlist("\n   \n", "empty.m3u")

    assert result.is_left()
    error, _ = result.monoid
    assert isinstance(error, InvalidFormat)


def test_metadata_without_comma_is_skipped(caplog):
    """
    Given a metadata line without a comma followed by a valid entry,
    When the playlist is parsed,
    Then the malformed line is skipped and the next entry is still parsed.
    """
    contents = "#EXTM3U\n#EXTINF:-1\n#EXTINF:-1,Good Radio\nhttp://good.example.com/\n"

    result = parse_playlist(contents, "radio.m3u")

    assert result.value == [Stream(name="Good Radio", url="http://good.example.com/")]
    assert "Skipping malformed metadata line" in caplog.text


def test_invalid_url_skips_entry_without_failing(caplog):
    result = parse_playlist("#EXTM3U\n#EXTINF:-1,Bad\nnot a url\n", "radio.m3u")

    assert result.is_right()
    assert result.value == []
    assert "Invalid URL 'not a url' for stream 'Bad'" in caplog.text


def test_invalid_url_does_not_stop_following_entries():
    contents = (
        "#EXTM3U\n"
        "#EXTINF:-1,Bad\n"
        "not a url\n"
        "#EXTINF:-1,Good\n"
        "http://good.example.com/\n"
    )

    result = parse_playlist(contents, "radio.m3u")

    assert result.value == [Stream(name="Good", url="http://good.example.com/")]


def test_metadata_followed_by_metadata_keeps_second_entry(caplog):
    contents = "#EXTM3U\n#EXTINF:-1,Orphan\n#EXTINF:-1,Good\nhttp://good.example.com/\n"

    result = parse_playlist(contents, "radio.m3u")

    assert result.value == [Stream(name="Good", url="http://good.example.com/")]
    assert "No URL found for stream 'Orphan'" in caplog.text


def test_metadata_at_end_of_file_is_skipped(caplog):
    contents = "#EXTM3U\n#EXTINF:-1,Good\nhttp://good.example.com/\n#EXTINF:-1,Last\n\n"

    result = parse_playlist(contents, "radio.m3u")

    assert result.is_right()
    assert result.value == [Stream(name="Good", url="http://good.example.com/")]
    assert "No URL found for stream 'Last'" in caplog.text


def test_stray_lines_and_comments_are_ignored():
    contents = (
        "#EXTM3U\n"
        "# curated list\n"
        "http://stray.example.com/\n"
        "#EXTINF:-1,Example Radio\n"
        "http://example.com/stream\n"
        "some trailing text\n"
    )

    result = parse_playlist(contents, "radio.m3u")

    assert result.value == [Stream(name="Example Radio", url="http://example.com/stream")]


def test_empty_name_is_skipped():
    result = parse_playlist("#EXTM3U\n#EXTINF:-1,   \nhttp://example.com/stream\n", "radio.m3u")

    assert result.is_right()
    assert result.value == []


def test_header_only_playlist_is_empty_but_valid(caplog):
    result = parse_playlist("#EXTM3U\n", "header_only.m3u")

    assert result.is_right()
    assert result.value == []
    assert "Playlist header_only.m3u contains no streams." in caplog.text


def test_read_playlist_strips_byte_order_mark(tmp_path):
    path = tmp_path / "bom.m3u"
    path.write_bytes("\ufeff#EXTM3U\n".encode("utf-8"))

    result = read_playlist(path)

    assert result.is_right()
    assert result.value == "#EXTM3U\n"


def test_read_playlist_missing_file():
    path = Path("/non/existent/radio.m3u")

    result = read_playlist(path)

    assert result.is_left()
    error, _ = result.monoid
    assert isinstance(error, FileReadFailed)
    assert error.path == str(path)
    assert isinstance(error.cause, FileNotFoundError)


def test_read_playlist_invalid_utf8(tmp_path):
    path = tmp_path / "latin1.m3u"
    path.write_bytes("#EXTM3U\n#EXTINF:-1,Radio Café\n".encode("latin-1"))

    result = read_playlist(path)

    assert result.is_left()
    error, _ = result.monoid
    assert isinstance(error.cause, UnicodeDecodeError)
    assert "Failed to read file" in error.message


def test_only_newlines_separate_lines():
    """
    Given a station name containing a Unicode line separator,
    When the playlist is parsed,
    Then the name is kept whole.
    """
    contents = "#EXTM3U\n#EXTINF:-1,Radio Two\u2028Three\nhttp://example.com/stream\n"

    result = parse_playlist(contents, "radio.m3u")

    assert result.value == [Stream(name="Radio Two\u2028Three", url="http://example.com/stream")]
