import re
from dataclasses import asdict, dataclass

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")


def is_absolute_uri(text: str) -> bool:
    """Returns True if `text` is a syntactically valid absolute URI."""
    if not text or any(char.isspace() for char in text):
        return False
    match = _SCHEME.match(text)
    if not match:
        return False
    return len(text) > match.end()


@dataclass(frozen=True)
class Stream:
    """An internet radio station: a display name and the URL to play."""
    name: str
    url: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Stream name must not be empty.")
        if not is_absolute_uri(self.url):
            raise ValueError(f"Stream URL '{self.url}' is not an absolute URI.")

    def to_dict(self) -> dict:
        return asdict(self)
