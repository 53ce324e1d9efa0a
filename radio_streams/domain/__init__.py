from .errors import (
    AppError,
    ConfigError,
    DirectoryNotFound,
    FileReadFailed,
    InvalidFormat,
    NoStreamsFound,
    StreamError,
)
from .models import Stream, is_absolute_uri
from .ports import StreamSource
