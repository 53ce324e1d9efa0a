from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class AppError:
    """Base class for application errors."""
    message: str


@dataclass(frozen=True)
class ConfigError(AppError):
    """Error while reading the configuration file."""
    pass


@dataclass(frozen=True)
class StreamError(ABC):
    """Base class for errors raised while loading the stream catalog."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable description of the error."""


@dataclass(frozen=True)
class DirectoryNotFound(StreamError):
    """The streams directory does not exist or cannot be listed."""
    path: str

    @property
    def message(self) -> str:
        return f"Directory not found at path: {self.path}"


@dataclass(frozen=True)
class FileReadFailed(StreamError):
    """A playlist file could not be opened or decoded."""
    path: str
    cause: Exception

    @property
    def message(self) -> str:
        return f"Failed to read file at {self.path}: {self.cause}"


@dataclass(frozen=True)
class InvalidFormat(StreamError):
    """A playlist file is not a valid extended M3U document."""
    label: str
    reason: str

    @property
    def message(self) -> str:
        return f"Invalid format in {self.label}: {self.reason}"


@dataclass(frozen=True)
class NoStreamsFound(StreamError):
    """Loading produced no stream at all."""
    scope: str

    @property
    def message(self) -> str:
        return f"No streams found in: {self.scope}"
