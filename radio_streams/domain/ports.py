from abc import ABC, abstractmethod
from typing import List

from pymonad.either import Either

from .errors import StreamError
from .models import Stream


class StreamSource(ABC):
    """
    Port defining the contract for a provider of radio streams.
    """

    @abstractmethod
    def load_streams(self) -> Either[StreamError, List[Stream]]:
        """
        Loads the full stream catalog.

        Returns:
            Either: A Right(list of streams) or a Left(StreamError).
        """
        pass

    @abstractmethod
    async def load_streams_async(self) -> Either[StreamError, List[Stream]]:
        """Same as load_streams, resolved once from a worker thread."""
        pass
