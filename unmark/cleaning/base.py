from abc import ABC, abstractmethod


class BaseCleaner(ABC):
    """Contract for all watermark cleaners."""

    @abstractmethod
    def clean(self, text: str) -> str:
        """Return *text* with watermark characters removed or normalized.

        Input is expected to be a string already; callers validate it.
        """
