from abc import ABC, abstractmethod
from typing import Any, List


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class InvalidArgumentError(ValueError):
    """Raised when a text operation receives None (or a non-string) input."""
    def __init__(self, argument: str, value: Any):
        super().__init__(
            f"Invalid argument '{argument}': expected str, got "
            f"{type(value).__name__}"
        )
        self.argument = argument
        self.value = value


def require_text(value: Any, argument: str = "text") -> str:
    """Return *value* unchanged if it is a string, otherwise raise InvalidArgumentError."""
    if not isinstance(value, str):
        raise InvalidArgumentError(argument, value)
    return value


class BaseSegmenter(ABC):
    """Abstract base class for text segmentation"""

    @abstractmethod
    def segment_text(self, text: str) -> List[str]:
        """Split text into an ordered list of non-empty segments"""
        pass


class BaseRomanizer(ABC):
    """Abstract base class for converting a script to Latin letters"""

    @abstractmethod
    def to_romaji(self, text: str) -> str:
        """Romanize text, passing unknown characters through unchanged"""
        pass


class BaseTransliterator(ABC):
    """Abstract base class for Latin-to-native-script approximation"""

    @abstractmethod
    def transliterate(self, text: str) -> str:
        """Approximate Latin-script text in the target script"""
        pass


class BaseTextProcessor(ABC):
    """Abstract base class for language-specific text processing"""

    @abstractmethod
    def process_text(self, text: str):
        """
        Build every derived representation of a single text value.

        Args:
            text: The source text

        Returns:
            Language-specific immutable result object
        """
        pass
