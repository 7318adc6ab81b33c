"""Ini entities. Every physical line of an ini is exactly one of: a blank line, a
comment, a section name, an unclosed section name, a key-value pair or an
unmatched line."""

from typing import Self, TypeAlias
from dataclasses import dataclass, field
from .exceptions_warnings import ExtractionError
from .globals import SECTION_OPEN, SECTION_CLOSE, WHITESPACE


@dataclass(frozen=True, slots=True)
class KeyValuePair:
    """A key and its value, both without surrounding whitespace.

    KeyValuePair() (empty key and empty value) is returned by lookups that found
    nothing.
    """

    key: str = ""
    value: str = ""

    def __bool__(self) -> bool:
        return bool(self.key or self.value)

    def to_string(self, delimiter: str) -> str:
        """Convert the pair into an ini string.

        Args:
            delimiter (str): The delimiter separating key and value.

        Returns:
            str: The ini string.
        """
        return f"{self.key} {delimiter} {self.value}"


@dataclass(frozen=True, slots=True)
class BlankLine:
    """A line that is empty after trimming."""

    @classmethod
    def from_string(cls, string: str) -> Self:
        if string:
            raise ExtractionError("Line is not blank.")
        return cls()

    def to_string(self, comment_prefix: str, delimiter: str) -> str | None:
        return ""


@dataclass(frozen=True, slots=True)
class Comment:
    """Comment object holding a comment's content (without prefix)."""

    content: str

    @classmethod
    def from_string(cls, string: str, prefixes: tuple[str, ...]) -> Self:
        """Create a Comment from a trimmed line.

        Args:
            string (str): The line, including the prefix.
            prefixes (tuple[str, ...]): Characters that may start a comment.

        Returns:
            Self: The comment with its prefix and surrounding whitespace removed.
        """
        if string and string[0] in prefixes:
            return cls(content=string[1:].strip(WHITESPACE))
        raise ExtractionError("Comment could not be extracted.")

    def to_string(self, comment_prefix: str, delimiter: str) -> str | None:
        return f"{comment_prefix} {self.content}" if self.content else comment_prefix


@dataclass(frozen=True, slots=True)
class SectionName:
    """A section header. An empty name resets to the default section."""

    name: str

    @classmethod
    def from_string(cls, string: str) -> Self:
        """Create a SectionName from a trimmed line.

        The name is everything strictly between the leading "[" and the first "]".
        Anything after that bracket is dropped.
        """
        if string.startswith(SECTION_OPEN):
            end = string.find(SECTION_CLOSE)
            if end != -1:
                return cls(name=string[len(SECTION_OPEN) : end])
        raise ExtractionError(f"Could not extract section name from {string}")

    def to_string(self, comment_prefix: str, delimiter: str) -> str | None:
        return f"{SECTION_OPEN}{self.name}{SECTION_CLOSE}"


@dataclass(frozen=True, slots=True)
class UnclosedSectionName:
    """A line opening a section header without ever closing it. It leaves the
    current section untouched."""

    text: str

    @classmethod
    def from_string(cls, string: str) -> Self:
        if string.startswith(SECTION_OPEN) and SECTION_CLOSE not in string:
            return cls(text=string)
        raise ExtractionError("Line is not an unclosed section name.")

    def to_string(self, comment_prefix: str, delimiter: str) -> str | None:
        return None


@dataclass(frozen=True, slots=True)
class Pair:
    """A key-value line. Holds the very KeyValuePair stored in the document."""

    pair: KeyValuePair = field(default_factory=KeyValuePair)

    @classmethod
    def from_string(cls, string: str, delimiter: str) -> Self:
        """Create a Pair from a trimmed line by splitting at the first delimiter.

        Args:
            string (str): The line.
            delimiter (str): The delimiter separating key and value.

        Returns:
            Self: The extracted pair.
        """
        key, found, value = string.partition(delimiter)
        if not found:
            raise ExtractionError("Pair could not be extracted.")
        return cls(
            KeyValuePair(key=key.rstrip(WHITESPACE), value=value.lstrip(WHITESPACE))
        )

    def to_string(self, comment_prefix: str, delimiter: str) -> str | None:
        return self.pair.to_string(delimiter)


@dataclass(frozen=True, slots=True)
class UnmatchedLine:
    """A line matching no other entity. Carries no data."""

    text: str

    def to_string(self, comment_prefix: str, delimiter: str) -> str | None:
        return None


LineEntity: TypeAlias = (
    BlankLine | Comment | SectionName | UnclosedSectionName | Pair | UnmatchedLine
)
"""What a single physical line was classified as."""
