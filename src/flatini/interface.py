"""IniDocument is the entry point of flatini: it reads ini content once and answers
section and key lookups afterwards."""

from typing import Iterable, Iterator, Self, TextIO
import io
import copy
from pathlib import Path
import warnings
import contextlib
from .exceptions_warnings import (
    ExtractionError,
    InvalidLineWarning,
    UnclosedSectionWarning,
    UnreadableSourceWarning,
)
from .entities import (
    BlankLine,
    Comment,
    KeyValuePair,
    LineEntity,
    Pair,
    SectionName,
    UnclosedSectionName,
    UnmatchedLine,
)
from .args import Parameters
from .globals import DEFAULT_SECTION_NAME, WHITESPACE, ExportStructure
from .utils import decode_file, iter_lines


class IniDocument:
    """A parsed ini. Pairs are stored per section in the order they were read, and
    every key is additionally reachable document-wide through get_pair and get
    (last one read wins). The document can't be changed after construction.
    """

    def __init__(
        self,
        source: Iterable[str] = (),
        parameters: Parameters | None = None,
        **kwargs,
    ) -> None:
        """
        Args:
            source (Iterable[str], optional): The lines to read, e.g. a list of
                strings or an open text file. If reading it fails, the document is
                empty. Defaults to () (empty document).
            parameters (Parameters | None, optional): Parameters for reading and
                writing. Parameters can also be passed as kwargs. Defaults to None
                (default Parameters).
            **kwargs (optional): Parameters as kwargs. See doc of Parameters for details.
        """
        # own copy, so changing the caller's Parameters can't alter this document
        self._parameters = (
            Parameters() if parameters is None else copy.copy(parameters)
        )
        if kwargs:
            self._parameters.update(**kwargs)

        self._sections: dict[str, list[KeyValuePair]] = {}
        # key -> (section name, position inside that section's pairs)
        self._key_index: dict[str, tuple[str, int]] = {}
        self._lines: tuple[LineEntity, ...] = ()

        _ReadIni(target=self, source=source)

    # ----------
    # construction
    # ----------

    @classmethod
    def from_string(
        cls, content: str, parameters: Parameters | None = None, **kwargs
    ) -> Self:
        """Read ini content from a string. Lines are delimited by "\\n"."""
        return cls(io.StringIO(content), parameters, **kwargs)

    @classmethod
    def from_stream(
        cls, stream: TextIO, parameters: Parameters | None = None, **kwargs
    ) -> Self:
        """Read ini content from an open text stream. If the stream fails while
        being read, the document is empty.
        """
        return cls(stream, parameters, **kwargs)

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        encoding: str | None = None,
        parameters: Parameters | None = None,
        **kwargs,
    ) -> Self:
        """Read an ini file. If the file can't be opened or decoded, the document
        is empty.

        Args:
            path (str | Path): Path to the ini file.
            encoding (str | None, optional): Encoding of the file. If None, the
                encoding is detected. Defaults to None.
            parameters (Parameters | None, optional): Parameters for reading and
                writing. Defaults to None.
            **kwargs (optional): Parameters as kwargs.

        Returns:
            Self: The document.
        """
        try:
            content = decode_file(path, encoding)
        except (OSError, ValueError) as e:
            warnings.warn(
                f"{path} could not be read ({e}), the document is empty.",
                UnreadableSourceWarning,
            )
            content = ""
        return cls.from_string(content, parameters, **kwargs)

    # ----------
    # queries
    # ----------

    @property
    def parameters(self) -> Parameters:
        """A copy of the Parameters the document was read and is written with."""
        return copy.copy(self._parameters)

    @property
    def lines(self) -> tuple[LineEntity, ...]:
        """What every line that was read got classified as, in order."""
        return self._lines

    def get_section(self, name: str = DEFAULT_SECTION_NAME) -> list[KeyValuePair]:
        """Get the pairs of a section in the order they were read.

        Args:
            name (str, optional): The section name. Defaults to "" (pairs before
                the first section header or after an empty header "[]").

        Returns:
            list[KeyValuePair]: The pairs, or an empty list if the section was
                never read.
        """
        return list(self._sections.get(name, ()))

    def get_pair(self, key: str) -> KeyValuePair:
        """Get the last pair read with this key, regardless of its section.

        Returns:
            KeyValuePair: The pair, or KeyValuePair() (empty key and value) if no
                pair has this key.
        """
        if (ref := self._key_index.get(key)) is None:
            return KeyValuePair()
        section, position = ref
        return self._sections[section][position]

    def get(self, key: str, default: str = "") -> str:
        """Get the value of the last pair read with this key.

        Args:
            key (str): The key.
            default (str, optional): Returned if no pair has this key.
                Defaults to "".
        """
        if key not in self._key_index:
            return default
        return self.get_pair(key).value

    def sections(self) -> list[str]:
        """Section names in the order they first appeared."""
        return list(self._sections)

    def has_section(self, name: str) -> bool:
        return name in self._sections

    def keys(self) -> list[str]:
        """Every distinct key, in the order it first appeared."""
        return list(self._key_index)

    def has_key(self, key: str) -> bool:
        return key in self._key_index

    def __contains__(self, key: object) -> bool:
        return key in self._key_index

    def __iter__(self) -> Iterator[tuple[str, KeyValuePair]]:
        for section, pairs in self._sections.items():
            for pair in pairs:
                yield section, pair

    def __len__(self) -> int:
        return sum(len(pairs) for pairs in self._sections.values())

    def __repr__(self) -> str:
        return (
            f"IniDocument(sections={len(self._sections)}, pairs={len(self)}, "
            f"lines={len(self._lines)})"
        )

    def __str__(self) -> str:
        return self.to_string()

    # ----------
    # export
    # ----------

    def to_string(
        self, structure: ExportStructure = "canonical", sort_sections: bool = False
    ) -> str:
        """Convert the document into an ini string.

        Args:
            structure ("canonical" | "lines", optional): If "canonical", write every
                section header followed by its pairs and a blank line. If "lines",
                rewrite the lines that were read one by one (comments, blank lines,
                headers and pairs; unusable lines are dropped).
                Defaults to "canonical".
            sort_sections (bool, optional): Whether to write sections sorted by name
                instead of in reading order. Only used for "canonical".
                Defaults to False.

        Returns:
            str: The ini string, every line terminated by "\\n".
        """
        match structure:
            case "canonical":
                out = self._canonical_lines(sort_sections)
            case "lines":
                out = self._original_lines()
            case _:
                raise ValueError(
                    f"structure must be 'canonical' or 'lines', got {structure!r}."
                )
        return "".join(f"{line}\n" for line in out)

    def export(
        self,
        path: str | Path,
        structure: ExportStructure = "canonical",
        sort_sections: bool = False,
        encoding: str = "utf-8",
    ) -> None:
        """Export the document to a file. Arguments as in to_string, plus the path
        to write to and the encoding to write with."""
        Path(path).write_text(
            self.to_string(structure, sort_sections), encoding=encoding
        )

    def _canonical_lines(self, sort_sections: bool) -> Iterator[str]:
        delimiter = self._parameters.option_delimiter
        names = sorted(self._sections) if sort_sections else list(self._sections)
        first = True
        for name in names:
            pairs = self._sections[name]
            if name == DEFAULT_SECTION_NAME:
                if not pairs:
                    continue
                # a header is only needed to switch back to the default section
                if not first:
                    yield SectionName(name).to_string("", delimiter)
            else:
                yield SectionName(name).to_string("", delimiter)
            first = False
            for pair in pairs:
                yield pair.to_string(delimiter)
            # blank line closing the section
            yield ""

    def _original_lines(self) -> Iterator[str]:
        comment_prefix = self._parameters.write_comment_prefix
        delimiter = self._parameters.option_delimiter
        for entity in self._lines:
            if (line := entity.to_string(comment_prefix, delimiter)) is not None:
                yield line


class _ReadIni:

    def __init__(self, target: IniDocument, source: Iterable[str]) -> None:
        """Read the lines of source into target."""
        self.target = target
        self.parameters = target._parameters

        self.current_section: str = DEFAULT_SECTION_NAME
        self.current_line_index: int = 0
        self.current_line_content: str = ""

        try:
            source_lines = list(iter_lines(source))
        except (OSError, UnicodeDecodeError) as e:
            warnings.warn(
                f"Source could not be read ({e}), the document is empty.",
                UnreadableSourceWarning,
            )
            source_lines = []

        lines: list[LineEntity] = []

        for self.current_line_index, line in enumerate(source_lines, start=1):
            self.current_line_content = line.strip(WHITESPACE)

            if blank := self._extract_blank():
                entity = blank

            elif comment := self._extract_comment():
                entity = comment

            elif section_name := self._extract_section_name():
                entity = self._handle_section_name(section_name)

            elif unclosed := self._extract_unclosed_section_name():
                entity = self._handle_unclosed_section_name(unclosed)

            elif pair := self._extract_pair():
                entity = self._handle_pair(pair)

            else:
                entity = self._handle_unmatched()

            lines.append(entity)

        target._lines = tuple(lines)

    def _extract_blank(self) -> BlankLine | None:
        with contextlib.suppress(ExtractionError):
            return BlankLine.from_string(self.current_line_content)
        return None

    def _extract_comment(self) -> Comment | None:
        with contextlib.suppress(ExtractionError):
            return Comment.from_string(
                self.current_line_content, self.parameters.comment_prefixes
            )
        return None

    def _extract_section_name(self) -> SectionName | None:
        with contextlib.suppress(ExtractionError):
            return SectionName.from_string(self.current_line_content)
        return None

    def _extract_unclosed_section_name(self) -> UnclosedSectionName | None:
        with contextlib.suppress(ExtractionError):
            return UnclosedSectionName.from_string(self.current_line_content)
        return None

    def _extract_pair(self) -> Pair | None:
        with contextlib.suppress(ExtractionError):
            return Pair.from_string(
                self.current_line_content, self.parameters.option_delimiter
            )
        return None

    def _handle_section_name(self, section_name: SectionName) -> SectionName:
        """Switch to the section (creating it if it's new)."""
        self.current_section = section_name.name
        self.target._sections.setdefault(self.current_section, [])
        return section_name

    def _handle_unclosed_section_name(
        self, unclosed: UnclosedSectionName
    ) -> UnclosedSectionName:
        warnings.warn(
            f"Line {self.current_line_index} is being ignored because its section "
            f"name is missing a closing bracket (staying in section "
            f"'{self.current_section}').",
            UnclosedSectionWarning,
        )
        return unclosed

    def _handle_pair(self, pair: Pair) -> Pair:
        """Add the pair to the current section and point its key at it."""
        pairs = self.target._sections.setdefault(self.current_section, [])
        pairs.append(pair.pair)
        self.target._key_index[pair.pair.key] = (self.current_section, len(pairs) - 1)
        return pair

    def _handle_unmatched(self) -> UnmatchedLine:
        warnings.warn(
            f"Line {self.current_line_index} is being ignored because it's invalid.",
            InvalidLineWarning,
        )
        return UnmatchedLine(self.current_line_content)
