from flatini import IniDocument, KeyValuePair, Parameters, DEFAULT_SECTION_NAME
from uuid import uuid1
from pathlib import Path


class Base:
    """Base for tests. Provides functions for creating an ini content and keeping
    track of the pairs every section should end up with."""

    def __init__(self, write_parameters: Parameters | None = None) -> None:
        """
        Args:
            write_parameters (Parameters | None, optional): Parameters for creating
                the ini content. Defaults to None (default Parameters).
        """
        self.content: str = ""
        self.write_parameters = write_parameters or Parameters()
        self.current_section: str = DEFAULT_SECTION_NAME
        self.sections: dict[str, list[KeyValuePair]] = {}
        self.n_lines: int = 0

    @classmethod
    def random_id(cls) -> str:
        """Create a random UUID1 with underscores instead of hyphens."""
        return str(uuid1()).replace("-", "_")

    def _add_line(self, line: str) -> None:
        self.content += f"{line}\n"
        self.n_lines += 1

    def add_section(self, name: str | None = None) -> str:
        """Add a section header and switch to it.

        Args:
            name (str | None, optional): The section name. If None will generate
                one. Defaults to None.

        Returns:
            str: The section name.
        """
        if name is None:
            name = self.random_id()
        self._add_line(f"[{name}]")
        self.current_section = name
        self.sections.setdefault(name, [])
        return name

    def add_pair(
        self, key: str | None = None, value: str | None = None, padding: str = ""
    ) -> KeyValuePair:
        """Add a pair to the current section.

        Args:
            key (str | None, optional): The key. If None will generate one.
                Defaults to None.
            value (str | None, optional): The value. If None will generate one.
                Defaults to None.
            padding (str, optional): Whitespace to put around key, delimiter and
                value. Defaults to "".

        Returns:
            KeyValuePair: The pair the document should contain.
        """
        key = self.random_id() if key is None else key
        value = self.random_id() if value is None else value
        self._add_line(
            f"{padding}{key}{padding}{self.write_parameters.option_delimiter}"
            f"{padding}{value}{padding}"
        )
        pair = KeyValuePair(key, value)
        self.sections.setdefault(self.current_section, []).append(pair)
        return pair

    def add_comment(self) -> str:
        """Add a comment."""
        comment = self.random_id()
        self._add_line(f"{self.write_parameters.write_comment_prefix} {comment}")
        return comment

    def add_blank(self) -> None:
        self._add_line("")

    def add_invalid_line(self) -> None:
        """Add a line that is neither comment, section name nor pair."""
        self._add_line(self.random_id())

    def read(self, parameters: Parameters | None = None) -> IniDocument:
        return IniDocument.from_string(self.content, parameters)

    def export(self, path: Path) -> Path:
        """Export the generated ini content.

        Args:
            path (Path): The directory to export to.

        Returns:
            Path: The export path.
        """
        dest = path / f"{self.random_id()}.ini"
        dest.write_text(self.content, encoding="utf-8")
        return dest

    def verify(self, document: IniDocument) -> None:
        """Assert that document holds exactly the pairs that were added."""
        assert len(document.lines) == self.n_lines
        for section, pairs in self.sections.items():
            assert document.get_section(section) == pairs
            for pair in pairs:
                assert document.has_key(pair.key)
        assert set(document.sections()) == set(self.sections)
