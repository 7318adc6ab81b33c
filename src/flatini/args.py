from .globals import (
    DEFAULT_COMMENT_PREFIXES,
    DEFAULT_OPTION_DELIMITER,
    SECTION_OPEN,
    SECTION_CLOSE,
)


class Parameters:
    """Parameters for reading and writing."""

    def __init__(
        self,
        comment_prefixes: str | tuple[str, ...] = DEFAULT_COMMENT_PREFIXES,
        option_delimiter: str = DEFAULT_OPTION_DELIMITER,
    ) -> None:
        """
        Args:
            comment_prefixes (str | tuple[str, ...], optional): Prefix character(s)
                that denote a comment line. If multiple are given, the first will be
                taken for writing. Defaults to (";", "#").
            option_delimiter (str, optional): Delimiter character that separates a
                key from its value. Only the first occurrence in a line counts.
                Defaults to "=".
        """
        # because comment_prefixes and option_delimiter check each other on setting
        self._comment_prefixes: tuple[str, ...] = ()
        self._option_delimiter = ""

        self.comment_prefixes = comment_prefixes
        self.option_delimiter = option_delimiter

    @property
    def comment_prefixes(self) -> tuple[str, ...]:
        return self._comment_prefixes

    @comment_prefixes.setter
    def comment_prefixes(self, value: str | tuple[str, ...]) -> None:
        if not isinstance(value, tuple):
            value = (value,)
        if not value:
            raise ValueError("At least one comment prefix is required.")
        self.verify_marker(value, "comment prefix")
        self._comment_prefixes = value
        self.verify_between_markers()

    @property
    def option_delimiter(self) -> str:
        return self._option_delimiter

    @option_delimiter.setter
    def option_delimiter(self, value: str) -> None:
        self.verify_marker((value,), "option delimiter")
        self._option_delimiter = value
        self.verify_between_markers()

    @property
    def write_comment_prefix(self) -> str:
        """The comment prefix used for writing."""
        return self._comment_prefixes[0]

    def verify_marker(self, marker: tuple[str, ...], name: str) -> None:
        for val in marker:
            if not isinstance(val, str) or len(val) != 1:
                raise ValueError(f"A {name} must be a single character, got {val!r}.")
            if val in {SECTION_OPEN, SECTION_CLOSE}:
                raise ValueError(
                    f"'{val}' (section name identifier) is not allowed as a {name}."
                )
            if val.isspace():
                raise ValueError(f"Whitespace is not allowed as a {name}.")

    def verify_between_markers(self) -> None:
        if self._option_delimiter and self._option_delimiter in self._comment_prefixes:
            raise ValueError(
                "Comment prefixes and option delimiter have to be distinct from each other."
            )

    def update(self, **kwargs) -> None:
        """Update parameters with kwargs

        Args:
            **kwargs: Keyword-arguments to update the parameters with.
        """
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __repr__(self) -> str:
        return (
            f"Parameters(comment_prefixes={self._comment_prefixes!r}, "
            f"option_delimiter={self._option_delimiter!r})"
        )
