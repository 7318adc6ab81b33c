from typing import Literal, TypeAlias

DEFAULT_SECTION_NAME = ""
"""Name of the scope that holds pairs before the first section header."""
DEFAULT_COMMENT_PREFIXES = (";", "#")
DEFAULT_OPTION_DELIMITER = "="
WHITESPACE = " \t\n\r\v\f"
"""Characters trimmed from lines, keys and values (ASCII whitespace only)."""
SECTION_OPEN = "["
SECTION_CLOSE = "]"

ExportStructure: TypeAlias = Literal["canonical", "lines"]
"""canonical: re-emit from the section index. lines: re-emit line by line."""
