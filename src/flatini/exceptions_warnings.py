"""flatini-specific exceptions and warnings"""

# ---------- #
# Exceptions
# ---------- #


class ExtractionError(Exception):
    """Raised when a line entity could not be extracted from a line."""


# ---------- #
# Warnings
# ---------- #


class IniStructureWarning(Warning):
    """Raised when a line could not be used and is being ignored."""


class UnclosedSectionWarning(IniStructureWarning):
    """Raised when a section header is missing its closing bracket."""


class InvalidLineWarning(IniStructureWarning):
    """Raised when a line is neither blank, comment, section header nor pair."""


class UnreadableSourceWarning(IniStructureWarning):
    """Raised when an ini file could not be read and an empty document is built."""
