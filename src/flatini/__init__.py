from .interface import IniDocument
from .args import Parameters
from .entities import (
    KeyValuePair,
    BlankLine,
    Comment,
    SectionName,
    UnclosedSectionName,
    Pair,
    UnmatchedLine,
    LineEntity,
)
from .globals import DEFAULT_SECTION_NAME
from . import exceptions_warnings
