from enum import IntFlag
from typing import List, NamedTuple


class Directive(IntFlag):
    """How the shell should treat a set of candidates.

    Values up to KEEP_ORDER match the cobra ``__complete`` protocol.
    """

    DEFAULT = 0
    ERROR = 1
    NO_SPACE = 2
    NO_FILE_COMP = 4
    FILTER_FILE_EXT = 8
    FILTER_DIRS = 16
    KEEP_ORDER = 32
    NO_FURTHER_PROCESSING = 64

    def describe(self) -> str:
        """Readable form, e.g. ``NO_SPACE|NO_FILE_COMP``"""
        if not self:
            return "DEFAULT"
        return "|".join(d.name for d in Directive if d and d in self)


class CompletionResult(NamedTuple):
    candidates: List[str]
    directive: Directive = Directive.DEFAULT


def empty(directive: Directive = Directive.DEFAULT) -> CompletionResult:
    return CompletionResult([], directive)
