import logging
from enum import Enum
from typing import Optional

HELP_HINT = "Try using the `--help` option for more information."


class ErrorKind(Enum):
    USAGE_REQUESTED = 1
    UNKNOWN_OPTION = 2
    MISSING_OUTPUT_VALUE = 3
    DUPLICATE_OUTPUT_FLAG = 4
    UNEXPECTED_POSITIONAL = 5
    MISSING_INPUT_PATH = 6
    MISSING_OUTPUT_FOLLOW_VALUE = 7
    NO_MODE_SELECTED = 8
    CONFLICTING_MODES = 9


# kinds that are reported but are not failures of the command line itself
NON_ERRORS = (ErrorKind.USAGE_REQUESTED, ErrorKind.UNEXPECTED_POSITIONAL)


class Diagnostic:
    kind: ErrorKind
    token: Optional[str]

    def __init__(self, kind: ErrorKind, token: Optional[str] = None):
        self.kind = kind
        self.token = token

    @property
    def is_error(self) -> bool:
        return self.kind not in NON_ERRORS

    @property
    def invalidates(self) -> bool:
        return self.kind is not ErrorKind.UNEXPECTED_POSITIONAL

    @property
    def message(self) -> str:
        kind = self.kind
        token = self.token
        if kind is ErrorKind.USAGE_REQUESTED:
            return "Usage requested with " + str(token) + "."
        if kind is ErrorKind.UNKNOWN_OPTION:
            return "Unknown option: " + str(token) + ". " + HELP_HINT
        if kind is ErrorKind.MISSING_OUTPUT_VALUE:
            return (
                "Expected value for `--out` option, found "
                + str(token)
                + " instead. "
                + HELP_HINT
            )
        if kind is ErrorKind.DUPLICATE_OUTPUT_FLAG:
            return "Expected " + str(token) + " option only once. " + HELP_HINT
        if kind is ErrorKind.UNEXPECTED_POSITIONAL:
            return "Unexpected positional argument: " + str(token) + ". " + HELP_HINT
        if kind is ErrorKind.MISSING_INPUT_PATH:
            return (
                "Expected path to input file as a positional argument. " + HELP_HINT
            )
        if kind is ErrorKind.MISSING_OUTPUT_FOLLOW_VALUE:
            return "Expected value following `--out` option. " + HELP_HINT
        if kind is ErrorKind.NO_MODE_SELECTED:
            return "Expected `--compress` or `--decompress` option. " + HELP_HINT
        return (
            "Expected either `--compress` or `--decompress` option, not both. "
            + HELP_HINT
        )

    def __eq__(self, other):
        if not isinstance(other, Diagnostic):
            return NotImplemented
        return self.kind is other.kind and self.token == other.token

    def __hash__(self):
        return hash((self.kind, self.token))

    def __repr__(self):
        return "Diagnostic(" + self.kind.name + ", " + repr(self.token) + ")"


def log_diagnostics(diagnostics, logger: logging.Logger):
    for diagnostic in diagnostics:
        if diagnostic.kind is ErrorKind.USAGE_REQUESTED:
            logger.debug(diagnostic.message)
        elif diagnostic.is_error:
            logger.error(diagnostic.message)
        else:
            logger.warning(diagnostic.message)
