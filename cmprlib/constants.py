from enum import Enum
import os
import sys
from typing import List, Optional


HELP_TEXT = """
Usage:
  cmpr <path> [options]

Options:
  -h, --help        Show help
  -o, --out [path]  Path to output file
  -c, --compress    Compress the selected file
  -d, --decompress  Decompress the selected file
"""

LOGGING_CONF_NAME = "logging.conf"

FLAG_PREFIX = "-"

HELP_FLAGS = ("--help", "-h")
OUTPUT_FLAGS = ("--out", "-o")
COMPRESS_FLAGS = ("--compress", "-c")
DECOMPRESS_FLAGS = ("--decompress", "-d")


class ArgKind(Enum):
    HELP = 1
    OUTPUT_FLAG = 2
    COMPRESS_FLAG = 3
    DECOMPRESS_FLAG = 4
    UNKNOWN_FLAG = 5
    VALUE = 6


class Expect(Enum):
    EXECUTABLE = 1
    INPUT = 2
    OUTPUT_VALUE = 3
    NONE = 4


class Mode(Enum):
    # values follow the old -1 / +1 / +2 counter so logs stay comparable
    UNSET = -1
    COMPRESS = 1
    DECOMPRESS = 2
    CONFLICT = 3

    def combine(self, other: "Mode") -> "Mode":
        if self is Mode.UNSET:
            return other
        if other is Mode.UNSET or other is self:
            return self
        return Mode.CONFLICT


class Configuration:
    valid: bool
    input_path: Optional[str]
    output_path: Optional[str]
    mode: Mode
    diagnostics: List
    help_requested: bool

    def __init__(
        self,
        valid=True,
        input_path=None,
        output_path=None,
        mode=Mode.UNSET,
        diagnostics=None,
        help_requested=False,
    ):
        self.valid = valid
        self.input_path = input_path
        self.output_path = output_path
        self.mode = mode
        self.diagnostics = diagnostics if diagnostics is not None else []
        self.help_requested = help_requested

    def report(self, diagnostic):
        self.diagnostics.append(diagnostic)
        if diagnostic.invalidates:
            self.valid = False

    def error_kinds(self) -> list:
        return [d.kind for d in self.diagnostics if d.is_error]

    def __eq__(self, other):
        if not isinstance(other, Configuration):
            return NotImplemented
        return (
            self.valid == other.valid
            and self.input_path == other.input_path
            and self.output_path == other.output_path
            and self.mode is other.mode
            and self.diagnostics == other.diagnostics
            and self.help_requested == other.help_requested
        )

    def __repr__(self):
        return (
            "Configuration(valid="
            + str(self.valid)
            + ", input_path="
            + repr(self.input_path)
            + ", output_path="
            + repr(self.output_path)
            + ", mode="
            + self.mode.name
            + ")"
        )


def internal_path(*path_parts) -> str:
    # data files ship inside the package, next to this module
    if getattr(sys, "frozen", False):
        __location__ = os.path.dirname(os.path.abspath(sys.argv[0]))
    else:
        __location__ = os.path.dirname(os.path.realpath(__file__))
    return os.path.join(__location__, *path_parts)
