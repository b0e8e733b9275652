import logging
from enum import Enum
from typing import Sequence, Tuple

from . import constants
from .constants import ArgKind, Configuration, Expect, Mode
from .diagnostics import Diagnostic, ErrorKind

logger = logging.getLogger("ArgParser")


class Action(Enum):
    HELP = 1
    UNKNOWN = 2
    DISCARD = 3
    STORE_INPUT = 4
    STORE_OUTPUT = 5
    UNEXPECTED = 6
    AWAIT_OUTPUT = 7
    SELECT_MODE = 8
    OUTPUT_VALUE_MISSING = 9


FLAG_MODES = {
    ArgKind.COMPRESS_FLAG: Mode.COMPRESS,
    ArgKind.DECOMPRESS_FLAG: Mode.DECOMPRESS,
}


def classify(token: str) -> ArgKind:
    if token in constants.HELP_FLAGS:
        return ArgKind.HELP
    if token in constants.OUTPUT_FLAGS:
        return ArgKind.OUTPUT_FLAG
    if token in constants.COMPRESS_FLAGS:
        return ArgKind.COMPRESS_FLAG
    if token in constants.DECOMPRESS_FLAGS:
        return ArgKind.DECOMPRESS_FLAG
    if token.startswith(constants.FLAG_PREFIX):
        return ArgKind.UNKNOWN_FLAG
    return ArgKind.VALUE


def transition(
    state: Expect, kind: ArgKind, has_input: bool = False
) -> Tuple[Expect, Action]:
    """
    Advance the expected-argument cursor by one token.

    Returns the next cursor state and the action the parser has to apply to
    the configuration. `has_input` only matters once an `--out` value has
    been consumed: the cursor then goes back to waiting for the input path
    unless one was already given.
    """
    if kind is ArgKind.HELP:
        return state, Action.HELP
    if kind is ArgKind.UNKNOWN_FLAG:
        return state, Action.UNKNOWN

    if kind is ArgKind.OUTPUT_FLAG:
        if state is Expect.OUTPUT_VALUE:
            return state, Action.OUTPUT_VALUE_MISSING
        return Expect.OUTPUT_VALUE, Action.AWAIT_OUTPUT

    if kind in FLAG_MODES:
        if state is Expect.OUTPUT_VALUE:
            return state, Action.OUTPUT_VALUE_MISSING
        return state, Action.SELECT_MODE

    if state is Expect.EXECUTABLE:
        return Expect.INPUT, Action.DISCARD
    if state is Expect.INPUT:
        return Expect.NONE, Action.STORE_INPUT
    if state is Expect.OUTPUT_VALUE:
        if has_input:
            return Expect.NONE, Action.STORE_OUTPUT
        return Expect.INPUT, Action.STORE_OUTPUT
    return Expect.NONE, Action.UNEXPECTED


def parse(tokens: Sequence[str]) -> Configuration:
    """
    Turn the raw invocation tokens (program path first) into a Configuration.

    Never raises for bad input: problems end up in `diagnostics` and clear
    `valid`.
    """
    config = Configuration()
    cursor = Expect.EXECUTABLE

    for token in tokens:
        kind = classify(token)
        if kind in FLAG_MODES:
            config.mode = config.mode.combine(FLAG_MODES[kind])

        cursor, action = transition(cursor, kind, config.input_path is not None)
        logger.debug(
            "Token " + repr(token) + " -> " + kind.name + ", " + action.name
        )

        if action is Action.HELP:
            config.help_requested = True
            config.report(Diagnostic(ErrorKind.USAGE_REQUESTED, token))
            return config
        elif action is Action.UNKNOWN:
            config.report(Diagnostic(ErrorKind.UNKNOWN_OPTION, token))
            return config
        elif action is Action.OUTPUT_VALUE_MISSING:
            config.report(Diagnostic(ErrorKind.MISSING_OUTPUT_VALUE, token))
            return config
        elif action is Action.AWAIT_OUTPUT:
            if config.output_path is not None:
                config.report(Diagnostic(ErrorKind.DUPLICATE_OUTPUT_FLAG, token))
                return config
        elif action is Action.STORE_INPUT:
            config.input_path = token
        elif action is Action.STORE_OUTPUT:
            config.output_path = token
        elif action is Action.UNEXPECTED:
            config.report(Diagnostic(ErrorKind.UNEXPECTED_POSITIONAL, token))

    return finalize(config, cursor)


def finalize(config: Configuration, cursor: Expect) -> Configuration:
    if not config.valid:
        return config

    if cursor is Expect.OUTPUT_VALUE:
        config.report(Diagnostic(ErrorKind.MISSING_OUTPUT_FOLLOW_VALUE))
    elif cursor is not Expect.NONE:
        config.report(Diagnostic(ErrorKind.MISSING_INPUT_PATH))
    elif config.mode is Mode.UNSET:
        config.report(Diagnostic(ErrorKind.NO_MODE_SELECTED))
    elif config.mode is Mode.CONFLICT:
        config.report(Diagnostic(ErrorKind.CONFLICTING_MODES))

    return config
