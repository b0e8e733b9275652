import logging
import subprocess

from .constants import Mode

logger = logging.getLogger("Engine")

MODE_ARGUMENTS = {
    Mode.COMPRESS: "-c",
    Mode.DECOMPRESS: "-d",
}


class EngineError(Exception):
    def __init__(self, message, returncode=None, stderr=b""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


def engine_command_line(command: list, mode: Mode) -> list:
    if mode not in MODE_ARGUMENTS:
        raise ValueError("Cannot run the engine for mode " + mode.name)
    if not command:
        raise ValueError("No engine command configured")
    return list(command) + [MODE_ARGUMENTS[mode]]


def run_engine(command: list, mode: Mode, input_data: bytes) -> bytes:
    command_line = engine_command_line(command, mode)
    logger.info("Running engine: " + " ".join(command_line))

    try:
        p = subprocess.run(
            command_line,
            input=input_data,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        raise EngineError(
            "Could not start engine " + command_line[0] + ": " + str(e)
        ) from e

    if p.returncode != 0:
        raise EngineError(
            "Engine exited with status "
            + str(p.returncode)
            + ": "
            + p.stderr.decode(errors="replace").strip(),
            returncode=p.returncode,
            stderr=p.stderr,
        )

    output_data = p.stdout
    logger.debug(
        "Engine turned "
        + str(len(input_data))
        + " bytes into "
        + str(len(output_data))
        + " bytes"
    )
    return output_data
