import logging
import os
from pathlib import Path

from tqdm import tqdm

from .constants import Mode

logger = logging.getLogger("FileIO")

CHUNK_SIZE = 64 * 1024


class FileReadError(Exception):
    def __init__(self, path, reason):
        super().__init__("Failed to read " + str(path) + ": " + str(reason))
        self.path = path
        self.reason = reason


class FileWriteError(Exception):
    def __init__(self, path, reason):
        super().__init__("Failed to write " + str(path) + ": " + str(reason))
        self.path = path
        self.reason = reason


def read_file(path: str, show_progress=False) -> bytes:
    file_path = Path(path)
    if not file_path.exists():
        raise FileReadError(path, "file does not exist")
    if file_path.is_dir():
        raise FileReadError(path, "path is a directory")

    data = bytearray()
    try:
        total = file_path.stat().st_size
        with open(file_path, "rb") as infile, tqdm(
            total=total,
            unit="B",
            unit_scale=True,
            desc=file_path.name,
            disable=not show_progress,
        ) as t:
            chunk = infile.read(CHUNK_SIZE)
            while chunk:
                data += chunk
                t.update(len(chunk))
                chunk = infile.read(CHUNK_SIZE)
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e

    logger.debug("Read " + str(len(data)) + " bytes from " + str(path))
    return bytes(data)


def write_file(path: str, data: bytes):
    try:
        Path(path).write_bytes(data)
    except OSError as e:
        raise FileWriteError(path, e.strerror or str(e)) from e
    logger.info("Wrote " + str(len(data)) + " bytes to " + str(path))


def default_output_path(input_path: str, mode: Mode, settings) -> str:
    if mode is Mode.COMPRESS:
        return input_path + settings.compressed_suffix
    if mode is Mode.DECOMPRESS:
        suffix = settings.compressed_suffix
        if suffix and input_path.endswith(suffix) and len(input_path) > len(suffix):
            stripped = input_path[: -len(suffix)]
            if not stripped.endswith(os.sep):
                return stripped
        return input_path + settings.decompressed_suffix
    raise ValueError("No output path for mode " + mode.name)
