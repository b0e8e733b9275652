import logging
import os
import shlex

import yaml

from . import constants

logger = logging.getLogger("Settings")

CONFIG_FILE_NAME = "config.yaml"


class SettingsError(Exception):
    pass


class Settings:
    engine_command: list
    compressed_suffix: str
    decompressed_suffix: str
    show_progress: bool

    def __init__(
        self,
        engine_command=None,
        compressed_suffix=".compressed",
        decompressed_suffix=".decompressed",
        show_progress=True,
    ):
        self.engine_command = engine_command or []
        self.compressed_suffix = compressed_suffix
        self.decompressed_suffix = decompressed_suffix
        self.show_progress = show_progress

    @property
    def has_engine(self) -> bool:
        return len(self.engine_command) > 0


def default_settings_path() -> str:
    return constants.internal_path(CONFIG_FILE_NAME)


def load_settings(config_path: str = None) -> Settings:
    if config_path is None:
        config_path = default_settings_path()

    settings = Settings()
    logger.info("Configuration file: " + config_path)
    if not (os.path.exists(config_path) and os.access(config_path, os.R_OK)):
        logger.info("No readable configuration file, using defaults")
        return settings

    try:
        with open(config_path, "r") as config_file:
            configuration = yaml.safe_load(config_file)
    except (yaml.YAMLError, OSError) as e:
        raise SettingsError(
            "Could not load configuration file " + config_path + ": " + str(e)
        ) from e

    if configuration is None:
        return settings
    if not isinstance(configuration, dict):
        raise SettingsError(
            "Configuration file " + config_path + " must contain a mapping"
        )

    if "Engine Command" in configuration:
        command = configuration["Engine Command"]
        if command is None:
            command = []
        elif isinstance(command, str):
            command = shlex.split(command)
        elif not isinstance(command, list):
            raise SettingsError("Engine Command must be a string or a list")
        settings.engine_command = [str(part) for part in command]
        logger.debug("  Engine Command: " + " ".join(settings.engine_command))

    if "Compressed Suffix" in configuration:
        settings.compressed_suffix = _read_suffix(configuration, "Compressed Suffix")

    if "Decompressed Suffix" in configuration:
        settings.decompressed_suffix = _read_suffix(
            configuration, "Decompressed Suffix"
        )

    if "Show Progress" in configuration:
        show_progress = configuration["Show Progress"]
        if not isinstance(show_progress, bool):
            raise SettingsError("Show Progress must be true or false")
        settings.show_progress = show_progress
        logger.debug("  Show Progress: " + str(settings.show_progress))

    return settings


def _read_suffix(configuration: dict, key: str) -> str:
    # an empty suffix would make the default output path the input path
    suffix = configuration[key]
    if not isinstance(suffix, str) or suffix == "":
        raise SettingsError(key + " must be a non-empty string")
    logger.debug("  " + key + ": " + suffix)
    return suffix
