import logging
import logging.config
import sys
from os import path

from cmprlib.arg_parser import parse
from cmprlib.constants import HELP_TEXT, LOGGING_CONF_NAME, internal_path
from cmprlib.diagnostics import log_diagnostics
from cmprlib.engine_helper import EngineError, run_engine
from cmprlib.file_io import (
    FileReadError,
    FileWriteError,
    default_output_path,
    read_file,
    write_file,
)
from cmprlib.settings import SettingsError, load_settings

# Get an instance of logger, which we'll pull from the config file
logger = logging.getLogger("cmpr")


def configure_logging():
    logging_conf = internal_path(LOGGING_CONF_NAME)
    if path.exists(logging_conf):
        logging.config.fileConfig(logging_conf, disable_existing_loggers=False)
    else:
        logging.basicConfig(level=logging.INFO)


def main(argv=None, settings_path=None) -> int:
    if argv is None:
        argv = sys.argv

    options = parse(argv)
    log_diagnostics(options.diagnostics, logger)

    if options.help_requested:
        print(HELP_TEXT)

    # invalid command lines are not distinguished by exit status
    if not options.valid:
        return 0

    try:
        settings = load_settings(settings_path)
    except SettingsError as e:
        logger.critical(str(e))
        return 1

    logger.debug(repr(options))

    if not settings.has_engine:
        logger.info("No compression engine configured, nothing to do")
        logger.info(repr(options))
        return 0

    output_path = options.output_path
    if output_path is None:
        output_path = default_output_path(options.input_path, options.mode, settings)
        if path.abspath(output_path) == path.abspath(options.input_path):
            logger.critical(
                "Default output path for "
                + options.input_path
                + " is the input file itself, use --out to choose one"
            )
            return 1

    try:
        input_data = read_file(options.input_path, show_progress=settings.show_progress)
        output_data = run_engine(settings.engine_command, options.mode, input_data)
        write_file(output_path, output_data)
    except (FileReadError, FileWriteError, EngineError) as e:
        logger.critical(str(e))
        return 1

    return 0


def console_main():
    configure_logging()
    logger.info("Starting cmpr.py")
    sys.exit(main())


if __name__ == "__main__":
    console_main()
