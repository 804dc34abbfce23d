"""Print a text file and the unique all-vowel words found in it."""

import argparse
import logging

from config import config
from exceptions import ConfigurationError
from services.runner_service import RunnerService

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Extract unique all-vowel words from a text file.")
    parser.add_argument(
        "path",
        nargs="?",
        default=str(config.reader.input_path),
        help="Path to the input text file (default: $VOWEL_WORDS_INPUT or input.txt)"
    )
    args = parser.parse_args(argv)

    try:
        config.setup_environment()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.WARNING)
        logger.warning("%s; using WARNING", e.message)

    # Failures are reported by the runner, so the exit code stays 0
    RunnerService().run(args.path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
