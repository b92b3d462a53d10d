import sys
import json
import logging
import argparse
from typing import List, Optional

from solr_seeder.config import ConfigError, load_config
from solr_seeder.seeder import run_seeding

logger = logging.getLogger("solr_seeder")


class KeyValueFormatter(logging.Formatter):
    """Formatter whose ``msg`` field is a double-quoted, escaped string."""

    def format(self, record: logging.LogRecord) -> str:
        record.quoted_message = json.dumps(record.getMessage())
        return super().format(record)


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Set up logging to standard output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured root logger
    """
    log_format = "time=%(asctime)s level=%(levelname)s thread=%(threadName)s msg=%(quoted_message)s"
    date_format = "%Y-%m-%dT%H:%M:%S"

    # Clear any existing handlers
    root = logging.getLogger()
    root.handlers.clear()

    level = getattr(logging, log_level.upper(), logging.INFO)
    root.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(KeyValueFormatter(log_format, date_format))
    root.addHandler(console_handler)

    # Keep per-request connection chatter out of the output
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return root


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Seed Solr users and movies collections with synthetic data"
    )
    parser.add_argument("--users", type=int, help="Number of users to generate")
    parser.add_argument("--movies", type=int, help="Number of movies to generate")
    parser.add_argument("--batch-size", type=int, help="Documents per update request")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible data")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level or "INFO")

    try:
        config = load_config()
    except ConfigError as e:
        logger.error("%s", e)
        return 1

    if args.log_level is None and config.log_level:
        setup_logging(config.log_level)

    for option, value in (("--users", args.users), ("--movies", args.movies)):
        if value is not None and value < 0:
            logger.error("%s must not be negative, got %d", option, value)
            return 1

    if args.users is not None:
        config.total_users = args.users
    if args.movies is not None:
        config.total_movies = args.movies
    if args.batch_size is not None:
        if args.batch_size <= 0:
            logger.error("--batch-size must be positive, got %d", args.batch_size)
            return 1
        config.batch_size = args.batch_size
    if args.seed is not None:
        config.random_seed = args.seed

    run_seeding(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
