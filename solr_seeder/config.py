import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

USERS_COLLECTION = "users"
MOVIES_COLLECTION = "movies"

UPDATE_PATH = "solr/{collection}/update"
REQUEST_TIMEOUT = 10.0

DEFAULT_TOTAL_USERS = 1_000_000
DEFAULT_TOTAL_MOVIES = 1_000_000
DEFAULT_BATCH_SIZE = 1000

# Log a progress line every N successful batches
PROGRESS_EVERY = 10

MAX_ID = 1_000_000

USERNAMES = ["alice", "bob", "charlie", "dave", "eve", "frank", "grace", "heidi"]
EMAIL_DOMAINS = ["example.com", "mail.com", "test.org", "demo.net"]
USER_AGE_RANGE = (18, 77)
USER_BALANCE_MAX = 1000.0

MOVIE_TITLES = [
    "The Example",
    "Another Film",
    "Go Adventure",
    "Mystery Night",
    "Comedy Hour",
    "Sci-Fi Saga",
    "Drama Days",
    "Action Blast",
]
MOVIE_DIRECTORS = ["Jane Doe", "John Smith", "Alex Lee", "Sam Kim", "Morgan Yu", "Chris Ray"]
MOVIE_GENRES = ["Drama", "Comedy", "Action", "Sci-Fi", "Horror", "Romance"]
MOVIE_YEAR_RANGE = (1985, 2025)
MOVIE_RATING_RANGE = (5.0, 9.0)
MOVIE_DURATION_RANGE = (60.0, 120.0)


class ConfigError(Exception):
    """Raised when required settings are missing or malformed."""


@dataclass
class SeederConfig:
    solr_url: str
    total_users: int = DEFAULT_TOTAL_USERS
    total_movies: int = DEFAULT_TOTAL_MOVIES
    batch_size: int = DEFAULT_BATCH_SIZE
    random_seed: Optional[int] = None
    timeout: float = REQUEST_TIMEOUT
    log_level: str = "INFO"


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def load_config(use_dotenv: bool = True) -> SeederConfig:
    """
    Build the seeder configuration from environment variables.

    Args:
        use_dotenv: Also read a ``.env`` file from the working directory

    Returns:
        SeederConfig populated from the environment

    Raises:
        ConfigError: If SOLR_MASTER_URL is unset or a numeric value is invalid
    """
    if use_dotenv:
        load_dotenv()

    solr_url = os.getenv("SOLR_MASTER_URL", "").strip()
    if not solr_url:
        raise ConfigError("SOLR_MASTER_URL is not set")

    batch_size = _int_env("SEED_BATCH_SIZE", DEFAULT_BATCH_SIZE)
    if batch_size <= 0:
        raise ConfigError(f"SEED_BATCH_SIZE must be positive, got {batch_size}")

    total_users = _int_env("SEED_TOTAL_USERS", DEFAULT_TOTAL_USERS)
    if total_users < 0:
        raise ConfigError(f"SEED_TOTAL_USERS must not be negative, got {total_users}")

    total_movies = _int_env("SEED_TOTAL_MOVIES", DEFAULT_TOTAL_MOVIES)
    if total_movies < 0:
        raise ConfigError(f"SEED_TOTAL_MOVIES must not be negative, got {total_movies}")

    # urllib3 rejects non-positive timeouts with a bare ValueError
    timeout = _float_env("SOLR_TIMEOUT", REQUEST_TIMEOUT)
    if timeout <= 0:
        raise ConfigError(f"SOLR_TIMEOUT must be positive, got {timeout}")

    return SeederConfig(
        solr_url=solr_url,
        total_users=total_users,
        total_movies=total_movies,
        batch_size=batch_size,
        random_seed=_int_env("SEED_RANDOM_SEED", None),
        timeout=timeout,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
