from typing import Callable, Iterator, List, Optional, Tuple, TypeVar

from faker import Faker

from solr_seeder.config import (
    EMAIL_DOMAINS,
    MAX_ID,
    MOVIE_DIRECTORS,
    MOVIE_DURATION_RANGE,
    MOVIE_GENRES,
    MOVIE_RATING_RANGE,
    MOVIE_TITLES,
    MOVIE_YEAR_RANGE,
    USER_AGE_RANGE,
    USER_BALANCE_MAX,
    USERNAMES,
)
from solr_seeder.models import Movie, User

T = TypeVar("T")


def make_faker(seed: Optional[int] = None) -> Faker:
    """
    Create a Faker with its own random source.

    Every worker gets its own instance so nothing is shared between threads.
    With a seed the generated records are reproducible; without one the
    instance is seeded from system entropy.
    """
    fake = Faker()
    fake.seed_instance(seed)
    return fake


def random_user(fake: Faker) -> User:
    username = fake.random_element(USERNAMES)
    domain = fake.random_element(EMAIL_DOMAINS)
    user_id = fake.random_int(min=0, max=MAX_ID - 1)
    return User(
        id=user_id,
        username=username,
        email=f"{username}{user_id}@{domain}",
        age=fake.random_int(min=USER_AGE_RANGE[0], max=USER_AGE_RANGE[1]),
        active=fake.pybool(),
        balance=fake.random.random() * USER_BALANCE_MAX,
    )


def random_movie(fake: Faker) -> Movie:
    return Movie(
        id=fake.random_int(min=0, max=MAX_ID - 1),
        title=fake.random_element(MOVIE_TITLES),
        director=fake.random_element(MOVIE_DIRECTORS),
        release_year=fake.random_int(min=MOVIE_YEAR_RANGE[0], max=MOVIE_YEAR_RANGE[1]),
        genre=fake.random_element(MOVIE_GENRES),
        rating=fake.random.uniform(*MOVIE_RATING_RANGE),
        is_available=fake.pybool(),
        duration=fake.random.uniform(*MOVIE_DURATION_RANGE),
    )


def generate_batch(generator: Callable[[Faker], T], fake: Faker, size: int) -> List[T]:
    return [generator(fake) for _ in range(size)]


def iter_batches(total: int, batch_size: int) -> Iterator[Tuple[int, int]]:
    """
    Split ``total`` records into consecutive batches.

    Yields:
        (batch_start, batch_size) pairs; the last batch may be short
    """
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    for start in range(0, max(total, 0), batch_size):
        yield start, min(batch_size, total - start)
