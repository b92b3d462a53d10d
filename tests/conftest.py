"""Shared fixtures for the seeder tests."""

import logging

import pytest

from solr_seeder.config import SeederConfig


@pytest.fixture
def config() -> SeederConfig:
    return SeederConfig(
        solr_url="http://solr.test:8983",
        total_users=2500,
        total_movies=2500,
        batch_size=1000,
        random_seed=7,
    )


@pytest.fixture
def restore_root_logging():
    # main() reconfigures the root logger; put it back afterwards
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
