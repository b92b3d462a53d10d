import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

import requests
from faker import Faker

from solr_seeder.config import (
    MOVIES_COLLECTION,
    PROGRESS_EVERY,
    USERS_COLLECTION,
    SeederConfig,
)
from solr_seeder.data_generator import (
    generate_batch,
    iter_batches,
    make_faker,
    random_movie,
    random_user,
)
from solr_seeder.solr_client import SolrUploadError, submit

logger = logging.getLogger(__name__)

Uploader = Callable[..., None]


@dataclass
class CollectionJob:
    """One record kind to seed: where it goes, how to make it, how many."""

    name: str
    generator: Callable[[Faker], Any]
    total: int


@dataclass
class SeedStats:
    batches_sent: int = 0
    batches_failed: int = 0
    documents_sent: int = 0


def default_jobs(config: SeederConfig) -> List[CollectionJob]:
    return [
        CollectionJob(USERS_COLLECTION, random_user, config.total_users),
        CollectionJob(MOVIES_COLLECTION, random_movie, config.total_movies),
    ]


def seed_collection(
    job: CollectionJob,
    solr_url: str,
    batch_size: int,
    fake: Faker,
    uploader: Uploader = submit,
    timeout: Optional[float] = None,
) -> SeedStats:
    """
    Generate and upload every batch for a single collection.

    Failed batches are logged and dropped; the loop always runs to the end.

    Args:
        job: Collection to seed
        solr_url: Base URL of the Solr service
        batch_size: Records per request
        fake: Random source owned by this job
        uploader: Callable posting one batch, raises SolrUploadError on failure
        timeout: Request timeout forwarded to the uploader

    Returns:
        SeedStats for the collection
    """
    stats = SeedStats()
    upload_kwargs: Dict[str, Any] = {}
    if timeout is not None:
        upload_kwargs["timeout"] = timeout

    with requests.Session() as session:
        for index, (batch_start, size) in enumerate(iter_batches(job.total, batch_size)):
            batch = generate_batch(job.generator, fake, size)
            try:
                uploader(solr_url, job.name, batch, session=session, **upload_kwargs)
            except SolrUploadError as e:
                stats.batches_failed += 1
                logger.error(
                    "failed to post batch collection=%s error=%r batch_start=%d",
                    job.name,
                    str(e),
                    batch_start,
                )
                continue

            stats.batches_sent += 1
            stats.documents_sent += size
            if index % PROGRESS_EVERY == 0:
                logger.info(
                    "seeded batch collection=%s batch_start=%d batch_size=%d",
                    job.name,
                    batch_start,
                    size,
                )

    logger.info(
        "finished seeding collection=%s documents_sent=%d batches_failed=%d",
        job.name,
        stats.documents_sent,
        stats.batches_failed,
    )
    return stats


def run_seeding(
    config: SeederConfig,
    jobs: Optional[Sequence[CollectionJob]] = None,
    uploader: Uploader = submit,
) -> Dict[str, SeedStats]:
    """
    Seed every collection concurrently and wait for all of them.

    Each job runs on its own thread with its own Faker; when a random seed is
    configured, job ``i`` is seeded with ``seed + i``.
    """
    if jobs is None:
        jobs = default_jobs(config)

    logger.info("starting seeding solr_master=%s", config.solr_url)

    results: Dict[str, SeedStats] = {}
    if not jobs:
        logger.info("seeding complete, exiting")
        return results

    with ThreadPoolExecutor(max_workers=len(jobs), thread_name_prefix="seed") as pool:
        futures = {}
        for i, job in enumerate(jobs):
            seed = None if config.random_seed is None else config.random_seed + i
            future = pool.submit(
                seed_collection,
                job,
                config.solr_url,
                config.batch_size,
                make_faker(seed),
                uploader,
                config.timeout,
            )
            futures[future] = job.name

        wait(futures)

    for future, name in futures.items():
        results[name] = future.result()

    logger.info("seeding complete, exiting")
    return results
