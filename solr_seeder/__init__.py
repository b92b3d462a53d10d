# Synthetic data seeder for Solr collections

from solr_seeder.models import Movie, User
from solr_seeder.solr_client import SolrUploadError, submit
from solr_seeder.seeder import CollectionJob, SeedStats, run_seeding, seed_collection

__all__ = [
    "User",
    "Movie",
    "SolrUploadError",
    "submit",
    "CollectionJob",
    "SeedStats",
    "seed_collection",
    "run_seeding",
]
