import json
import logging
from typing import Any, Optional, Sequence

import requests

from solr_seeder.config import REQUEST_TIMEOUT, UPDATE_PATH

logger = logging.getLogger(__name__)


class SolrUploadError(Exception):
    """A batch could not be delivered to Solr."""


def build_update_url(solr_url: str, collection: str) -> str:
    path = UPDATE_PATH.format(collection=collection)
    return f"{solr_url.rstrip('/')}/{path}?commit=true"


def _to_document(record: Any) -> Any:
    if hasattr(record, "to_document"):
        return record.to_document()
    return record


def submit(
    solr_url: str,
    collection: str,
    batch: Sequence[Any],
    session: Optional[requests.Session] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> None:
    """
    Post a batch of records to the Solr JSON update API and commit it.

    Args:
        solr_url: Base URL of the Solr service
        collection: Target collection name
        batch: Records (or plain documents) of a single kind
        session: Optional session to reuse connections across calls
        timeout: Request timeout in seconds

    Raises:
        SolrUploadError: On serialization failure, transport error or a
            non-2xx response
    """
    url = build_update_url(solr_url, collection)

    try:
        body = json.dumps([_to_document(record) for record in batch])
    except (TypeError, ValueError) as e:
        raise SolrUploadError(f"marshal docs: {e}") from e

    sender = session if session is not None else requests
    try:
        response = sender.post(
            url,
            data=body,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise SolrUploadError(f"do request: {e}") from e

    if not 200 <= response.status_code < 300:
        raise SolrUploadError(
            f"solr returned status {response.status_code} {response.reason}"
        )

    logger.debug("posted batch collection=%s docs=%d", collection, len(batch))
