import json
from unittest.mock import MagicMock

import pytest
import requests

from solr_seeder.models import User
from solr_seeder.solr_client import SolrUploadError, build_update_url, submit


def _response(status_code: int, reason: str = "OK") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    return response


@pytest.fixture
def user() -> User:
    return User(id=1, username="bob", email="bob1@mail.com", age=40, active=False, balance=3.25)


def test_build_update_url():
    assert (
        build_update_url("http://solr:8983", "users")
        == "http://solr:8983/solr/users/update?commit=true"
    )


def test_build_update_url_strips_trailing_slash():
    assert (
        build_update_url("http://solr:8983/", "movies")
        == "http://solr:8983/solr/movies/update?commit=true"
    )


def test_submit_posts_json_array(user):
    session = MagicMock()
    session.post.return_value = _response(200)

    submit("http://solr:8983", "users", [user, user], session=session)

    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args[0] == "http://solr:8983/solr/users/update?commit=true"
    assert kwargs["headers"] == {"Content-Type": "application/json"}
    assert kwargs["timeout"] == 10.0
    body = json.loads(kwargs["data"])
    assert body == [user.to_document(), user.to_document()]


def test_submit_accepts_plain_documents():
    session = MagicMock()
    session.post.return_value = _response(204, "No Content")

    submit("http://solr:8983", "movies", [{"id": 1, "title_s": "x"}], session=session)

    body = json.loads(session.post.call_args.kwargs["data"])
    assert body == [{"id": 1, "title_s": "x"}]


@pytest.mark.parametrize("status", [199, 300, 400, 404, 500, 503])
def test_submit_non_2xx_raises(user, status):
    session = MagicMock()
    session.post.return_value = _response(status, "Nope")

    with pytest.raises(SolrUploadError) as exc_info:
        submit("http://solr:8983", "users", [user], session=session)

    assert str(status) in str(exc_info.value)


def test_submit_transport_error_raises_upload_error(user):
    session = MagicMock()
    session.post.side_effect = requests.Timeout("read timed out")

    with pytest.raises(SolrUploadError, match="read timed out"):
        submit("http://solr:8983", "users", [user], session=session)


def test_submit_unreachable_endpoint_reports_failure(user):
    # Nothing listens on port 1
    with pytest.raises(SolrUploadError):
        submit("http://127.0.0.1:1", "users", [user], timeout=2.0)


def test_submit_serialization_error_is_upload_error():
    session = MagicMock()

    with pytest.raises(SolrUploadError, match="marshal docs"):
        submit("http://solr:8983", "users", [{"id": object()}], session=session)

    session.post.assert_not_called()
