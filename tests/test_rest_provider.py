from unittest.mock import MagicMock

import httpx
import pytest

from acffields.core.contracts import Comment, FieldObject, Term
from acffields.core.exceptions import ProviderError
from acffields.providers.rest import RestConnection, RestFieldProvider
from acffields.reader import FieldReader


def _response(status_code=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    response.text = "<html>oops</html>"
    response.headers = {"content-type": "text/html"}
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "boom",
            request=MagicMock(),
            response=MagicMock(status_code=status_code),
        )
    else:
        response.raise_for_status.return_value = None
    return response


def _provider(response, **conn_kwargs):
    client = MagicMock(spec=httpx.Client)
    client.request.return_value = response
    conn = RestConnection(base_url="https://example.test/wp-json", **conn_kwargs)
    return RestFieldProvider(conn, client=client), client


def test_fetches_acf_member_as_field_objects():
    provider, client = _provider(_response(payload={"acf": {"nickname": "ada", "age": 36}}))

    fields = provider.get_field_objects("user_42")

    client.request.assert_called_once_with("GET", "/acf/v3/users/42")
    assert fields == {
        "nickname": FieldObject(value="ada", name="nickname"),
        "age": FieldObject(value=36, name="age"),
    }


@pytest.mark.parametrize(
    "key, endpoint",
    [
        (12, "/acf/v3/posts/12"),
        ("12", "/acf/v3/posts/12"),
        ("comment_5", "/acf/v3/comments/5"),
        (Comment(comment_id=5), "/acf/v3/comments/5"),
        ("user_42", "/acf/v3/users/42"),
        ("widget_text-2", "/acf/v3/widgets/text-2"),
        ("option", "/acf/v3/options/options"),
        ("category_7", "/acf/v3/categories/7"),
        ("post_tag_3", "/acf/v3/tags/3"),
        (Term(term_id=7, taxonomy="category"), "/acf/v3/categories/7"),
        (Term(term_id=7, taxonomy="genre"), "/acf/v3/genre/7"),
        ("genre_9", "/acf/v3/genre/9"),
        ("user_group_5", "/acf/v3/user_group/5"),
        ("comment_type_2", "/acf/v3/comment_type/2"),
        ("widget_area_4", "/acf/v3/widget_area/4"),
        ("widget_7", "/acf/v3/widgets/7"),
    ],
)
def test_endpoint_for_storage_keys(key, endpoint):
    provider, _ = _provider(_response(payload={}))

    assert provider.endpoint_for(key) == endpoint


def test_posts_route_and_namespace_are_configurable():
    provider, _ = _provider(_response(payload={}), namespace="/acf/v3/", posts_route="media")

    assert provider.endpoint_for(99) == "/acf/v3/media/99"


def test_current_post_has_no_remote_endpoint():
    provider, client = _provider(_response(payload={"acf": {"a": 1}}))

    assert provider.get_field_objects(0) is None
    client.request.assert_not_called()


def test_not_found_means_no_fields():
    provider, _ = _provider(_response(status_code=404))

    assert provider.get_field_objects("user_404") is None


@pytest.mark.parametrize("payload", [{"acf": False}, {"acf": {}}, {"acf": []}, [], {}])
def test_empty_acf_payload_means_no_fields(payload):
    provider, _ = _provider(_response(payload=payload))

    assert provider.get_field_objects("option") is None


def test_server_error_raises_provider_error():
    provider, _ = _provider(_response(status_code=500))

    with pytest.raises(ProviderError, match="HTTP 500"):
        provider.get_field_objects("user_1")


def test_transport_error_raises_provider_error():
    provider, client = _provider(_response())
    client.request.side_effect = httpx.ConnectError("refused")

    with pytest.raises(ProviderError, match="refused"):
        provider.get_field_objects("user_1")


def test_non_json_body_raises_provider_error():
    provider, _ = _provider(_response(json_error=ValueError("not json")))

    with pytest.raises(ProviderError, match="Failed to parse field response as JSON"):
        provider.get_field_objects("user_1")


def test_reader_degrades_on_server_error():
    provider, _ = _provider(_response(status_code=500))

    assert FieldReader(provider, on_provider_error="allow").get_user_fields(1) == {}


def test_reader_end_to_end_with_transform():
    provider, client = _provider(_response(payload={"acf": {"headline": "hello"}}))
    reader = FieldReader(provider, transform=lambda value, key, field, hook: value.title())

    assert reader.get_taxonomy_fields(["category", 7]) == {"headline": "Hello"}
    client.request.assert_called_once_with("GET", "/acf/v3/categories/7")


def test_taxonomy_routes_are_configurable():
    provider, _ = _provider(_response(payload={}), taxonomy_routes={"genre": "genres"})

    assert provider.endpoint_for("genre_3") == "/acf/v3/genres/3"
    assert provider.endpoint_for(Term(term_id=3, taxonomy="genre")) == "/acf/v3/genres/3"
    assert provider.endpoint_for("category_7") == "/acf/v3/category/7"


def test_keys_without_numeric_id_have_no_endpoint():
    provider, client = _provider(_response(payload={"acf": {"a": 1}}))

    assert provider.endpoint_for("user_ada") is None
    assert provider.get_field_objects("nonsense") is None
    client.request.assert_not_called()
