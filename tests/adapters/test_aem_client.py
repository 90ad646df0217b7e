from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING
from urllib.parse import parse_qs

import httpx
import pytest

from damsync.adapters.aem import AemClient
from damsync.domain.errors import DataIntegrityError, TransportFailure
from damsync.domain.model import ActivationStatus, EntityClass, ListingPage, ReplicationAction
from tests.support.assets_api import AUTHOR_URL, PUBLISH_URL, make_client_factory, siren_entity

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from damsync.config import AemConfig

PAGE_HREF = f"{PUBLISH_URL}/api/assets/photos"


def _call[T](
    config: AemConfig,
    handler: Callable[[httpx.Request], httpx.Response],
    operation: Callable[[AemClient], Awaitable[T]],
) -> T:
    async def run() -> T:
        async with make_client_factory(handler)(config.resilience) as http:
            return await operation(AemClient(config=config, http=http))

    return asyncio.run(run())


def test_fetch_page_translates_entities_and_next_link(aem_config: AemConfig) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == PAGE_HREF
        return httpx.Response(
            200,
            json={
                "class": ["assets/folder"],
                "entities": [
                    siren_entity(PUBLISH_URL, "photos/a.jpg", EntityClass.ASSET),
                    siren_entity(PUBLISH_URL, "photos/sub", EntityClass.FOLDER),
                ],
                "links": [
                    {"rel": ["self"], "href": PAGE_HREF},
                    {"rel": ["next"], "href": f"{PAGE_HREF}?offset=20"},
                ],
            },
        )

    page = _call(aem_config, handler, lambda client: client.fetch_page(PAGE_HREF))

    assert page.next_href == f"{PAGE_HREF}?offset=20"
    assert [entity.classes for entity in page.entities] == [
        ("assets/asset",),
        ("assets/folder",),
    ]
    assert page.entities[0].link_href("self") == f"{PUBLISH_URL}/api/assets/photos/a.jpg.json"
    assert page.entities[0].payload["class"] == ["assets/asset"]


def test_fetch_page_without_entities_is_empty(aem_config: AemConfig) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        payload = {"entities": None, "links": [{"rel": "self", "href": PAGE_HREF}]}
        return httpx.Response(200, json=payload)

    page = _call(aem_config, handler, lambda client: client.fetch_page(PAGE_HREF))

    assert page == ListingPage()


def test_fetch_page_failure_raises_transport_failure(aem_config: AemConfig) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(403)

    with pytest.raises(TransportFailure) as excinfo:
        _call(aem_config, handler, lambda client: client.fetch_page(PAGE_HREF))

    assert excinfo.value.status_code == 403
    assert excinfo.value.url == PAGE_HREF
    assert "403 Forbidden" in str(excinfo.value)


def test_fetch_page_rejects_non_json_body(aem_config: AemConfig) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>login</html>")

    with pytest.raises(DataIntegrityError, match="unreadable listing page"):
        _call(aem_config, handler, lambda client: client.fetch_page(PAGE_HREF))


def test_network_errors_become_transport_failures(aem_config: AemConfig) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportFailure) as excinfo:
        _call(aem_config, handler, lambda client: client.fetch_page(PAGE_HREF))

    assert excinfo.value.status_code is None
    assert "connection refused" in str(excinfo.value)


def test_requests_carry_basic_auth(aem_config: AemConfig) -> None:
    seen: list[str | None] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200, json={"entities": [], "links": []})

    _call(aem_config, handler, lambda client: client.fetch_page(PAGE_HREF))

    assert seen == ["Basic YWRtaW46YWRtaW4="]


@pytest.mark.parametrize(
    ("response", "expected"),
    [
        (
            httpx.Response(200, json={"cq:lastReplicationAction": "Activate"}),
            ActivationStatus.ACTIVE,
        ),
        (
            httpx.Response(200, json={"cq:lastReplicationAction": "Deactivate"}),
            ActivationStatus.INACTIVE,
        ),
        (
            httpx.Response(200, json={"jcr:primaryType": "dam:AssetContent"}),
            ActivationStatus.INACTIVE,
        ),
        (httpx.Response(404), ActivationStatus.INACTIVE),
        (httpx.Response(500), ActivationStatus.UNKNOWN),
        (httpx.Response(200, text="not json"), ActivationStatus.UNKNOWN),
    ],
)
def test_fetch_activation_maps_responses(
    aem_config: AemConfig,
    response: httpx.Response,
    expected: ActivationStatus,
) -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return response

    status = _call(aem_config, handler, lambda client: client.fetch_activation("photos/a b.jpg"))

    assert status is expected
    assert requested == [f"{AUTHOR_URL}/content/dam/photos/a%20b.jpg/jcr:content.0.json"]


def test_replicate_posts_form_to_author(aem_config: AemConfig) -> None:
    received: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        received.append(request)
        return httpx.Response(200, json={})

    _call(
        aem_config,
        handler,
        lambda client: client.replicate("photos/a.jpg", ReplicationAction.DEACTIVATE),
    )

    (request,) = received
    assert request.method == "POST"
    assert str(request.url) == f"{AUTHOR_URL}/bin/replicate.json"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert parse_qs(request.content.decode()) == {
        "_charset_": ["utf-8"],
        "cmd": ["Deactivate"],
        "path": ["/content/dam/photos/a.jpg"],
    }


def test_replicate_failure_raises(aem_config: AemConfig) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    with pytest.raises(TransportFailure) as excinfo:
        _call(
            aem_config,
            handler,
            lambda client: client.replicate("photos/a.jpg", ReplicationAction.ACTIVATE),
        )

    assert excinfo.value.status_code == 500


def test_replicate_refuses_none_action(aem_config: AemConfig) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(ValueError, match="No replication command"):
        _call(
            aem_config,
            handler,
            lambda client: client.replicate("photos/a.jpg", ReplicationAction.NONE),
        )
