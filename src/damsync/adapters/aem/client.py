"""HTTP client for the Assets API, JCR status and replication endpoints."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from damsync.domain.errors import DataIntegrityError, TransportFailure
from damsync.domain.model import ActivationStatus, ReplicationAction

from .schema import JcrContentStatus, SirenPage
from .translator import translate_page

if TYPE_CHECKING:
    from damsync.adapters.http_resilience import ResilientClient
    from damsync.config.aem import AemConfig
    from damsync.domain.model import ListingPage

log = getLogger(__name__)

DAM_ROOT = "/content/dam/"
REPLICATE_PATH = "/bin/replicate.json"
STATUS_SUFFIX = "/jcr:content.0.json"


class AemClient:
    """Talks to author and publish on behalf of the reconciliation core.

    Listing pages are fetched from whichever host the href names; status
    status checks and replication commands always go to author.
    """

    def __init__(self, *, config: AemConfig, http: ResilientClient) -> None:
        self._config = config
        self._http = http

    async def fetch_page(self, href: str) -> ListingPage:
        response = await self._request("GET", href)
        _raise_for_status(response)

        try:
            page = SirenPage.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise DataIntegrityError(f"unreadable listing page {href}: {exc}") from exc
        return translate_page(page)

    async def fetch_activation(self, path: str) -> ActivationStatus:
        """Read ``cq:lastReplicationAction`` for ``path`` from author.

        Missing metadata means inactive. Other HTTP failures and unreadable
        bodies give ``UNKNOWN``; only network errors raise.
        """

        url = self.status_url(path)
        response = await self._request("GET", url)
        if response.status_code == httpx.codes.NOT_FOUND:
            log.debug("No status metadata for %s", path)
            return ActivationStatus.INACTIVE
        if not response.is_success:
            log.debug(
                "Status check for %s failed: %s %s",
                path,
                response.status_code,
                response.reason_phrase,
            )
            return ActivationStatus.UNKNOWN

        try:
            status = JcrContentStatus.model_validate(response.json())
        except (ValueError, ValidationError):
            log.debug("Unreadable status metadata for %s", path)
            return ActivationStatus.UNKNOWN

        if status.last_replication_action == ReplicationAction.ACTIVATE.value:
            return ActivationStatus.ACTIVE
        return ActivationStatus.INACTIVE

    async def replicate(self, path: str, action: ReplicationAction) -> None:
        if action is ReplicationAction.NONE:
            raise ValueError("No replication command for ReplicationAction.NONE")

        url = f"{self._config.author_url}{REPLICATE_PATH}"
        form = {
            "_charset_": "utf-8",
            "cmd": action.value,
            "path": self.content_path(path),
        }
        response = await self._request("POST", url, data=form)
        _raise_for_status(response)

    def status_url(self, path: str) -> str:
        return f"{self._config.author_url}{quote(self.content_path(path))}{STATUS_SUFFIX}"

    @staticmethod
    def content_path(path: str) -> str:
        return f"{DAM_ROOT}{path.lstrip('/')}"

    async def _request(
        self,
        method: str,
        url: str,
        *,
        data: dict[str, str] | None = None,
    ) -> httpx.Response:
        log.debug("%s %s", method, url)
        try:
            if data is None:
                return await self._http.request(method, url)
            return await self._http.request(method, url, data=data)
        except httpx.HTTPError as exc:
            raise TransportFailure(url, reason=str(exc) or type(exc).__name__) from exc


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    raise TransportFailure(
        str(response.request.url),
        status_code=response.status_code,
        reason=response.reason_phrase,
    )

