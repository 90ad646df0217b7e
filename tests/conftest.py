from __future__ import annotations

import pytest

from damsync.config import AemConfig, ResynchConfig, RetryPolicy, get_aem_config
from tests.support.assets_api import AUTHOR_URL, PUBLISH_URL


@pytest.fixture
def aem_config() -> AemConfig:
    return get_aem_config(
        author_url=AUTHOR_URL,
        publish_url=PUBLISH_URL,
        user="admin",
        password="admin",  # noqa: S106
        retry=RetryPolicy(total=0),
    )


@pytest.fixture
def resynch_config() -> ResynchConfig:
    return ResynchConfig(start_path="/photos", dry_run=True, replication_delay_seconds=5.0)
