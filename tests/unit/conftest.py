"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from oktasync.pagination import CollectionPage
from tests.helpers.okta import FakeCollectionClient


@pytest.fixture
def fake_client_factory():
    """Build a FakeCollectionClient from a URL -> CollectionPage map."""

    def _make(pages: dict[str, CollectionPage]) -> FakeCollectionClient:
        return FakeCollectionClient(pages)

    return _make
