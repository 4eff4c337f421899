"""Tests for container wiring."""

import asyncio
import json

from book_catalog.config import Settings
from book_catalog.containers import build_container


def test_build_container_seeds_default_catalog(settings: Settings) -> None:
    container = build_container(settings)

    books = asyncio.run(container.catalog_service.get_all())

    assert len(books) == 10
    assert container.catalog_service.resolver.delay_seconds == 0


def test_services_share_one_catalog(tmp_path) -> None:
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"001": {"title": "T1", "author": "A1"}}))
    container = build_container(
        Settings(seed_path=str(path), resolution_delay_seconds=0)
    )

    container.review_service.upsert_review("001", "alice", "great")
    found = asyncio.run(container.lookup_service.find_by_author("A1"))

    assert found["001"].reviews == {"alice": "great"}
    assert container.catalog_service.repository is container.lookup_service.repository
