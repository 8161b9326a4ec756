import pytest
from uuid import uuid4
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from media.domain.models import MediaItem
from media.domain.sources import SourceKind
from shared.entities.actor import RoleName


async def _add_item(db: AsyncSession, bundle: str, label: str = "item") -> MediaItem:
    m = MediaItem(bundle=bundle, label=label, source_value=None)
    db.add(m)
    await db.commit()
    await db.refresh(m)
    return m


# ==============================================================================
# Create
# ==============================================================================

@pytest.mark.asyncio
async def test_should_persist_media_item_on_create(client: AsyncClient, db_session: AsyncSession, login, seed_media_type):
    # GIVEN
    await seed_media_type("image", SourceKind.image)
    login(RoleName.editor)

    # WHEN
    r = await client.post("/v1/media", json={"bundle": "image", "label": "A cat", "source_value": "public://cat.png"})

    # THEN
    assert r.status_code == 201
    body = r.json()
    assert body["bundle"] == "image"
    assert body["label"] == "A cat"
    assert body["status"] is True

    m = (await db_session.execute(select(MediaItem).where(MediaItem.bundle == "image"))).scalars().first()
    assert m is not None
    assert str(m.id) == body["id"]
    assert m.source_value == "public://cat.png"


@pytest.mark.asyncio
async def test_should_default_label_to_file_name(client: AsyncClient, login, seed_media_type):
    await seed_media_type("document", SourceKind.document)
    login(RoleName.editor)

    r = await client.post("/v1/media", json={"bundle": "document", "source_value": "public://docs/report.pdf"})

    assert r.status_code == 201
    assert r.json()["label"] == "report.pdf"


@pytest.mark.asyncio
async def test_should_use_provider_title_for_remote_video(client: AsyncClient, login, seed_media_type, fake_provider):
    await seed_media_type("remote_video", SourceKind.remote_video)
    fake_provider.titles["https://videos.example/42"] = "The answer"
    login(RoleName.editor)

    r = await client.post("/v1/media", json={"bundle": "remote_video", "source_value": "https://videos.example/42"})

    assert r.status_code == 201
    assert r.json()["label"] == "The answer"
    assert fake_provider.fetched == ["https://videos.example/42"]


@pytest.mark.asyncio
async def test_should_reject_unsupported_remote_url_even_with_label(client: AsyncClient, login, seed_media_type):
    await seed_media_type("remote_video", SourceKind.remote_video)
    login(RoleName.editor)

    r = await client.post(
        "/v1/media",
        json={"bundle": "remote_video", "label": "Mine", "source_value": "https://elsewhere.example/1"},
    )

    assert r.status_code == 422
    assert r.json()["detail"] == "unsupported_remote_media"


@pytest.mark.asyncio
async def test_should_return_404_for_unknown_bundle(client: AsyncClient, login):
    login(RoleName.editor)

    r = await client.post("/v1/media", json={"bundle": "ghost", "label": "x"})

    assert r.status_code == 404
    assert r.json()["detail"] == "media_type_not_found"


@pytest.mark.asyncio
async def test_should_require_staff_to_create(client: AsyncClient, login, seed_media_type):
    await seed_media_type("image", SourceKind.image)
    login(RoleName.viewer)

    r = await client.post("/v1/media", json={"bundle": "image", "label": "x"})

    assert r.status_code == 403


# ==============================================================================
# Read / delete
# ==============================================================================

@pytest.mark.asyncio
async def test_should_list_media_items_by_bundle(client: AsyncClient, db_session: AsyncSession, seed_media_type):
    await seed_media_type("image", SourceKind.image)
    await seed_media_type("document", SourceKind.document)
    await _add_item(db_session, "image", "one")
    await _add_item(db_session, "image", "two")
    await _add_item(db_session, "document", "three")

    r = await client.get("/v1/media", params={"bundle": "image"})

    assert r.status_code == 200
    assert sorted(m["label"] for m in r.json()) == ["one", "two"]


@pytest.mark.asyncio
async def test_should_return_404_for_missing_media_item(client: AsyncClient):
    r = await client.get(f"/v1/media/{uuid4()}")

    assert r.status_code == 404
    assert r.json()["detail"] == "not found"


@pytest.mark.asyncio
async def test_should_delete_media_item(client: AsyncClient, db_session: AsyncSession, login, seed_media_type):
    await seed_media_type("image", SourceKind.image)
    m = await _add_item(db_session, "image")
    login(RoleName.editor)

    r = await client.delete(f"/v1/media/{m.id}")

    assert r.status_code == 200
    assert r.json() == {"ok": True}
    assert (await db_session.execute(select(MediaItem).where(MediaItem.id == m.id))).scalars().first() is None

    r = await client.delete(f"/v1/media/{m.id}")
    assert r.status_code == 404


# ==============================================================================
# Template suggestions
# ==============================================================================

@pytest.mark.asyncio
async def test_should_return_template_suggestions_for_view_mode(client: AsyncClient, db_session: AsyncSession, seed_media_type):
    await seed_media_type("video", SourceKind.video_file)
    m = await _add_item(db_session, "video")

    r = await client.get(f"/v1/media/{m.id}/template-suggestions", params={"view_mode": "teaser.compact"})

    assert r.status_code == 200
    assert r.json() == {
        "media_id": str(m.id),
        "view_mode": "teaser.compact",
        "suggestions": ["media__teaser_compact", "media__video", "media__video__teaser_compact"],
    }


@pytest.mark.asyncio
async def test_should_default_to_full_view_mode(client: AsyncClient, db_session: AsyncSession, seed_media_type):
    await seed_media_type("image", SourceKind.image)
    m = await _add_item(db_session, "image")

    r = await client.get(f"/v1/media/{m.id}/template-suggestions")

    assert r.json()["suggestions"] == ["media__full", "media__image", "media__image__full"]


# ==============================================================================
# Derived labels fit the label column
# ==============================================================================

@pytest.mark.asyncio
async def test_should_truncate_long_remote_url_used_as_label(client: AsyncClient, login, seed_media_type):
    # GIVEN: provider knows the host but has no title for this URL
    await seed_media_type("remote_video", SourceKind.remote_video)
    url = "https://videos.example/" + "x" * 300
    login(RoleName.editor)

    # WHEN
    r = await client.post("/v1/media", json={"bundle": "remote_video", "source_value": url})

    # THEN
    assert r.status_code == 201
    body = r.json()
    assert len(body["label"]) == 255
    assert url.startswith(body["label"])
    assert body["source_value"] == url


@pytest.mark.asyncio
async def test_should_truncate_long_file_name_used_as_label(client: AsyncClient, login, seed_media_type):
    await seed_media_type("document", SourceKind.document)
    login(RoleName.editor)

    r = await client.post("/v1/media", json={"bundle": "document", "source_value": "public://docs/" + "a" * 300 + ".pdf"})

    assert r.status_code == 201
    assert r.json()["label"] == "a" * 255
