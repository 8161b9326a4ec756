from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, func, select

from media.domain.models.media_item import MediaItem
from shared.abstracts.abstract_repository import AbstractRepository


class MediaItemRepository(AbstractRepository):

    async def insert(self, bundle: str, label: str, status: bool, source_value: str | None) -> MediaItem:
        obj = MediaItem(bundle=bundle, label=label, status=status, source_value=source_value)
        self.db.add(obj)
        await self.commit(obj)
        return obj

    async def get(self, media_id: UUID) -> Optional[MediaItem]:
        res = await self.db.execute(select(MediaItem).where(MediaItem.id == media_id))
        return res.scalars().first()

    async def delete(self, media_id: UUID) -> bool:
        res = await self.db.execute(delete(MediaItem).where(MediaItem.id == media_id))
        await self.db.commit()
        return bool(res.rowcount)

    async def list(self, *, bundle: str | None = None, limit: int = 50, offset: int = 0) -> Sequence[MediaItem]:
        stmt = select(MediaItem).order_by(MediaItem.created_at.desc(), MediaItem.id).limit(limit).offset(offset)
        if bundle:
            stmt = stmt.where(MediaItem.bundle == bundle)
        res = await self.db.execute(stmt)
        return res.scalars().all()

    async def count_by_bundle(self, bundle: str) -> int:
        res = await self.db.execute(select(func.count()).select_from(MediaItem).where(MediaItem.bundle == bundle))
        return int(res.scalar_one())
