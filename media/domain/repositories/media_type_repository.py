from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from media.domain.entities.media_type import MediaTypeCreate, MediaTypeUpdate
from media.domain.errors import MediaTypeExists
from media.domain.models.media_type import MediaType
from shared.abstracts.abstract_repository import AbstractRepository


class MediaTypeRepository(AbstractRepository):

    async def insert(self, payload: MediaTypeCreate) -> MediaType:
        obj = MediaType(
            id=payload.id,
            label=payload.label,
            description=payload.description,
            source=payload.source,
            source_field=payload.source_field or payload.source.source_field_name(),
        )
        self.db.add(obj)
        try:
            await self.commit(obj)
        except IntegrityError as e:
            # concurrent creation of the same type (or its source field)
            await self.db.rollback()
            raise MediaTypeExists(payload.id) from e
        return obj

    async def get(self, media_type_id: str) -> Optional[MediaType]:
        res = await self.db.execute(select(MediaType).where(MediaType.id == media_type_id))
        return res.scalars().first()

    async def update(self, media_type_id: str, payload: MediaTypeUpdate) -> Optional[MediaType]:
        obj = await self.get(media_type_id)
        if not obj:
            return None
        data = payload.model_dump(exclude_unset=True)
        if data.get("label") is not None:
            obj.label = data["label"]
        if "description" in data:
            obj.description = data["description"]

        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def delete(self, media_type_id: str) -> bool:
        res = await self.db.execute(delete(MediaType).where(MediaType.id == media_type_id))
        await self.db.commit()
        return bool(res.rowcount)

    async def list(self, **filters) -> Sequence[MediaType]:
        stmt = select(MediaType).order_by(MediaType.id.asc())
        if filters.get("source"):
            stmt = stmt.where(MediaType.source == filters["source"])
        res = await self.db.execute(stmt)
        return res.scalars().all()
