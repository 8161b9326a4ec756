from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from media.domain.entities.field_config import FieldConfigCreate
from media.domain.errors import FieldConfigExists
from media.domain.models.field_config import FieldConfig
from shared.abstracts.abstract_repository import AbstractRepository


def field_config_id(entity_type: str, bundle: str, field_name: str) -> str:
    return f"{entity_type}.{bundle}.{field_name}"


class FieldConfigRepository(AbstractRepository):

    async def insert(self, payload: FieldConfigCreate, commit: bool = True) -> FieldConfig:
        obj = FieldConfig(
            id=field_config_id(payload.target_entity_type, payload.target_bundle, payload.field_name),
            target_entity_type=payload.target_entity_type,
            target_bundle=payload.target_bundle,
            field_name=payload.field_name,
            field_type=payload.field_type,
            label=payload.label,
            required=payload.required,
            settings=payload.settings.model_dump(exclude_none=True),
        )
        self.db.add(obj)
        if commit:
            try:
                await self.commit(obj)
            except IntegrityError as e:
                # concurrent creation of the same field
                await self.db.rollback()
                raise FieldConfigExists(obj.id) from e
        return obj

    async def get(self, config_id: str) -> Optional[FieldConfig]:
        res = await self.db.execute(select(FieldConfig).where(FieldConfig.id == config_id))
        return res.scalars().first()

    async def delete(self, config_id: str) -> bool:
        res = await self.db.execute(delete(FieldConfig).where(FieldConfig.id == config_id))
        await self.db.commit()
        return bool(res.rowcount)

    async def delete_by_bundle(self, entity_type: str, bundle: str, commit: bool = True) -> int:
        res = await self.db.execute(
            delete(FieldConfig).where(
                FieldConfig.target_entity_type == entity_type,
                FieldConfig.target_bundle == bundle,
            )
        )
        if commit:
            await self.db.commit()
        return res.rowcount or 0

    async def list(self, **filters) -> Sequence[FieldConfig]:
        stmt = select(FieldConfig).order_by(FieldConfig.id.asc())
        if filters.get("entity_type"):
            stmt = stmt.where(FieldConfig.target_entity_type == filters["entity_type"])
        if filters.get("bundle"):
            stmt = stmt.where(FieldConfig.target_bundle == filters["bundle"])
        res = await self.db.execute(stmt)
        return res.scalars().all()
