from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from contest.database import Base

ModelType = TypeVar("ModelType", bound=Base)
PydanticType = TypeVar("PydanticType", bound=BaseModel)


class BaseRepository(Generic[ModelType, PydanticType]):
    """Generic base repository with common CRUD operations."""

    def __init__(self, db: AsyncSession, model_class: Any):
        self.db = db
        self.model_class = model_class

    async def get_by_id(self, id: int) -> Optional[PydanticType]:
        """Get a single record by ID."""
        query = (
            select(self.model_class)
            .where(self.model_class.id == id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        db_model = result.scalar_one_or_none()
        return self._to_pydantic(db_model) if db_model else None

    async def create(self, pydantic_model: Any) -> PydanticType:
        """Create a new record."""
        db_model = self._from_pydantic(pydantic_model)
        self.db.add(db_model)
        await self.db.commit()
        await self.db.refresh(db_model)
        return self._to_pydantic(db_model)

    async def delete(self, id: int) -> Optional[PydanticType]:
        """Delete a record by ID and return its last state."""
        query = (
            select(self.model_class)
            .where(self.model_class.id == id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        db_model = result.scalar_one_or_none()

        if not db_model:
            return None

        deleted = self._to_pydantic(db_model)
        await self.db.delete(db_model)
        await self.db.commit()
        return deleted

    async def get_all(self, *order_by: Any) -> List[PydanticType]:
        """Get all records in the given order."""
        query = (
            select(self.model_class)
            .order_by(*order_by)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        db_models = result.scalars().all()
        return [self._to_pydantic(db_model) for db_model in db_models]

    async def count(self, *criteria: Any) -> int:
        """Count records matching the given criteria."""
        query = select(func.count()).select_from(self.model_class).where(*criteria)
        result = await self.db.execute(query)
        return int(result.scalar_one())

    def _to_pydantic(self, db_model: ModelType) -> PydanticType:
        """Convert SQLAlchemy model to Pydantic model.

        This should be overridden in subclasses for specific conversion logic.
        """
        raise NotImplementedError

    def _from_pydantic(self, pydantic_model: Any) -> ModelType:
        """Convert Pydantic model to SQLAlchemy model.

        This should be overridden in subclasses for specific conversion logic.
        """
        raise NotImplementedError
