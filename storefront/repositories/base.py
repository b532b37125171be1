"""Repositorio CRUD base — padre de todos los repositorios.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic Create, Read, Update, Delete and counting operations over
integer primary keys.

Usage:
    class RegionRepository(BaseRepository[Region]):
        def __init__(self) -> None:
            super().__init__(Region)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import Base

# Variable genérica — Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Repositorio CRUD genérico.

    Generic CRUD repository providing common database operations.
    Writes only flush; the route that owns the request commits.

    Attributes:
        model: Clase del modelo SQLAlchemy (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(self, db: AsyncSession, record_id: int) -> ModelType | None:
        """Obtiene un registro por id.

        Retrieve a single record by its primary key.

        Args:
            db: Sesión asíncrona (Async database session)
            record_id: Id del registro (Record id)

        Returns:
            ModelType | None: Registro o None (Found record or None)
        """
        return await db.get(self.model, record_id)

    async def get_all(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """Obtiene todos los registros que cumplen los filtros.

        Retrieve all records matching equality filters, ordered by id unless
        another ordering is given.

        Args:
            db: Sesión asíncrona (Async database session)
            filters: Filtros {'columna': valor} (Equality filters)
            order_by: Columna de orden (Column to order by)

        Returns:
            Sequence[ModelType]: Registros (Matching records)
        """
        query: Select = select(self.model)

        if filters:
            for column_name, value in filters.items():
                if hasattr(self.model, column_name) and value is not None:
                    query = query.where(getattr(self.model, column_name) == value)

        query = query.order_by(order_by if order_by is not None else self.model.id)
        result = await db.execute(query)
        return result.scalars().all()

    async def create(self, db: AsyncSession, obj_data: dict[str, Any]) -> ModelType:
        """Crea un registro nuevo.

        Create a new record and flush so its id is populated.

        Args:
            db: Sesión asíncrona (Async database session)
            obj_data: Datos del registro (Column values)

        Returns:
            ModelType: Registro creado (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        db_obj: ModelType,
        update_data: dict[str, Any],
    ) -> ModelType:
        """Aplica cambios a un registro ya cargado.

        Apply the given column values to an already loaded record.

        Args:
            db: Sesión asíncrona (Async database session)
            db_obj: Registro existente (Loaded record)
            update_data: Campos a sobrescribir (Fields to overwrite)

        Returns:
            ModelType: Registro actualizado (Updated record)
        """
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, record_id: int) -> bool:
        """Elimina un registro por id.

        Delete a record by its primary key.

        Returns:
            bool: False si no existía (False when the record did not exist)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True

    async def exists(self, db: AsyncSession, filters: dict[str, Any]) -> bool:
        """Indica si existe algún registro con esos valores.

        Check if a record matching the given equality filters exists.
        """
        return await self.count(db, filters) > 0

    async def count(self, db: AsyncSession, filters: dict[str, Any] | None = None) -> int:
        """Cuenta registros, opcionalmente filtrados.

        Count records matching optional equality filters.
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in (filters or {}).items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        return (await db.execute(query)).scalar() or 0

    async def find_one_by(self, db: AsyncSession, **filters: Any) -> ModelType | None:
        """Primer registro que cumple los filtros.

        Return the first record matching the equality filters, or None.
        """
        query: Select = select(self.model)
        for column_name, value in filters.items():
            query = query.where(getattr(self.model, column_name) == value)
        result = await db.execute(query.limit(1))
        return result.scalars().first()
