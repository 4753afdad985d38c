from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union, Tuple
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, func, and_
from valormind.models.base import Base
from valormind.core.exceptions import NotFoundError

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any, *, raise_if_not_found: bool = True) -> Optional[ModelType]:
        """Get a single record by ID (not soft deleted)"""
        result = await db.execute(
            select(self.model).where(
                and_(self.model.id == id, self.model.is_deleted == False)
            )
        )
        obj = result.scalar_one_or_none()

        if raise_if_not_found and obj is None:
            raise NotFoundError(f"{self.model.__name__}")

        return obj

    async def get_by_user_id(self, db: AsyncSession, id: Any, user_id: str, *, raise_if_not_found: bool = True) -> Optional[ModelType]:
        """Get a single record by ID and user_id (not soft deleted)"""
        result = await db.execute(
            select(self.model).where(
                and_(
                    self.model.id == id,
                    self.model.user_id == user_id,
                    self.model.is_deleted == False
                )
            )
        )
        obj = result.scalar_one_or_none()

        if raise_if_not_found and obj is None:
            raise NotFoundError(f"{self.model.__name__}")

        return obj

    def _apply_filters(self, query, filters: Optional[Dict[str, Any]]):
        if not filters:
            return query

        filter_conditions = []
        for field, value in filters.items():
            if not hasattr(self.model, field):
                continue
            field_obj = getattr(self.model, field)
            if isinstance(value, (list, tuple)):
                filter_conditions.append(field_obj.in_(value))
            elif isinstance(value, dict):
                # Handle range queries like {"gte": 10, "lte": 20}
                for op, val in value.items():
                    if op == "gte":
                        filter_conditions.append(field_obj >= val)
                    elif op == "lte":
                        filter_conditions.append(field_obj <= val)
                    elif op == "gt":
                        filter_conditions.append(field_obj > val)
                    elif op == "lt":
                        filter_conditions.append(field_obj < val)
            else:
                filter_conditions.append(field_obj == value)

        if filter_conditions:
            query = query.where(and_(*filter_conditions))
        return query

    async def get_multi(
        self,
        db: AsyncSession,
        *,
        skip: int = 0,
        limit: int = 100,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = True
    ) -> Tuple[List[ModelType], int]:
        """Get multiple records with pagination and filtering"""
        query = select(self.model).where(self.model.is_deleted == False)
        query = self._apply_filters(query, filters)

        # Get total count for pagination
        count_query = select(func.count()).select_from(query.subquery())
        total_result = await db.execute(count_query)
        total = total_result.scalar()

        # Apply ordering
        if order_by and hasattr(self.model, order_by):
            order_field = getattr(self.model, order_by)
            if order_desc:
                query = query.order_by(order_field.desc())
            else:
                query = query.order_by(order_field.asc())
        else:
            # Default ordering by created_at desc
            query = query.order_by(self.model.created_at.desc())

        # Apply pagination
        query = query.offset(skip).limit(limit)

        result = await db.execute(query)
        items = result.scalars().all()

        return items, total

    async def get_by_field(
        self,
        db: AsyncSession,
        *,
        field: str,
        value: Any,
        skip: int = 0,
        limit: int = 100,
        order_by: Optional[str] = None,
        order_desc: bool = True
    ) -> Tuple[List[ModelType], int]:
        """Get records by a specific field value with pagination (not soft deleted)"""
        if not hasattr(self.model, field):
            raise ValueError(f"Field '{field}' does not exist on model {self.model.__name__}")

        return await self.get_multi(
            db,
            skip=skip,
            limit=limit,
            filters={field: value},
            order_by=order_by,
            order_desc=order_desc
        )

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """Create a new record"""
        return await self.create_with_extra(db, obj_in=obj_in, extra_data={})

    async def create_with_extra(self, db: AsyncSession, *, obj_in: CreateSchemaType, extra_data: Dict[str, Any]) -> ModelType:
        """Create a new record with additional fields"""
        # Use model_dump() to preserve Python types (date, datetime, etc.)
        # instead of jsonable_encoder which converts them to strings
        if hasattr(obj_in, 'model_dump'):
            obj_in_data = obj_in.model_dump(exclude_unset=True)
        else:
            obj_in_data = jsonable_encoder(obj_in)

        obj_in_data.update(extra_data)
        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """Update a record"""
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update_by_field(
        self,
        db: AsyncSession,
        *,
        field: str,
        value: Any,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> int:
        """Bulk update records by field value, returns rows affected"""
        if not hasattr(self.model, field):
            raise ValueError(f"Field '{field}' does not exist on model {self.model.__name__}")

        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        result = await db.execute(
            update(self.model).where(
                and_(
                    getattr(self.model, field) == value,
                    self.model.is_deleted == False
                )
            ).values(**update_data)
        )
        await db.commit()
        return result.rowcount

    async def soft_delete_by_user_id(self, db: AsyncSession, *, id: Any, user_id: str, raise_if_not_found: bool = True) -> bool:
        """Soft delete a record by ID and user_id"""
        result = await db.execute(
            update(self.model).where(
                and_(
                    self.model.id == id,
                    self.model.user_id == user_id,
                    self.model.is_deleted == False
                )
            ).values(is_deleted=True)
        )

        await db.commit()
        rows_affected = result.rowcount

        if raise_if_not_found and rows_affected == 0:
            raise NotFoundError(f"{self.model.__name__}")

        return rows_affected > 0

    async def count(
        self,
        db: AsyncSession,
        *,
        filters: Optional[Dict[str, Any]] = None
    ) -> int:
        """Count records with optional filters (not soft deleted)"""
        query = select(func.count()).select_from(self.model).where(self.model.is_deleted == False)
        query = self._apply_filters(query, filters)
        result = await db.execute(query)
        return result.scalar()
