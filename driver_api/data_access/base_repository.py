import logging
from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import delete, insert, inspect, select, update
from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError

from driver_api.core.exceptions import StorageError
from driver_api.db.session import ConnectionProvider
from driver_api.models import Base

ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelType]):
    def __init__(self, model: Type[ModelType], provider: ConnectionProvider):
        """
        Base class for data access repositories.
        Provides default CRUD operations built from the model's mapped columns:
        the primary key is the identity, every other column is a data field.
        """
        self.model = model
        self.provider = provider
        self.table = model.__table__

        mapper = inspect(model)
        identity = mapper.primary_key[0]
        self.identity_column = identity
        self.identity_key = mapper.get_property_by_column(identity).key
        # Ordered (attribute, column) pairs for every non-identity field
        self.fields = [
            (prop.key, prop.columns[0])
            for prop in mapper.column_attrs
            if prop.columns[0] is not identity
        ]

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def create(self, entity: ModelType) -> int:
        stmt = insert(self.table).values(self._values(entity))
        try:
            with self.provider.begin() as conn:
                new_id = conn.execute(stmt).inserted_primary_key[0]
        except SQLAlchemyError as e:
            raise self._storage_error(f"creating the {self.entity_name}", e) from e
        logger.info(f"Created {self.entity_name} #{new_id}")
        return new_id

    def get_by_id(self, id: int) -> Optional[ModelType]:
        stmt = select(self.table).where(self.identity_column == id)
        try:
            with self.provider.connect() as conn:
                row = conn.execute(stmt).first()
        except SQLAlchemyError as e:
            raise self._storage_error(f"retrieving the {self.entity_name}", e) from e
        return self._to_entity(row) if row else None

    def get_all(self, page_number: int, page_size: int) -> list[ModelType]:
        offset = (page_number - 1) * page_size
        stmt = (
            select(self.table)
            .order_by(self.identity_column)
            .limit(page_size)
            .offset(offset)
        )
        try:
            with self.provider.connect() as conn:
                rows = conn.execute(stmt).all()
        except SQLAlchemyError as e:
            raise self._storage_error(f"retrieving the {self.entity_name}s", e) from e
        return [self._to_entity(row) for row in rows]

    def update(self, entity: ModelType) -> None:
        id = getattr(entity, self.identity_key)
        stmt = (
            update(self.table)
            .where(self.identity_column == id)
            .values(self._values(entity))
        )
        try:
            with self.provider.begin() as conn:
                rowcount = conn.execute(stmt).rowcount
        except SQLAlchemyError as e:
            raise self._storage_error(f"updating the {self.entity_name}", e) from e
        if rowcount == 0:
            logger.info(f"No {self.entity_name} #{id} to update")

    def delete(self, id: int) -> None:
        stmt = delete(self.table).where(self.identity_column == id)
        try:
            with self.provider.begin() as conn:
                rowcount = conn.execute(stmt).rowcount
        except SQLAlchemyError as e:
            raise self._storage_error(f"deleting the {self.entity_name}", e) from e
        if rowcount:
            logger.info(f"Deleted {self.entity_name} #{id}")

    # --- helpers ---

    def _values(self, entity: ModelType) -> dict[str, Any]:
        """Column name -> bound value for every data field of the entity."""
        return {column.name: getattr(entity, key) for key, column in self.fields}

    def _to_entity(self, row: Row) -> ModelType:
        mapping = row._mapping
        values = {key: mapping[column] for key, column in self.fields}
        values[self.identity_key] = mapping[self.identity_column]
        return self.model(**values)

    def _storage_error(self, action: str, cause: Exception) -> StorageError:
        message = f"An error occurred while {action}"
        logger.error(f"{message}: {cause}", exc_info=cause)
        return StorageError(message)
