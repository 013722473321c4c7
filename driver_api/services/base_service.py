import logging
from typing import Generic, Optional, Type, TypeVar

from pydantic import BaseModel

from driver_api.data_access.base_repository import BaseRepository, ModelType
from driver_api.services.mapping import Mapper

CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
ReadSchemaType = TypeVar("ReadSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseService(Generic[CreateSchemaType, ReadSchemaType, ModelType]):
    """
    Generic CRUD service.
    Maps transport schemas to storage models and delegates to the repository.
    Repository errors are logged here and re-raised unchanged.
    """

    def __init__(
        self,
        repository: BaseRepository[ModelType],
        mapper: Mapper,
        read_schema: Type[ReadSchemaType],
    ):
        self.repository = repository
        self.mapper = mapper
        self.model = repository.model
        self.read_schema = read_schema

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def create(self, obj_in: CreateSchemaType) -> int:
        entity = self.mapper.map(obj_in, self.model)
        try:
            return self.repository.create(entity)
        except Exception as e:
            logger.error(f"Service failed to create {self.entity_name}: {e}")
            raise

    def get_by_id(self, id: int) -> Optional[ReadSchemaType]:
        try:
            entity = self.repository.get_by_id(id)
        except Exception as e:
            logger.error(f"Service failed to get {self.entity_name} #{id}: {e}")
            raise
        if entity is None:
            return None
        return self.mapper.map(entity, self.read_schema)

    def get_all(self, page_number: int, page_size: int) -> list[ReadSchemaType]:
        try:
            entities = self.repository.get_all(page_number, page_size)
        except Exception as e:
            logger.error(
                f"Service failed to list {self.entity_name}s "
                f"(page {page_number}, size {page_size}): {e}"
            )
            raise
        return self.mapper.map_many(entities, self.read_schema)

    def update(self, id: int, obj_in: ReadSchemaType) -> None:
        entity = self.mapper.map(obj_in, self.model)
        # The path id wins over any id in the body
        setattr(entity, self.repository.identity_key, id)
        try:
            self.repository.update(entity)
        except Exception as e:
            logger.error(f"Service failed to update {self.entity_name} #{id}: {e}")
            raise

    def delete(self, id: int) -> None:
        try:
            self.repository.delete(id)
        except Exception as e:
            logger.error(f"Service failed to delete {self.entity_name} #{id}: {e}")
            raise
