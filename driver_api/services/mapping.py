"""
Field-by-field mapping between storage models and transport schemas.

A map is declared once per (source, destination) pair; mapping copies every
destination field the source also carries, with no transformation.
"""

from typing import Any, Callable, Iterable, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect

from driver_api.models import Base, Driver
from driver_api.schemas.driver_schemas import DriverCreate, DriverRead

T = TypeVar("T")

_MISSING = object()


def _destination_fields(destination: type) -> list[str]:
    if issubclass(destination, BaseModel):
        return list(destination.model_fields)
    if issubclass(destination, Base):
        return [prop.key for prop in inspect(destination).column_attrs]
    raise TypeError(f"Cannot map to {destination.__name__}")


class Mapper:
    def __init__(self):
        self._maps: dict[tuple[type, type], Callable[[Any], Any]] = {}

    def register(self, source: type, destination: type) -> None:
        fields = _destination_fields(destination)
        is_schema = issubclass(destination, BaseModel)

        def convert(obj):
            values = {}
            for name in fields:
                value = getattr(obj, name, _MISSING)
                if value is not _MISSING:
                    values[name] = value
            if is_schema:
                return destination.model_validate(values)
            return destination(**values)

        self._maps[(source, destination)] = convert

    def map(self, obj: Any, destination: Type[T]) -> T:
        try:
            convert = self._maps[(type(obj), destination)]
        except KeyError:
            raise LookupError(
                f"No mapping registered from {type(obj).__name__} to {destination.__name__}"
            ) from None
        return convert(obj)

    def map_many(self, objs: Iterable[Any], destination: Type[T]) -> list[T]:
        return [self.map(obj, destination) for obj in objs]


def driver_mapper() -> Mapper:
    """Mapper with the Driver maps registered."""
    mapper = Mapper()
    mapper.register(Driver, DriverRead)
    mapper.register(DriverRead, Driver)
    mapper.register(DriverCreate, Driver)
    return mapper
