"""Aggregate Root base class with Generic ID support."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic_core import PydanticUndefined

if TYPE_CHECKING:
    from ..primitives.id_generator import IIDGenerator

ID = TypeVar("ID", str, int, UUID)


class AggregateRoot(BaseModel, Generic[ID]):
    """Base class for all Aggregate Roots.

    Generic over ``ID`` to support UUID, int, or str primary keys.
    Supports ID generation via IIDGenerator at initialization time.

    Usage::

        class User(AggregateRoot[UUID]):
            name: str

        # ID generated automatically with generator
        user = User(id_generator=generator, name="John Doe")

        # ID provided explicitly
        user = User(id=some_id, name="John Doe")
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    id: ID

    def __init__(
        self, id_generator: IIDGenerator | None = None, **data: object
    ) -> None:
        """
        Initialize an Aggregate Root.

        Args:
            id_generator: Optional ID generator strategy. If provided and 'id'
                         is not in data, ID will be auto-generated.
            **data: Aggregate attributes. Must include 'id' OR have
                id_generator provided.

        Raises:
            ValueError: If neither 'id' is provided nor id_generator is supplied.
        """
        if "id" not in data and id_generator is not None:
            data = {**data, "id": id_generator.next_id()}
        elif "id" not in data:
            field_info = self.__class__.model_fields.get("id")
            has_default = field_info and (
                (field_info.default is not PydanticUndefined)
                or (field_info.default_factory is not None)
            )
            if not has_default:
                raise ValueError(
                    "Either 'id' must be provided or 'id_generator' must be supplied "
                    "to auto-generate the ID at initialization time."
                )

        super().__init__(**data)
