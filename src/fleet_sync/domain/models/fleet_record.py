"""Base model for records owned by the fleet backend."""

from collections.abc import Mapping
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, model_validator


def drop_nulls_with_defaults(model: type[BaseModel], data: Any) -> Any:
    """Remove ``null`` values of optional fields whose default is not None.

    The backend sends ``null`` for unset numbers and flags; such a field
    then takes its default instead of failing validation.
    """
    if not isinstance(data, Mapping):
        return data
    fields = dict(model.model_fields)
    fields.update({f.alias: f for f in model.model_fields.values() if f.alias})
    cleaned = {}
    for key, value in data.items():
        field = fields.get(key)
        if (
            value is None
            and field is not None
            and not field.is_required()
            and field.get_default(call_default_factory=True) is not None
        ):
            continue
        cleaned[key] = value
    return cleaned


class FleetRecord(BaseModel):
    """A server-owned record held as a transient local copy.

    Unknown fields sent by the server are kept (``extra="allow"``) so that a
    local merge never drops data the client does not model explicitly.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id_field: ClassVar[str] = "id"

    @model_validator(mode="before")
    @classmethod
    def _nulls_as_defaults(cls, data: Any) -> Any:
        return drop_nulls_with_defaults(cls, data)

    @property
    def record_id(self) -> str:
        return str(getattr(self, self.id_field))

    def merged_with(self, fields: Mapping[str, Any]) -> Self:
        """Shallow-merge ``fields`` over this record and revalidate."""
        data = self.model_dump(by_alias=True)
        data.update(fields)
        return type(self).model_validate(data)
