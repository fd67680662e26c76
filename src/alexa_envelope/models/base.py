"""Base class shared by every wire structure."""

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializationInfo, SerializerFunctionWrapHandler, model_serializer

from ..naming import WIRE_SCHEMAS


def wire_config(structure: str) -> ConfigDict:
    """
    Model config for ``structure`` taken from the naming table.

    Field aliases come from ``WIRE_SCHEMAS[structure]``; a model field with no
    declared wire name fails at class creation. Extensible structures keep
    unknown keys in ``model_extra``, the others drop them.
    """
    schema = WIRE_SCHEMAS[structure]

    def alias(field_name: str) -> str:
        try:
            return schema.wire_name(field_name)
        except KeyError:
            raise KeyError(f"No wire name declared for {structure}.{field_name}") from None

    return ConfigDict(
        alias_generator=alias,
        extra="allow" if schema.extensible else "ignore",
    )


class WireModel(BaseModel):
    """
    Immutable envelope structure.

    Declared fields left as ``None`` are absent and are not written back out;
    unknown keys kept by extensible structures are written back exactly as
    received, nulls included. Constructors take attribute names; the codec
    reads wire names only.
    """

    model_config = ConfigDict(validate_by_alias=True, validate_by_name=True, frozen=True)

    @model_serializer(mode="wrap")
    def omit_absent(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        for name, field in type(self).model_fields.items():
            key = field.alias if info.by_alias and field.alias else name
            if key in data and data[key] is None:
                del data[key]
        return data

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict using wire field names."""
        return self.model_dump(mode="json", by_alias=True)
