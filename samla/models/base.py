"""Pydantic base schema utilities for the Samla data transfer layer.

Provides a common `BaseSchema` that enforces camelCase aliasing for every record
exchanged with the backend, and the coercion helpers used to build records from
loosely-typed payloads (plain mappings or JSON text).

Coercion rules shared by all shapes:
- A JSON string/bytes payload is decoded first; invalid JSON raises
  `MalformedPayloadError`.
- Absent fields, and explicit nulls for non-optional fields, take the field's
  zero value instead of failing. Null items in string lists become ``""``.
- Numbers sent for string fields are kept as their text (``5`` -> ``"5"``).
  Values with no sensible conversion (``"id": "abc"``) still raise
  `MalformedPayloadError`.
- Unknown fields are ignored.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Type, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from samla.errors import MalformedPayloadError

SchemaT = TypeVar("SchemaT", bound="BaseSchema")

Payload = Union[str, bytes, bytearray, Mapping[str, Any], BaseModel, None]


def _to_camel(s: str) -> str:
    """Convert snake_case to camelCase for JSON aliasing."""
    parts = s.split("_")
    return parts[0] + "".join(p.capitalize() or "_" for p in parts[1:])


def decode_payload(raw: Union[str, bytes, bytearray], shape: str) -> Any:
    """Decode JSON text for `shape`, raising `MalformedPayloadError` on bad input."""
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedPayloadError(shape, f"invalid JSON ({exc})") from exc


def _describe(exc: ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in exc.errors())


class BaseSchema(BaseModel):
    """Shared base for all records in the data transfer layer.

    - Ignores unknown fields so newer backends stay readable
    - Enables populate_by_name for using either snake_case or camelCase
    - Uses a snake->camel alias generator for JSON interop
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        alias_generator=_to_camel,  # snake_case -> camelCase aliases
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _normalize_nulls(cls, data: Any) -> Any:
        """Drop nulls for non-optional fields and blank out null items of string lists."""
        if not isinstance(data, Mapping):
            return data
        nullable = set()
        str_lists = set()
        for name, field in cls.model_fields.items():
            keys = {name, field.alias or _to_camel(name)}
            if not field.is_required() and field.default is None:
                nullable |= keys
            if get_origin(field.annotation) is list and get_args(field.annotation) == (str,):
                str_lists |= keys
        normalized = {}
        for key, value in data.items():
            if value is None and key not in nullable:
                continue
            if key in str_lists and isinstance(value, list):
                value = ["" if item is None else item for item in value]
            normalized[key] = value
        return normalized

    @classmethod
    def create_from(cls: Type[SchemaT], source: Payload = None) -> SchemaT:
        """Build a record from a mapping, JSON text, another record, or nothing.

        Examples:
            >>> Manufacturer.create_from('{"id": 3, "name": "Acme"}')
            Manufacturer(id=3, name='Acme')
            >>> Manufacturer.create_from()
            Manufacturer(id=0, name='')

        Raises:
            MalformedPayloadError: if JSON text cannot be decoded, does not hold an
                object, or a value cannot be coerced to its field type.
        """
        shape = cls.__name__
        if source is None:
            return cls()
        if isinstance(source, cls):
            return source.model_copy(deep=True)
        if isinstance(source, BaseModel):
            source = source.model_dump(by_alias=True)
        if isinstance(source, (str, bytes, bytearray)):
            source = decode_payload(source, shape)
        if not isinstance(source, Mapping):
            raise MalformedPayloadError(shape, f"expected an object, got {type(source).__name__}")
        try:
            return cls.model_validate(dict(source))
        except ValidationError as exc:
            raise MalformedPayloadError(shape, _describe(exc)) from exc

    def to_payload(self) -> Dict[str, Any]:
        """Serialize into the camelCase mapping the backend expects."""
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self) -> str:
        """Serialize into camelCase JSON text."""
        return self.model_dump_json(by_alias=True)


def convert_values(
    value: Any,
    schema: Type[SchemaT],
    as_map: bool = False,
) -> Union[List[SchemaT], Dict[str, SchemaT]]:
    """Convert a sequence (or, with ``as_map``, a mapping) of payloads into records.

    Each element goes through ``schema.create_from``. Empty or absent input gives
    an empty list, or an empty dict in map mode. Mapping keys are preserved.

    Examples:
        >>> convert_values([{"id": 1, "name": "a"}], Tag)
        [Tag(id=1, name='a')]
        >>> convert_values({"x": {"id": 2}}, Tag, as_map=True)
        {'x': Tag(id=2, name='')}
        >>> convert_values(None, Tag)
        []
    """
    shape = schema.__name__
    if isinstance(value, (str, bytes, bytearray)):
        value = decode_payload(value, shape)
    if not value:
        return {} if as_map else []
    if as_map:
        if not isinstance(value, Mapping):
            raise MalformedPayloadError(shape, f"expected a mapping of records, got {type(value).__name__}")
        return {key: schema.create_from(item) for key, item in value.items()}
    if isinstance(value, Mapping) or not isinstance(value, Iterable):
        raise MalformedPayloadError(shape, f"expected a sequence of records, got {type(value).__name__}")
    return [schema.create_from(item) for item in value]
