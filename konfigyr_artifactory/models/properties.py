"""Configuration property descriptor models.

A descriptor is owned by the artifact metadata it belongs to but holds no
reference back to it. Descriptors order by name only; equality is structural.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from konfigyr_artifactory.config import ArtifactorySettings, settings as default_settings
from konfigyr_artifactory.core.validation import is_blank, require_text

logger = logging.getLogger(__name__)


class PropertyType(str, Enum):
    """Semantic type of a configuration property value."""

    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    DURATION = "DURATION"
    TIME_ZONE = "TIME_ZONE"
    DATE = "DATE"
    DATE_TIME = "DATE_TIME"
    URI = "URI"
    INTERNET_ADDRESS = "INTERNET_ADDRESS"
    DATA_SIZE = "DATA_SIZE"
    MIME_TYPE = "MIME_TYPE"
    CHARSET = "CHARSET"
    LOCALE = "LOCALE"


class DataType(str, Enum):
    """Shape of the value, independent of its PropertyType."""

    ATOMIC = "ATOMIC"
    COLLECTION = "COLLECTION"
    COMPOSITE = "COMPOSITE"


class Deprecation(BaseModel):
    """Deprecation notice embedded in a PropertyDescriptor."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    reason: str | None = None
    replacement: str | None = None  # name of the property to use instead


class PropertyDescriptor(BaseModel):
    """Metadata of one configuration property exposed by an artifact.

    Field names double as wire keys, except ``value_schema`` which travels
    as ``schema`` and is only accepted under that key. Optional scalars are
    omitted from the wire when unset, ``hints`` is always written.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    value_schema: str | None = Field(default=None, alias="schema")
    type: PropertyType = PropertyType.STRING
    data_type: DataType = DataType.ATOMIC
    type_name: str | None = None  # source-language type, e.g. java.lang.String
    description: str | None = None
    default_value: str | None = None
    hints: tuple[str, ...] = ()
    deprecation: Deprecation | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if is_blank(value):
            raise ValueError("Property name can not be blank")
        return value

    @field_validator("hints", mode="before")
    @classmethod
    def _drop_blank_hints(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            # non-string entries are left for the tuple[str, ...] check
            return tuple(
                hint
                for hint in value
                if hint is not None and not (isinstance(hint, str) and is_blank(hint))
            )
        return value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PropertyDescriptor):
            return NotImplemented
        return self.name < other.name

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation is not None

    @classmethod
    def builder(cls) -> PropertyDescriptorBuilder:
        """Start a fluent builder for a new descriptor."""
        return PropertyDescriptorBuilder()


class PropertyDescriptorBuilder:
    """Single-use accumulator for a PropertyDescriptor.

    Hints are appended in insertion order; ``None`` and blank hints are
    skipped and duplicates are kept.

    Parameters
    ----------
    settings:
        Settings consulted for the default strictness of ``build()``.
    """

    def __init__(self, settings: ArtifactorySettings | None = None) -> None:
        self._settings = settings or default_settings
        self._name: str | None = None
        self._schema: str | None = None
        self._type = PropertyType.STRING
        self._data_type = DataType.ATOMIC
        self._type_name: str | None = None
        self._description: str | None = None
        self._default_value: str | None = None
        self._deprecation: Deprecation | None = None
        self._hints: list[str] = []

    def name(self, name: str | None) -> PropertyDescriptorBuilder:
        """Property name, case-sensitive and unique within one artifact."""
        self._name = name
        return self

    def schema(self, schema: str | None) -> PropertyDescriptorBuilder:
        """JSON Schema describing the structure of the property value."""
        self._schema = schema
        return self

    def type(self, type: PropertyType | str | None) -> PropertyDescriptorBuilder:
        self._type = PropertyType(type) if type is not None else PropertyType.STRING
        return self

    def data_type(self, data_type: DataType | str | None) -> PropertyDescriptorBuilder:
        self._data_type = DataType(data_type) if data_type is not None else DataType.ATOMIC
        return self

    def type_name(self, type_name: str | None) -> PropertyDescriptorBuilder:
        """Type name in the language the artifact was written in.

        Purely informational, for instance ``java.lang.String``.
        """
        self._type_name = type_name
        return self

    def description(self, description: str | None) -> PropertyDescriptorBuilder:
        self._description = description
        return self

    def default_value(self, value: str | None) -> PropertyDescriptorBuilder:
        self._default_value = value
        return self

    def hint(self, hint: str | None) -> PropertyDescriptorBuilder:
        if not is_blank(hint):
            self._hints.append(hint)  # type: ignore[arg-type]
        return self

    def hints(self, *hints: str | Iterable[str] | None) -> PropertyDescriptorBuilder:
        """Add suggested values, either as arguments or as one iterable."""
        if len(hints) == 1 and hints[0] is not None and not isinstance(hints[0], str):
            values: Iterable[Any] = hints[0]
        else:
            values = hints
        for hint in values:
            self.hint(hint)
        return self

    def deprecation(
        self,
        deprecation: Deprecation | str | None,
        replacement: str | None = None,
    ) -> PropertyDescriptorBuilder:
        """Mark the property deprecated.

        Accepts a ready Deprecation, or a reason and an optional replacement
        property name.
        """
        if deprecation is None or isinstance(deprecation, Deprecation):
            self._deprecation = deprecation
        else:
            self._deprecation = Deprecation(reason=deprecation, replacement=replacement)
        return self

    def build(self, *, strict: bool | None = None) -> PropertyDescriptor:
        """Validate and create the descriptor.

        When ``strict`` (defaulting to ``settings.strict_descriptors``) is
        set, the value schema and type name are required as well.
        """
        if strict is None:
            strict = self._settings.strict_descriptors

        name = require_text(self._name, "Property name can not be blank")
        if strict:
            require_text(self._schema, "Property value schema can not be blank")
            require_text(self._type_name, "Property type name can not be blank")

        return PropertyDescriptor(
            name=name,
            schema=self._schema,
            type=self._type,
            data_type=self._data_type,
            type_name=self._type_name,
            description=self._description,
            default_value=self._default_value,
            hints=tuple(self._hints),
            deprecation=self._deprecation,
        )
