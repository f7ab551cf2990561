"""Factories for the typed schema properties used in generated documents."""

from enum import Enum
from typing import List, Optional, Type

from .schema import SchemaProperty


DEFINITIONS_PREFIX = "#/definitions/"


def string_property(description: Optional[str] = None, format: Optional[str] = None) -> SchemaProperty:
    return SchemaProperty(type="string", format=format, description=description)


def integer_property() -> SchemaProperty:
    return SchemaProperty(type="integer", format="int32")


def boolean_property() -> SchemaProperty:
    return SchemaProperty(type="boolean")


def date_property() -> SchemaProperty:
    return SchemaProperty(type="string", format="date")


def double_property() -> SchemaProperty:
    return SchemaProperty(type="number", format="double")


def object_property(**properties: SchemaProperty) -> SchemaProperty:
    return SchemaProperty(type="object", properties=properties or None)


def array_property(items: Optional[SchemaProperty] = None) -> SchemaProperty:
    return SchemaProperty(type="array", items=items or object_property())


def ref_property(definition_name: str) -> SchemaProperty:
    return SchemaProperty(ref=definition_ref(definition_name))


def enum_property(enum_class: Type[Enum]) -> SchemaProperty:
    """String property listing the members of a domain enum."""
    values: List[str] = [member.name for member in enum_class]
    return SchemaProperty(type="string", description="enum", enum=values or None)


def definition_ref(definition_name: str) -> str:
    return DEFINITIONS_PREFIX + definition_name


def definition_name_from_ref(ref: str) -> Optional[str]:
    if not ref.startswith(DEFINITIONS_PREFIX):
        return None
    return ref[len(DEFINITIONS_PREFIX):]
