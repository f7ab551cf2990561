"""Names derived from resources: operation titles and definition names."""

import re
from enum import Enum
from typing import Optional

import inflect

_inflector = inflect.engine()

_VERSION_SUFFIX = re.compile(r"\d_\d{1,2}$")
_RESOURCE_SUFFIX = re.compile(r"Resource$")
_WORDS = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+\d*|[A-Z]+\d*|\d+")


class DefinitionFamily(str, Enum):
    """Definition families and the suffix their names carry."""
    GET = "Get"
    CREATE = "Create"
    UPDATE = "Update"


class DefinitionVariant(str, Enum):
    DEFAULT = ""
    REF = "Ref"
    FULL = "Full"


FAMILY_VARIANTS = {
    DefinitionFamily.GET: (DefinitionVariant.DEFAULT, DefinitionVariant.REF, DefinitionVariant.FULL),
    DefinitionFamily.CREATE: (DefinitionVariant.DEFAULT, DefinitionVariant.FULL),
    DefinitionFamily.UPDATE: (DefinitionVariant.DEFAULT,),
}


def capitalize(value: str) -> str:
    if not value:
        return value
    return value[0].upper() + value[1:]


def schema_base_name(resource_name: str, parent_name: Optional[str] = None) -> str:
    """``concept`` -> ``Concept``; parent ``concept`` + ``name`` -> ``ConceptName``.

    Slashes are dropped and every segment is capitalised.
    """
    segments = resource_name.split('/')
    if parent_name is not None:
        segments = parent_name.split('/') + segments
    return "".join(capitalize(segment) for segment in segments)


def definition_name(resource_name: str, parent_name: Optional[str], family: DefinitionFamily,
                    variant: DefinitionVariant = DefinitionVariant.DEFAULT) -> str:
    return schema_base_name(resource_name, parent_name) + family.value + variant.value


def operation_title(handler_class_name: str, pluralize: bool) -> str:
    """Noun used in operation ids, from the handler class name.

    ``ConceptResource1_8`` -> ``Concept`` (or ``Concepts``); only the last
    word of a camel-case name is pluralised.
    """
    title = _VERSION_SUFFIX.sub("", handler_class_name)
    title = _RESOURCE_SUFFIX.sub("", title)
    if not pluralize or not title:
        return title

    words = _WORDS.findall(title)
    if not words or not title.endswith(words[-1]):
        return plural(title)
    last = words[-1]
    return title[:-len(last)] + plural(last)


def plural(word: str) -> str:
    return _inflector.plural_noun(word) or word
