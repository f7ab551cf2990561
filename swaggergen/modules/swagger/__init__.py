"""Swagger 2.0 document model, loading and saving."""

from .parser import SwaggerParser, SwaggerParserError
from .schema import (
    SwaggerSpec,
    Info,
    Contact,
    License,
    ExternalDocs,
    PathItem,
    Operation,
    Parameter,
    Response,
    SchemaModel,
    SchemaProperty,
    object_model,
    Scheme,
)

__all__ = [
    # Parser
    "SwaggerParser",
    "SwaggerParserError",

    # Schema
    "SwaggerSpec",
    "Info",
    "Contact",
    "License",
    "ExternalDocs",
    "PathItem",
    "Operation",
    "Parameter",
    "Response",
    "SchemaModel",
    "SchemaProperty",
    "object_model",
    "Scheme",
]
