"""Conversion of ability input schemas to MCP tool input schemas."""

from typing import Any

from wp_abilities_mcp.abilities.types import (
    Ability,
    EmptySchema,
    InputSchema,
    ObjectSchema,
    parse_input_schema,
)


def canonicalize(schema: Any) -> dict[str, Any]:
    """Convert an input schema to the canonical object-schema shape.

    Never fails. EmptySchema (and any raw value that is not a mapping) yields
    an object schema without properties. ObjectSchema fields are copied
    verbatim with "type" forced to "object".

    Args:
        schema: A parsed InputSchema, or a raw schema value from the API

    Returns:
        dict: JSON schema with "type": "object"
    """
    if not isinstance(schema, (EmptySchema, ObjectSchema)):
        schema = parse_input_schema(schema)

    if isinstance(schema, ObjectSchema):
        return {**schema.fields, "type": "object"}

    return {"type": "object", "properties": {}}


def accepts_input(ability: Ability | InputSchema | Any) -> bool:
    """Check whether an ability declares an object input with properties.

    Takes an Ability, a parsed InputSchema, or a raw schema value. An empty
    "properties" mapping still counts as present.
    """
    schema = ability.input_schema if isinstance(ability, Ability) else ability
    if not isinstance(schema, (EmptySchema, ObjectSchema)):
        schema = parse_input_schema(schema)
    if not isinstance(schema, ObjectSchema):
        return False
    return schema.fields.get("type") == "object" and "properties" in schema.fields
