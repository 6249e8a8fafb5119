"""WordPress Abilities API integration layer.

This package provides the async client for the wp-abilities/v1 REST API,
cached ability discovery, tool-name translation, input schema conversion,
and ability execution.
"""

from wp_abilities_mcp.abilities.client import AbilitiesClient
from wp_abilities_mcp.abilities.directory import AbilityDirectory, DirectorySnapshot
from wp_abilities_mcp.abilities.dispatcher import InvocationDispatcher, has_input
from wp_abilities_mcp.abilities.names import to_ability_name, to_tool_name
from wp_abilities_mcp.abilities.schema import accepts_input, canonicalize
from wp_abilities_mcp.abilities.types import (
    Ability,
    AbilityAnnotations,
    EmptySchema,
    InputSchema,
    ObjectSchema,
    parse_input_schema,
)

__all__ = [
    "AbilitiesClient",
    "Ability",
    "AbilityAnnotations",
    "AbilityDirectory",
    "DirectorySnapshot",
    "EmptySchema",
    "InputSchema",
    "InvocationDispatcher",
    "ObjectSchema",
    "accepts_input",
    "canonicalize",
    "has_input",
    "parse_input_schema",
    "to_ability_name",
    "to_tool_name",
]
