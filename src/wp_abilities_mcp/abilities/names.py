"""Mapping between ability identifiers and MCP tool names.

Ability identifiers are hierarchical ("core/get-site-info") while MCP tool
names are flat ("wp_core_get_site_info"). The reverse mapping splits on
underscores, so identifiers that themselves contain underscores (or a hyphen
in the category) do not round-trip: "my_cat/do-thing" comes back as
"my/cat-do-thing".
"""

TOOL_NAME_PREFIX = "wp_"


def to_tool_name(ability_name: str) -> str:
    """Convert an ability identifier to a tool name.

    Example:
        >>> to_tool_name("core/get-site-info")
        'wp_core_get_site_info'
    """
    return TOOL_NAME_PREFIX + ability_name.replace("/", "_").replace("-", "_")


def to_ability_name(tool_name: str) -> str:
    """Convert a tool name back to an ability identifier.

    The first underscore-separated segment is the category; the remaining
    segments are joined with hyphens to form the action.

    Example:
        >>> to_ability_name("wp_core_get_site_info")
        'core/get-site-info'
    """
    if tool_name.startswith(TOOL_NAME_PREFIX):
        tool_name = tool_name[len(TOOL_NAME_PREFIX) :]
    category, *rest = tool_name.split("_")
    return f"{category}/{'-'.join(rest)}"
