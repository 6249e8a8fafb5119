"""Type definitions for the WordPress Abilities API.

This module contains dataclasses representing abilities as returned by the
wp-abilities/v1 REST endpoints, including the tagged union used for their
input schemas.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class EmptySchema:
    """Input schema sentinel meaning the ability accepts no input.

    WordPress serializes this as an empty JSON array.
    """


@dataclass(frozen=True)
class ObjectSchema:
    """An object-shaped JSON schema, kept verbatim."""

    fields: dict[str, Any] = field(default_factory=dict)


InputSchema = EmptySchema | ObjectSchema


def parse_input_schema(raw: Any) -> InputSchema:
    """Parse a raw input schema into the tagged union.

    Mappings become ObjectSchema. Everything else (the empty-array sentinel,
    non-empty arrays, primitives, None) is treated as EmptySchema.
    """
    if isinstance(raw, dict):
        return ObjectSchema(fields=dict(raw))
    return EmptySchema()


@dataclass(frozen=True)
class AbilityAnnotations:
    """Side-effect hints declared by an ability.

    Attributes:
        readonly: The ability does not modify site state
        destructive: The ability may destroy data
        idempotent: Repeated calls with the same input have the same effect
    """

    readonly: bool = False
    destructive: bool = False
    idempotent: bool = False

    @staticmethod
    def from_api(data: Any) -> "AbilityAnnotations":
        """Create annotations from the `meta.annotations` object.

        Only literal booleans are honoured; anything else falls back to False.
        """
        if not isinstance(data, dict):
            return AbilityAnnotations()
        return AbilityAnnotations(
            readonly=data.get("readonly") is True,
            destructive=data.get("destructive") is True,
            idempotent=data.get("idempotent") is True,
        )


@dataclass(frozen=True)
class Ability:
    """An ability registered on the WordPress site.

    Attributes:
        name: Hierarchical identifier (e.g., "core/get-site-info")
        label: Human-readable label
        description: Human-readable description
        category: Category slug (e.g., "core")
        input_schema: Parsed input schema
        output_schema: Output schema, not interpreted
        annotations: Side-effect hints
        execution_link: Direct URL for running the ability, if advertised
    """

    name: str
    label: str = ""
    description: str = ""
    category: str = ""
    input_schema: InputSchema = field(default_factory=EmptySchema)
    output_schema: dict[str, Any] = field(default_factory=dict)
    annotations: AbilityAnnotations = field(default_factory=AbilityAnnotations)
    execution_link: str | None = None

    @staticmethod
    def from_api(data: dict[str, Any]) -> "Ability":
        """Create an Ability from a wp-abilities/v1 REST record.

        Args:
            data: Decoded JSON object for one ability

        Returns:
            Ability: Parsed ability
        """
        meta = data.get("meta") or {}
        annotations = AbilityAnnotations.from_api(
            meta.get("annotations") if isinstance(meta, dict) else None
        )

        execution_link = None
        links = data.get("_links") or {}
        run_links = links.get("wp:action-run") if isinstance(links, dict) else None
        if isinstance(run_links, list) and run_links:
            first = run_links[0]
            if isinstance(first, dict) and first.get("href"):
                execution_link = first["href"]

        output_schema = data.get("output_schema")

        return Ability(
            name=data.get("name", ""),
            label=data.get("label", ""),
            description=data.get("description", ""),
            category=data.get("category", ""),
            input_schema=parse_input_schema(data.get("input_schema")),
            output_schema=output_schema if isinstance(output_schema, dict) else {},
            annotations=annotations,
            execution_link=execution_link,
        )
