"""Unit tests for parsing ability records."""

from wp_abilities_mcp.abilities import Ability, AbilityAnnotations, EmptySchema, ObjectSchema


def test_from_api_full_record(ability_records, api_base):
    """Test parsing a record with annotations and a run link."""
    ability = Ability.from_api(ability_records["content/get-post"])

    assert ability.name == "content/get-post"
    assert ability.label == "Get Post"
    assert ability.description == "Fetches a single post."
    assert ability.category == "content"
    assert isinstance(ability.input_schema, ObjectSchema)
    assert ability.input_schema.fields["required"] == ["id"]
    assert ability.output_schema == {"type": "object"}
    assert ability.annotations == AbilityAnnotations(readonly=True)
    assert ability.execution_link == f"{api_base}/abilities/content/get-post/run"


def test_from_api_empty_input_schema(ability_records):
    """Test that the empty-array sentinel parses to EmptySchema."""
    ability = Ability.from_api(ability_records["core/get-site-info"])

    assert ability.input_schema == EmptySchema()
    assert ability.annotations.readonly is True
    assert ability.annotations.idempotent is True
    assert ability.annotations.destructive is False
    assert ability.execution_link is None


def test_from_api_without_meta(ability_records):
    """Test that missing annotations default to all False."""
    ability = Ability.from_api(ability_records["content/create-post"])

    assert ability.annotations == AbilityAnnotations()
    assert ability.annotations.readonly is False


def test_annotations_require_literal_true():
    """Test that truthy non-boolean annotation values are not honoured."""
    annotations = AbilityAnnotations.from_api(
        {"readonly": "true", "destructive": 1, "idempotent": True}
    )

    assert annotations.readonly is False
    assert annotations.destructive is False
    assert annotations.idempotent is True


def test_from_api_ignores_malformed_links(ability_records):
    """Test that an empty or malformed run link list is ignored."""
    record = ability_records["content/create-post"]

    record["_links"] = {"wp:action-run": []}
    assert Ability.from_api(record).execution_link is None

    record["_links"] = {"wp:action-run": [{"title": "run"}]}
    assert Ability.from_api(record).execution_link is None
