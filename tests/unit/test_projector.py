"""
Unit tests for the schema projector.
"""

import logging

import pytest
from schema_projector import (
    UNSET,
    GeneratedSchemaDocument,
    MissingSchemaMapError,
    NoSchemaFoundError,
    ProjectedSchema,
    ProjectionError,
    ProjectionInput,
    ResponseEnvelope,
    project,
    project_as_envelope,
    to_json_schema,
    to_response_format,
)


OUTPUT_BODY = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "name": {"type": "string", "minLength": 1},
    },
    "required": ["id", "name"],
    "description": "an output",
}


def make_input(schemas, strict=UNSET):
    return ProjectionInput(document=GeneratedSchemaDocument(schemas=schemas), strict=strict)


class TestProject:
    """Test projection of a single schema."""

    def test_happy_path(self):
        """Test name, body, description and strict are all carried over."""
        result = project(make_input({"Output": OUTPUT_BODY}, strict=True))

        assert result == ProjectedSchema(
            name="Output",
            schema=OUTPUT_BODY,
            description="an output",
            strict=True,
        )

    def test_schema_body_is_passed_through(self):
        """Test the body is the same object, not a copy."""
        result = project(make_input({"Output": OUTPUT_BODY}))

        assert result.schema is OUTPUT_BODY

    def test_missing_description_is_unset(self):
        """Test a body without description gives an absent description."""
        body = {"type": "object", "properties": {}}
        result = project(make_input({"Output": body}))

        assert result.description is UNSET
        assert "description" not in result.to_dict()

    def test_empty_description_is_kept(self):
        """Test an empty description string is not treated as absent."""
        result = project(make_input({"Output": {"type": "object", "description": ""}}))

        assert result.description == ""
        assert result.to_dict()["description"] == ""

    def test_missing_schema_map(self):
        """Test a document without a mapping raises MissingSchemaMapError."""
        with pytest.raises(MissingSchemaMapError, match="missing"):
            project(make_input(None, strict=True))

    def test_empty_schema_map(self):
        """Test an empty mapping raises NoSchemaFoundError."""
        with pytest.raises(NoSchemaFoundError, match="no schema definitions"):
            project(make_input({}, strict=True))

    def test_errors_are_value_errors(self):
        """Test both failures share the ProjectionError/ValueError base."""
        for schemas in (None, {}):
            with pytest.raises(ProjectionError):
                project(make_input(schemas))
            with pytest.raises(ValueError):
                project(make_input(schemas))

    def test_non_object_definition(self):
        """Test a boolean schema definition raises a descriptive TypeError."""
        with pytest.raises(TypeError, match="'Output' must be a JSON object, got: bool"):
            project(make_input({"Output": True}))

    def test_first_schema_wins(self):
        """Test the first definition by insertion order is selected."""
        schemas = {"B": {"type": "boolean"}, "A": {"type": "integer", "description": "a"}}
        result = project(make_input(schemas))

        assert result.name == "B"
        assert result.schema == {"type": "boolean"}
        assert result.description is UNSET

    def test_ignored_schemas_are_logged_at_debug(self, caplog):
        """Test extra definitions are reported only at debug level."""
        schemas = {"B": {"type": "boolean"}, "A": {"type": "integer"}}

        with caplog.at_level(logging.DEBUG, logger="schema_projector"):
            project(make_input(schemas))

        records = [r for r in caplog.records if r.name.startswith("schema_projector")]
        assert records
        assert all(r.levelno == logging.DEBUG for r in records)
        assert "ignoring: A" in records[-1].getMessage()

    @pytest.mark.parametrize("strict", [True, False, None])
    def test_strict_is_forwarded(self, strict):
        """Test every strict value, including None, is forwarded verbatim."""
        result = project(make_input({"Output": OUTPUT_BODY}, strict=strict))

        assert result.strict is strict
        assert result.to_dict()["strict"] is strict

    def test_strict_not_given(self):
        """Test an unset strict flag is left out of the output."""
        result = project(make_input({"Output": OUTPUT_BODY}))

        assert result.strict is UNSET
        assert "strict" not in result.to_dict()

    def test_idempotent(self):
        """Test projecting the same input twice gives equal results."""
        params = make_input({"Output": OUTPUT_BODY}, strict=False)

        assert project(params) == project(params)
        assert project(params).to_dict() == project(params).to_dict()


class TestProjectAsEnvelope:
    """Test the response_format envelope."""

    def test_envelope_wraps_projection(self):
        """Test the envelope carries the discriminator and the projection."""
        envelope = project_as_envelope(make_input({"Output": OUTPUT_BODY}, strict=True))

        assert isinstance(envelope, ResponseEnvelope)
        assert envelope.kind == "json_schema"
        assert envelope.json_schema == ProjectedSchema(
            name="Output",
            schema=OUTPUT_BODY,
            description="an output",
            strict=True,
        )

    def test_envelope_to_dict(self):
        """Test the envelope serializes to the OpenAI request shape."""
        envelope = project_as_envelope(make_input({"Output": OUTPUT_BODY}, strict=True))

        assert envelope.to_dict() == {
            "type": "json_schema",
            "json_schema": {
                "name": "Output",
                "schema": OUTPUT_BODY,
                "description": "an output",
                "strict": True,
            },
        }

    def test_envelope_kind_is_fixed(self):
        """Test the discriminator cannot be overridden at construction."""
        projected = ProjectedSchema(name="Output", schema=OUTPUT_BODY)

        with pytest.raises(TypeError):
            ResponseEnvelope(json_schema=projected, kind="text")
        assert ResponseEnvelope(json_schema=projected).to_dict()["type"] == "json_schema"

    def test_envelope_missing_schema_map(self):
        """Test the envelope propagates MissingSchemaMapError."""
        with pytest.raises(MissingSchemaMapError):
            project_as_envelope(make_input(None, strict=True))

    def test_envelope_empty_schema_map(self):
        """Test the envelope propagates NoSchemaFoundError."""
        with pytest.raises(NoSchemaFoundError):
            project_as_envelope(make_input({}, strict=True))


class TestConvenienceFunctions:
    """Test to_json_schema and to_response_format."""

    def test_to_json_schema_from_raw_mapping(self):
        """Test raw generator output is accepted."""
        raw = {
            "version": "3.1",
            "components": {"schemas": {"Output": OUTPUT_BODY}},
            "schemas": [{"$ref": "#/components/schemas/Output"}],
        }
        result = to_json_schema(raw, strict=True)

        assert result.name == "Output"
        assert result.schema is OUTPUT_BODY
        assert result.strict is True

    def test_to_json_schema_from_document(self):
        """Test a GeneratedSchemaDocument is accepted as-is."""
        doc = GeneratedSchemaDocument(schemas={"Output": OUTPUT_BODY})

        assert to_json_schema(doc).to_dict() == {
            "name": "Output",
            "schema": OUTPUT_BODY,
            "description": "an output",
        }

    def test_to_response_format_missing_components(self):
        """Test raw output without components raises MissingSchemaMapError."""
        with pytest.raises(MissingSchemaMapError):
            to_response_format({"schemas": []})

    def test_to_response_format_strict_none(self):
        """Test strict=None survives into the request dict."""
        raw = {"components": {"schemas": {"Output": OUTPUT_BODY}}}
        result = to_response_format(raw, strict=None).to_dict()

        assert "strict" in result["json_schema"]
        assert result["json_schema"]["strict"] is None

    def test_unsupported_input(self):
        """Test unsupported document types raise TypeError."""
        with pytest.raises(TypeError, match="Expected a GeneratedSchemaDocument"):
            to_json_schema(["Output"])
