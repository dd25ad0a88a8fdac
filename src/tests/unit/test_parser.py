"""Tests for parsing response bodies."""
import json

import pytest

from recast.domain import MalformedPayload, Response, parse_response
from tests.fixtures.payloads import GREETING_RESULTS, TRAVEL_RESULTS, make_body, make_sentence


class TestParseValid:
    """Test parsing of well-formed bodies."""

    def test_travel_sentence(self, travel_body):
        """Test the recorded answer for 'I go from Paris to London.'."""
        response = parse_response(travel_body)
        sentence = response.sentence

        assert sentence.type == "assert"
        assert sentence.action == "go"
        assert sentence.agent == "i"
        assert sentence.polarity == "positive"

        locations = sentence.all_entities("location")["location"]
        assert len(locations) == 2
        assert locations[0].name == "location"
        assert locations[0].raw == "Paris"
        assert locations[1].raw == "London"
        assert locations[0].field("lat") == 48.856614
        assert sentence.entity("location").raw == "Paris"

        pronoun = sentence.entity("pronoun")
        assert pronoun.field("person") == 1
        assert pronoun.field("number") == "singular"
        assert pronoun.field("gender") != ""
        assert pronoun.field("swag") is None
        assert pronoun.field("raw") == "I"

    def test_bytes_body(self, travel_body):
        """Test that a body can be passed as bytes."""
        response = parse_response(travel_body.encode("utf-8"))
        assert response.entity("location").raw == "Paris"

    def test_from_json(self, greeting_body):
        """Test the classmethod entry point."""
        assert Response.from_json(greeting_body) == parse_response(greeting_body)

    def test_deterministic(self, travel_body):
        """Test that parsing the same body twice gives equal graphs."""
        first = parse_response(travel_body)
        second = parse_response(travel_body)

        assert first == second
        assert first is not second

    def test_null_labels_become_empty(self, greeting_body):
        """Test that null semantic labels read as empty strings."""
        sentence = parse_response(greeting_body).sentence

        assert sentence.action == ""
        assert sentence.agent == ""

    def test_missing_entities_key(self):
        """Test a sentence without an entities key at all."""
        sentence = make_sentence("Hello !")
        del sentence["entities"]
        response = parse_response(make_body(GREETING_RESULTS, sentences=[sentence]))

        assert response.all_entities() == {}

    def test_flat_entity_list(self):
        """Test entities sent as a flat list with a name discriminator."""
        sentence = make_sentence(
            "I go from Paris to London.",
            [
                {"name": "location", "raw": "Paris", "lat": 48.856614},
                {"name": "pronoun", "raw": "I", "person": 1},
                {"name": "location", "raw": "London", "lat": 51.5073509},
            ],
        )
        response = parse_response(make_body(GREETING_RESULTS, sentences=[sentence]))

        locations = response.entities("location")
        assert [e.raw for e in locations] == ["Paris", "London"]
        assert locations[0].field("lat") == 48.856614
        # The discriminator is the category, not a field
        assert locations[0].field("name") is None
        assert response.entity("pronoun").field("person") == 1

    def test_integral_float_status(self):
        """Test that an integer-valued float status is accepted."""
        response = parse_response(make_body(GREETING_RESULTS, status=200.0))

        assert response.status == 200
        assert isinstance(response.status, int)

    def test_unknown_keys_ignored(self):
        """Test that extra keys from newer API versions don't break parsing."""
        body = json.dumps(
            {
                "results": {**GREETING_RESULTS, "uuid": "1234"},
                "message": "Requests rendered with success",
            }
        )
        assert parse_response(body).intent == "hello-greetings"

    def test_nested_field_values(self):
        """Test that nested field values survive parsing unchanged."""
        sentence = make_sentence(
            "Here",
            {"location": [{"raw": "Here", "bounds": {"north": 1.5}, "tags": ["a", 1, True]}]},
        )
        response = parse_response(make_body(GREETING_RESULTS, sentences=[sentence]))
        entity = response.entity("location")

        assert entity.field("bounds") == {"north": 1.5}
        assert entity.field("tags") == ["a", 1, True]


class TestParseMalformed:
    """Test that malformed bodies are rejected as a whole."""

    def test_invalid_json(self):
        """Test a body that is not JSON."""
        with pytest.raises(MalformedPayload, match="not valid JSON") as exc_info:
            parse_response("{results: ")

        assert exc_info.value.field is None

    def test_empty_body(self):
        """Test an empty body."""
        with pytest.raises(MalformedPayload):
            parse_response("")

    def test_missing_results(self):
        """Test a body without the results key."""
        with pytest.raises(MalformedPayload) as exc_info:
            parse_response('{"message": "ok"}')

        assert exc_info.value.field == "results"

    def test_null_results(self):
        """Test the body the API sends alongside an error status."""
        with pytest.raises(MalformedPayload) as exc_info:
            parse_response('{"results":null,"message":"Speech is not recognizable."}')

        assert exc_info.value.field == "results"

    def test_results_not_an_object(self):
        """Test results of the wrong type."""
        with pytest.raises(MalformedPayload):
            parse_response('{"results": []}')

    @pytest.mark.parametrize("field", ["status", "source", "version", "timestamp", "language"])
    def test_missing_scalar(self, field):
        """Test that each scalar field is required."""
        results = dict(TRAVEL_RESULTS)
        del results[field]

        with pytest.raises(MalformedPayload) as exc_info:
            parse_response(json.dumps({"results": results}))

        assert exc_info.value.field == f"results.{field}"
        assert field in str(exc_info.value)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("status", "200"),
            ("status", True),
            ("status", 200.5),
            ("source", 42),
            ("version", None),
            ("timestamp", 1464619674),
            ("language", ["en"]),
        ],
    )
    def test_mistyped_scalar(self, field, value):
        """Test that scalar fields are type-checked, not coerced."""
        with pytest.raises(MalformedPayload) as exc_info:
            parse_response(make_body(TRAVEL_RESULTS, **{field: value}))

        assert exc_info.value.field == f"results.{field}"

    def test_non_string_intent(self):
        """Test that every intent must be a string."""
        with pytest.raises(MalformedPayload) as exc_info:
            parse_response(make_body(GREETING_RESULTS, intents=["hello", 3]))

        assert exc_info.value.field == "results.intents.1"

    def test_empty_sentences(self):
        """Test that a response must have at least one sentence."""
        with pytest.raises(MalformedPayload) as exc_info:
            parse_response(make_body(GREETING_RESULTS, sentences=[]))

        assert exc_info.value.field == "results.sentences"

    def test_sentence_without_type(self):
        """Test that a malformed sentence aborts the whole parse."""
        sentence = make_sentence("Hello !")
        del sentence["type"]

        with pytest.raises(MalformedPayload) as exc_info:
            parse_response(make_body(GREETING_RESULTS, sentences=[sentence]))

        assert exc_info.value.field == "results.sentences.0.type"

    def test_entity_category_not_a_list(self):
        """Test that a category must map to a list of field mappings."""
        sentence = make_sentence("Paris", {"location": {"raw": "Paris"}})

        with pytest.raises(MalformedPayload) as exc_info:
            parse_response(make_body(GREETING_RESULTS, sentences=[sentence]))

        field = exc_info.value.field
        assert field.startswith("results.sentences.0.entities")
        assert "[" not in field
        assert "[" not in str(exc_info.value)

    def test_flat_entity_without_name(self):
        """Test that the flat layout requires a name on every entity."""
        sentence = make_sentence("Paris", [{"raw": "Paris"}])

        with pytest.raises(MalformedPayload, match="no string 'name' field"):
            parse_response(make_body(GREETING_RESULTS, sentences=[sentence]))

    def test_errors_are_kept(self):
        """Test that every validation error is available to the caller."""
        results = dict(TRAVEL_RESULTS)
        del results["status"]
        del results["language"]

        with pytest.raises(MalformedPayload) as exc_info:
            parse_response(json.dumps({"results": results}))

        assert len(exc_info.value.errors) == 2
