"""Tests for the FormGenerator (AI-powered form generation)."""

import json
from unittest.mock import MagicMock

import pytest

from intelliforms.generation.exceptions import (
    InvalidFieldOptions,
    InvalidModelOutput,
    QuotaExceeded,
)
from intelliforms.generation.generator import FormGenerator, strip_code_fence

VALID_FORM = {
    "title": "Customer registration",
    "fields": [
        {"id": "full_name", "label": "Full name", "type": "text", "required": True},
        {
            "id": "contact",
            "label": "Preferred contact",
            "type": "radio",
            "required": False,
            "options": [
                {"value": "email", "label": "Email"},
                {"value": "phone", "label": "Phone"},
            ],
        },
    ],
}


def _make_generator(content: str | None = None, temperature: float = 0.2) -> tuple[FormGenerator, MagicMock]:
    client = MagicMock()
    client.create_chat_completion.return_value = (
        json.dumps(VALID_FORM) if content is None else content
    )
    return FormGenerator(client=client, model="test-model", temperature=temperature), client


class TestGenerateSuccess:
    def test_returns_form_spec(self) -> None:
        generator, _client = _make_generator()
        form = generator.generate("document text", "moderna")
        assert form.title == "Customer registration"
        assert [f.type for f in form.fields] == ["text", "radio"]

    def test_passes_text_and_template_to_prompt(self) -> None:
        generator, client = _make_generator()
        generator.generate("Name, email and phone", "clasica")
        user_prompt = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "Name, email and phone" in user_prompt
        assert "clasica" in user_prompt

    def test_sends_schema_and_model(self) -> None:
        generator, client = _make_generator()
        generator.generate("text", "moderna")
        kwargs = client.create_chat_completion.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert "fields" in kwargs["json_schema"]["properties"]

    @pytest.mark.parametrize(("given", "expected"), [(-1.0, 0.0), (0.5, 0.5), (3.0, 1.0)])
    def test_clamps_temperature(self, given: float, expected: float) -> None:
        generator, client = _make_generator(temperature=given)
        generator.generate("text", "moderna")
        assert client.create_chat_completion.call_args.kwargs["temperature"] == expected

    def test_accepts_json_code_fence(self) -> None:
        fenced = "```json\n" + json.dumps(VALID_FORM) + "\n```"
        generator, _client = _make_generator(fenced)
        assert generator.generate("text", "moderna").title == "Customer registration"

    def test_accepts_single_line_fence(self) -> None:
        fenced = "```" + json.dumps(VALID_FORM) + "```"
        generator, _client = _make_generator(fenced)
        assert len(generator.generate("text", "moderna").fields) == 2


class TestGenerateFailures:
    def test_rejects_non_json(self) -> None:
        generator, _client = _make_generator("Sorry, I cannot help with that.")
        with pytest.raises(InvalidModelOutput, match="not valid JSON"):
            generator.generate("text", "moderna")

    def test_rejects_json_array(self) -> None:
        generator, _client = _make_generator("[]")
        with pytest.raises(InvalidModelOutput, match="JSON object"):
            generator.generate("text", "moderna")

    def test_rejects_choice_field_without_options(self) -> None:
        broken = json.loads(json.dumps(VALID_FORM))
        broken["fields"][1]["options"] = []
        generator, _client = _make_generator(json.dumps(broken))
        with pytest.raises(InvalidFieldOptions):
            generator.generate("text", "moderna")

    def test_propagates_client_errors(self) -> None:
        generator, client = _make_generator()
        client.create_chat_completion.side_effect = QuotaExceeded("quota")
        with pytest.raises(QuotaExceeded):
            generator.generate("text", "moderna")


class TestStripCodeFence:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ('{"a": 1}', '{"a": 1}'),
            ('```json\n{"a": 1}\n```', '{"a": 1}'),
            ('```\n{"a": 1}\n```\n', '{"a": 1}'),
            ('  ```JSON {"a": 1}```  ', '{"a": 1}'),
        ],
    )
    def test_strips_fences(self, raw: str, expected: str) -> None:
        assert strip_code_fence(raw) == expected
