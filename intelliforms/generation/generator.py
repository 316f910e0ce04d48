"""AI-powered form generator."""

import json
import re
from pathlib import Path

from intelliforms.generation.base import BaseFormGenerator
from intelliforms.generation.client_base import BaseGenerationClient
from intelliforms.generation.exceptions import InvalidModelOutput
from intelliforms.generation.models import FormSpec
from intelliforms.generation.prompt_loader import load_json_schema, load_prompt_template
from intelliforms.generation.validator import validate_and_build
from intelliforms.logging.logger import Log

_CODE_FENCE = re.compile(r"^```[A-Za-z]*\s*|\s*```$")


class FormGenerator(BaseFormGenerator):
    """Generates form descriptions from document text using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseGenerationClient,
        model: str,
        temperature: float = 0.2,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        schema_str = load_json_schema(json_schema_path)
        self._json_schema = schema_str
        self._json_schema_dict = json.loads(schema_str)

    def generate(self, text: str, template_id: str) -> FormSpec:
        prompt = self._build_prompt(text, template_id)
        Log.debug(f"Form generation prompt:\n{prompt}")

        raw_response = self._call_ai(prompt)
        Log.debug(f"AI raw response:\n{raw_response}")

        try:
            form = validate_and_build(self._parse_json(raw_response))
        except InvalidModelOutput:
            Log.error("Model output rejected", response=raw_response[:500])
            raise

        Log.info(f"Form generated: '{form.title}' with {len(form.fields)} fields")
        return form

    def _build_prompt(self, text: str, template_id: str) -> str:
        return self._prompt_template.format(
            template_id=template_id,
            json_schema=self._json_schema,
            document_text=text,
        )

    def _call_ai(self, prompt: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema_dict,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = strip_code_fence(raw)
        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise InvalidModelOutput(f"The AI response is not valid JSON: {exc}") from exc

        if not isinstance(parsed, dict):
            raise InvalidModelOutput("The AI response must be a JSON object")
        return parsed


def strip_code_fence(raw: str) -> str:
    """Remove a leading ```/```json fence and a trailing ``` fence."""
    return _CODE_FENCE.sub("", raw.strip()).strip()
