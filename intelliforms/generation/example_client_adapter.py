"""Offline generation client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseGenerationClient and register the provider in GeneratorFactory.
"""

import json
from typing import ClassVar

from intelliforms.generation.client_base import BaseGenerationClient


class ExampleClientAdapter(BaseGenerationClient):
    """Adapter that returns a fixed sample form.

    No network calls. Backs the simulated-form endpoint and local development.
    """

    SAMPLE_FORM: ClassVar[dict[str, object]] = {
        "title": "Generated Form",
        "fields": [
            {"id": "name", "label": "Name", "type": "text", "required": True},
            {"id": "email", "label": "Email", "type": "email", "required": True},
            {
                "id": "comments",
                "label": "Comments",
                "type": "textarea",
                "required": False,
            },
        ],
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        return json.dumps(self.SAMPLE_FORM)
