"""OpenAI Responses API client for structured JSON output."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from health_tracker.services.estimates import StructuredOutputClient


@dataclass
class OpenAIStructuredClient(StructuredOutputClient):
    """Structured-output client backed by the OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIStructuredClient":
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Send a text prompt and parse the schema-constrained reply."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": [{"role": "user", "content": prompt}],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "strict": True,
                    "schema": schema,
                }
            },
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)

    async def close(self) -> None:
        await self.client.close()
