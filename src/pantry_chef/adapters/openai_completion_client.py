"""OpenAI Responses API client for text and vision completions."""

from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from pantry_chef.domain.errors import ModelCallError
from pantry_chef.services.completions import CompletionClient


@dataclass
class OpenAICompletionClient(CompletionClient):
    """Completion client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAICompletionClient":
        """Create an OpenAI completion client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        prompt: str,
        instructions: str | None = None,
        image_data_url: str | None = None,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ) -> str:
        """Call OpenAI Responses API and return the output text."""
        content: list[dict[str, object]] = [{"type": "input_text", "text": prompt}]
        if image_data_url:
            content.append({"type": "input_image", "image_url": image_data_url})
        request_payload: dict[str, object] = {
            "model": model,
            "input": [{"role": "user", "content": content}],
        }
        if instructions:
            request_payload["instructions"] = instructions
        if temperature is not None:
            request_payload["temperature"] = temperature
        if max_output_tokens is not None:
            request_payload["max_output_tokens"] = max_output_tokens

        try:
            response = await self.client.responses.create(**request_payload)
        except OpenAIError as exc:
            raise ModelCallError(str(exc)) from exc
        return response.output_text or ""

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
