"""Interface for the hosted language and vision model."""

from typing import Protocol


class CompletionClient(Protocol):
    """Interface for text and vision completions."""

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
        """Return the model's text reply, raising ModelCallError on failure."""
