"""Ingredient extraction from photos using a vision model."""

import base64
import logging
from dataclasses import dataclass

from pantry_chef.domain.errors import (
    ExtractionFailed,
    InvalidInput,
    ModelCallError,
    Unconfigured,
)
from pantry_chef.services.completions import CompletionClient

logger = logging.getLogger(__name__)

SUPPORTED_MIME_TYPES = frozenset({"image/jpeg", "image/png", "image/webp", "image/gif"})

INGREDIENT_PROMPT = (
    "Analyze this image and identify all visible food ingredients. "
    "Return only the ingredient names as a comma-separated list. "
    'Be specific (e.g., "cherry tomatoes" not just "tomatoes"). '
    "If you see packaged items, identify the ingredient inside. "
    "Focus only on raw ingredients that can be used for cooking."
)


@dataclass
class IngredientExtractionService:
    """Service that asks a vision model which ingredients a photo shows."""

    client: CompletionClient
    model: str
    configured: bool = True
    max_output_tokens: int | None = 500

    async def extract(
        self, image_bytes: bytes | None, mime_type: str | None = None
    ) -> list[str]:
        """Return ingredient names detected in the image."""
        if not self.configured:
            raise Unconfigured("OpenAI API key not configured")
        if not image_bytes:
            raise InvalidInput("No image provided")
        data_url = _to_data_url(image_bytes, mime_type)
        try:
            reply = await self.client.complete(
                model=self.model,
                prompt=INGREDIENT_PROMPT,
                image_data_url=data_url,
                max_output_tokens=self.max_output_tokens,
            )
        except ModelCallError as exc:
            logger.warning("Image analysis failed: %s", exc)
            raise ExtractionFailed(str(exc) or "Failed to analyze image") from exc
        return parse_ingredient_list(reply)


def parse_ingredient_list(reply: str) -> list[str]:
    """Split a comma-separated model reply into trimmed, non-empty names."""
    return [token.strip() for token in reply.split(",") if token.strip()]


def _to_data_url(image_bytes: bytes, mime_type: str | None) -> str:
    """Convert bytes to a base64 data URL for image input."""
    resolved = _resolve_mime_type(image_bytes, mime_type)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{resolved};base64,{encoded}"


def _resolve_mime_type(image_bytes: bytes, mime_type: str | None) -> str:
    """Validate the declared media type, sniffing it when absent."""
    if not mime_type or mime_type == "application/octet-stream":
        return _detect_mime_type(image_bytes)
    declared = mime_type.split(";", maxsplit=1)[0].strip().lower()
    if declared == "image/jpg":
        declared = "image/jpeg"
    if declared not in SUPPORTED_MIME_TYPES:
        raise InvalidInput(f"Unsupported image type: {mime_type}")
    return declared


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return "image/jpeg"
