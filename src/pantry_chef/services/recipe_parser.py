"""Extraction of structured recipes from free-text model replies.

Models are asked for a bare JSON array but often wrap it in a Markdown
code fence or surround it with prose. The candidate JSON is chosen by a
three-branch priority list:

1. the body of the first fence tagged ``json``;
2. otherwise the body of the first fence, whatever its tag;
3. otherwise the whole reply.

A reply that does not decode to an array of objects degrades to an empty
list. The failure is logged, never raised: recipes are advisory output.
Every object of a decoded array is kept; one that does not fit the
``Recipe`` model is passed through unvalidated.
"""

import json
import logging

from pydantic import ValidationError

from pantry_chef.domain.recipes import Recipe

logger = logging.getLogger(__name__)

FENCE = "```"
JSON_FENCE = FENCE + "json"


def parse_recipe_response(raw_text: str) -> list[Recipe]:
    """Return the recipes contained in a model reply, or an empty list."""
    candidate = extract_json_candidate(raw_text)
    try:
        data = json.loads(candidate)
    except (json.JSONDecodeError, RecursionError) as exc:
        logger.warning("Failed to parse recipes JSON: %s", exc)
        return []
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        logger.warning(
            "Recipe reply is not an array of objects",
            extra={"json_type": type(data).__name__},
        )
        return []

    recipes: list[Recipe] = []
    for index, item in enumerate(data):
        try:
            recipes.append(Recipe.model_validate(item))
        except ValidationError as exc:
            logger.warning(
                "Passing through unvalidated recipe at index %d: %d errors",
                index,
                exc.error_count(),
            )
            recipes.append(Recipe.model_construct(**item))
    return recipes


def extract_json_candidate(raw_text: str) -> str:
    """Pick the substring of a reply most likely to hold the JSON payload."""
    tagged = _fenced_body(raw_text, JSON_FENCE)
    if tagged is not None:
        return tagged
    untagged = _fenced_body(raw_text, FENCE)
    if untagged is not None:
        return _drop_info_string(untagged)
    return raw_text


def _fenced_body(text: str, opening: str) -> str | None:
    """Return the text between ``opening`` and the next fence, if both exist."""
    start = text.find(opening)
    if start == -1:
        return None
    body_start = start + len(opening)
    end = text.find(FENCE, body_start)
    if end == -1:
        return None
    return text[body_start:end].strip()


def _drop_info_string(body: str) -> str:
    """Strip a language hint such as ``JSON`` left on the fence's first line."""
    first_line, newline, rest = body.partition("\n")
    hint = first_line.strip()
    if newline and hint.isalpha():
        return rest
    return body
