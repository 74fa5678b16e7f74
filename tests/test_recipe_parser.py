"""Tests for recipe reply parsing."""

import logging

from pantry_chef.services.recipe_parser import (
    extract_json_candidate,
    parse_recipe_response,
)

_MINIMAL = (
    '[{"name":"X","description":"d","cookTime":"1m","servings":"1",'
    '"difficulty":"Easy","ingredients":["a"],"instructions":["b"]}]'
)


def test_parses_json_tagged_fence() -> None:
    recipes = parse_recipe_response(f"```json\n{_MINIMAL}\n```")

    assert len(recipes) == 1
    recipe = recipes[0]
    assert recipe.name == "X"
    assert recipe.cook_time == "1m"
    assert recipe.ingredients == ["a"]
    assert recipe.instructions == ["b"]
    assert recipe.nutrition is None


def test_parses_fence_surrounded_by_prose() -> None:
    text = f"Here are your recipes!\n```json\n{_MINIMAL}\n```\nEnjoy cooking."

    assert [recipe.name for recipe in parse_recipe_response(text)] == ["X"]


def test_parses_untagged_fence() -> None:
    text = f"Sure:\n```\n{_MINIMAL}\n```"

    assert [recipe.name for recipe in parse_recipe_response(text)] == ["X"]


def test_tagged_fence_wins_over_earlier_untagged_fence() -> None:
    text = f"```\nnot json\n```\nthen\n```json\n{_MINIMAL}\n```"

    assert extract_json_candidate(text) == _MINIMAL


def test_untagged_fence_drops_language_hint() -> None:
    assert extract_json_candidate(f"```JSON\n{_MINIMAL}\n```") == _MINIMAL


def test_raw_text_is_used_without_fences() -> None:
    assert [recipe.name for recipe in parse_recipe_response(_MINIMAL)] == ["X"]


def test_unclosed_fence_falls_back_to_raw_text() -> None:
    text = "```json\n[]"

    assert extract_json_candidate(text) == text
    assert parse_recipe_response(text) == []


def test_not_json_yields_empty_list(caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("pantry_chef"), "propagate", True)

    with caplog.at_level(logging.WARNING, logger="pantry_chef"):
        assert parse_recipe_response("not json at all") == []

    assert "Failed to parse recipes JSON" in caplog.text


def test_array_of_scalars_yields_empty_list() -> None:
    assert parse_recipe_response("[1,2,3]") == []


def test_object_top_level_yields_empty_list() -> None:
    assert parse_recipe_response('{"recipes": []}') == []


def test_missing_fields_default_and_numbers_coerce() -> None:
    recipes = parse_recipe_response(
        '[{"name": "Toast", "servings": 2, "nutrition": {"calories": 150},'
        ' "description": null, "chefNote": "crispy"}]'
    )

    recipe = recipes[0]
    assert recipe.servings == "2"
    assert recipe.description == ""
    assert recipe.ingredients == []
    assert recipe.nutrition is not None
    assert recipe.nutrition.calories == "150"
    assert recipe.nutrition.fat == ""
    assert recipe.model_dump(by_alias=True)["chefNote"] == "crispy"


def test_mixed_array_keeps_every_recipe() -> None:
    recipes = parse_recipe_response(
        '[{"name": "Good"}, {"name": "Odd", "ingredients": 7},'
        ' {"name": "Nested", "ingredients": [{"item": "flour", "qty": "2 cups"}]}]'
    )

    assert [recipe.name for recipe in recipes] == ["Good", "Odd", "Nested"]
    assert recipes[1].ingredients == ["7"]
    assert recipes[2].ingredients == [{"item": "flour", "qty": "2 cups"}]


def test_scalar_steps_and_free_text_nutrition_are_kept() -> None:
    recipes = parse_recipe_response(
        '[{"name":"Soup","instructions":"Simmer everything for 20 minutes"},'
        '{"name":"Salad","nutrition":"about 200 kcal"}]'
    )

    assert [recipe.name for recipe in recipes] == ["Soup", "Salad"]
    assert recipes[0].instructions == ["Simmer everything for 20 minutes"]
    assert recipes[1].nutrition is None


def test_deeply_nested_reply_yields_empty_list() -> None:
    assert parse_recipe_response("[" * 100000 + "]" * 100000) == []


def test_serializes_with_camel_case_aliases() -> None:
    recipe = parse_recipe_response(_MINIMAL)[0]

    dumped = recipe.model_dump(by_alias=True, exclude_none=True)

    assert dumped["cookTime"] == "1m"
    assert "nutrition" not in dumped
