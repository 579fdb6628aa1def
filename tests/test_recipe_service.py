"""Tests for recipe suggestions."""

import asyncio

import pytest
from pydantic import ValidationError

from nutriscan.domain.errors import ConfigurationError, InvalidInputError
from nutriscan.services.recipes import RecipeService
from tests.conftest import FakeRecipeClient


def _service(client: FakeRecipeClient) -> RecipeService:
    return RecipeService(
        client=client, model="gpt-5.2", reasoning_effort="low", store=False
    )


def test_suggest_caps_recipes_and_prompts_with_ingredient() -> None:
    client = FakeRecipeClient()

    recipes = asyncio.run(_service(client).suggest("  chickpeas "))

    assert len(recipes) == 4
    assert recipes[0].title == "Chickpea Dish 1"
    assert '"chickpeas"' in client.prompts[0]


def test_blank_ingredient_is_rejected_without_calling_model() -> None:
    client = FakeRecipeClient()

    with pytest.raises(InvalidInputError):
        asyncio.run(_service(client).suggest("   "))

    assert client.prompts == []


def test_malformed_model_output_fails_validation() -> None:
    client = FakeRecipeClient(payload={"recipes": [{"title": "Half a recipe"}]})

    with pytest.raises(ValidationError):
        asyncio.run(_service(client).suggest("tofu"))


def test_missing_credentials_fail_before_calling_model() -> None:
    client = FakeRecipeClient(credentials=False)

    with pytest.raises(ConfigurationError):
        asyncio.run(_service(client).suggest("tofu"))

    assert client.prompts == []
