"""Recipe suggestion service using LLMs."""

from dataclasses import dataclass
from typing import Protocol

from nutriscan.domain.errors import ConfigurationError, InvalidInputError
from nutriscan.domain.recipes import RecipeIdea, RecipeIdeas

RECIPE_COUNT = 4

RECIPE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "recipes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "description": {"type": "string"},
                    "difficulty": {"type": "string", "enum": ["Easy", "Medium", "Hard"]},
                    "cook_time": {"type": "string"},
                    "servings": {"type": "string"},
                },
                "required": [
                    "title",
                    "description",
                    "difficulty",
                    "cook_time",
                    "servings",
                ],
                "additionalProperties": False,
            },
        }
    },
    "required": ["recipes"],
    "additionalProperties": False,
}


class RecipeClient(Protocol):
    """Interface for structured LLM text generation."""

    @property
    def has_credentials(self) -> bool:
        """Return True when an API key is configured."""

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return structured data matching the schema."""


@dataclass
class RecipeService:
    """Service that prompts for recipe ideas and validates results."""

    client: RecipeClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def suggest(self, ingredient: str) -> list[RecipeIdea]:
        """Suggest recipes that use the ingredient as a main component."""
        cleaned = ingredient.strip()
        if not cleaned:
            raise InvalidInputError("Ingredient is required")
        if not self.client.has_credentials:
            raise ConfigurationError("Recipe suggestions are not configured")
        prompt = (
            f'Generate exactly {RECIPE_COUNT} creative and practical recipe ideas '
            f'using "{cleaned}" as a main ingredient. For each recipe give a '
            "specific title, a two or three sentence description, a difficulty "
            "of Easy, Medium or Hard, a cook time such as \"30 min\" and a "
            'serving count such as "4 servings".'
        )
        raw = await self.client.generate(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            schema=RECIPE_SCHEMA,
            prompt=prompt,
        )
        return RecipeIdeas.model_validate(raw).recipes[:RECIPE_COUNT]
