"""Recipe suggestion endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends

from nutriscan.api.deps import get_container, require_user
from nutriscan.api.models import RecipeRequest
from nutriscan.containers import AppContainer

router = APIRouter(prefix="/api/ai", tags=["ai"])


@router.post("/recipes")
async def generate_recipes(
    body: RecipeRequest,
    _user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Suggest recipes built around an ingredient."""
    recipes = await container.recipe_service.suggest(body.ingredient)
    return {"recipes": [recipe.model_dump() for recipe in recipes]}
