"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutriscan.adapters.fdc_client import FdcConfig, HttpxFdcClient
from nutriscan.adapters.off_client import HttpxOpenFoodFactsClient, OpenFoodFactsConfig
from nutriscan.adapters.openai_recipe_client import OpenAIRecipeClient
from nutriscan.adapters.supabase_food_log_repository import SupabaseFoodLogRepository
from nutriscan.adapters.supabase_identity_resolver import SupabaseIdentityResolver
from nutriscan.adapters.supabase_meal_repository import SupabaseMealRepository
from nutriscan.adapters.supabase_product_repository import SupabaseProductRepository
from nutriscan.config import Settings
from nutriscan.services.admin import AdminService
from nutriscan.services.food_logs import FoodLogService
from nutriscan.services.identity import IdentityResolver
from nutriscan.services.meals import MealService
from nutriscan.services.products import ProductLookupService
from nutriscan.services.providers import FdcSearchProvider, OpenFoodFactsSearchProvider
from nutriscan.services.recipes import RecipeService
from nutriscan.services.search import FoodSearchService
from nutriscan.services.summary import SummaryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_resolver: IdentityResolver
    search_service: FoodSearchService
    product_service: ProductLookupService
    food_log_service: FoodLogService
    meal_service: MealService
    summary_service: SummaryService
    recipe_service: RecipeService
    admin_service: AdminService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    fdc_client = HttpxFdcClient.create(
        FdcConfig(
            api_key=resolved_settings.fdc_api_key,
            base_url=resolved_settings.fdc_base_url,
            timeout_seconds=resolved_settings.fdc_timeout_seconds,
        )
    )
    off_client = HttpxOpenFoodFactsClient.create(
        OpenFoodFactsConfig(
            base_url=resolved_settings.off_base_url,
            timeout_seconds=resolved_settings.off_timeout_seconds,
            user_agent=resolved_settings.off_user_agent,
        )
    )
    providers = [
        FdcSearchProvider(fdc_client, max_results=resolved_settings.search_max_results),
        OpenFoodFactsSearchProvider(
            off_client, max_results=resolved_settings.search_max_results
        ),
    ]
    food_log_service = FoodLogService(SupabaseFoodLogRepository(supabase_client))
    meal_service = MealService(
        repository=SupabaseMealRepository(supabase_client),
        food_log_service=food_log_service,
    )
    recipe_client = OpenAIRecipeClient.create(resolved_settings.openai_api_key)
    recipe_service = RecipeService(
        client=recipe_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )

    async def close_resources() -> None:
        await fdc_client.close()
        await off_client.close()
        await recipe_client.close()

    return AppContainer(
        settings=resolved_settings,
        identity_resolver=SupabaseIdentityResolver(supabase_client),
        search_service=FoodSearchService(providers),
        product_service=ProductLookupService(
            repository=SupabaseProductRepository(
                supabase_client, table_name=resolved_settings.products_table
            ),
            client=off_client,
        ),
        food_log_service=food_log_service,
        meal_service=meal_service,
        summary_service=SummaryService(food_log_service.repository),
        recipe_service=recipe_service,
        admin_service=AdminService(providers),
        close_resources=close_resources,
    )
