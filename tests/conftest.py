"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from nutriscan.adapters.fdc_client import FdcClient
from nutriscan.adapters.off_client import OpenFoodFactsClient
from nutriscan.config import Settings
from nutriscan.containers import AppContainer
from nutriscan.domain.food_logs import FoodLog, FoodLogItem
from nutriscan.domain.meals import Meal, MealItem
from nutriscan.domain.nutrition import NutrientRecord
from nutriscan.services.admin import AdminService
from nutriscan.services.food_logs import FoodLogRepository, FoodLogService
from nutriscan.services.identity import IdentityResolver
from nutriscan.services.meals import MealRepository, MealService
from nutriscan.services.products import ProductLookupService, ProductRepository
from nutriscan.services.providers import FdcSearchProvider, OpenFoodFactsSearchProvider
from nutriscan.services.recipes import RecipeClient, RecipeService
from nutriscan.services.search import FoodSearchService
from nutriscan.services.summary import SummaryService

TEST_TOKEN = "test-token"
TEST_USER_ID = UUID("00000000-0000-4000-8000-000000000001")
AUTH_HEADERS = {"Authorization": f"Bearer {TEST_TOKEN}"}


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client that records calls."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "foods": [
                {
                    "fdcId": 1750340,
                    "description": "Apple Pie",
                    "foodNutrients": [
                        {"nutrientId": 1008, "value": 237},
                        {"nutrientId": 1003, "value": 1.9},
                        {"nutrientId": 1004, "value": 11},
                        {"nutrientId": 1005, "value": 34},
                        {"nutrientId": 2000, "value": 15.6},
                    ],
                },
                {
                    "fdcId": 1750339,
                    "description": "apple",
                    "foodNutrients": [
                        {"nutrientId": 1008, "value": 52},
                        {"nutrientId": 1005, "value": 13.8},
                        {"nutrientId": 2000, "value": 10.4},
                    ],
                },
            ]
        }
    )
    credentials: bool = True
    error: Exception | None = None
    calls: list[str] = field(default_factory=list)

    @property
    def has_credentials(self) -> bool:
        return self.credentials

    async def search_foods(self, query: str, page_size: int = 25) -> dict[str, object]:
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake Open Food Facts client with per-barcode products."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "products": [
                {
                    "code": "5449000000996",
                    "product_name": "Coca-Cola",
                    "brands": "Coca-Cola",
                    "nutriments": {
                        "energy-kcal_100g": 42,
                        "carbohydrates_100g": 10.6,
                        "sugars_100g": 10.6,
                    },
                }
            ]
        }
    )
    products: dict[str, dict[str, object]] = field(default_factory=dict)
    error: Exception | None = None
    search_calls: list[str] = field(default_factory=list)
    product_calls: list[str] = field(default_factory=list)

    async def search_products(
        self, query: str, page_size: int = 20
    ) -> dict[str, object]:
        self.search_calls.append(query)
        if self.error is not None:
            raise self.error
        return self.search_payload

    async def get_product(self, barcode: str) -> dict[str, object] | None:
        self.product_calls.append(barcode)
        if self.error is not None:
            raise self.error
        product = self.products.get(barcode)
        if product is None:
            return {"status": 0, "status_verbose": "product not found"}
        return {"status": 1, "code": barcode, "product": product}


@dataclass
class InMemoryProductRepository(ProductRepository):
    """In-memory product cache for tests."""

    products: dict[str, NutrientRecord] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def get_by_barcode(self, barcode: str) -> NutrientRecord | None:
        return self.products.get(barcode)

    def create_product(self, product: NutrientRecord) -> bool:
        self.writes.append(product.barcode)
        if product.barcode in self.products:
            return False
        self.products[product.barcode] = product
        return True


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    logs: dict[UUID, FoodLog] = field(default_factory=dict)

    def create_log(
        self,
        user_id: UUID,
        logged_at: datetime,
        items: list[FoodLogItem],
        notes: str | None,
    ) -> FoodLog:
        log = FoodLog(
            id=uuid4(), user_id=user_id, logged_at=logged_at, items=items, notes=notes
        )
        self.logs[log.id] = log
        return log

    def list_logs(
        self, user_id: UUID, start: datetime | None, end: datetime | None
    ) -> list[FoodLog]:
        logs = [log for log in self.logs.values() if log.user_id == user_id]
        if start is not None and end is not None:
            logs = [log for log in logs if start <= log.logged_at <= end]
        return sorted(logs, key=lambda log: log.logged_at, reverse=True)

    def get_log(self, log_id: UUID) -> FoodLog | None:
        return self.logs.get(log_id)

    def update_items(self, log_id: UUID, items: list[FoodLogItem]) -> FoodLog:
        log = replace(self.logs[log_id], items=items)
        self.logs[log_id] = log
        return log

    def delete_log(self, log_id: UUID) -> None:
        self.logs.pop(log_id, None)


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, Meal] = field(default_factory=dict)

    def list_meals(self, user_id: UUID) -> list[Meal]:
        meals = [meal for meal in self.meals.values() if meal.user_id == user_id]
        return sorted(meals, key=lambda meal: meal.updated_at, reverse=True)

    def get_meal(self, meal_id: UUID) -> Meal | None:
        return self.meals.get(meal_id)

    def create_meal(
        self, user_id: UUID, name: str, description: str, items: list[MealItem]
    ) -> Meal:
        now = datetime.now(tz=UTC)
        meal = Meal(
            id=uuid4(),
            user_id=user_id,
            name=name,
            description=description,
            items=items,
            created_at=now,
            updated_at=now,
        )
        self.meals[meal.id] = meal
        return meal

    def update_meal(self, meal: Meal) -> Meal:
        self.meals[meal.id] = meal
        return meal

    def delete_meal(self, meal_id: UUID) -> None:
        self.meals.pop(meal_id, None)


@dataclass
class FakeIdentityResolver(IdentityResolver):
    """Accept a fixed set of tokens."""

    tokens: dict[str, UUID] = field(
        default_factory=lambda: {TEST_TOKEN: TEST_USER_ID}
    )

    def resolve(self, token: str) -> UUID | None:
        return self.tokens.get(token)


@dataclass
class FakeRecipeClient(RecipeClient):
    """Fake recipe client returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "recipes": [
                {
                    "title": f"Chickpea Dish {number}",
                    "description": "Quick and filling.",
                    "difficulty": "Easy",
                    "cook_time": "20 min",
                    "servings": "2 servings",
                }
                for number in range(1, 6)
            ]
        }
    )
    prompts: list[str] = field(default_factory=list)
    credentials: bool = True

    @property
    def has_credentials(self) -> bool:
        return self.credentials

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.prompts.append(prompt)
        return self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        admin_token="admin-token",
        openai_api_key="openai-key",
        fdc_api_key="fdc-key",
    )


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def off_client() -> FakeOpenFoodFactsClient:
    return FakeOpenFoodFactsClient()


@pytest.fixture
def container(
    settings: Settings,
    fdc_client: FakeFdcClient,
    off_client: FakeOpenFoodFactsClient,
) -> AppContainer:
    providers = [FdcSearchProvider(fdc_client), OpenFoodFactsSearchProvider(off_client)]
    food_log_service = FoodLogService(InMemoryFoodLogRepository())
    meal_service = MealService(
        repository=InMemoryMealRepository(), food_log_service=food_log_service
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        identity_resolver=FakeIdentityResolver(),
        search_service=FoodSearchService(providers),
        product_service=ProductLookupService(
            repository=InMemoryProductRepository(), client=off_client
        ),
        food_log_service=food_log_service,
        meal_service=meal_service,
        summary_service=SummaryService(food_log_service.repository),
        recipe_service=RecipeService(
            client=FakeRecipeClient(),
            model=settings.openai_model,
            reasoning_effort=settings.openai_reasoning_effort,
            store=settings.openai_store,
        ),
        admin_service=AdminService(providers),
        close_resources=close_resources,
    )
