"""Food search and barcode lookup endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends

from nutriscan.api.deps import get_container, require_user
from nutriscan.containers import AppContainer
from nutriscan.services.search import MIN_QUERY_LENGTH

router = APIRouter(prefix="/api/product", tags=["products"])


@router.get("/search")
async def search_products(
    query: str = "",
    _user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Search foods across providers and return ranked results."""
    if len(query.strip()) < MIN_QUERY_LENGTH:
        return {"results": [], "message": "Query too short"}

    outcome = await container.search_service.search(query)
    body: dict[str, object] = {
        "results": [record.to_dict() for record in outcome.results],
        "source": outcome.source,
        "count": outcome.count,
    }
    if outcome.failures:
        body["errors"] = [
            {"provider": failure.provider, "error": str(failure.cause)}
            for failure in outcome.failures
        ]
    if outcome.error is not None:
        body["message"] = "Search unavailable, please try again"
    return body


@router.get("/{barcode}")
async def lookup_barcode(
    barcode: str,
    _user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a product by barcode, from cache when possible."""
    lookup = await container.product_service.lookup(barcode)
    return {"source": lookup.source, "product": lookup.product.to_dict()}
