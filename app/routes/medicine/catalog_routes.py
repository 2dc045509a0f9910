"""app/routes/medicine/catalog_routes.py - lookups over the popular medicines catalog"""

import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from app.utils import catalog

router = APIRouter()
logger = logging.getLogger("app.routes.catalog")

MIN_QUERY_LENGTH = 2


@router.get("/popular-medicines",
    summary="List popular medicines",
    description="Return the popular medicines catalog, optionally for one category. "
                "Formats: full (default), list, grouped.")
async def popular_medicines(
    category: Optional[str] = Query(None, description="Category name, e.g. painRelievers"),
    output_format: str = Query("full", alias="format", description="Response format: full, list or grouped")
):
    """List popular medicines by category."""
    if category and category in catalog.POPULAR_MEDICINES:
        return {
            "category": category,
            "medicines": list(catalog.POPULAR_MEDICINES[category]),
        }

    medicines = catalog.all_medicines()

    if output_format == "list":
        return {
            "count": len(medicines),
            "medicines": medicines,
        }

    if output_format == "grouped":
        return {
            "categories": catalog.categories(),
            "medicines": catalog.as_dict(),
        }

    return {
        "status": "success",
        "count": len(medicines),
        "categories": catalog.categories(),
        "categoryCount": len(catalog.POPULAR_MEDICINES),
        "data": catalog.as_dict(),
        "endpoints": {
            "all": "/popular-medicines",
            "list": "/popular-medicines?format=list",
            "byCategory": "/popular-medicines?category=painRelievers",
        },
    }


@router.get("/random-medicine", summary="Pick a random popular medicine")
async def random_medicine():
    """Return a random medicine from the catalog with a link to its lookup."""
    medicine, category = catalog.random_medicine()
    return {
        "medicine": medicine,
        "category": category,
        "info": f"/medicine/{medicine.lower()}",
    }


@router.get("/search-medicines",
    summary="Search popular medicines",
    description="Case-insensitive substring search over the catalog. Formats: grouped (default), list.")
async def search_medicines(
    q: str = Query("", description="Search text, at least 2 characters"),
    output_format: str = Query("grouped", alias="format", description="Response format: grouped or list")
):
    """Search the catalog by medicine name."""
    query = q.lower()

    if len(query) < MIN_QUERY_LENGTH:
        return JSONResponse(
            status_code=400,
            content={
                "error": f"Search query must be at least {MIN_QUERY_LENGTH} characters",
                "hint": "Use /popular-medicines for a full list",
            },
        )

    results = catalog.search_catalog(query)
    matched = [name for names in results.values() for name in names]
    logger.info(f"Catalog search for '{query}' matched {len(matched)} medicines")

    if output_format == "list":
        return {
            "query": query,
            "count": len(matched),
            "results": matched,
        }

    if not matched:
        return {
            "query": query,
            "matches": 0,
            "message": "No medicines found matching your query",
            "suggestion": "Try a different search term or check /popular-medicines for a full list",
        }

    return {
        "query": query,
        "matches": len(matched),
        "categories": len(results),
        "results": results,
    }
