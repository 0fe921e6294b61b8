# src/api/routes.py

"""HTTP routes: product search and product detail."""

import asyncio
import logging
from functools import lru_cache
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from src.config.settings import Settings
from src.services.product_service import (
    ProductNotFoundError,
    ProductService,
)

logger = logging.getLogger("quickfind.api")

router = APIRouter(prefix="/api", tags=["Products"])


@lru_cache(maxsize=1)
def get_product_service() -> ProductService:
    """Shared service instance; overridden in tests."""
    return ProductService()


Service = Annotated[ProductService, Depends(get_product_service)]


@router.get("/search")
async def search_products(
    service: Service,
    q: Annotated[str, Query()] = "",
    delay: Annotated[str, Query()] = "",
) -> Response:
    """Search the store; degrades to sample data rather than failing."""
    if not q:
        return PlainTextResponse(
            "Query parameter 'q' is required", status_code=400
        )
    logger.info("Searching for: %s", q)

    # Lets the frontend demo its loading state
    if delay == "true":
        await asyncio.sleep(Settings.SEARCH_DELAY)

    try:
        result = await asyncio.to_thread(service.search, q)
    except Exception as exc:
        logger.error(
            "Error scraping products for '%s': %s", q, exc, exc_info=True
        )
        return PlainTextResponse(
            "Failed to retrieve products", status_code=500
        )

    if result.used_fallback:
        logger.info(
            "Serving %d fallback products for query: %s",
            result.total_count,
            q,
        )
    return JSONResponse([p.to_dict() for p in result.products])


@router.get("/product/")
async def missing_product_id() -> Response:
    return PlainTextResponse("Product ID is required", status_code=400)


@router.get("/product/{product_id}")
async def get_product_detail(product_id: str, service: Service) -> Response:
    """Fetch one product's detail page."""
    if not product_id:
        return PlainTextResponse(
            "Product ID is required", status_code=400
        )

    try:
        product = await asyncio.to_thread(service.get_detail, product_id)
    except ProductNotFoundError:
        logger.info("No product details found for ID: %s", product_id)
        return PlainTextResponse("Product not found", status_code=404)
    except Exception as exc:
        logger.error(
            "Error scraping product details for '%s': %s",
            product_id,
            exc,
            exc_info=True,
        )
        return PlainTextResponse(
            "Failed to retrieve product details", status_code=500
        )

    if not product.title:
        logger.info("No product details found for ID: %s", product_id)
        return PlainTextResponse("Product not found", status_code=404)

    logger.info("Retrieved details for product: %s", product.title)
    return JSONResponse(product.to_dict())
