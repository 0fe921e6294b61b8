# src/services/product_service.py

"""Search and detail lookups: fetch, extract, fall back."""

import logging
from dataclasses import dataclass, field

from src.config.settings import Settings
from src.models.product import Product
from src.scrapers.html_extractor import (
    PageKind,
    SelectorFamily,
    extract_products,
    load_selector_rules,
)
from src.scrapers.page_fetcher import PageFetcher
from src.services.fallback_data import fallback_product, fallback_products

logger = logging.getLogger("quickfind.service")


class ScrapeError(Exception):
    """Base class for errors surfaced by the product service."""


class ProductNotFoundError(ScrapeError):
    """The detail page was reachable but no product title was found.

    ``product`` carries the fallback record (with the requested id) so
    callers can still show something.
    """

    def __init__(self, product_id: str, product: Product) -> None:
        super().__init__(f"product not found: {product_id}")
        self.product_id = product_id
        self.product = product


@dataclass
class SearchResult:
    """Products found for one query, in page order."""

    query: str
    products: list[Product] = field(
        default_factory=lambda: list[Product]()
    )
    used_fallback: bool = False
    error: str = ""

    @property
    def total_count(self) -> int:
        return len(self.products)

    def to_dict(self) -> dict[str, object]:
        """Serialise to the ``{products, totalCount, query}`` envelope."""
        return {
            "products": [p.to_dict() for p in self.products],
            "totalCount": self.total_count,
            "query": self.query,
        }


class ProductService:
    """Coordinates the page fetcher, the extractor and fallback data."""

    def __init__(
        self,
        fetcher: PageFetcher | None = None,
        rules: dict[PageKind, list[SelectorFamily]] | None = None,
    ) -> None:
        self.settings = Settings()
        self.fetcher = fetcher or PageFetcher()
        self.rules = rules or load_selector_rules(self.settings.STORE_ID)

    def search(self, query: str) -> SearchResult:
        """Search the store for *query*.

        Never raises for network or parse trouble: a failed fetch or an
        empty extraction both yield the fixed sample products.
        """
        # The query goes into the URL as-is, without percent-encoding.
        url = self.settings.SEARCH_URL_TEMPLATE.format(query=query)
        fetched = self.fetcher.fetch(url)

        if not fetched.ok:
            logger.warning(
                "Search for '%s' failed (%s), serving fallback data",
                query,
                fetched.error,
            )
            return SearchResult(
                query=query,
                products=fallback_products(),
                used_fallback=True,
                error=fetched.error,
            )

        products = extract_products(
            fetched.text, PageKind.SEARCH, self.rules, page_url=url
        )
        if not products:
            logger.info(
                "No products extracted for query '%s', "
                "serving fallback data",
                query,
            )
            return SearchResult(
                query=query,
                products=fallback_products(),
                used_fallback=True,
                error="no products extracted",
            )

        logger.info(
            "Found %d products for query: %s", len(products), query
        )
        return SearchResult(query=query, products=products)

    def get_detail(self, product_id: str) -> Product:
        """Fetch the detail page for *product_id*.

        A failed fetch yields the fallback product without an error.
        A fetched page without a title raises :class:`ProductNotFoundError`
        carrying that same fallback product.
        """
        url = self.settings.DETAIL_URL_TEMPLATE.format(
            product_id=product_id
        )
        fetched = self.fetcher.fetch(url)

        if not fetched.ok:
            logger.warning(
                "Detail fetch for id '%s' failed (%s), "
                "serving fallback data",
                product_id,
                fetched.error,
            )
            return fallback_product(product_id)

        records = extract_products(
            fetched.text, PageKind.DETAIL, self.rules, page_url=url
        )
        # Later matches overwrite earlier ones.
        product = records[-1] if records else Product(link=url)
        product.id = product_id
        product.store_name = self.settings.STORE_NAME

        if not product.title:
            logger.warning(
                "No product title found for id '%s'", product_id
            )
            raise ProductNotFoundError(
                product_id, fallback_product(product_id)
            )

        logger.info(
            "Retrieved details for product %s: %s",
            product_id,
            product.title,
        )
        return product
