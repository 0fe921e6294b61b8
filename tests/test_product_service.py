# tests/test_product_service.py

"""Tests for ProductService fetch/extract/fallback orchestration."""

import unittest
from pathlib import Path

from src.scrapers.page_fetcher import FetchResult
from src.services.fallback_data import fallback_product, fallback_products
from src.services.product_service import (
    ProductNotFoundError,
    ProductService,
    ScrapeError,
    SearchResult,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"

EMPTY_PAGE = "<html><body></body></html>"


def _load_fixture(name: str) -> str:
    """Read an HTML fixture file."""
    with open(FIXTURES_DIR / name, encoding="utf-8") as f:
        return f.read()


class FakeFetcher:
    """Stub fetcher returning a canned result and recording URLs."""

    def __init__(
        self,
        text: str = "",
        status_code: int = 200,
        error: str = "",
    ) -> None:
        self.text = text
        self.status_code = status_code
        self.error = error
        self.urls: list[str] = []

    def fetch(self, url: str) -> FetchResult:
        self.urls.append(url)
        return FetchResult(
            url=url,
            status_code=self.status_code,
            text=self.text,
            error=self.error,
        )


def _failing_fetcher() -> FakeFetcher:
    return FakeFetcher(error="Could not resolve host")


class TestSearch(unittest.TestCase):
    """ProductService.search."""

    def test_search_returns_extracted_products(self) -> None:
        """Live results are returned in page order."""
        fetcher = FakeFetcher(_load_fixture("daraz_search.html"))
        result = ProductService(fetcher=fetcher).search("iphone")

        self.assertIsInstance(result, SearchResult)
        self.assertFalse(result.used_fallback)
        self.assertEqual(result.query, "iphone")
        self.assertEqual(result.total_count, 2)
        self.assertEqual(
            [p.id for p in result.products], ["104066523", "2223334"]
        )

    def test_search_url_embeds_raw_query(self) -> None:
        """The query is placed into the URL without percent-encoding."""
        fetcher = FakeFetcher(_load_fixture("daraz_search.html"))
        ProductService(fetcher=fetcher).search("iphone 15 & case")
        self.assertEqual(
            fetcher.urls,
            ["https://www.daraz.com.np/catalog/?q=iphone 15 & case"],
        )

    def test_transport_error_serves_fallback(self) -> None:
        """A failed fetch yields the four sample products in order."""
        result = ProductService(fetcher=_failing_fetcher()).search("iphone")

        self.assertTrue(result.used_fallback)
        self.assertEqual(result.error, "Could not resolve host")
        self.assertEqual(result.products, fallback_products())
        self.assertEqual(
            [p.id for p in result.products], ["1", "2", "3", "4"]
        )

    def test_error_status_serves_fallback(self) -> None:
        """An HTTP error status yields the sample products."""
        fetcher = FakeFetcher("blocked", status_code=403, error="HTTP 403")
        result = ProductService(fetcher=fetcher).search("iphone")
        self.assertTrue(result.used_fallback)
        self.assertEqual(result.products, fallback_products())

    def test_empty_extraction_serves_fallback(self) -> None:
        """A page with no matching nodes yields the sample products."""
        result = ProductService(fetcher=FakeFetcher(EMPTY_PAGE)).search(
            "iphone"
        )
        self.assertTrue(result.used_fallback)
        self.assertEqual(result.products, fallback_products())

    def test_to_dict_envelope(self) -> None:
        """SearchResult serialises to the products/totalCount/query shape."""
        result = ProductService(fetcher=_failing_fetcher()).search("tv")
        data = result.to_dict()
        self.assertEqual(data["query"], "tv")
        self.assertEqual(data["totalCount"], 4)
        self.assertEqual(len(data["products"]), 4)


class TestGetDetail(unittest.TestCase):
    """ProductService.get_detail."""

    def test_detail_returns_extracted_product(self) -> None:
        """The extracted record carries the requested id and store name."""
        fetcher = FakeFetcher(_load_fixture("daraz_detail.html"))
        product = ProductService(fetcher=fetcher).get_detail("104066523")

        self.assertEqual(product.id, "104066523")
        self.assertEqual(product.store_name, "Daraz")
        self.assertEqual(product.title, "Apple iPhone 15 128GB")
        self.assertEqual(
            product.link,
            "https://www.daraz.com.np/products/i104066523.html",
        )
        self.assertEqual(fetcher.urls, [product.link])

    def test_transport_error_returns_fallback_without_error(self) -> None:
        """A failed fetch yields the sample product, not an exception."""
        product = ProductService(fetcher=_failing_fetcher()).get_detail(
            "42"
        )
        self.assertEqual(product, fallback_product("42"))
        self.assertEqual(product.id, "42")
        self.assertEqual(product.title, "Apple MacBook Pro 16-inch")

    def test_error_status_returns_fallback_without_error(self) -> None:
        """An HTTP error status also yields the sample product."""
        fetcher = FakeFetcher("", status_code=500, error="HTTP 500")
        product = ProductService(fetcher=fetcher).get_detail("42")
        self.assertEqual(product, fallback_product("42"))

    def test_missing_title_raises_with_fallback(self) -> None:
        """A reachable page without a title raises, carrying the fallback."""
        service = ProductService(fetcher=FakeFetcher(EMPTY_PAGE))

        with self.assertRaises(ProductNotFoundError) as ctx:
            service.get_detail("987654321")

        exc = ctx.exception
        self.assertIsInstance(exc, ScrapeError)
        self.assertEqual(exc.product_id, "987654321")
        self.assertEqual(exc.product.id, "987654321")
        self.assertEqual(exc.product.title, "Apple MacBook Pro 16-inch")
        self.assertEqual(exc.product.price, "$2,399.00")
        self.assertTrue(exc.product.detailed_description)

    def test_block_without_title_raises(self) -> None:
        """A detail block whose title is empty counts as not found."""
        html = (
            '<html><body><div class="pdp-block">'
            '<h1 class="pdp-title">   </h1>'
            '<div class="pdp-price">Rs. 10</div>'
            "</div></body></html>"
        )
        with self.assertRaises(ProductNotFoundError):
            ProductService(fetcher=FakeFetcher(html)).get_detail("1")


if __name__ == "__main__":
    unittest.main()
