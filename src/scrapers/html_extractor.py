# src/scrapers/html_extractor.py

"""Selector-table driven extraction of products from store HTML.

Rules live in ``selectors.json`` keyed by store and then by page kind.
Each page kind maps to an ordered list of *selector families*; every
family names a container selector for candidate nodes plus per-field
primary and fallback selectors.  Families are applied one after the
other and their matches are concatenated, each family in document
order.
"""

import json
import logging
import re
from enum import Enum
from typing import Any

from bs4 import BeautifulSoup, Tag

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("quickfind.extractor")

SelectorFamily = dict[str, Any]

_PRODUCT_ID_RE = re.compile(r"/i(\d+)\.html")


class PageKind(Enum):
    """Kinds of store page the extractor knows how to read."""

    SEARCH = "search"
    DETAIL = "detail"


def load_selector_rules(
    store_id: str = Settings.STORE_ID,
) -> dict[PageKind, list[SelectorFamily]]:
    """Load the selector families for *store_id* from selectors.json."""
    with open(Settings.SELECTORS_PATH, encoding="utf-8") as f:
        all_selectors: dict[str, Any] = json.load(f)
    store_rules: dict[str, list[SelectorFamily]] = all_selectors.get(
        store_id, {}
    )
    return {kind: store_rules.get(kind.value, []) for kind in PageKind}


def extract_product_id(link: str) -> str:
    """Derive a product id from a detail link.

    ``.../i987654321.html`` yields ``"987654321"``.  Failing that, a
    trailing path segment shaped ``i<anything>.html`` yields the part
    between the prefix and the suffix.  Anything else yields ``""``.
    """
    if not link:
        return ""

    match = _PRODUCT_ID_RE.search(link)
    if match:
        return match.group(1)

    last_part = link.split("?", 1)[0].rstrip("/").rsplit("/", 1)[-1]
    if last_part.startswith("i") and last_part.endswith(".html"):
        return last_part[1:-len(".html")]

    return ""


def placeholder_review_count(rating: str) -> str:
    """Return a stand-in review count for a rated product.

    The index is fixed, so every rated product gets the same value.
    """
    counts = Settings.PLACEHOLDER_REVIEW_COUNTS
    index = 0
    return counts[index]


def _child_text(node: Tag, selector: str) -> str:
    """Concatenated, trimmed text of every descendant matching *selector*."""
    return "".join(
        el.get_text() for el in node.select(selector)
    ).strip()


def _child_attr(node: Tag, selector: str, attr: str) -> str:
    """Attribute *attr* of the first descendant matching *selector*."""
    el = node.select_one(selector)
    if el is None:
        return ""
    value = el.get(attr)
    if value is None:
        return ""
    return value if isinstance(value, str) else " ".join(value)


def _read_field(node: Tag, rule: dict[str, str]) -> str:
    """Apply a field rule's primary selector, then its fallback."""
    attr = rule.get("attr")
    if attr:
        value = _child_attr(node, rule["selector"], attr)
    else:
        value = _child_text(node, rule["selector"])

    fallback = rule.get("fallback")
    if not value and fallback:
        fallback_attr = rule.get("fallback_attr")
        if fallback_attr:
            value = _child_attr(node, fallback, fallback_attr)
        else:
            value = _child_text(node, fallback)
    return value


def _parse_candidate(
    node: Tag,
    family: SelectorFamily,
    page_url: str,
) -> Product | None:
    """Turn one candidate node into a Product, or None if it is unusable."""
    product = Product(store_name=Settings.STORE_NAME)

    id_attr = family.get("id_attr")
    if id_attr:
        raw_id = node.get(id_attr)
        product.id = raw_id.strip() if isinstance(raw_id, str) else ""

    for field_name, rule in family.get("fields", {}).items():
        setattr(product, field_name, _read_field(node, rule))

    link_rule: dict[str, str] | None = family.get("link")
    if not product.id and link_rule:
        product.link = _child_attr(
            node, link_rule["selector"], link_rule["attr"]
        )
        product.id = extract_product_id(product.link)

    required: list[str] = family.get("require_any", [])
    if required and not any(getattr(product, f) for f in required):
        return None

    if family.get("link_from_page"):
        product.link = page_url

    link_template = family.get("link_template")
    if link_template and not product.link and product.id:
        product.link = link_template.format(id=product.id)

    if (
        family.get("synthesize_review_count")
        and product.rating
        and not product.review_count
    ):
        product.review_count = placeholder_review_count(product.rating)

    return product


def extract_products(
    html: str,
    kind: PageKind,
    rules: dict[PageKind, list[SelectorFamily]],
    page_url: str = "",
) -> list[Product]:
    """Extract every product the *kind* selector families find in *html*.

    Returns a new list on each call; the order is family by family,
    document order within a family.
    """
    soup = BeautifulSoup(html, "lxml")
    products: list[Product] = []

    for family in rules.get(kind, []):
        candidates = soup.select(family["container"])
        matched = 0
        for node in candidates:
            product = _parse_candidate(node, family, page_url)
            if product is not None:
                products.append(product)
                matched += 1
        logger.debug(
            "[%s] %s matched %d candidates, kept %d",
            kind.value,
            family["container"],
            len(candidates),
            matched,
        )

    return products
