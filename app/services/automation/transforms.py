"""Field transformations applied by the automation routines."""

import re
from typing import Iterable, Optional

from app.constants.automation import (
    SEO_MIN_DESCRIPTION_LENGTH,
    SEO_SUFFIX,
    StockTag,
)
from app.schemas.products import ShopifyVariant

_WHITESPACE_RE = re.compile(r"\s+")


def optimize_title(title: str) -> str:
    """
    Collapse whitespace runs, trim, and title-case every word.

    >>> optimize_title("  wireLESS   mouse ")
    'Wireless Mouse'
    """
    collapsed = _WHITESPACE_RE.sub(" ", title or "").strip()
    return " ".join(word[:1].title() + word[1:].lower() for word in collapsed.split(" "))


def total_inventory(variants: Iterable[ShopifyVariant]) -> int:
    return sum(v.inventory_quantity or 0 for v in variants)


def stock_tag(total: int) -> str:
    if total <= 0:
        return StockTag.OUT
    if total < StockTag.LOW_STOCK_THRESHOLD:
        return StockTag.LOW
    return StockTag.AVAILABLE


def compute_inventory_tags(tags: Optional[str], total: int) -> str:
    """
    Replace any stock-* tag with the one matching ``total``.

    Other tags keep their order; empty fragments are dropped.
    """
    kept = [
        tag for tag in (t.strip() for t in (tags or "").split(","))
        if tag and not tag.startswith(StockTag.PREFIX)
    ]
    kept.append(stock_tag(total))
    return ", ".join(kept)


def needs_seo_description(body_html: Optional[str]) -> bool:
    return not body_html or len(body_html) < SEO_MIN_DESCRIPTION_LENGTH


def build_seo_description(
    title: str,
    product_type: Optional[str] = None,
    vendor: Optional[str] = None,
    store_name: str = "TechHive"
) -> str:
    parts = [f"Shop {title} at {store_name}. "]
    if product_type:
        parts.append(f"Category: {product_type}. ")
    if vendor:
        parts.append(f"Brand: {vendor}. ")
    parts.append(SEO_SUFFIX)
    return "".join(parts)
