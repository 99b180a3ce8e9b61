from __future__ import annotations

from typing import Any, Mapping, Sequence

from shoe_assistant.config import settings
from shoe_assistant.rag.catalog_store import Catalog, CatalogStore
from shoe_assistant.rag.keywords import extract_keywords
from shoe_assistant.rag.scoring import score_product
from shoe_assistant.schemas import ProductRecord, ProductSummary, StructuredDescription

PRICE_NOT_AVAILABLE = "Price not available"


def select_top_k(
    catalog: Catalog,
    keywords: Sequence[str],
    k: int,
    *,
    base_url: str = settings.product_base_url,
    placeholder_image: str = settings.placeholder_image_url,
) -> list[ProductSummary]:
    if not catalog or k <= 0:
        return []

    scored: list[tuple[int, ProductRecord]] = []
    for product in catalog:
        score = score_product(keywords, product)
        if score > 0:
            scored.append((score, product))

    # sorted() is stable: equal scores keep catalog order.
    ranked = sorted(scored, key=lambda x: x[0], reverse=True)
    return [
        to_summary(product, base_url=base_url, placeholder_image=placeholder_image)
        for _, product in ranked[:k]
    ]


def to_summary(product: ProductRecord, *, base_url: str, placeholder_image: str) -> ProductSummary:
    return ProductSummary(
        id=product.handle,
        title=product.title,
        price=f"${product.variant_price}" if product.variant_price else PRICE_NOT_AVAILABLE,
        image=product.image_src or placeholder_image,
        vendor=product.vendor,
        url=f"{base_url}{product.handle}",
    )


class ProductRecommender:
    def __init__(
        self,
        store: CatalogStore,
        top_k: int | None = None,
        base_url: str | None = None,
        placeholder_image: str | None = None,
    ) -> None:
        self.store = store
        self.top_k = settings.recommendation_top_k if top_k is None else top_k
        self.base_url = settings.product_base_url if base_url is None else base_url
        self.placeholder_image = settings.placeholder_image_url if placeholder_image is None else placeholder_image
        self.debug = settings.debug_log

    def recommend(self, description: StructuredDescription | Mapping[str, Any] | None) -> list[ProductSummary]:
        catalog = self.store.current()
        keywords = extract_keywords(description)
        results = select_top_k(
            catalog,
            keywords,
            self.top_k,
            base_url=self.base_url,
            placeholder_image=self.placeholder_image,
        )
        if self.debug:
            print(
                f"[DEBUG][RANK] catalog={len(catalog)} keywords={keywords} "
                f"results={[item.id for item in results]}"
            )
        return results
