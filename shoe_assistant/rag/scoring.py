from __future__ import annotations

from typing import Sequence

from shoe_assistant.schemas import ProductRecord

TITLE_WEIGHT = 3
TAGS_WEIGHT = 2
OTHER_WEIGHT = 1


def searchable_text(product: ProductRecord) -> str:
    return f"{product.title} {product.body} {product.tags} {product.vendor}".lower()


def score_product(keywords: Sequence[str], product: ProductRecord) -> int:
    # Substring containment, so "" matches every product and "leather" matches "leathers".
    text = searchable_text(product)
    title = product.title.lower()
    tags = product.tags.lower()

    score = 0
    for keyword in keywords:
        if keyword not in text:
            continue
        if keyword in title:
            score += TITLE_WEIGHT
        elif keyword in tags:
            score += TAGS_WEIGHT
        else:
            score += OTHER_WEIGHT
    return score
