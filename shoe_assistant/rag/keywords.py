from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from shoe_assistant.schemas import StructuredDescription

# Placeholders the vision prompt asks the model to use when a material can't be identified.
SENTINEL_MATERIALS = frozenset({"unknown", "unspecified"})

STOPWORDS = frozenset({"with", "and", "the", "for", "your", "that", "this", "then", "use"})

MIN_WORD_LENGTH = 4


def extract_keywords(description: StructuredDescription | Mapping[str, Any] | None) -> list[str]:
    """Derive match probes from a shoe description.

    Order follows the description: brand/model tokens, material values, then
    for each cleaning entry its affected part followed by its recommendation
    words, then recommended tags. Repeated keywords are kept on purpose, every
    occurrence is scored again.
    """
    description = _coerce(description)
    keywords: list[str] = []

    if description.brand_and_model:
        keywords.extend(description.brand_and_model.lower().split())

    if description.materials:
        for material in description.materials.values_in_slot_order():
            if not material:
                continue
            lowered = material.lower()
            if lowered in SENTINEL_MATERIALS:
                continue
            keywords.append(lowered)

    if description.cleaning_recommendations:
        for entry in description.cleaning_recommendations:
            if entry.affected_part:
                keywords.append(entry.affected_part.lower())
            for recommendation in entry.recommendations:
                keywords.extend(_recommendation_words(recommendation))

    if description.recommended_tags:
        keywords.extend(tag.lower() for tag in description.recommended_tags)

    return keywords


def _recommendation_words(text: str) -> list[str]:
    return [
        word
        for word in text.lower().split()
        if len(word) >= MIN_WORD_LENGTH and word not in STOPWORDS
    ]


def _coerce(description: StructuredDescription | Mapping[str, Any] | None) -> StructuredDescription:
    if isinstance(description, StructuredDescription):
        return description
    if not description:
        return StructuredDescription()
    try:
        return StructuredDescription.model_validate(dict(description))
    except (ValidationError, TypeError, ValueError):
        return StructuredDescription()
