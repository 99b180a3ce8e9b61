from __future__ import annotations

import asyncio

from shoe_assistant.config import settings
from shoe_assistant.data_providers.products_csv import ProductsCsvSource
from shoe_assistant.errors import ImageQualityError, MissingImageError
from shoe_assistant.llm.client import ShoeAnalyzer
from shoe_assistant.llm.prompts import build_analysis_prompt
from shoe_assistant.rag.catalog_store import CatalogStore
from shoe_assistant.rag.ranking import ProductRecommender
from shoe_assistant.schemas import AnalyzeShoeRequest


class ShoeAssistantService:
    def __init__(
        self,
        analyzer: ShoeAnalyzer | None = None,
        store: CatalogStore | None = None,
        recommender: ProductRecommender | None = None,
        catalog_source: ProductsCsvSource | None = None,
    ) -> None:
        self.analyzer = analyzer if analyzer is not None else ShoeAnalyzer()
        self.store = store if store is not None else CatalogStore()
        self.recommender = recommender if recommender is not None else ProductRecommender(self.store)
        self.catalog_source = catalog_source if catalog_source is not None else ProductsCsvSource()
        self.debug = settings.debug_log

    def load_catalog(self) -> int:
        catalog = self.store.load_from(self.catalog_source)
        return len(catalog)

    async def analyze_shoe(self, request: AnalyzeShoeRequest) -> dict:
        image = (request.base64_image or "").strip()
        if not image:
            raise MissingImageError("No image provided")
        if self.debug:
            print(
                f"[DEBUG][SERVICE] language='{request.language}' brand='{request.brand or ''}' "
                f"affected_part='{request.affected_part or ''}' image_chars={len(image)}"
            )

        quality_issue = await asyncio.to_thread(self.analyzer.check_image_quality, image)
        if quality_issue:
            raise ImageQualityError(quality_issue)

        prompt = build_analysis_prompt(
            language=request.language,
            brand=request.brand,
            problem_description=request.problem_description,
            affected_part=request.affected_part,
        )
        description = await asyncio.to_thread(self.analyzer.analyze, image, prompt)

        # Ranking is pure CPU work over one catalog snapshot; run it inline.
        recommended = self.recommender.recommend(description)

        payload = description.model_dump(by_alias=True, exclude_none=True)
        payload["recommendedProducts"] = [item.model_dump() for item in recommended]
        if self.debug:
            print(f"[DEBUG][SERVICE] response_source='{self.analyzer.last_source}' products={len(recommended)}")
        return payload

    def stats(self) -> dict:
        return {
            "catalog": self.store.stats(),
            "model": self.analyzer.model,
            "model_configured": self.analyzer.configured,
            "top_k": self.recommender.top_k,
        }
