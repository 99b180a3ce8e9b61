import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from shoe_assistant.data_providers.products_csv import ProductsCsvSource
from shoe_assistant.rag.catalog_store import CatalogStore
from shoe_assistant.rag.ranking import ProductRecommender


def main() -> None:
    location = sys.argv[1] if len(sys.argv) > 1 else None
    store = CatalogStore()
    store.load_from(ProductsCsvSource(location))
    print(f"products={len(store)}")
    print(f"last_error={store.last_error}")

    recommender = ProductRecommender(store)
    description = {
        "materials": {"upper": "leather", "outsole": "rubber"},
        "cleaningRecommendations": [
            {"affectedPart": "Upper", "recommendations": ["Use a leather cleaner regularly"]}
        ],
    }
    for item in recommender.recommend(description):
        print(f"- {item.title} | {item.price} | {item.url}")


if __name__ == "__main__":
    main()
