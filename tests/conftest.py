import pytest

from shoe_assistant.rag.catalog_store import CatalogStore
from shoe_assistant.schemas import ProductRecord


@pytest.fixture
def care_rows() -> list[dict]:
    return [
        {
            "Handle": "p1",
            "Title": "Leather Cleaner Spray",
            "Body (HTML)": "",
            "Tags": "cleaner,leather",
            "Vendor": "Acme",
            "Variant Price": "9.99",
            "Image Src": "https://cdn.example.com/p1.jpg",
        },
        {
            "Handle": "p2",
            "Title": "Suede Brush",
            "Body (HTML)": "works well",
            "Tags": "brush,suede",
            "Vendor": "Acme",
            "Variant Price": "",
            "Image Src": "",
        },
        {
            "Handle": "p3",
            "Title": "Generic Shoe Polish",
            "Body (HTML)": "contains leather conditioner",
            "Tags": "polish",
            "Vendor": "Acme",
            "Variant Price": "5.00",
            "Image Src": "",
        },
    ]


@pytest.fixture
def care_catalog(care_rows) -> tuple[ProductRecord, ...]:
    return tuple(ProductRecord.from_row(row) for row in care_rows)


@pytest.fixture
def loaded_store(care_rows) -> CatalogStore:
    store = CatalogStore()
    store.load(care_rows)
    return store


@pytest.fixture
def leather_description() -> dict:
    return {
        "materials": {"upper": "leather"},
        "cleaningRecommendations": [
            {"affectedPart": "Upper", "recommendations": ["Use a leather cleaner regularly"]}
        ],
    }
