import csv

import httpx
import pytest

from shoe_assistant.data_providers.products_csv import ProductsCsvSource, parse_csv_text
from shoe_assistant.rag.catalog_store import CatalogStore

EXPORT = (
    "Handle,Title,Body (HTML),Vendor,Tags,Variant Price,Image Src\n"
    'leather-spray,Leather Cleaner Spray,"<p>Cleans, conditions</p>",Acme,"cleaner, leather",9.99,https://cdn.test/a.jpg\n'
    "leather-spray,,,,,,https://cdn.test/b.jpg\n"
    "suede-brush,Suede Brush,,Acme,suede\n"
)


def test_parse_csv_text_reads_rows_in_order():
    rows = parse_csv_text(EXPORT)
    assert [row["Handle"] for row in rows] == ["leather-spray", "leather-spray", "suede-brush"]
    assert rows[0]["Body (HTML)"] == "<p>Cleans, conditions</p>"
    assert rows[0]["Tags"] == "cleaner, leather"


def test_short_rows_are_padded_with_empty_strings():
    rows = parse_csv_text(EXPORT)
    assert rows[2]["Variant Price"] == ""
    assert rows[2]["Image Src"] == ""


def test_local_file_with_bom(tmp_path):
    path = tmp_path / "products_export.csv"
    path.write_text(EXPORT, encoding="utf-8-sig")
    rows = ProductsCsvSource(path)()
    assert rows[0]["Handle"] == "leather-spray"


def test_missing_file_raises_and_store_degrades(tmp_path):
    source = ProductsCsvSource(tmp_path / "missing.csv")
    with pytest.raises(FileNotFoundError):
        source()

    store = CatalogStore()
    assert store.load_from(source) == ()
    assert "FileNotFoundError" in store.last_error


def test_malformed_quoting_raises():
    with pytest.raises(csv.Error):
        parse_csv_text('Handle,Title\n"a"b,c\n')


def test_remote_export_is_downloaded():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/exports/products.csv"
        return httpx.Response(200, content=EXPORT.encode("utf-8"))

    source = ProductsCsvSource("https://shop.test/exports/products.csv", transport=httpx.MockTransport(handler))
    store = CatalogStore()
    store.load_from(source)
    assert len(store) == 3
    assert source.last_status == 200


def test_remote_http_error_degrades_store():
    source = ProductsCsvSource(
        "https://shop.test/exports/products.csv",
        transport=httpx.MockTransport(lambda request: httpx.Response(404)),
    )
    store = CatalogStore()
    assert store.load_from(source) == ()
    assert "HTTPStatusError" in store.last_error
