from __future__ import annotations

import csv
import io
from pathlib import Path

import httpx

from shoe_assistant.config import settings


class ProductsCsvSource:
    """Reads a Shopify-style products export from a local path or an http(s) URL."""

    def __init__(
        self,
        location: str | Path | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.location = str(location or settings.products_csv_path)
        self.transport = transport
        self.timeout = settings.request_timeout_seconds
        self.debug = settings.debug_log
        self.last_status: int | None = None

    def __call__(self) -> list[dict[str, str]]:
        return self.read_rows()

    def read_rows(self) -> list[dict[str, str]]:
        if self._is_remote(self.location):
            text = self._download(self.location)
        else:
            text = Path(self.location).read_text(encoding="utf-8-sig")
        rows = parse_csv_text(text)
        if self.debug:
            print(f"[DEBUG][CSV] rows={len(rows)} location={self.location}")
        return rows

    def _download(self, url: str) -> str:
        headers = {"User-Agent": "shoe-assistant/0.1", "Accept": "text/csv"}
        with httpx.Client(
            timeout=float(self.timeout), headers=headers, follow_redirects=True, transport=self.transport
        ) as client:
            response = client.get(url)
            self.last_status = response.status_code
            if self.debug:
                print(f"[DEBUG][CSV] status={self.last_status} url={url}")
            response.raise_for_status()
            content = response.content
        return content.decode("utf-8-sig")

    @staticmethod
    def _is_remote(location: str) -> bool:
        return location.lower().startswith(("http://", "https://"))


def parse_csv_text(text: str) -> list[dict[str, str]]:
    reader = csv.DictReader(io.StringIO(text, newline=""), strict=True)
    rows: list[dict[str, str]] = []
    for row in reader:
        # Short rows leave None values, long rows collect extras under the None key.
        rows.append({key: value or "" for key, value in row.items() if key is not None})
    return rows
