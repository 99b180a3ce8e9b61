from __future__ import annotations

import os
from urllib.parse import urlparse

from openai import OpenAI

from shoe_assistant.config import settings
from shoe_assistant.errors import AnalysisFailedError, AnalysisUnavailableError
from shoe_assistant.llm.parser import parse_description_output
from shoe_assistant.llm.prompts import IMAGE_QUALITY_PROMPT
from shoe_assistant.schemas import StructuredDescription

QUALITY_PASS = "PASS"


class ShoeAnalyzer:
    def __init__(self) -> None:
        self.model = settings.openai_model
        self.client = None
        self.debug = settings.debug_log
        self.last_source = "fallback"
        self.last_error = ""
        if settings.openai_api_key:
            kwargs = {"api_key": settings.openai_api_key}
            if self._is_valid_http_url(settings.openai_base_url):
                kwargs["base_url"] = settings.openai_base_url
            else:
                # Let OpenAI SDK use its default URL when direct API is intended.
                os.environ.pop("OPENAI_BASE_URL", None)
            self.client = OpenAI(**kwargs)

    @property
    def configured(self) -> bool:
        return self.client is not None

    def check_image_quality(self, base64_image: str) -> str | None:
        """Return a description of what is wrong with the photo, or None if it is usable."""
        if not self.client:
            return None

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                temperature=0.5,
                max_tokens=100,
                messages=[
                    {"role": "system", "content": IMAGE_QUALITY_PROMPT},
                    {"role": "user", "content": [self._image_part(base64_image, detail="low")]},
                ],
            )
            result = (response.choices[0].message.content or "").strip()
        except Exception as exc:
            # Continue with analysis if the quality check itself fails.
            self.last_error = f"{exc.__class__.__name__}: {exc}"
            print(f"[ERROR][VISION] Error checking image quality: {self.last_error}")
            return None

        if self.debug:
            print(f"[DEBUG][VISION] quality_check='{result[:120]}'")
        if not result or result == QUALITY_PASS:
            return None
        return result

    def analyze(self, base64_image: str, prompt: str) -> StructuredDescription:
        self.last_error = ""
        if not self.client:
            self.last_source = "fallback"
            raise AnalysisUnavailableError("OPENAI_API_KEY is not configured.")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                temperature=1,
                max_tokens=2048,
                top_p=1,
                frequency_penalty=0,
                presence_penalty=0,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": [{"type": "text", "text": prompt}]},
                    {"role": "user", "content": [self._image_part(base64_image, detail="high")]},
                ],
            )
            raw = (response.choices[0].message.content or "").strip()
        except Exception as exc:
            self.last_source = "fallback"
            self.last_error = f"{exc.__class__.__name__}: {exc}"
            raise AnalysisFailedError(self.last_error) from exc

        if not raw:
            self.last_source = "fallback"
            self.last_error = "EmptyResponse: model returned no text."
            raise AnalysisFailedError(self.last_error)

        self.last_source = "llm"
        if self.debug:
            print(f"[DEBUG][VISION] analysis_chars={len(raw)}")
        return parse_description_output(raw)

    @staticmethod
    def _image_part(base64_image: str, detail: str) -> dict:
        return {
            "type": "image_url",
            "image_url": {"url": f"data:image/jpeg;base64,{base64_image}", "detail": detail},
        }

    @staticmethod
    def _is_valid_http_url(value: str) -> bool:
        if not value:
            return False
        parsed = urlparse(value)
        return parsed.scheme in {"http", "https"} and bool(parsed.netloc)
