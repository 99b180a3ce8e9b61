"""Errors raised by the request layer; the ranking engine itself never raises."""


class ShoeAssistantError(Exception):
    """Base error for the shoe assistant."""


class MissingImageError(ShoeAssistantError):
    """The request carried no image."""


class ImageQualityError(ShoeAssistantError):
    """The photo is too dark, blurry or small to analyse."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AnalysisUnavailableError(ShoeAssistantError):
    """No vision model is configured (missing OPENAI_API_KEY)."""


class AnalysisFailedError(ShoeAssistantError):
    """The vision model call failed or returned nothing usable."""
