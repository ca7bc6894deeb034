"""Runtime configuration loaded from the environment."""

import os
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class ExtractionSettings(BaseModel):
    """Tunables for the page scan and unit detection heuristics."""
    page_cap: int = Field(default=150, ge=100, le=200)
    marker_window: int = Field(default=10, ge=1, le=50)
    scale_prefix_chars: int = Field(default=20_000, ge=10_000, le=50_000)
    max_upload_bytes: int = Field(default=10 * 1024 * 1024, gt=0)


def load_settings() -> ExtractionSettings:
    """Build settings from environment variables (and a .env file if present).

    Raises:
        pydantic.ValidationError: If a configured value is out of range
    """
    load_dotenv()

    values = {}
    if os.getenv("EXTRACTION_PAGE_CAP"):
        values["page_cap"] = os.getenv("EXTRACTION_PAGE_CAP")
    if os.getenv("EXTRACTION_MARKER_WINDOW"):
        values["marker_window"] = os.getenv("EXTRACTION_MARKER_WINDOW")
    if os.getenv("UNIT_SCALE_PREFIX_CHARS"):
        values["scale_prefix_chars"] = os.getenv("UNIT_SCALE_PREFIX_CHARS")
    if os.getenv("MAX_UPLOAD_MB"):
        values["max_upload_bytes"] = int(float(os.getenv("MAX_UPLOAD_MB")) * 1024 * 1024)

    return ExtractionSettings(**values)
