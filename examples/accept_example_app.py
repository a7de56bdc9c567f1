"""Example FastAPI app ranking the client's Accept and Accept-Language lists.

Run with:
    uvicorn examples.accept_example_app:app --reload
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Any

from fastapi import FastAPI, Header

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi_qvalues import ParseErrorMiddleware, WeightedValue, ranked_quality_values  # noqa: E402

logger = logging.getLogger(__name__)


def _serialize(values: list[WeightedValue]) -> list[dict[str, Any]]:
    return [value.model_dump() for value in values]


app = FastAPI(title="Quality value example")
app.add_middleware(ParseErrorMiddleware)


@app.get("/preferences")
async def preferences(
    accept: str = Header(default=""),
    accept_language: str = Header(default=""),
) -> dict[str, Any]:
    """Echo both header lists back, highest priority first."""
    media_types = ranked_quality_values(accept)
    languages = ranked_quality_values(accept_language)
    logger.debug("Ranked %d media types, %d languages", len(media_types), len(languages))
    return {
        "accept": _serialize(media_types),
        "accept_language": _serialize(languages),
        "header": ", ".join(str(value) for value in media_types),
    }
