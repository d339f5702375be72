from __future__ import annotations

import logging
from typing import List

from langchain_core.tools import StructuredTool

from assistant.core.prompt import (
    COMPARISON_TEMPLATE,
    TOOL_ERROR_TEMPLATE,
    TOOL_RESULT_TEMPLATE,
)
from assistant.tools.scraper import fetch_page, truncate
from config.settings import get_settings


logger = logging.getLogger(__name__)


DELTA_DESCRIPTION = (
    "Fetches current Delta SkyMiles Medallion qualification requirements "
    "and status tier information"
)
UNITED_DESCRIPTION = (
    "Fetches current United MileagePlus Premier qualification requirements "
    "and status tier information"
)
COMPARE_DESCRIPTION = (
    "Compares Delta SkyMiles Medallion and United MileagePlus Premier "
    "qualification requirements"
)


def _fetch_qualification(airline: str, url: str) -> str:
    settings = get_settings()
    logger.info("Fetching %s qualification information from %s", airline, url)
    try:
        page = fetch_page(url, timeout=settings.scrape_timeout, user_agent=settings.scrape_user_agent)
    except Exception as exc:
        logger.exception("Failed to fetch %s qualification information", airline)
        return TOOL_ERROR_TEMPLATE.format(airline=airline, reason=exc)

    logger.info(
        "Fetched %s information: %s (%s characters)", airline, page.title, len(page.text)
    )
    return TOOL_RESULT_TEMPLATE.format(
        source=url,
        title=page.title,
        content=truncate(page.text, settings.tool_content_limit),
        airline=airline,
    )


def get_delta_medallion_qualification() -> str:
    """Fetch Delta SkyMiles Medallion qualification requirements."""
    return _fetch_qualification("Delta", get_settings().delta_url)


def get_united_premier_qualification() -> str:
    """Fetch United MileagePlus Premier qualification requirements."""
    return _fetch_qualification("United", get_settings().united_url)


def compare_airline_programs() -> str:
    """Fetch both programs and lay them side by side for comparison."""
    logger.info("Comparing Delta and United loyalty programs")
    return COMPARISON_TEMPLATE.format(
        delta=get_delta_medallion_qualification(),
        united=get_united_premier_qualification(),
    )


def build_airline_tools() -> List[StructuredTool]:
    return [
        StructuredTool.from_function(
            func=get_delta_medallion_qualification,
            name="get_delta_medallion_qualification",
            description=DELTA_DESCRIPTION,
        ),
        StructuredTool.from_function(
            func=get_united_premier_qualification,
            name="get_united_premier_qualification",
            description=UNITED_DESCRIPTION,
        ),
        StructuredTool.from_function(
            func=compare_airline_programs,
            name="compare_airline_programs",
            description=COMPARE_DESCRIPTION,
        ),
    ]
