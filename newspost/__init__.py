"""Shared library for News Post Studio."""

import logging

from .site_selectors import (
    SITE_SELECTORS,
    SOURCE_NAMES,
    SiteSelectors,
    get_site_selectors,
    get_source_name,
)

from .extractors import (
    UNKNOWN_TITLE,
    UNKNOWN_AUTHOR,
    UNKNOWN_SOURCE,
    extract_title,
    extract_author,
    extract_image,
    extract_content,
    resolve_source,
)

from .article_extractor import (
    EXTRACTION_FAILED_MESSAGE,
    ExtractionError,
    ExtractionResult,
    FetchError,
    extract_article,
    extract_from_html,
    fetch_html,
    get_domain_from_url,
    is_valid_url,
)

from .logging_config import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Selector registry
    'SITE_SELECTORS',
    'SOURCE_NAMES',
    'SiteSelectors',
    'get_site_selectors',
    'get_source_name',
    # Field extractors
    'UNKNOWN_TITLE',
    'UNKNOWN_AUTHOR',
    'UNKNOWN_SOURCE',
    'extract_title',
    'extract_author',
    'extract_image',
    'extract_content',
    'resolve_source',
    # Orchestrator
    'EXTRACTION_FAILED_MESSAGE',
    'ExtractionError',
    'ExtractionResult',
    'FetchError',
    'extract_article',
    'extract_from_html',
    'fetch_html',
    'get_domain_from_url',
    'is_valid_url',
    # Logging
    'configure_logging',
]
