"""
Article extraction pipeline.

Fetches a news article page, parses it and runs the field extractors:

    URL -> fetch HTML -> parse -> hostname -> title/author/source/image/content

Only two things can fail the whole extraction:
- the page fetch (non-2xx status, timeout, network error)
- an unexpected exception while parsing/extracting

Both surface as ExtractionError with one user-facing message. Individual
fields never fail; they fall back to sentinels inside the extractors.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Optional
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup, UnicodeDammit

from . import config
from .extractors import (
    extract_author,
    extract_content,
    extract_image,
    extract_title,
    resolve_source,
)

logger = logging.getLogger(__name__)

EXTRACTION_FAILED_MESSAGE = 'Failed to extract article. Please check the URL and try again.'


class ExtractionError(Exception):
    """Raised when an article cannot be extracted at all."""

    def __init__(self, message: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.reason = reason


class FetchError(ExtractionError):
    """The article page could not be retrieved."""


@dataclass
class ExtractionResult:
    """Metadata extracted from one article page."""

    title: str
    author: str
    source: str
    image_url: Optional[str]
    content: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data['imageUrl'] = data.pop('image_url')
        return data


def get_domain_from_url(url: str) -> str:
    """Return the lowercase hostname of url, or '' if it cannot be parsed."""
    try:
        return urlparse(url).hostname or ''
    except (ValueError, AttributeError):
        return ''


def is_valid_url(url) -> bool:
    """True for absolute http(s) URLs with a host."""
    if not url or not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url.strip())
        hostname = parsed.hostname
    except ValueError:
        return False
    return parsed.scheme in ('http', 'https') and bool(hostname)


def fetch_html(url: str, timeout: float = None, session: requests.Session = None) -> str:
    """
    Fetch an article page.

    Args:
        url: Page URL
        timeout: Seconds before giving up (defaults to ARTICLE_FETCH_TIMEOUT)
        session: Optional requests session to reuse

    Returns:
        Response body as text

    Raises:
        FetchError: On timeout, connection failure or non-2xx status
    """
    headers = {
        'User-Agent': config.USER_AGENT,
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        'Accept-Language': 'id-ID,id;q=0.9,en-US;q=0.8,en;q=0.7',
    }
    http = session or requests
    timeout = timeout if timeout is not None else config.ARTICLE_FETCH_TIMEOUT

    try:
        response = http.get(url, headers=headers, timeout=timeout, allow_redirects=True)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise FetchError('Request timed out', reason='timeout') from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        reason = e.response.reason if e.response is not None else None
        raise FetchError(f'Failed to fetch article: {status} {reason or ""}'.strip(),
                         status_code=status, reason=reason) from e
    except requests.exceptions.RequestException as e:
        raise FetchError(f'Request failed: {e}', reason=type(e).__name__) from e

    # requests assumes ISO-8859-1 when no charset is declared
    if 'charset' not in response.headers.get('Content-Type', '').lower():
        return UnicodeDammit(response.content, is_html=True).unicode_markup or response.text

    return response.text


def extract_from_html(html: str, url: str) -> ExtractionResult:
    """Run every field extractor over an already fetched page."""
    soup = BeautifulSoup(html, 'html.parser')
    domain = get_domain_from_url(url)
    logger.info('Detected domain: %s', domain or '<none>')

    return ExtractionResult(
        title=extract_title(soup, domain),
        author=extract_author(soup, domain),
        source=resolve_source(soup, url, domain),
        image_url=extract_image(soup, domain),
        content=extract_content(soup, domain),
    )


def extract_article(url: str, timeout: float = None, session: requests.Session = None) -> ExtractionResult:
    """
    Extract title, author, source, image and body text from a news article.

    Makes exactly one HTTP GET to url.

    Raises:
        ExtractionError: Fetch failed or parsing blew up. The message is
            always EXTRACTION_FAILED_MESSAGE; status_code/reason carry the
            fetch details when available.
    """
    try:
        html = fetch_html(url, timeout=timeout, session=session)
        return extract_from_html(html, url)
    except FetchError as e:
        logger.warning('Fetch failed for %s: %s', url, e.message)
        raise ExtractionError(EXTRACTION_FAILED_MESSAGE, status_code=e.status_code, reason=e.reason) from e
    except Exception as e:
        logger.exception('Error extracting article from %s', url)
        raise ExtractionError(EXTRACTION_FAILED_MESSAGE) from e
