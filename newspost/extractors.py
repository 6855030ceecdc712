"""
Field extractors for news article pages.

Each extractor takes a parsed page (BeautifulSoup) and the page hostname and
returns one field of the article. Extractors never raise: when nothing
matches they return a sentinel ('Unknown Title', 'Unknown Author'), a
derived value (source), None (image) or an empty string (content).

Strategy for every field:
1. Domain-specific selector from the site registry (if the host is known)
2. Ordered generic fallback probes, first non-empty value wins
3. Sentinel / default
"""

import copy
import json
import re
from typing import Any, Iterable, NamedTuple, Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag

from .site_selectors import get_site_selectors, get_source_name

UNKNOWN_TITLE = 'Unknown Title'
UNKNOWN_AUTHOR = 'Unknown Author'
UNKNOWN_SOURCE = 'Unknown Source'

# Minimum trimmed paragraph length (exclusive) to count as article text.
# Domain containers are curated, generic ones are noisier; both values are
# kept as-is from the production extractor.
DOMAIN_PARAGRAPH_MIN_LENGTH = 30
GENERIC_PARAGRAPH_MIN_LENGTH = 20


class Probe(NamedTuple):
    """One fallback candidate: a CSS selector and the attribute to read.

    attribute=None reads the trimmed text of the first matching node.
    """

    selector: str
    attribute: Optional[str] = None


# Element selectors before meta tags before rel="author". Order matters.
TITLE_PROBES = (
    Probe('h1'),
    Probe('h1.article-title'),
    Probe('h1.entry-title'),
    Probe('h1.post-title'),
    Probe('.article-headline'),
    Probe('.headline'),
    Probe('meta[property="og:title"]', 'content'),
    Probe('meta[name="twitter:title"]', 'content'),
)

AUTHOR_PROBES = (
    Probe('.author'),
    Probe('.byline'),
    Probe('.article-author'),
    Probe('.post-author'),
    Probe('meta[name="author"]', 'content'),
    Probe('meta[property="article:author"]', 'content'),
    Probe('a[rel="author"]'),
)

IMAGE_PROBES = (
    Probe('meta[property="og:image"]', 'content'),
    Probe('meta[name="twitter:image"]', 'content'),
    Probe('.featured-image img', 'src'),
    Probe('.featured-image img', 'data-src'),
    Probe('.article-featured-image img', 'src'),
    Probe('.article-featured-image img', 'data-src'),
    Probe('.post-thumbnail img', 'src'),
    Probe('.post-thumbnail img', 'data-src'),
    Probe('article img', 'src'),
    Probe('article img', 'data-src'),
    Probe('.entry-content img', 'src'),
    Probe('.entry-content img', 'data-src'),
)

CONTENT_CONTAINERS = (
    'article',
    '.article-content',
    '.entry-content',
    '.post-content',
    '.content',
    'main',
    '#content',
    '[itemprop="articleBody"]',
)

# Removed from a content container before reading its text
NOISE_SELECTOR = ', '.join([
    'script', 'style', 'iframe',
    '.social-share', '.related-posts', '.comments', '.author-box',
    '.navigation', 'footer', 'header', 'nav', 'aside', '.sidebar',
    '.ads', '.advertisement',
])

JSON_LD_SELECTOR = 'script[type="application/ld+json"]'


# ============================================================================
# Query helpers
# ============================================================================

def select_text(soup: BeautifulSoup, selector: str) -> Optional[str]:
    """Trimmed text of the first node matching selector, None if empty."""
    node = soup.select_one(selector)
    if node is None:
        return None
    text = node.get_text().strip()
    return text or None


def select_attribute(soup: BeautifulSoup, selector: str, attribute: str) -> Optional[str]:
    """Trimmed attribute value of the first node matching selector."""
    node = soup.select_one(selector)
    if node is None:
        return None
    value = node.get(attribute)
    if isinstance(value, list):
        value = ' '.join(value)
    if not value:
        return None
    return value.strip() or None


def run_probe(soup: BeautifulSoup, probe: Probe) -> Optional[str]:
    if probe.attribute is None:
        return select_text(soup, probe.selector)
    return select_attribute(soup, probe.selector, probe.attribute)


def first_match(soup: BeautifulSoup, probes: Iterable[Probe], normalize=None) -> Optional[str]:
    """
    Run probes in order and return the first usable value.

    Args:
        soup: Parsed page
        probes: Ordered candidates
        normalize: Optional callable applied to each raw value; a None result
            rejects the candidate and moves on to the next probe

    Returns:
        First accepted value, or None when every probe came up empty
    """
    for probe in probes:
        value = run_probe(soup, probe)
        if value is None:
            continue
        if normalize is not None:
            value = normalize(value)
            if value is None:
                continue
        return value
    return None


def collapse_whitespace(text: str) -> str:
    return re.sub(r'\s+', ' ', text or '').strip()


# ============================================================================
# Title / Author
# ============================================================================

def extract_title(soup: BeautifulSoup, domain: str = '') -> str:
    """Extract the article headline."""
    site = get_site_selectors(domain)
    if site is not None:
        title = select_text(soup, site.title)
        if title:
            return title

    return first_match(soup, TITLE_PROBES) or UNKNOWN_TITLE


def extract_author(soup: BeautifulSoup, domain: str = '') -> str:
    """Extract the article author / byline."""
    site = get_site_selectors(domain)
    if site is not None:
        author = select_text(soup, site.author)
        if author:
            return author

    return first_match(soup, AUTHOR_PROBES) or UNKNOWN_AUTHOR


# ============================================================================
# Source
# ============================================================================

def parse_json(text: Optional[str]) -> Optional[Any]:
    """Parse a JSON document, returning None when it is empty or malformed."""
    if not text or not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None


def find_publisher_name(data: Any) -> Optional[str]:
    """
    Look up publisher.name in parsed JSON-LD.

    Handles a single object, a top-level list of objects and an @graph array.
    """
    if isinstance(data, list):
        candidates = data
    elif isinstance(data, dict):
        candidates = [data]
        graph = data.get('@graph')
        if isinstance(graph, list):
            candidates.extend(graph)
    else:
        return None

    for obj in candidates:
        if not isinstance(obj, dict):
            continue
        publisher = obj.get('publisher')
        if isinstance(publisher, list) and publisher:
            publisher = publisher[0]
        if not isinstance(publisher, dict):
            continue
        name = publisher.get('name')
        if isinstance(name, str) and name.strip():
            return name.strip()
    return None


def source_from_structured_data(soup: BeautifulSoup) -> Optional[str]:
    for script in soup.select(JSON_LD_SELECTOR):
        name = find_publisher_name(parse_json(script.string))
        if name:
            return name
    return None


def derive_source_from_url(url: str) -> str:
    """
    Build a display name from the URL hostname.

    'https://www.acme-news.com/x' -> 'Acme News'
    """
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        hostname = None

    if not hostname:
        return UNKNOWN_SOURCE

    if hostname.startswith('www.'):
        hostname = hostname[4:]

    # Drop the top-level domain segment
    name = '.'.join(hostname.split('.')[:-1])
    derived = ' '.join(part[:1].upper() + part[1:] for part in name.split('-'))
    return derived.strip() or UNKNOWN_SOURCE


def resolve_source(soup: BeautifulSoup, url: str, domain: str = '') -> str:
    """
    Resolve the publication name.

    Priority (first success wins):
    1. Registered display name for the exact hostname
    2. og:site_name meta tag
    3. JSON-LD publisher.name
    4. Name derived from the URL hostname
    """
    name = get_source_name(domain)
    if name:
        return name

    site_name = select_attribute(soup, 'meta[property="og:site_name"]', 'content')
    if site_name:
        return site_name

    publisher = source_from_structured_data(soup)
    if publisher:
        return publisher

    return derive_source_from_url(url)


# ============================================================================
# Image
# ============================================================================

def normalize_image_url(value: str) -> Optional[str]:
    """
    Return an absolute http(s) image URL or None.

    Protocol-relative URLs get an https: prefix. Relative paths are rejected
    since no base URL is available here.
    """
    if not value:
        return None
    value = value.strip()
    if value.lower().startswith(('http://', 'https://')):
        return value
    if value.startswith('//'):
        return f'https:{value}'
    return None


def extract_image(soup: BeautifulSoup, domain: str = '') -> Optional[str]:
    """Extract the featured image URL."""
    site = get_site_selectors(domain)
    if site is not None:
        image = first_match(
            soup,
            (Probe(site.image, 'src'), Probe(site.image, 'data-src')),
            normalize=normalize_image_url,
        )
        if image:
            return image

    return first_match(soup, IMAGE_PROBES, normalize=normalize_image_url)


# ============================================================================
# Content
# ============================================================================

def strip_noise(container: Tag) -> Tag:
    """Return a copy of container without scripts, share widgets, ads, etc.

    The parsed page itself is left untouched.
    """
    cleaned = copy.copy(container)
    for node in cleaned.select(NOISE_SELECTOR):
        node.extract()
    return cleaned


def collect_paragraphs(root, min_length: int) -> str:
    """Join <p> texts longer than min_length with a blank line between them."""
    kept = []
    for paragraph in root.find_all('p'):
        text = paragraph.get_text().strip()
        if len(text) > min_length:
            kept.append(text)
    return '\n\n'.join(kept)


def container_text(container: Tag, min_length: int) -> str:
    """Paragraph text of a cleaned container, or its flattened text."""
    cleaned = strip_noise(container)
    text = collect_paragraphs(cleaned, min_length)
    if text:
        return text
    return collapse_whitespace(cleaned.get_text())


def extract_content(soup: BeautifulSoup, domain: str = '') -> str:
    """
    Extract the article body as paragraphs separated by blank lines.

    Tries the registered content container, then the first generic
    container present on the page, then every substantial paragraph.
    """
    site = get_site_selectors(domain)
    if site is not None:
        container = soup.select_one(site.content)
        if container is not None:
            content = container_text(container, DOMAIN_PARAGRAPH_MIN_LENGTH)
            if content:
                return content

    content = ''
    for selector in CONTENT_CONTAINERS:
        container = soup.select_one(selector)
        if container is not None:
            content = container_text(container, GENERIC_PARAGRAPH_MIN_LENGTH)
            break

    if not content:
        content = collect_paragraphs(soup, GENERIC_PARAGRAPH_MIN_LENGTH)

    return content.strip()
