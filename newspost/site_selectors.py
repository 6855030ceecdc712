"""
Selector registry for known news sites.

Two independent, read-only tables:
1. SITE_SELECTORS - CSS selectors for title/author/content/image per hostname
2. SOURCE_NAMES - human-readable publication name per hostname

Keys are exact hostnames as returned by urlparse().hostname. There is no
subdomain or wildcard matching: 'kompas.com' does not cover 'tekno.kompas.com'.
"""

from types import MappingProxyType
from typing import NamedTuple, Optional


class SiteSelectors(NamedTuple):
    """Selector set for one news site."""

    title: str
    author: str
    content: str
    image: str


SITE_SELECTORS = MappingProxyType({
    # --- Indonesian tech news ---
    'tekno.kompas.com': SiteSelectors(
        title='.read__title',
        author='.read__credit__item',
        content='.read__content',
        image='.photo__wrap img',
    ),
    'inet.detik.com': SiteSelectors(
        title='h1.detail__title',
        author='.detail__author',
        content='.detail__body-text',
        image='.detail__media-image img',
    ),
    'www.liputan6.com': SiteSelectors(
        title='h1.article-header__title',
        author='.article-header__author',
        content='.article-content-body__item-content',
        image='.article-photo-gallery__item img',
    ),
    'www.cnnindonesia.com': SiteSelectors(
        title='h1.title',
        author='.author',
        content='.detail-text',
        image='.media-container img',
    ),
    'tekno.tempo.co': SiteSelectors(
        title='h1.title',
        author='.reporter',
        content='.detail-in',
        image='.detail-img img',
    ),
    'dailysocial.id': SiteSelectors(
        title='h1.post-title',
        author='.post-meta__author-name',
        content='.post-content',
        image='.post-featured-image img',
    ),
    'teknoia.com': SiteSelectors(
        title='h1.entry-title',
        author='.entry-author',
        content='.entry-content',
        image='.featured-image img',
    ),

    # --- International tech news ---
    'www.theverge.com': SiteSelectors(
        title='h1',
        author='.byline span',
        content='.article-body',
        image='picture img',
    ),
    'techcrunch.com': SiteSelectors(
        title='h1.article__title',
        author='.article__byline-author',
        content='.article-content',
        image='.article__featured-image img',
    ),
})

SOURCE_NAMES = MappingProxyType({
    'tekno.kompas.com': 'Kompas Tekno',
    'inet.detik.com': 'Detik Inet',
    'www.liputan6.com': 'Liputan6',
    'www.cnnindonesia.com': 'CNN Indonesia',
    'tekno.tempo.co': 'Tempo Tekno',
    'dailysocial.id': 'DailySocial',
    'teknoia.com': 'Teknoia',
    'www.theverge.com': 'The Verge',
    'techcrunch.com': 'TechCrunch',
})


def get_site_selectors(domain: str) -> Optional[SiteSelectors]:
    """Return the selector set registered for domain, or None."""
    if not domain:
        return None
    return SITE_SELECTORS.get(domain)


def get_source_name(domain: str) -> Optional[str]:
    """Return the display name registered for domain, or None."""
    if not domain:
        return None
    return SOURCE_NAMES.get(domain)
