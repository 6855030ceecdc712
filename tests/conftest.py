"""
Shared pytest fixtures for News Post Studio tests.
"""

import pytest
import sys
import importlib.util
from pathlib import Path
from bs4 import BeautifulSoup

# Project root for finding Cloud Function modules
PROJECT_ROOT = Path(__file__).parent.parent


def _load_module_from_path(module_name: str, file_path: Path):
    """Load a module from a specific file path."""
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


# Load Cloud Function modules with unique names at module load time
_article_extractor_module = _load_module_from_path(
    'article_extractor_main',
    PROJECT_ROOT / 'article-extractor' / 'main.py'
)

_caption_generator_module = _load_module_from_path(
    'caption_generator_main',
    PROJECT_ROOT / 'caption-generator' / 'main.py'
)

_news_recommender_module = _load_module_from_path(
    'news_recommender_main',
    PROJECT_ROOT / 'news-recommender' / 'main.py'
)


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, 'html.parser')


# ============================================================================
# Cloud Function Module Fixtures
# ============================================================================

@pytest.fixture
def article_extractor_main():
    """The article-extractor Cloud Function module."""
    return _article_extractor_module


@pytest.fixture
def caption_generator_main():
    """The caption-generator Cloud Function module, with Gemini disabled."""
    original_key = _caption_generator_module.GEMINI_API_KEY
    _caption_generator_module.GEMINI_API_KEY = None
    yield _caption_generator_module
    _caption_generator_module.GEMINI_API_KEY = original_key


@pytest.fixture
def news_recommender_main():
    """The news-recommender Cloud Function module, with NewsAPI disabled."""
    original_key = _news_recommender_module.NEWS_API_KEY
    _news_recommender_module.NEWS_API_KEY = None
    yield _news_recommender_module
    _news_recommender_module.NEWS_API_KEY = original_key


# ============================================================================
# Sample Pages
# ============================================================================

@pytest.fixture
def kompas_html():
    """Raw HTML of a tekno.kompas.com article page."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Judul Uji - Kompas.com</title>
        <meta property="og:title" content="Judul Uji (OG)">
        <meta property="og:site_name" content="KOMPAS.com">
        <meta property="og:image" content="https://asset.kompas.com/og.jpg">
    </head>
    <body>
        <header><h1>Kompas Tekno</h1></header>
        <h1 class="read__title">Judul Uji</h1>
        <div class="read__credit__item">Wahyunanda Kusuma</div>
        <div class="photo__wrap"><img src="//asset.kompas.com/crops/foto.jpg"></div>
        <div class="read__content">
            <p>Pemerintah resmi meluncurkan program transformasi digital nasional hari ini.</p>
            <p>Baca juga: Singkat</p>
            <div class="social-share"><p>Bagikan artikel ini ke media sosial kamu sekarang juga ya</p></div>
            <script>var tracking = "abcdefghijklmnopqrstuvwxyz0123456789";</script>
            <p>Program ini ditargetkan menjangkau seluruh provinsi pada akhir tahun depan.</p>
        </div>
    </body>
    </html>
    """


@pytest.fixture
def kompas_soup(kompas_html):
    return make_soup(kompas_html)


@pytest.fixture
def generic_article_soup():
    """An article from a site with no registered selectors."""
    html = """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Cloud Outage | Acme Daily</title>
        <meta property="og:title" content="Cloud Outage Hits Millions">
        <meta name="author" content="Jane Reporter">
        <meta property="og:image" content="https://cdn.acme.test/outage.jpg">
    </head>
    <body>
        <nav><p>Home Tech Business Science Opinion Video Podcasts</p></nav>
        <article>
            <h1>Cloud Outage Hits Millions</h1>
            <p>A major cloud provider suffered a multi-hour outage on Tuesday.</p>
            <p>Short line.</p>
            <aside><p>Related: Another story you might like to read today</p></aside>
            <p>Engineers traced the failure to a faulty configuration push.</p>
        </article>
    </body>
    </html>
    """
    return make_soup(html)


@pytest.fixture
def empty_soup():
    """Returns an empty document."""
    return make_soup('<html></html>')


@pytest.fixture
def mock_flask_request():
    """Factory for creating mock Flask request objects."""
    class MockRequest:
        def __init__(self, json_data=None, method='POST', args=None):
            self._json = json_data
            self.method = method
            self.args = args or {}
            self.data = b''

        def get_json(self, force=False, silent=False):
            return self._json

    return MockRequest
