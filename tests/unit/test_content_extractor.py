"""
Unit tests for extract_content() and its helpers.
"""

from bs4 import BeautifulSoup

from newspost.extractors import (
    DOMAIN_PARAGRAPH_MIN_LENGTH,
    GENERIC_PARAGRAPH_MIN_LENGTH,
    collect_paragraphs,
    extract_content,
    strip_noise,
)

P15 = 'x' * 15
P25 = 'y' * 25
P40 = 'z' * 40


def soup_of(html):
    return BeautifulSoup(html, 'html.parser')


class TestSubstanceThreshold:
    """Paragraph length filter for domain and generic containers."""

    def test_thresholds(self):
        assert DOMAIN_PARAGRAPH_MIN_LENGTH == 30
        assert GENERIC_PARAGRAPH_MIN_LENGTH == 20

    def test_generic_container_drops_short_paragraph(self):
        soup = soup_of(f'<article><p>{P15}</p><p>{P40}</p></article>')
        assert extract_content(soup, '') == P40

    def test_domain_container_drops_short_paragraph(self):
        soup = soup_of(f'<div class="read__content"><p>{P15}</p><p>{P40}</p></div>')
        assert extract_content(soup, 'tekno.kompas.com') == P40

    def test_25_chars_pass_generic_only(self):
        html = f'<div class="read__content"><p>{P25}</p><p>{P40}</p></div>'
        assert extract_content(soup_of(html), 'tekno.kompas.com') == P40
        generic = f'<article><p>{P25}</p><p>{P40}</p></article>'
        assert extract_content(soup_of(generic), '') == f'{P25}\n\n{P40}'

    def test_exactly_threshold_is_excluded(self):
        soup = soup_of(f'<article><p>{"a" * 20}</p><p>{P40}</p></article>')
        assert extract_content(soup, '') == P40


class TestExtractContent:
    """Tests for extract_content()"""

    def test_domain_container(self, kompas_soup):
        content = extract_content(kompas_soup, 'tekno.kompas.com')
        assert content == (
            'Pemerintah resmi meluncurkan program transformasi digital nasional hari ini.\n\n'
            'Program ini ditargetkan menjangkau seluruh provinsi pada akhir tahun depan.'
        )

    def test_noise_removed(self, kompas_soup):
        content = extract_content(kompas_soup, 'tekno.kompas.com')
        assert 'Bagikan' not in content
        assert 'tracking' not in content

    def test_generic_container(self, generic_article_soup):
        content = extract_content(generic_article_soup, 'www.acme-daily.test')
        assert content == (
            'A major cloud provider suffered a multi-hour outage on Tuesday.\n\n'
            'Engineers traced the failure to a faulty configuration push.'
        )

    def test_generic_container_order(self):
        html = (
            f'<main><p>{"m" * 40}</p></main>'
            f'<div class="entry-content"><p>{"e" * 40}</p></div>'
        )
        # .entry-content comes before main in the fallback list
        assert extract_content(soup_of(html), '') == 'e' * 40

    def test_container_without_paragraphs_uses_flattened_text(self):
        soup = soup_of('<article><div>Line one\n\n   line   two</div><script>x()</script></article>')
        assert extract_content(soup, '') == 'Line one line two'

    def test_domain_container_without_paragraphs(self):
        soup = soup_of('<div class="detail__body-text">Teks   tanpa\nparagraf</div>')
        assert extract_content(soup, 'inet.detik.com') == 'Teks tanpa paragraf'

    def test_missing_domain_container_uses_generic(self):
        soup = soup_of(f'<article><p>{P40}</p></article>')
        assert extract_content(soup, 'tekno.kompas.com') == extract_content(soup, '')

    def test_page_sweep(self):
        soup = soup_of(f'<div><p>{P15}</p><p>{P40}</p></div><section><p>{P25}</p></section>')
        assert extract_content(soup, '') == f'{P40}\n\n{P25}'

    def test_sweep_when_container_has_only_short_text(self):
        html = f'<article><p>{P15}</p></article><div><p>{P40}</p></div>'
        # Container text is used because it has no qualifying paragraph
        assert extract_content(soup_of(html), '') == P15

    def test_empty_document(self, empty_soup):
        assert extract_content(empty_soup, '') == ''

    def test_page_is_not_mutated(self, kompas_soup):
        before = str(kompas_soup)
        extract_content(kompas_soup, 'tekno.kompas.com')
        assert str(kompas_soup) == before

    def test_deterministic(self, kompas_soup):
        first = extract_content(kompas_soup, 'tekno.kompas.com')
        assert all(extract_content(kompas_soup, 'tekno.kompas.com') == first for _ in range(3))


class TestStripNoise:
    """Tests for strip_noise()"""

    def test_returns_clean_copy(self):
        soup = soup_of('<article><p>Keep</p><nav>Menu</nav><div class="ads">Buy</div></article>')
        container = soup.select_one('article')
        cleaned = strip_noise(container)
        assert cleaned.get_text() == 'Keep'
        assert 'Menu' in container.get_text()

    def test_nested_noise(self):
        soup = soup_of('<article><aside><div class="comments"><p>c</p></div></aside><p>ok</p></article>')
        assert strip_noise(soup.select_one('article')).get_text() == 'ok'


class TestCollectParagraphs:
    def test_joins_with_blank_line(self):
        soup = soup_of(f'<p>{P40}</p><p>{P25}</p>')
        assert collect_paragraphs(soup, 20) == f'{P40}\n\n{P25}'

    def test_no_paragraphs(self):
        assert collect_paragraphs(soup_of('<div>text</div>'), 20) == ''
