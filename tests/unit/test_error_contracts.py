"""
Error Contract Tests - Defines what each HTTP endpoint returns on failure.

These tests serve as guardrails so the client can rely on stable messages.

Error Classification:
====================

CLIENT ERRORS (HTTP 400, {message} or {error}):
- Missing/invalid article URL
- Missing title / content for caption and recommendation requests
- Missing/invalid image URL for the proxy

EXTRACTION FAILURES (HTTP 500, generic message):
- Article fetch failed (timeout, 404, 500, network)
- Unexpected exception while parsing
  The message never leaks the underlying cause.

DEGRADED SUCCESS (HTTP 200):
- Gemini unavailable -> local caption templates
- NewsAPI unavailable -> curated recommendations

PREFLIGHT (HTTP 204):
- OPTIONS on every endpoint
"""

import json

import pytest

EXTRACTION_FAILED = 'Failed to extract article. Please check the URL and try again.'


class TestArticleExtractorContract:
    """POST /article/extract"""

    @pytest.mark.parametrize('body', [
        None,
        {},
        {'url': ''},
        {'url': '   '},
        {'url': 'not-a-url'},
        {'url': 'ftp://example.com/file'},
        {'url': 42},
        ['https://example.com'],
    ])
    def test_invalid_url_is_400(self, mock_flask_request, article_extractor_main, body):
        request = mock_flask_request(json_data=body)
        response, status_code, headers = article_extractor_main.extract_article(request)

        assert status_code == 400
        assert json.loads(response) == {'message': 'Please provide a valid URL'}
        assert headers['Access-Control-Allow-Origin'] == '*'

    def test_extraction_failure_is_generic_500(self, mock_flask_request, article_extractor_main, monkeypatch):
        def fail(url):
            raise article_extractor_main.article_extractor.ExtractionError(EXTRACTION_FAILED, status_code=404)

        monkeypatch.setattr(article_extractor_main.article_extractor, 'extract_article', fail)
        request = mock_flask_request(json_data={'url': 'https://example.com/gone'})
        response, status_code, _ = article_extractor_main.extract_article(request)

        assert status_code == 500
        assert json.loads(response) == {'message': EXTRACTION_FAILED}

    def test_unexpected_error_is_500(self, mock_flask_request, article_extractor_main, monkeypatch):
        def crash(url):
            raise KeyError('boom')

        monkeypatch.setattr(article_extractor_main.article_extractor, 'extract_article', crash)
        request = mock_flask_request(json_data={'url': 'https://example.com/a'})
        response, status_code, _ = article_extractor_main.extract_article(request)

        assert status_code == 500
        assert json.loads(response) == {'message': 'An unknown error occurred'}

    def test_options_preflight(self, mock_flask_request, article_extractor_main):
        response, status_code, headers = article_extractor_main.extract_article(mock_flask_request(method='OPTIONS'))
        assert status_code == 204
        assert response == ''
        assert headers['Access-Control-Allow-Methods'] == 'POST'

    def test_get_not_allowed(self, mock_flask_request, article_extractor_main):
        _, status_code, _ = article_extractor_main.extract_article(mock_flask_request(method='GET'))
        assert status_code == 405


class TestImageProxyContract:
    """GET /image/proxy?url=..."""

    def test_missing_url(self, mock_flask_request, article_extractor_main):
        response, status_code, _ = article_extractor_main.proxy_image(mock_flask_request(method='GET'))
        assert status_code == 400
        assert json.loads(response) == {'error': 'Missing image URL'}

    def test_invalid_url(self, mock_flask_request, article_extractor_main):
        request = mock_flask_request(method='GET', args={'url': 'file:///etc/passwd'})
        response, status_code, _ = article_extractor_main.proxy_image(request)
        assert status_code == 400
        assert json.loads(response) == {'error': 'Invalid image URL'}

    def test_options_preflight(self, mock_flask_request, article_extractor_main):
        _, status_code, headers = article_extractor_main.proxy_image(mock_flask_request(method='OPTIONS'))
        assert status_code == 204
        assert headers['Access-Control-Allow-Methods'] == 'GET'


class TestCaptionGeneratorContract:
    """POST /ai/*"""

    @pytest.mark.parametrize('body', [None, {}, {'title': ''}, {'title': '  '}, {'title': 7}, ['x']])
    def test_description_requires_title(self, mock_flask_request, caption_generator_main, body):
        response, status_code, _ = caption_generator_main.generate_description(mock_flask_request(json_data=body))
        assert status_code == 400
        assert json.loads(response) == {'message': 'Title is required'}

    def test_comment_requires_title(self, mock_flask_request, caption_generator_main):
        request = mock_flask_request(json_data={'content': 'Isi'})
        response, status_code, _ = caption_generator_main.generate_comment(request)
        assert status_code == 400
        assert json.loads(response) == {'message': 'Title is required'}

    def test_comment_requires_content(self, mock_flask_request, caption_generator_main):
        request = mock_flask_request(json_data={'title': 'Judul'})
        response, status_code, _ = caption_generator_main.generate_comment(request)
        assert status_code == 400
        assert json.loads(response) == {'message': 'Content is required'}

    def test_hook_title_requires_title(self, mock_flask_request, caption_generator_main):
        _, status_code, _ = caption_generator_main.generate_hook_title(mock_flask_request(json_data={}))
        assert status_code == 400

    def test_description_without_gemini_succeeds(self, mock_flask_request, caption_generator_main):
        request = mock_flask_request(json_data={'title': 'AI Baru', 'author': 'Budi', 'source': 'Kompas'})
        response, status_code, _ = caption_generator_main.generate_description(request)
        assert status_code == 200
        assert json.loads(response)['content'].startswith('AI Baru.')

    def test_description_failure_is_500(self, mock_flask_request, caption_generator_main, monkeypatch):
        def crash(*args, **kwargs):
            raise RuntimeError('boom')

        monkeypatch.setattr(caption_generator_main, 'generate_description_text', crash)
        response, status_code, _ = caption_generator_main.generate_description(
            mock_flask_request(json_data={'title': 'Judul'})
        )
        assert status_code == 500
        assert json.loads(response) == {'message': 'Failed to generate description'}

    @pytest.mark.parametrize('handler', ['generate_description', 'generate_comment', 'generate_hook_title'])
    def test_options_preflight(self, mock_flask_request, caption_generator_main, handler):
        _, status_code, _ = getattr(caption_generator_main, handler)(mock_flask_request(method='OPTIONS'))
        assert status_code == 204


class TestNewsRecommenderContract:
    """POST /news/recommendations"""

    @pytest.mark.parametrize('body', [None, {}, {'title': ''}, {'title': None}, 'AI'])
    def test_requires_title(self, mock_flask_request, news_recommender_main, body):
        response, status_code, _ = news_recommender_main.get_recommendations(mock_flask_request(json_data=body))
        assert status_code == 400
        assert json.loads(response) == {'message': 'Title is required'}

    def test_without_news_api_returns_curated_list(self, mock_flask_request, news_recommender_main):
        response, status_code, _ = news_recommender_main.get_recommendations(
            mock_flask_request(json_data={'title': 'Tren AI'})
        )
        assert status_code == 200
        recs = json.loads(response)
        assert 0 < len(recs) <= 4

    def test_failure_is_500(self, mock_flask_request, news_recommender_main, monkeypatch):
        def crash(title):
            raise RuntimeError('boom')

        monkeypatch.setattr(news_recommender_main, 'get_recommendation_list', crash)
        response, status_code, _ = news_recommender_main.get_recommendations(
            mock_flask_request(json_data={'title': 'Tren AI'})
        )
        assert status_code == 500
        assert json.loads(response) == {'message': 'Failed to get recommendations'}

    def test_options_preflight(self, mock_flask_request, news_recommender_main):
        _, status_code, _ = news_recommender_main.get_recommendations(mock_flask_request(method='OPTIONS'))
        assert status_code == 204
