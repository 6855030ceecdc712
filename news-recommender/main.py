"""
News Recommender Cloud Function

Suggests related tech-news articles for the article being posted.

Responsibilities:
- Search NewsAPI for related Indonesian tech news (when NEWS_API_KEY is set)
- Fall back to curated recommendations bucketed by title keywords

Does NOT:
- Rank or deduplicate results beyond keyword bucketing
- Cache results between requests
"""

import functions_framework
import requests
import os
import sys
import json
import logging

# Make the newspost package importable when deployed from this directory
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from newspost import config
from newspost.news_utils import (
    NEWS_API_SOURCES,
    build_news_query,
    contextual_recommendations,
    extract_main_keywords,
    filter_it_articles,
    to_recommendation,
)
from newspost.logging_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

# Configuration
NEWS_API_KEY = config.NEWS_API_KEY
NEWS_API_URL = config.NEWS_API_URL
PAGE_SIZE = 6

CORS_HEADERS = {'Access-Control-Allow-Origin': '*'}


def search_news_api(params: dict) -> list:
    """Query NewsAPI 'everything'. Returns the article list or None on failure."""
    response = requests.get(
        NEWS_API_URL,
        params=dict(params, sortBy='publishedAt', pageSize=PAGE_SIZE),
        headers={'X-Api-Key': NEWS_API_KEY},
        timeout=config.COLLABORATOR_TIMEOUT,
    )
    if not response.ok:
        return None
    articles = response.json().get('articles')
    return articles if isinstance(articles, list) else None


def fetch_news_api_recommendations(title: str) -> list:
    """
    Related articles from NewsAPI.

    Tries Indonesian news sources first, then any Indonesian-language source.
    Returns [] when the API key is missing or anything goes wrong.
    """
    if not NEWS_API_KEY:
        return []

    keywords = extract_main_keywords(title)
    query = build_news_query(title)

    try:
        articles = search_news_api({'q': query, 'sources': NEWS_API_SOURCES})
        if articles is None:
            return []

        if articles:
            kept = filter_it_articles(articles, extra_keywords=keywords)
        else:
            backup = search_news_api({'q': query, 'language': 'id'})
            if not backup:
                return []
            kept = filter_it_articles(backup)

        return [to_recommendation(article) for article in kept]

    except (requests.exceptions.RequestException, ValueError) as e:
        logger.warning('News API not available: %s', e)
        return []


def get_recommendation_list(title: str) -> list:
    """NewsAPI results when available, curated recommendations otherwise."""
    recommendations = fetch_news_api_recommendations(title)
    if recommendations:
        return recommendations
    return contextual_recommendations(title)


@functions_framework.http
def get_recommendations(request):
    """
    Main Cloud Function entry point (POST /news/recommendations).

    Expected JSON input:
    {
        "title": "Article title"
    }
    """
    if request.method == 'OPTIONS':
        headers = {
            'Access-Control-Allow-Origin': '*',
            'Access-Control-Allow-Methods': 'POST',
            'Access-Control-Allow-Headers': 'Content-Type',
            'Access-Control-Max-Age': '3600'
        }
        return ('', 204, headers)

    headers = dict(CORS_HEADERS, **{'Content-Type': 'application/json'})

    try:
        request_json = request.get_json(silent=True)
        title = request_json.get('title') if isinstance(request_json, dict) else None

        if not isinstance(title, str) or not title.strip():
            return (json.dumps({'message': 'Title is required'}), 400, headers)

        return (json.dumps(get_recommendation_list(title)), 200, headers)

    except Exception:
        logger.exception('Error getting recommendations')
        return (json.dumps({'message': 'Failed to get recommendations'}), 500, headers)
