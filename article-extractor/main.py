"""
Article Extractor Cloud Function

Extracts news article metadata for the News Post Studio post composer.

Responsibilities:
- Validate the submitted article URL
- Fetch the article page and extract title, author, source, image and body
- Proxy remote images so the browser canvas can draw them without CORS taint

Does NOT:
- Generate captions (caption-generator's job)
- Recommend related news (news-recommender's job)
- Compose the Instagram image (done client-side)
- Retry failed fetches (the UI lets the user retry)
"""

import functions_framework
import requests
import os
import sys
import json
import logging
from urllib.parse import urlparse

# Make the newspost package importable when deployed from this directory
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from newspost import article_extractor, config
from newspost.logging_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = 'Please provide a valid URL'
IMAGE_ACCEPT = 'image/webp,image/apng,image/*,*/*;q=0.8'
IMAGE_CACHE_CONTROL = 'public, max-age=86400'

CORS_HEADERS = {'Access-Control-Allow-Origin': '*'}


def _preflight(methods: str):
    headers = {
        'Access-Control-Allow-Origin': '*',
        'Access-Control-Allow-Methods': methods,
        'Access-Control-Allow-Headers': 'Content-Type',
        'Access-Control-Max-Age': '3600'
    }
    return ('', 204, headers)


def _json(data, status: int = 200):
    headers = dict(CORS_HEADERS, **{'Content-Type': 'application/json'})
    return (json.dumps(data), status, headers)


def fetch_image(image_url: str) -> tuple:
    """
    Fetch a remote image. Returns (content, content_type, status, error).

    error is None on success; status is the upstream status on HTTP errors
    and 500 on network failures.
    """
    parsed = urlparse(image_url)
    headers = {
        'User-Agent': config.USER_AGENT,
        'Accept': IMAGE_ACCEPT,
        'Referer': f'{parsed.scheme}://{parsed.netloc}',
    }

    try:
        response = requests.get(image_url, headers=headers, timeout=config.COLLABORATOR_TIMEOUT)
    except requests.exceptions.RequestException as e:
        logger.warning('Error fetching image %s: %s', image_url, e)
        return None, None, 500, 'Failed to proxy image'

    if not response.ok:
        return None, None, response.status_code, f'Failed to fetch image: {response.reason}'

    content_type = response.headers.get('Content-Type') or 'image/jpeg'
    return response.content, content_type, 200, None


@functions_framework.http
def extract_article(request):
    """
    Main Cloud Function entry point (POST /article/extract).

    Expected JSON input:
    {
        "url": "https://tekno.kompas.com/read/..."
    }

    Returns 200 {title, author, source, imageUrl, content}, 400 {message}
    for a missing/invalid URL and 500 {message} when extraction fails.
    """
    if request.method == 'OPTIONS':
        return _preflight('POST')

    if request.method != 'POST':
        return _json({'message': 'Method not allowed'}, 405)

    try:
        request_json = request.get_json(silent=True)
        url = request_json.get('url') if isinstance(request_json, dict) else None

        if not article_extractor.is_valid_url(url):
            return _json({'message': INVALID_URL_MESSAGE}, 400)

        result = article_extractor.extract_article(url.strip())
        return _json(result.to_dict(), 200)

    except article_extractor.ExtractionError as e:
        return _json({'message': e.message}, 500)
    except Exception:
        logger.exception('Unhandled error in extract_article')
        return _json({'message': 'An unknown error occurred'}, 500)


@functions_framework.http
def proxy_image(request):
    """
    Image proxy entry point (GET /image/proxy?url=...).

    Streams the remote image back with its content type and a one day cache
    header so the client canvas can use it.
    """
    if request.method == 'OPTIONS':
        return _preflight('GET')

    image_url = request.args.get('url')
    if not image_url:
        return _json({'error': 'Missing image URL'}, 400)

    if not article_extractor.is_valid_url(image_url):
        return _json({'error': 'Invalid image URL'}, 400)

    content, content_type, status, error = fetch_image(image_url)
    if error:
        return _json({'error': error}, status)

    headers = dict(CORS_HEADERS, **{
        'Content-Type': content_type,
        'Cache-Control': IMAGE_CACHE_CONTROL,
    })
    return (content, 200, headers)
