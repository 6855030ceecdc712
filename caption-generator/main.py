"""
Caption Generator Cloud Function

Writes Instagram captions and discussion comments for an extracted article.

Responsibilities:
- Generate a news description (default, custom-prompt or Gen-Z style)
- Generate a critical comment that invites discussion
- Generate a Gen-Z "hook" version of the headline
- Fall back to local templates whenever Gemini is unavailable

Does NOT:
- Fetch or parse articles (article-extractor's job)
- Store captions (the client keeps them in memory)
"""

import functions_framework
import google.generativeai as genai
import os
import sys
import json
import logging

# Make the newspost package importable when deployed from this directory
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from newspost import config
from newspost.caption_utils import (
    build_comment_prompt,
    build_description_prompt,
    build_genz_prompt,
    build_hook_title_prompt,
    fallback_description,
    fill_prompt,
    local_critical_comment,
    local_genz_caption,
    local_hook_title,
    truncate_caption,
)
from newspost.logging_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

# Configuration
GEMINI_API_KEY = config.GEMINI_API_KEY
GEMINI_MODEL = config.GEMINI_MODEL

CORS_HEADERS = {'Access-Control-Allow-Origin': '*'}


def query_gemini(prompt: str) -> str:
    """Send a prompt to Gemini. Returns the response text, or None if unavailable."""
    if not GEMINI_API_KEY:
        return None

    try:
        genai.configure(api_key=GEMINI_API_KEY)
        model = genai.GenerativeModel(GEMINI_MODEL)
        response = model.generate_content(prompt)
        text = (response.text or '').strip()
        return text or None
    except Exception as e:
        logger.warning('Gemini not available: %s', e)
        return None


def generate_description_text(
    title: str,
    author: str = 'Unknown',
    source: str = 'Unknown',
    content: str = None,
    regenerate: bool = False,
    custom_prompt: str = None,
    genz_style: bool = False,
) -> str:
    """
    Generate a caption for an article.

    Gen-Z style and custom prompts go to Gemini first; otherwise the default
    news-narrative prompt is used. Without a Gemini answer the local
    templates in caption_utils produce the caption.
    """
    author = author or 'Unknown'
    source = source or 'Unknown'

    if genz_style:
        caption = query_gemini(build_genz_prompt(title, content)) or local_genz_caption(title)
        return truncate_caption(caption)[0]

    if custom_prompt:
        prompt = fill_prompt(custom_prompt, title, author, source, content)
    else:
        prompt = build_description_prompt(title, author, source, content)

    caption = query_gemini(prompt)
    if not caption:
        caption = fallback_description(
            title, author, source,
            regenerate=regenerate,
            custom_prompt=custom_prompt,
            content=content,
        )
    return truncate_caption(caption)[0]


def generate_critical_comment(title: str, content: str) -> str:
    """Critical, discussion-starting comment for the article."""
    return query_gemini(build_comment_prompt(title, content)) or local_critical_comment(title, content)


def generate_hook_title_text(title: str) -> str:
    """Gen-Z hook headline. Falls back to the original title on any error."""
    try:
        return query_gemini(build_hook_title_prompt(title)) or local_hook_title(title)
    except Exception as e:
        logger.error('Error generating hook title: %s', e)
        return title


def _preflight():
    headers = {
        'Access-Control-Allow-Origin': '*',
        'Access-Control-Allow-Methods': 'POST',
        'Access-Control-Allow-Headers': 'Content-Type',
        'Access-Control-Max-Age': '3600'
    }
    return ('', 204, headers)


def _json(data, status: int = 200):
    headers = dict(CORS_HEADERS, **{'Content-Type': 'application/json'})
    return (json.dumps(data), status, headers)


def _body(request) -> dict:
    request_json = request.get_json(silent=True)
    return request_json if isinstance(request_json, dict) else {}


def _required_text(request_json: dict, field: str):
    value = request_json.get(field)
    if not isinstance(value, str) or not value.strip():
        return None
    return value


def _optional_text(request_json: dict, field: str):
    value = request_json.get(field)
    return value if isinstance(value, str) else None


@functions_framework.http
def generate_description(request):
    """
    Description entry point (POST /ai/generate-description).

    Expected JSON input:
    {
        "title": "...",
        "author": "...",          (optional)
        "source": "...",          (optional)
        "content": "...",         (optional)
        "regenerate": false,      (optional)
        "customPrompt": "...",    (optional, {title} {author} {source} {content})
        "genZStyle": false        (optional)
    }
    """
    if request.method == 'OPTIONS':
        return _preflight()

    try:
        request_json = _body(request)
        title = _required_text(request_json, 'title')
        if not title:
            return _json({'message': 'Title is required'}, 400)

        description = generate_description_text(
            title,
            author=_optional_text(request_json, 'author'),
            source=_optional_text(request_json, 'source'),
            content=_optional_text(request_json, 'content'),
            regenerate=bool(request_json.get('regenerate', False)),
            custom_prompt=_optional_text(request_json, 'customPrompt'),
            genz_style=bool(request_json.get('genZStyle', False)),
        )
        return _json({'content': description}, 200)

    except Exception:
        logger.exception('Error generating description')
        return _json({'message': 'Failed to generate description'}, 500)


@functions_framework.http
def generate_comment(request):
    """Critical comment entry point (POST /ai/generate-comment)."""
    if request.method == 'OPTIONS':
        return _preflight()

    try:
        request_json = _body(request)
        title = _required_text(request_json, 'title')
        if not title:
            return _json({'message': 'Title is required'}, 400)
        content = _required_text(request_json, 'content')
        if not content:
            return _json({'message': 'Content is required'}, 400)

        return _json({'content': generate_critical_comment(title, content)}, 200)

    except Exception:
        logger.exception('Error generating comment')
        return _json({'message': 'Failed to generate comment'}, 500)


@functions_framework.http
def generate_hook_title(request):
    """Hook headline entry point (POST /ai/generate-hook-title)."""
    if request.method == 'OPTIONS':
        return _preflight()

    request_json = _body(request)
    title = _required_text(request_json, 'title')
    if not title:
        return _json({'message': 'Title is required'}, 400)

    return _json({'title': generate_hook_title_text(title)}, 200)
