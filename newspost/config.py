"""
Runtime configuration for News Post Studio.

All settings come from environment variables so each Cloud Function can be
configured at deploy time. Values are read once at import.
"""

import os

# Article page fetch
ARTICLE_FETCH_TIMEOUT = float(os.environ.get('ARTICLE_FETCH_TIMEOUT', '15'))
USER_AGENT = os.environ.get(
    'USER_AGENT',
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)

# Outbound calls made by the collaborators (LLM, NewsAPI, image proxy)
COLLABORATOR_TIMEOUT = float(os.environ.get('COLLABORATOR_TIMEOUT', '10'))

# Caption generation
GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY')
GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-2.0-flash')

# News recommendations
NEWS_API_KEY = os.environ.get('NEWS_API_KEY')
NEWS_API_URL = os.environ.get('NEWS_API_URL', 'https://newsapi.org/v2/everything')

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
