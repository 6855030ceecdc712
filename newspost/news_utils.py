"""
News recommendation helpers for News Post Studio.

Keyword bucketing of article titles plus the static recommendation tables
used when NewsAPI is not configured or returns nothing.
"""

import random
import uuid
from typing import Dict, List

MAX_RECOMMENDATIONS = 4
MAX_PER_SOURCE = 2

# Keywords added to every NewsAPI query and used to filter its results
IT_QUERY_KEYWORDS = ['teknologi', 'IT', 'software', 'digital']

NEWS_API_SOURCES = 'detik.com,tempo.co,kompas.com'

KEYWORD_CATEGORIES = {
    'ai': ['ai', 'artificial intelligence', 'machine learning', 'ml', 'deep learning', 'neural network'],
    'cloud': ['cloud', 'aws', 'azure', 'gcp', 'serverless', 'saas', 'paas', 'iaas'],
    'programming': ['programming', 'code', 'software', 'development', 'developer', 'java', 'javascript', 'python'],
    'security': ['security', 'cybersecurity', 'privacy', 'encryption', 'hacking', 'vulnerability'],
    'web': ['web', 'webapp', 'frontend', 'backend', 'fullstack', 'react', 'angular', 'vue'],
}

DEFAULT_CATEGORIES = ['ai', 'programming']

PREFERRED_SOURCES = {
    'detikcom': {'name': 'detikinet', 'base_url': 'https://inet.detik.com'},
    'medium': {'name': 'Medium', 'base_url': 'https://medium.com'},
    'kompas': {'name': 'Tekno Kompas', 'base_url': 'https://tekno.kompas.com'},
    'tempo': {'name': 'Tekno Tempo', 'base_url': 'https://tekno.tempo.co'},
}

TECH_IMAGES = [
    'https://images.unsplash.com/photo-1488229297570-58520851e868?q=80&w=1469&auto=format&fit=crop',
    'https://images.unsplash.com/photo-1526374965328-7f61d4dc18c5?q=80&w=1470&auto=format&fit=crop',
    'https://images.unsplash.com/photo-1635070041078-e363dbe005cb?q=80&w=1470&auto=format&fit=crop',
    'https://images.unsplash.com/photo-1516321318423-f06f85e504b3?q=80&w=1470&auto=format&fit=crop',
]


def _rec(source_key: str, title: str, path: str, image_url: str) -> dict:
    source = PREFERRED_SOURCES[source_key]
    return {
        'title': title,
        'source': source['name'],
        'url': f"{source['base_url']}{path}",
        'imageUrl': image_url,
    }


RECOMMENDATIONS_BY_TOPIC = {
    'ai': [
        _rec('detikcom', 'Penelitian AI Terbaru dari Google DeepMind Bikin Kejutan di Industri',
             '/digital-life/d-7139417/penelitian-ai-terbaru-dari-google-deepmind-bikin-kejutan-di-industri',
             'https://images.unsplash.com/photo-1661956602868-6ae368943878?q=80&w=1470&auto=format&fit=crop'),
        _rec('medium', '5 Model Machine Learning Terbaru yang Wajib Diketahui Developer Indonesia',
             '/topic/machine-learning',
             'https://images.unsplash.com/photo-1678983419903-92b075ed3caf?q=80&w=1374&auto=format&fit=crop'),
        _rec('kompas', 'Mengenal Teknologi Generative AI dan Cara Kerjanya',
             '/read/2023/12/10/08140097/mengenal-teknologi-generative-ai-dan-cara-kerjanya',
             'https://images.unsplash.com/photo-1620712943543-bcc4688e7485?q=80&w=1650&auto=format&fit=crop'),
    ],
    'cloud': [
        _rec('detikcom', 'Tren Cloud Computing di Indonesia 2024, Ini yang Perlu Kamu Tahu',
             '/business/d-7062095/tren-cloud-computing-di-indonesia-terbaru',
             'https://images.unsplash.com/photo-1485827404703-89b55fcc595e?q=80&w=1470&auto=format&fit=crop'),
        _rec('medium', 'Keuntungan Adopsi Serverless untuk Startup Indonesia',
             '/topic/serverless',
             'https://images.unsplash.com/photo-1451187580459-43490279c0fa?q=80&w=1472&auto=format&fit=crop'),
    ],
    'programming': [
        _rec('detikcom', '8 Bahasa Pemrograman Terpopuler di Indonesia 2024',
             '/inet-tips/d-7054871/8-bahasa-pemrograman-terpopuler-di-indonesia',
             'https://images.unsplash.com/photo-1581090700227-1e37b190418e?q=80&w=1470&auto=format&fit=crop'),
        _rec('medium', 'Teknik Pengembangan Software Modern untuk Developer Indonesia',
             '/topic/software-development',
             'https://images.unsplash.com/photo-1516259762381-22954d7d3ad2?q=80&w=1489&auto=format&fit=crop'),
    ],
    'security': [
        _rec('detikcom', 'Awas! Serangan Siber Meningkat di Indonesia, Ini Cara Melindungi Data',
             '/news/d-7084536/awas-serangan-siber-meningkat-di-indonesia',
             'https://images.unsplash.com/photo-1563013544-824ae1b704d3?q=80&w=1470&auto=format&fit=crop'),
        _rec('medium', 'Zero Trust Architecture: Panduan Keamanan untuk Perusahaan Teknologi',
             '/topic/cybersecurity',
             'https://images.unsplash.com/photo-1614064641938-3bbee52942c7?q=80&w=1470&auto=format&fit=crop'),
    ],
    'web': [
        _rec('detikcom', 'Perbandingan Framework Frontend 2024 untuk Developer Indonesia',
             '/inet-tips/d-7035621/perbandingan-framework-frontend-terbaru',
             'https://images.unsplash.com/photo-1547658719-da2b51169166?q=80&w=1464&auto=format&fit=crop'),
        _rec('medium', 'Microservices vs Monoliths: Pilihan Tepat untuk Aplikasi Skala Besar',
             '/topic/web-development',
             'https://images.unsplash.com/photo-1537432376769-00f5c2f4c8d2?q=80&w=1450&auto=format&fit=crop'),
    ],
}

DEFAULT_RECOMMENDATIONS = [
    _rec('detikcom', 'Blockchain dan Cryptocurrency, Peluang Baru di Indonesia',
         '/news/d-7048576/blockchain-dan-cryptocurrency-peluang-baru-di-indonesia',
         'https://images.unsplash.com/photo-1590283603385-c1c595235a32?q=80&w=1470&auto=format&fit=crop'),
    _rec('kompas', '5G di Indonesia: Kapan Akan Tersedia Merata?',
         '/read/2023/12/15/16453777/5g-di-indonesia-kapan-akan-tersedia-merata',
         'https://images.unsplash.com/photo-1526374965328-7f61d4dc18c5?q=80&w=1470&auto=format&fit=crop'),
    _rec('detikcom', 'Quantum Computing dan Masa Depan Komputasi di Indonesia',
         '/inet-tips/d-7071234/quantum-computing-dan-masa-depan-komputasi',
         'https://images.unsplash.com/photo-1635070041078-e363dbe005cb?q=80&w=1470&auto=format&fit=crop'),
    _rec('medium', 'DevOps dan Agile: Transformasi Budaya IT di Perusahaan Indonesia',
         '/topic/devops',
         'https://images.unsplash.com/photo-1516321318423-f06f85e504b3?q=80&w=1470&auto=format&fit=crop'),
    _rec('tempo', 'Internet of Things: Peluang dan Tantangan di Indonesia',
         '/tekno/read/1234567/internet-of-things-peluang-dan-tantangan-di-indonesia',
         'https://images.unsplash.com/photo-1558346490-a72e53ae2d4f?q=80&w=1470&auto=format&fit=crop'),
    _rec('detikcom', 'Data Science dan Big Data: Karir Menjanjikan di Bidang IT',
         '/news/d-7092784/data-science-dan-big-data-karir-menjanjikan-di-bidang-it',
         'https://images.unsplash.com/photo-1551288049-bebda4e38f71?q=80&w=1470&auto=format&fit=crop'),
]


def new_id() -> str:
    return uuid.uuid4().hex[:21]


def extract_main_keywords(title: str) -> List[str]:
    """
    Bucket a title into keyword categories.

    A category matches when any of its keywords occurs as a substring of the
    lowercased title. Returns DEFAULT_CATEGORIES when nothing matches.
    """
    title_lower = (title or '').lower()
    matched = [
        category for category, keywords in KEYWORD_CATEGORIES.items()
        if any(keyword in title_lower for keyword in keywords)
    ]
    return matched or list(DEFAULT_CATEGORIES)


def build_news_query(title: str) -> str:
    return ' OR '.join(extract_main_keywords(title) + IT_QUERY_KEYWORDS)


def random_tech_image(rng: random.Random = None) -> str:
    return (rng or random).choice(TECH_IMAGES)


def _shuffled(items: list, rng) -> list:
    items = list(items)
    rng.shuffle(items)
    return items


def diversify_sources(recommendations: List[Dict], rng: random.Random = None) -> List[Dict]:
    """Keep at most MAX_PER_SOURCE items per source, then shuffle."""
    rng = rng or random

    by_source: Dict[str, List[Dict]] = {}
    for rec in recommendations:
        by_source.setdefault(rec['source'], []).append(rec)

    result = []
    for source_recs in by_source.values():
        result.extend(source_recs[:MAX_PER_SOURCE])

    return _shuffled(result, rng)


def contextual_recommendations(title: str, rng: random.Random = None) -> List[Dict]:
    """
    Recommendations from the static tables.

    Topic lists for every matched category, topped up from the defaults to
    MAX_RECOMMENDATIONS, diversified by source and given fresh ids.
    """
    rng = rng or random

    relevant = []
    for keyword in extract_main_keywords(title):
        if keyword in RECOMMENDATIONS_BY_TOPIC:
            relevant.extend(_shuffled(RECOMMENDATIONS_BY_TOPIC[keyword], rng))

    if len(relevant) < MAX_RECOMMENDATIONS:
        defaults = _shuffled(DEFAULT_RECOMMENDATIONS, rng)
        relevant.extend(defaults[:MAX_RECOMMENDATIONS - len(relevant)])

    relevant = diversify_sources(relevant, rng)

    return [dict(rec, id=new_id()) for rec in relevant[:MAX_RECOMMENDATIONS]]


def filter_it_articles(articles: List[Dict], extra_keywords: List[str] = None) -> List[Dict]:
    """Keep NewsAPI articles whose title mentions an IT keyword."""
    keywords = [k.lower() for k in IT_QUERY_KEYWORDS + (extra_keywords or [])]
    kept = []
    for article in articles:
        if not isinstance(article, dict):
            continue
        title_lower = (article.get('title') or '').lower()
        if any(keyword in title_lower for keyword in keywords):
            kept.append(article)
    return kept


def to_recommendation(article: Dict, rng: random.Random = None) -> Dict:
    """Map a NewsAPI article onto the recommendation shape."""
    source = article.get('source') or {}
    return {
        'id': new_id(),
        'title': article.get('title'),
        'source': source.get('name') if isinstance(source, dict) else str(source),
        'url': article.get('url'),
        'imageUrl': article.get('urlToImage') or random_tech_image(rng),
    }
