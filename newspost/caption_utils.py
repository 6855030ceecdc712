"""
Caption utilities for News Post Studio.

Pure helpers used by the caption generator: prompt builders for the LLM,
keyword/hashtag extraction and the local template fallbacks used when no LLM
is reachable.

All captions are limited to Instagram's 2200 character maximum and are
truncated at word boundaries (not mid-word).
"""

import random
import re
from typing import List, Optional, Tuple

# Instagram caption limit
MAX_CAPTION_LENGTH = 2200
MAX_HASHTAGS = 3

# Sentences shorter than this are ignored by the structured fallback
MIN_SENTENCE_LENGTH = 30

# IT-related keywords looked up in titles (English and Indonesian)
IT_KEYWORDS = [
    'ai', 'artificial intelligence', 'machine learning', 'ml', 'deep learning',
    'cloud', 'cloud computing', 'aws', 'azure', 'gcp',
    'programming', 'code', 'software', 'development', 'developer',
    'tech', 'technology', 'digital', 'data', 'database',
    'security', 'cybersecurity', 'privacy', 'encryption',
    'web', 'webapp', 'application', 'frontend', 'backend',
    'network', 'internet', 'iot', 'blockchain', 'crypto',
    'mobile', 'app', 'devops', 'agile', 'scrum',
    'innovation', 'startup', 'automation', 'robotics',
    'algorithm', 'api', 'microservice', 'serverless',
    'saas', 'paas', 'iaas', 'infrastructure',
    # Indonesian
    'teknologi', 'kecerdasan buatan', 'pembelajaran mesin', 'komputasi awan',
    'pengembangan', 'keamanan', 'privasi', 'basis data',
    'jaringan', 'aplikasi', 'inovasi', 'otomatisasi',
    'infrastruktur', 'transformasi digital', 'ekonomi digital', 'fintech', 'edtech',
    'sistem', 'kebijakan', 'regulasi', 'layanan', 'program',
    'teknologi informasi', 'ti', 'sistemetic', 'strategis',
]

DEFAULT_KEYWORDS = ['Sistemetic', 'TeknologiInformasi', 'DigitalIndonesia']

GENZ_HASHTAGS = ['fyp', 'viral', 'trending', 'updateterkini', 'infopenting', 'genZ']

GENZ_OPENINGS = [
    'Guys, ini seriusan bikin gue auto kepo! 🔥',
    'OMG! Fix banget ini bakal jadi trend! 🚀',
    'Nah lho? Udah pada tau belom? 👀',
    'Anjay! Ini sih wajib banget di-save! 💯',
    'WAIT- ini tuh beneran?! Gak bohong kan? 🤯',
    'Goks parahhh... gue auto shocked! 😱',
    'Yuk mari kita bahas yang lagi viral ini! 🔍',
    'Gak nyangka ini bakal kejadian... auto melongo! 👁️👄👁️',
]

GENZ_EXPRESSIONS = [
    'auto kepo',
    'gokil parah',
    'literally gak nyangka',
    'sumpah demi apa',
    'no debat ini wajib tau',
    'gak diragukan lagi',
    'literally mindblown',
    'auto save',
    'must-read banget',
    'skrg lagi viral',
]

GENZ_CLOSINGS = [
    'Penasaran? Cek link di bio ya guys!',
    'Swipe up di story atau cek link di bio for more info!',
    'Mau tau lebih lanjut? Tap link di bio sekarang!',
    'Full story di link bio, gas cek skrg!',
    'Yang penasaran, langsung aja cek link bio ya bestie!',
]

HOOK_PATTERNS = [
    '"{title}"? Cek Dulu Gesss!',
    'OMG! {title} Bikin Geger Netizen!',
    'Auto Kaget! {title} Ternyata...',
    '{title}? Yakin Lo Udah Tau Faktanya?',
    'Nggak Nyangka! {title} Terungkap!',
    '{title}? Ini Yang Sebenarnya Terjadi!',
    'Gokil Sih! {title} Jadi Trending!',
    '{title} - Kok Bisa Sih?!',
    'Fix! {title} Bikin Penasaran',
    '{title} - Benarkah Seheboh Itu?',
]

# (trigger words, comment) - first perspective with a matching trigger wins
CRITICAL_PERSPECTIVES = [
    (
        ['teknologi', 'digital', 'ai', 'artificial', 'intelligence', 'machine', 'learning'],
        'Menarik artikelnya, tapi saya rasa dampak etis dari teknologi ini belum dibahas '
        'secara mendalam. Bagaimana dengan isu privasi dan potensi bias algoritma? Apakah '
        'kita sudah mempertimbangkan regulasi yang tepat untuk teknologi semacam ini?',
    ),
    (
        ['startup', 'bisnis', 'ekonomi', 'investor', 'unicorn', 'digital', 'industri'],
        'Artikel yang informatif, namun saya merasa ada celah analisis tentang keberlanjutan '
        'model bisnis ini dalam jangka panjang. Bagaimana dengan tantangan kompetisi global '
        'dan risiko investasi? Mungkinkah ini hanya tren sementara?',
    ),
    (
        ['pendidikan', 'belajar', 'sekolah', 'mahasiswa', 'siswa', 'kuliah', 'pembelajaran'],
        'Saya setuju dengan poin-poin utama artikel, tetapi aspek kesenjangan akses pendidikan '
        'antara daerah urban dan rural tidak disinggung. Bukankah ini akan semakin memperlebar '
        'kesenjangan digital? Bagaimana solusi konkretnya?',
    ),
    (
        ['pemerintah', 'kebijakan', 'regulasi', 'aturan', 'hukum', 'undang-undang'],
        'Artikel ini menyajikan informasi berharga, namun implementasi kebijakan semacam ini '
        'sering terhambat birokrasi. Apakah sudah ada kajian mengenai efektivitas kebijakan '
        'serupa di negara lain? Bagaimana dengan aspek penegakan hukumnya?',
    ),
    (
        ['social media', 'sosial', 'media', 'platform', 'facebook', 'instagram', 'tiktok', 'twitter'],
        'Pembahasan yang menarik, tetapi dampak psikologis dan pengaruh sosial media terhadap '
        'kesehatan mental masyarakat belum dibahas secara kritis. Bukankah kita perlu lebih '
        "berhati-hati dengan narasi 'kemajuan teknologi' tanpa melihat sisi negatifnya?",
    ),
]

DEFAULT_CRITICAL_COMMENT = (
    'Artikel ini menyajikan informasi yang cukup komprehensif, namun saya merasa aspek '
    'keberlanjutan dan dampak jangka panjangnya belum digali lebih dalam. Apakah sudah ada '
    'studi komparasi dengan pendekatan alternatif? Mungkin ada perspektif berbeda yang bisa '
    'melengkapi pembahasan ini?'
)

DESCRIPTION_STRUCTURE = """Struktur deskripsi yang harus diikuti:

1. Lead / Pembuka Berita:
   Ringkasan peristiwa utama berdasarkan judul. Jawab unsur 5W1H sebisa mungkin.

2. Tindakan atau Rencana yang Diambil:
   Jelaskan langkah konkret yang disampaikan atau dilakukan oleh narasumber.

3. Tujuan atau Dampak:
   Uraikan alasan atau dampak dari langkah tersebut bagi publik atau stakeholder tertentu.

4. Kutipan Langsung (Opsional):
   Tambahkan kutipan dari narasumber untuk menguatkan narasi.

5. Rincian Strategi atau Isi Keputusan:
   Jelaskan solusi, kebijakan, atau rencana lanjutan yang disebutkan.

6. Penutup / Strategi Jangka Panjang:
   Akhiri dengan strategi tambahan, kesimpulan, atau harapan dari narasumber.

Sampaikan dalam minimal 4 paragraf. Gaya bahasa harus formal, padat, dan mudah dicerna pembaca awam. Cantumkan sumber berita di akhir artikel.

PENTING:
- Struktur paragraf harus rapi dan mudah dibaca
- Pastikan deskripsi kompatibel untuk dibagikan di website berita teknologi
- Hindari pengulangan informasi yang sama
- Jangan menyebutkan bahwa kamu AI atau menulis kata "ringkasan\""""


def truncate_caption(caption: str, max_length: int = MAX_CAPTION_LENGTH) -> Tuple[str, bool]:
    """
    Truncate caption at a word boundary, not mid-word.

    Line breaks are preserved; only the tail is cut.

    Returns:
        Tuple of (truncated_caption, was_truncated)
    """
    if not caption:
        return ('', False)

    caption = caption.strip()
    if len(caption) <= max_length:
        return (caption, False)

    truncated = caption[:max_length]
    last_space = max(truncated.rfind(' '), truncated.rfind('\n'))

    # Single long word: hard cut with ellipsis
    if last_space == -1:
        return (caption[:max_length - 3] + '...', True)

    return (truncated[:last_space].rstrip(), True)


def extract_keywords(title: str) -> List[str]:
    """
    Find IT keywords in a title.

    Single-word keywords must match a whole title word; multi-word keywords
    must appear as consecutive title words. Spaces are removed from the
    result so each keyword can become a hashtag.
    """
    title_words = (title or '').lower().split()

    found = []
    for keyword in IT_KEYWORDS:
        keyword_words = keyword.split(' ')
        if len(keyword_words) == 1:
            matched = keyword in title_words
        else:
            span = len(keyword_words)
            matched = any(
                title_words[i:i + span] == keyword_words
                for i in range(len(title_words) - span + 1)
            )
        if matched:
            found.append(keyword.replace(' ', ''))

    return found or list(DEFAULT_KEYWORDS)


def generate_hashtags(title: str, limit: int = MAX_HASHTAGS) -> str:
    """Build up to `limit` hashtags from the title keywords."""
    keywords = extract_keywords(title)
    return ' '.join(f'#{k[:1].upper() + k[1:]}' for k in keywords[:limit])


def fill_prompt(prompt: str, title: str, author: str, source: str, content: Optional[str] = None) -> str:
    """Replace {title}, {author}, {source} and {content} placeholders."""
    filled = (
        prompt.replace('{title}', title)
        .replace('{author}', author)
        .replace('{source}', source)
    )
    if content:
        filled = filled.replace('{content}', content)
    return filled


def build_description_prompt(title: str, author: str, source: str, content: Optional[str] = None) -> str:
    """Default Indonesian news-narrative prompt."""
    header = (
        'Buatkan deskripsi berita berdasarkan informasi berikut:\n'
        f'Judul: {title}\n'
        f'Penulis / Narasumber: {author}\n'
        f'Sumber Berita: {source}\n'
    )
    if content:
        return (
            f'{header}\nKONTEN ARTIKEL: \n{content}\n\n'
            'Gunakan struktur narasi yang informatif dan ringkas seperti gaya Narasi Daily. '
            f'Sertakan kutipan langsung dari {author} jika tersedia.\n\n'
            f'{DESCRIPTION_STRUCTURE}\n'
            '- Jangan menambahkan konten yang tidak ada di artikel asli'
        )
    return (
        f'{header}\n'
        'Gunakan struktur narasi yang informatif dan ringkas seperti gaya Narasi Daily. '
        'Sertakan kutipan langsung dari narasumber jika tersedia.\n\n'
        f'{DESCRIPTION_STRUCTURE}'
    )


def build_genz_prompt(title: str, content: Optional[str] = None) -> str:
    """Prompt for a Gen-Z style Instagram caption."""
    extra = ''
    if content:
        extra = f'\nInformasi tambahan dari artikel:\n{content[:200]}...\n'
    return f"""Ubah judul artikel ini: "{title}" menjadi caption Instagram dengan gaya bahasa Gen-Z kekinian yang bikin penasaran dan WAJIB membuat orang membaca lebih lanjut.

Aturan pembuatan caption:
1. Gunakan bahasa Gen-Z Indonesia yang kekinian, gaul, tapi masih bisa dipahami (mix bahasa Indo-Inggris)
2. Tambahkan emoji yang cocok (maksimal 3-4 emoji)
3. Buat hook di awal yang bikin penasaran dan "clickbait" tapi tetap faktual
4. Sertakan frasa seperti "auto penasaran", "must-read", "gokil parah", "auto kepo"
5. Akhiri dengan 3-5 hashtag yang kekinian dan relevan dengan konten
6. Panjang caption harus 2-3 paragraf pendek saja
7. Jangan menyebutkan sumber berita, cukup katakan "cek link di bio"
8. Hindari formal, buat seperti teman sebaya bercerita

Yang WAJIB dihindari:
- Jangan terlalu formal atau seperti berita resmi
- Jangan berlebihan dalam penggunaan emoji
- Jangan mengubah fakta utama dari judul asli
- Jangan gunakan kata "artikel" atau "berita"
{extra}
Berikan caption akhir yang langsung bisa dipakai, tanpa menjelaskan proses pembuatannya."""


def build_hook_title_prompt(title: str) -> str:
    return (
        'Ubah judul berita berikut menjadi versi yang menarik perhatian Gen Z dan membuat penasaran. \n'
        'Gunakan bahasa santai tapi tetap formal, untuk audiens muda Indonesia.\n\n'
        f'Judul asli:\n"{title}"\n\n'
        'Judul hook versi Gen Z:'
    )


def build_comment_prompt(title: str, content: str) -> str:
    return f"""Buatkan komentar kritis yang menimbulkan diskusi berdasarkan artikel berikut:
Judul: {title}

Konten:
{content[:500]}...

Aturan membuat komentar:
1. Komentar harus berdasarkan sudut pandang kritis namun tetap sopan
2. Fokus pada satu aspek kontroversial atau kurang dibahas dalam artikel
3. Berikan pertanyaan terbuka di akhir untuk memicu diskusi
4. Gunakan bahasa yang netral dan tidak provokatif
5. Panjang komentar antara 3-5 kalimat saja
6. Jangan menyebutkan bahwa ini adalah komentar buatan AI

Berikan komentar langsung tanpa penjelasan tambahan."""


def split_sentences(content: str, min_length: int = MIN_SENTENCE_LENGTH) -> List[str]:
    """Split on . ! ? and keep trimmed sentences longer than min_length."""
    sentences = [s.strip() for s in re.split(r'[.!?]', content or '')]
    return [s for s in sentences if len(s) > min_length]


def build_structured_description(title: str, source: str, content: str) -> Optional[str]:
    """
    Compose a news description from the article's own sentences.

    Lead (first 2-3 sentences), a middle paragraph when there are more than 4
    sentences, a detail paragraph when there are more than 6, then source and
    hashtags. Returns None if the content has no substantial sentences.
    """
    sentences = split_sentences(content)
    if not sentences:
        return None

    def _paragraph(items):
        return ' '.join(s + '.' for s in items)

    parts = [title]

    if len(sentences) >= 2:
        parts.append(_paragraph(sentences[:3]))
    else:
        parts.append(sentences[0] + '.')

    middle = len(sentences) // 2
    if len(sentences) > 4:
        parts.append(_paragraph(sentences[middle:middle + 2]))

    if len(sentences) > 6:
        start = min(middle + 2, len(sentences) - 2)
        parts.append(_paragraph(sentences[start:middle + 4]))

    parts.append(f'Sumber: {source} {generate_hashtags(title)}')
    return '\n\n'.join(parts)


def description_templates(title: str, author: str, source: str) -> List[str]:
    hashtags = generate_hashtags(title)
    return [
        f'{title}. Ringkasan penting dari berita yang ditulis oleh {author} di {source}. {hashtags}',
        f'Artikel dari {source}: "{title}". Disusun berdasarkan konten asli yang ditulis oleh {author}. {hashtags}',
        f'Program Systemetic menyajikan "{title}" - berdasarkan artikel asli {source}. {hashtags}',
        f'{title} - Ringkasan artikel {source} oleh {author}. {hashtags}',
    ]


def fallback_description(
    title: str,
    author: str,
    source: str,
    regenerate: bool = False,
    custom_prompt: Optional[str] = None,
    content: Optional[str] = None,
    rng: random.Random = None,
) -> str:
    """
    Description used when no LLM answered.

    Order: structured description from content, custom-prompt summary line,
    fixed templates (first one, or a random one when regenerating).
    """
    rng = rng or random

    if content:
        structured = build_structured_description(title, source, content)
        if structured:
            return structured

    if custom_prompt:
        filled = fill_prompt(custom_prompt, title, author, source, content)
        if len(filled.split('.')) > 1:
            return f'{title} by {author} from {source}. {generate_hashtags(title)}'

    templates = description_templates(title, author, source)
    return rng.choice(templates) if regenerate else templates[0]


def local_genz_caption(title: str, rng: random.Random = None) -> str:
    """Gen-Z caption assembled from canned phrases."""
    rng = rng or random

    main_topic = ' '.join(title.split(' ')[:3])
    opening = rng.choice(GENZ_OPENINGS)
    expression = rng.choice(GENZ_EXPRESSIONS)
    closing = rng.choice(GENZ_CLOSINGS)

    tags = extract_keywords(title) + GENZ_HASHTAGS[:3]
    hashtags = ' '.join(f'#{tag}' for tag in tags[:5])

    return (
        f'{opening} {title} ini bikin {expression}! \n\n'
        f'Gue {expression} banget pas tau tentang {main_topic}... Ini tuh bener-bener sesuatu '
        'yang bakal ubah cara pandang kita. Gak percaya? Just wait and see aja sih 💁‍♀️\n\n'
        f'{closing}\n\n'
        f'{hashtags}'
    )


def local_hook_title(title: str, rng: random.Random = None) -> str:
    rng = rng or random
    return rng.choice(HOOK_PATTERNS).replace('{title}', title)


def local_critical_comment(title: str, content: str) -> str:
    """Pick the first critical perspective whose trigger words appear."""
    title_words = (title or '').lower().split()
    content_sample = (content or '')[:300].lower()

    for triggers, comment in CRITICAL_PERSPECTIVES:
        if any(word in title_words or word in content_sample for word in triggers):
            return comment

    return DEFAULT_CRITICAL_COMMENT
