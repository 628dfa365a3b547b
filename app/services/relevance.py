import re
import unicodedata

STOPWORDS = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "your", "with", "this", "that",
    "these", "those", "from", "have", "has", "had", "was", "were", "will", "would",
    "can", "could", "should", "what", "when", "where", "which", "who", "whom", "why",
    "how", "does", "did", "doing", "about", "into", "over", "than", "then", "them",
    "they", "their", "there", "here", "its", "our", "out", "all", "any", "also", "just",
    "some", "such", "more", "most", "very", "been", "being", "is", "it", "of", "to",
    "in", "on", "at", "by", "an", "a", "or", "as", "be", "do", "so", "if", "me", "my",
    "we", "he", "she", "him", "her", "his", "i", "tell", "explain", "please", "video",
})

MAX_KEYWORDS = 12
MAX_UNITS = 400

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_BOUNDARY_RE = re.compile(r"\n+|(?<=[.!?\u0964])\s+")


def _word_char(ch: str) -> bool:
    # letters, combining marks (Devanagari vowel signs) and digits
    return unicodedata.category(ch)[0] in "LMN"


def normalize(text: str) -> str:
    text = "".join(ch if _word_char(ch) else " " for ch in text.lower())
    return _WHITESPACE_RE.sub(" ", text).strip()


def keywords(text: str, stopwords=STOPWORDS, limit: int = MAX_KEYWORDS) -> list[str]:
    """Distinct content words of ``text`` in first-seen order, at most ``limit``."""
    seen = []
    for token in normalize(text).split(" "):
        if len(token) < 3 or token in stopwords or token in seen:
            continue
        seen.append(token)
        if len(seen) == limit:
            break
    return seen


def split_sentences(text: str, limit: int = MAX_UNITS) -> list[str]:
    units = [unit.strip() for unit in _SENTENCE_BOUNDARY_RE.split(text)]
    return [unit for unit in units if unit][:limit]


def top_relevant_sentences(text: str, query: str, max_sentences: int, stopwords=STOPWORDS) -> list[str]:
    """Rank sentences of ``text`` by how many query keywords each contains.

    Zero-score sentences are dropped; ties keep document order.
    """
    terms = keywords(query, stopwords=stopwords)
    if not terms or not text:
        return []

    scored = []
    for sentence in split_sentences(text):
        normalized = normalize(sentence)
        score = sum(1 for term in terms if term in normalized)
        if score:
            scored.append((score, sentence))

    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [sentence for _, sentence in scored[:max_sentences]]
