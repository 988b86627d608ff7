"""
Keyword highlighting — derive a keyword set from a job description and mark
every whole-word occurrence of it in a resume.
"""

import html
import re
from dataclasses import dataclass, field

from .config import Config

MISSING_INPUT = "Please upload or paste both Resume and Job Description."

_WORD_SPLIT = re.compile(r"\W+")


@dataclass
class HighlightResult:
    """Output of a highlight run, ready for rendering."""
    html: str
    keywords: list[str] = field(default_factory=list)
    matched: list[str] = field(default_factory=list)

    @property
    def match_count(self) -> int:
        return len(self.matched)


def extract_keywords(job_description: str) -> list[str]:
    """Lowercased, deduplicated words longer than 3 characters that are not stopwords."""
    stopwords = Config.stopwords()
    words = (w.lower() for w in _WORD_SPLIT.split(job_description))
    kept = (w for w in words if len(w) >= Config.MIN_KEYWORD_LENGTH and w not in stopwords)
    # dict keeps first-seen order
    return list(dict.fromkeys(kept))


def build_pattern(keywords: list[str]) -> re.Pattern | None:
    """Case-insensitive whole-word alternation over the keywords, or None when there are none."""
    if not keywords:
        return None
    alternation = "|".join(re.escape(k) for k in keywords)
    return re.compile(rf"\b({alternation})\b", re.IGNORECASE)


def highlight(text: str, keywords: list[str], tag: str | None = None) -> str:
    """
    Wrap each keyword match in ``text`` with ``<tag>…</tag>``.

    The surrounding text and the matches themselves are HTML-escaped, so the
    result can be rendered as raw HTML. Original casing is preserved.
    """
    tag = tag or Config.HIGHLIGHT_TAG
    pattern = build_pattern(keywords)
    if pattern is None:
        return html.escape(text)

    parts = []
    pos = 0
    for match in pattern.finditer(text):
        parts.append(html.escape(text[pos:match.start()]))
        parts.append(f"<{tag}>{html.escape(match.group(0))}</{tag}>")
        pos = match.end()
    parts.append(html.escape(text[pos:]))
    return "".join(parts)


def matched_keywords(text: str, keywords: list[str]) -> list[str]:
    """Keywords (in keyword order) that occur at least once in ``text``."""
    pattern = build_pattern(keywords)
    if pattern is None:
        return []
    found = {m.group(0).lower() for m in pattern.finditer(text)}
    return [k for k in keywords if k in found]


def highlight_resume(resume: str, job_description: str) -> HighlightResult:
    if not resume.strip() or not job_description.strip():
        raise ValueError(MISSING_INPUT)

    keywords = extract_keywords(job_description)
    return HighlightResult(
        html=highlight(resume, keywords),
        keywords=keywords,
        matched=matched_keywords(resume, keywords),
    )
