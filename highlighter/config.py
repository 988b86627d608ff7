"""
Centralized configuration for the resume highlighter.
Loads from .env and provides defaults matching the classic keyword rules.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_list(name: str) -> tuple:
    value = os.getenv(name, "")
    return tuple(w.strip().lower() for w in value.split(",") if w.strip())


class Config:
    # ── Keyword Extraction ──────────────────────────────────
    # Words must be longer than 3 characters to count as keywords
    MIN_KEYWORD_LENGTH: int = int(os.getenv("MIN_KEYWORD_LENGTH", "4"))
    STOPWORDS: frozenset = frozenset((
        "with", "have", "this", "that", "your", "from", "when",
        "were", "will", "would", "these", "such", "about",
    ))
    EXTRA_STOPWORDS: tuple = _env_list("EXTRA_STOPWORDS")

    # ── Rendering ───────────────────────────────────────────
    HIGHLIGHT_TAG: str = os.getenv("HIGHLIGHT_TAG", "mark")

    # ── Text Uploads ────────────────────────────────────────
    ALLOWED_TEXT_TYPES: tuple = ("text/plain",)
    TEXT_ENCODING: str = "utf-8"

    @classmethod
    def stopwords(cls) -> frozenset:
        return cls.STOPWORDS | frozenset(cls.EXTRA_STOPWORDS)
