import pytest

from highlighter.config import Config
from highlighter.keywords import (
    MISSING_INPUT,
    build_pattern,
    extract_keywords,
    highlight,
    highlight_resume,
    matched_keywords,
)

JOB = "Looking for a Python developer with backend experience"
RESUME = "I have backend and Python skills"


def test_extract_keywords_filters_and_lowercases():
    assert extract_keywords(JOB) == ["looking", "python", "developer", "backend", "experience"]


def test_extract_keywords_dedupes_in_order():
    assert extract_keywords("Python, python; PYTHON and Django/python") == ["python", "django"]


def test_extract_keywords_skips_stopwords():
    assert extract_keywords("these would have been about your work") == ["been", "work"]


def test_extra_stopwords(monkeypatch):
    monkeypatch.setattr(Config, "EXTRA_STOPWORDS", ("looking",))
    assert "looking" not in extract_keywords(JOB)


def test_highlight_marks_keywords_case_insensitively():
    out = highlight(RESUME, extract_keywords(JOB))
    assert out == "I have <mark>backend</mark> and <mark>Python</mark> skills"


def test_highlight_whole_words_only():
    out = highlight("Java and JavaScript", ["java"])
    assert out == "<mark>Java</mark> and JavaScript"


def test_highlight_prefix_keywords():
    out = highlight("JavaScript and Java", ["java", "javascript"])
    assert out == "<mark>JavaScript</mark> and <mark>Java</mark>"


def test_highlight_escapes_html():
    out = highlight("<b>Python</b> & more", ["python"])
    assert out == "&lt;b&gt;<mark>Python</mark>&lt;/b&gt; &amp; more"


def test_highlight_without_keywords_leaves_text_unmarked():
    assert highlight("short text", []) == "short text"
    assert build_pattern([]) is None


def test_regex_metacharacters_are_escaped():
    pattern = build_pattern(["c++x", "node.js"])
    assert pattern.search("node.js") is not None
    assert pattern.search("nodexjs") is None


def test_custom_tag():
    assert highlight("python", ["python"], tag="strong") == "<strong>python</strong>"


def test_matched_keywords():
    assert matched_keywords(RESUME, extract_keywords(JOB)) == ["python", "backend"]


def test_highlight_resume():
    result = highlight_resume(RESUME, JOB)
    assert "<mark>backend</mark>" in result.html
    assert "<mark>Python</mark>" in result.html
    assert "<mark>have</mark>" not in result.html
    assert result.matched == ["python", "backend"]
    assert result.match_count == 2


@pytest.mark.parametrize("resume, job", [("", JOB), (RESUME, ""), ("   ", JOB)])
def test_highlight_resume_requires_both_inputs(resume, job):
    with pytest.raises(ValueError, match=MISSING_INPUT):
        highlight_resume(resume, job)


def test_non_ascii_letters_stay_inside_words():
    assert extract_keywords("Résumé writing for señor engineers") == ["résumé", "writing", "señor", "engineers"]
    assert highlight("My Résumé is ready", ["résumé"]) == "My <mark>Résumé</mark> is ready"
    assert highlight("résuméx", ["résumé"]) == "résuméx"
