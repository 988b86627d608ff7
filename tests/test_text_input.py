import pytest

from highlighter.text_input import NOT_PLAIN_TEXT, read_text_upload


def test_reads_plain_text():
    assert read_text_upload("text/plain", "Python dev\n".encode()) == "Python dev\n"


def test_accepts_charset_parameter():
    assert read_text_upload("text/plain; charset=utf-8", b"ok") == "ok"


def test_replaces_undecodable_bytes():
    assert read_text_upload("text/plain", b"ok\xff") == "ok�"


@pytest.mark.parametrize("mime", ["application/pdf", "text/html", None, ""])
def test_rejects_non_text(mime):
    with pytest.raises(ValueError, match=NOT_PLAIN_TEXT):
        read_text_upload(mime, b"data")
