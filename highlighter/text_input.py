"""
Text Input — load resume / job description text from uploaded files.
Only plain-text uploads are accepted, mirroring the `.txt` picker in the UI.
"""

from .config import Config

NOT_PLAIN_TEXT = "Please upload a .txt file only"


def read_text_upload(content_type: str | None, data: bytes) -> str:
    """
    Decode an uploaded text file.

    Args:
        content_type: MIME type reported by the browser
        data: Raw file bytes

    Returns:
        The decoded text; undecodable bytes are replaced.

    Raises:
        ValueError: if the upload is not a plain-text file
    """
    mime = (content_type or "").split(";", 1)[0].strip().lower()
    if mime not in Config.ALLOWED_TEXT_TYPES:
        raise ValueError(NOT_PLAIN_TEXT)
    return data.decode(Config.TEXT_ENCODING, errors="replace")
