import pytest

from backend.services.upload_service import parse_metadata


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        ("", None),
        ('{"a": 1}', {"a": 1}),
        ("[1, 2]", [1, 2]),
        ("42", 42),
        ("hello", {"raw": "hello"}),
        ("{broken", {"raw": "{broken"}),
        ("NaN", {"raw": "NaN"}),
        ("Infinity", {"raw": "Infinity"}),
        ("-Infinity", {"raw": "-Infinity"}),
        ('{"score": NaN}', {"raw": '{"score": NaN}'}),
        ("1.5e3", 1500.0),
        ({"already": "parsed"}, {"already": "parsed"}),
    ],
)
def test_parse_metadata(value, expected):
    assert parse_metadata(value) == expected
