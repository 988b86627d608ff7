import asyncio
import time

from backend.utils.storage import LocalStorage, sanitize_filename


def test_sanitize_filename():
    assert sanitize_filename("CV 2024 (v2).pdf") == "CV_2024__v2_.pdf"
    assert sanitize_filename("../etc/passwd") == ".._etc_passwd"
    assert sanitize_filename("ok-name_1.txt") == "ok-name_1.txt"


def test_generate_name_is_timestamped(tmp_path):
    storage = LocalStorage(tmp_path)
    name = storage.generate_name("résumé.txt")
    stamp, _, rest = name.partition("-")
    assert stamp.isdigit()
    assert rest == "r_sum_.txt"


def test_generate_name_avoids_existing(tmp_path, monkeypatch):
    monkeypatch.setattr(time, "time", lambda: 1700000000.0)
    storage = LocalStorage(tmp_path)
    (tmp_path / "1700000000000-a.txt").write_bytes(b"")
    assert storage.generate_name("a.txt") == "1700000000001-a.txt"


def test_store_and_delete(tmp_path):
    storage = LocalStorage(tmp_path)
    asyncio.run(storage.store_bytes(b"abc", "x.txt"))
    assert (tmp_path / "x.txt").read_bytes() == b"abc"
    assert asyncio.run(storage.delete("x.txt")) is True
    assert asyncio.run(storage.delete("x.txt")) is False
    assert storage.get_url("x.txt") == "/uploads/x.txt"
