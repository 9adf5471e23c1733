import pytest
import requests

from passgen import corpus


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_ensure_eff_wordlist_downloads_when_missing(tmp_path, monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return FakeResponse("11111\tabacus\n")

    monkeypatch.setattr(corpus.requests, "get", fake_get)
    target = tmp_path / "data" / "eff_wordlist.txt"

    assert corpus.ensure_eff_wordlist(target) == target
    assert target.read_text(encoding="utf-8") == "11111\tabacus\n"
    assert calls == [corpus.EFF_WORDLIST_URL]


def test_ensure_eff_wordlist_skips_download_when_present(tmp_path, monkeypatch):
    target = tmp_path / "eff_wordlist.txt"
    target.write_text("1\tcached\n", encoding="utf-8")

    def fail_get(*args, **kwargs):
        raise AssertionError("should not download")

    monkeypatch.setattr(corpus.requests, "get", fail_get)
    assert corpus.ensure_eff_wordlist(target) == target


@pytest.mark.parametrize("error", [requests.ConnectionError("offline"), None])
def test_ensure_eff_wordlist_reports_download_failure(tmp_path, monkeypatch, error):
    def fake_get(url, timeout):
        if error is not None:
            raise error
        return FakeResponse("", status_code=404)

    monkeypatch.setattr(corpus.requests, "get", fake_get)
    target = tmp_path / "eff_wordlist.txt"

    with pytest.raises(FileNotFoundError) as exc:
        corpus.ensure_eff_wordlist(target)
    assert str(target) in str(exc.value)
    assert not target.exists()


def test_read_word_list_source_fetches_default_list(tmp_path, monkeypatch):
    default = tmp_path / "eff_wordlist.txt"
    monkeypatch.setattr(corpus, "EFF_WORDLIST_PATH", default)
    monkeypatch.delenv("PASSGEN_WORD_LIST", raising=False)
    monkeypatch.setattr(corpus.requests, "get", lambda url, timeout: FakeResponse("1\tzebra\n"))

    assert corpus.read_word_list_source() == "1\tzebra\n"


def test_read_word_list_source_uses_configured_path(tmp_path, monkeypatch):
    source = tmp_path / "mine.txt"
    source.write_text("1\tkoala\n", encoding="utf-8")
    monkeypatch.setenv("PASSGEN_WORD_LIST", str(source))

    assert corpus.get_word_list_path() == source
    assert corpus.read_word_list_source() == "1\tkoala\n"


def test_read_word_list_source_missing_custom_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        corpus.read_word_list_source(tmp_path / "missing.txt")
