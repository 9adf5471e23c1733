"""
Raw word list source: the EFF large word list (one "<dice>\t<word>" per line).
Download on first use and cache to data/eff_wordlist.txt.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

import requests

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
EFF_WORDLIST_URL = "https://www.eff.org/files/2016/07/18/eff_large_wordlist.txt"
EFF_WORDLIST_PATH = DATA_DIR / "eff_wordlist.txt"
DOWNLOAD_TIMEOUT = 15


def get_word_list_path() -> Path:
    p = os.environ.get("PASSGEN_WORD_LIST")
    if p:
        return Path(p)
    return EFF_WORDLIST_PATH


def ensure_eff_wordlist(path: Path | None = None) -> Path:
    """Download the EFF word list if missing. Returns path to file."""
    p = path or EFF_WORDLIST_PATH
    if p.exists():
        return p
    p.parent.mkdir(parents=True, exist_ok=True)
    try:
        logging.info("Downloading %s ...", EFF_WORDLIST_URL)
        r = requests.get(EFF_WORDLIST_URL, timeout=DOWNLOAD_TIMEOUT)
        r.raise_for_status()
    except requests.RequestException as e:
        raise FileNotFoundError(
            f"Could not download {EFF_WORDLIST_URL}. "
            f"Download manually to {p} (index TAB word per line). Error: {e}"
        ) from e
    p.write_text(r.text, encoding="utf-8")
    return p


def read_word_list_source(path: Path | None = None) -> str:
    """
    Return the raw word list text. The default EFF list is fetched when absent;
    an explicit or configured path must already exist.
    """
    p = path or get_word_list_path()
    if p == EFF_WORDLIST_PATH:
        ensure_eff_wordlist(p)
    if not p.exists():
        raise FileNotFoundError(f"Word list source not found at {p}. Set PASSGEN_WORD_LIST to a valid path.")
    return p.read_text(encoding="utf-8")
