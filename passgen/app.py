"""
Localhost JSON API for generating passphrases.
Run: uvicorn passgen.app:app --reload --host 0.0.0.0
Then open http://localhost:8000/api/passphrase?length=24
"""
from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI, Query
from pydantic import BaseModel, Field

from .corpus import DATA_DIR
from .generator import MAX_LENGTH, MIN_LENGTH, generate_passphrase_with_max_length, random_number_to_join
from .strength import password_stats
from .words import WordIndex, read_word_index

load_dotenv(DATA_DIR.parent / ".env")

app = FastAPI(title="passgen")

# Index is immutable; loaded on first request and shared after that
_WORD_INDEX: WordIndex | None = None


def get_word_index() -> WordIndex:
    global _WORD_INDEX
    if _WORD_INDEX is None:
        _WORD_INDEX = read_word_index()
    return _WORD_INDEX


class PassphraseRequest(BaseModel):
    length: int = Field(20, ge=MIN_LENGTH, le=MAX_LENGTH)
    separator: str = Field("-", max_length=16)
    capitalise: bool = True
    add_number: bool = True
    stats: bool = False


def _generate(body: PassphraseRequest) -> dict:
    try:
        index = get_word_index()
        number_to_join = random_number_to_join() if body.add_number else None
        passphrase = generate_passphrase_with_max_length(
            index, body.length, body.separator, body.capitalise, number_to_join
        )
    except (OSError, ValueError) as e:
        return {"ok": False, "error": str(e)}
    out = {"ok": True, "passphrase": passphrase, "length": len(passphrase)}
    if body.stats:
        out["stats"] = password_stats(passphrase)
    return out


@app.get("/api/passphrase")
def api_passphrase(
    length: int = Query(20, ge=MIN_LENGTH, le=MAX_LENGTH),
    separator: str = Query("-", max_length=16),
    capitalise: bool = True,
    add_number: bool = True,
    stats: bool = False,
):
    """Generate one passphrase from query parameters."""
    return _generate(PassphraseRequest(
        length=length,
        separator=separator,
        capitalise=capitalise,
        add_number=add_number,
        stats=stats,
    ))


@app.post("/api/passphrase")
def api_passphrase_post(body: PassphraseRequest):
    """Same as GET, options in a JSON body."""
    return _generate(body)
