"""
Build and cache the word index from the raw word list.
Run once (or when the word list changes): python -m passgen.migrate
Downloads the EFF large word list on first run unless PASSGEN_WORD_LIST is set.
"""
import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

from .corpus import DATA_DIR
from .words import migrate_word_list


def main() -> None:
    load_dotenv(DATA_DIR.parent / ".env")
    logging.basicConfig(level=logging.INFO, format="[passgen] %(message)s")
    p = argparse.ArgumentParser(description="Convert a tab-separated word list into the cached JSON index.")
    p.add_argument("--source", type=Path, help="Raw word list (default: PASSGEN_WORD_LIST or data/eff_wordlist.txt)")
    p.add_argument("--target", type=Path, help="Output JSON (default: PASSGEN_WORDS_JSON or data/words.json)")
    args = p.parse_args()

    index = migrate_word_list(args.source, args.target)
    stats = index.stats
    print(f"  {len(index.words)} words, lengths {stats.shortest_word_length}-{stats.longest_word_length}")
    for size in stats.available_word_sizes:
        print(f"  {size:>3}: {len(index.words_by_length[size])}")


if __name__ == "__main__":
    main()
