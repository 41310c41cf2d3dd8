"""
Scrape past Wordle answers from wordlehints.co.uk and write an answers list.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Keeps the final UPPERCASE token of each row as the answer.
- Lowercases, validates as N-letter words, de-duplicates preserving calendar
  order, then optionally merges with an existing list.

Usage:
    python -m script.fetch_answers --out wordler/datasets/data/answers_5.txt
    # keep words already in the file and add the new ones at the end:
    python -m script.fetch_answers --merge --out wordler/datasets/data/answers_5.txt
"""

import argparse
import logging
import re
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from wordler.datasets import load_words, write_lines
from wordler.engine import InvalidWord, Word

log = logging.getLogger("fetch_answers")

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]+)\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_answers(url: str = URL, N: int = 5) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    soup = BeautifulSoup(r.text, "html.parser")
    text = soup.get_text("\n", strip=True)
    answers = []
    for m in ROW_RE.finditer(text):
        try:
            answers.append(Word(m.group(2).lower(), N))
        except InvalidWord:
            log.warning("skipping %r (%s)", m.group(2), m.group(1))
    return unique_preserve_order(answers)


def main():
    ap = argparse.ArgumentParser(description="Fetch past Wordle answers into a word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--N", type=int, default=5)
    ap.add_argument("--out", default="wordler/datasets/data/answers_5.txt")
    ap.add_argument("--merge", action="store_true", help="keep the words already in --out")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    answers = fetch_answers(args.url, args.N)
    log.info("fetched %d answers from %s", len(answers), args.url)
    if args.merge and Path(args.out).exists():
        answers = unique_preserve_order(load_words(args.out, args.N) + answers)
    if args.sort:
        answers = sorted(answers)

    write_lines(answers, args.out)
    print(f"Wrote {len(answers)} unique answers -> {args.out}")


if __name__ == "__main__":
    main()
