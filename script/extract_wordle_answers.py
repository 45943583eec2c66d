"""
Scrape past Wordle answers into an answers list for apps/cli/simulate.py.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Lowercases, keeps only playable words, de-duplicates in calendar order.

Usage:
    python -m script.extract_wordle_answers --out data/answers_5.txt
    python -m script.extract_wordle_answers --sort --out data/answers_5.txt
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from wordle_assistant.datasets import playable_words, write_lines

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def parse_answers(html: str) -> list[str]:
    text = BeautifulSoup(html, "html.parser").get_text("\n", strip=True)
    return playable_words(m.group(2).lower() for m in ROW_RE.finditer(text))


def fetch_answers(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return parse_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Extract unique Wordle answers")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/answers_5.txt")
    ap.add_argument("--sort", action="store_true",
                    help="sort alphabetically instead of keeping calendar order")
    args = ap.parse_args()

    answers = fetch_answers(args.url)
    if args.sort:
        answers = sorted(answers)

    path = write_lines(answers, args.out)
    print(f"Wrote {len(answers)} unique answers -> {path}")


if __name__ == "__main__":
    main()
