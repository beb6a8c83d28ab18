"""
Cut a full dictionary down to a five-letter word list.

Features:
- Keeps only lines that are five letters a-z (case-folded to lowercase).
- Preserves original order.
- Optional stable de-duplication (first occurrence wins).

Usage:
    python -m script.filter_words --in words_alpha.txt --out data/words_5.txt --dedupe
"""

import argparse
from pathlib import Path

from wordsieve.datasets.io import filter_wordlist, load_corpus, write_lines


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def main():
    ap = argparse.ArgumentParser(description="Keep only the five-letter words of a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file (one word per line)")
    ap.add_argument("--out", dest="out", required=True, help="output file")
    ap.add_argument("--dedupe", action="store_true", help="drop repeated words (keep first)")
    args = ap.parse_args()

    inp = Path(args.inp)
    if not inp.exists():
        raise FileNotFoundError(inp)

    if args.dedupe:
        words = unique_preserve_order(load_corpus(inp))
        write_lines(words, args.out)
        print(f"Input: {inp} -> Output: {args.out} ({len(words)} unique words)")
    else:
        read, written = filter_wordlist(inp, args.out)
        print(f"Input: {inp} ({read} lines) -> Output: {args.out} ({written} words)")


if __name__ == "__main__":
    main()
