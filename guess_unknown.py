#!/usr/bin/env python3
# guess_unknown.py
# Train the suffix guesser on a tagged corpus, then guess tags for words
# and/or score it on the out-of-vocabulary tokens of a dev corpus.
from __future__ import annotations

import argparse
import logging
from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from suffix_handler import CutoffConfig, SuffixWordHandler
from tagger_model import Sentence, TaggerModel, build_model, read_tagged_corpus
from word_shape import CATEGORIES

MAX_SUFFIX_LENGTH = 2
UPPER_MAX_FREQ = 2
LOWER_MAX_FREQ = 8
DASH_MAX_FREQ = 4
CARDINAL_MAX_FREQ = 10
MAX_TAGS = 10


def evaluate_unknown(
    handler: SuffixWordHandler,
    model: TaggerModel,
    sentences: Sequence[Sentence],
) -> Dict[str, Counter[str]]:
    """
    Top-1 accuracy of the guesser on dev tokens missing from the training lexicon.
    Returns {"total": Counter(tokens=, correct=), <category>: Counter(...), ...}
    """
    report: Dict[str, Counter[str]] = {"total": Counter()}
    for category in CATEGORIES:
        report[category.value] = Counter()
    tag_numbers = model.tag_numbers

    for sentence in sentences:
        for word, gold in sentence:
            if not word or word in model:
                continue
            bucket = report[handler.category_of(word).value]
            predicted = handler.best_tag(word)
            hit = predicted is not None and predicted == tag_numbers.get(gold)
            for counter in (report["total"], bucket):
                counter["tokens"] += 1
                if hit:
                    counter["correct"] += 1
    return report


def print_guesses(handler: SuffixWordHandler, model: TaggerModel, words: Sequence[str]) -> None:
    tag_names = model.tag_names
    for word in words:
        if not word:
            continue
        print(f"{word}\t[{handler.category_of(word).value}]")
        for tag, log_prob in handler.tag_probs(word).items():
            print(f"  {tag_names.get(tag, tag)}\t{log_prob:.4f}")


def print_report(report: Dict[str, Counter[str]]) -> None:
    print("=== OOV suffix guesser (top-1) ===")
    for name, counts in report.items():
        tokens = counts["tokens"]
        acc = 100.0 * counts["correct"] / max(1, tokens)
        print(f"  {name:>11s}: {counts['correct']}/{tokens} ({acc:.2f}%)")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Suffix-based tag guesser for unknown words.")
    parser.add_argument("--train", type=Path, required=True, help="Tagged training corpus")
    parser.add_argument("--dev", type=Path, help="Tagged dev corpus to score OOV guesses on")
    parser.add_argument("words", nargs="*", help="Words to guess tags for")
    parser.add_argument(
        "--max-suffix-length",
        type=int,
        default=MAX_SUFFIX_LENGTH,
        help="Longest word ending the suffix models look at.",
    )
    parser.add_argument(
        "--upper-max-freq",
        type=int,
        default=UPPER_MAX_FREQ,
        help="Capitalized words at or below this frequency train the suffix model.",
    )
    parser.add_argument(
        "--lower-max-freq",
        type=int,
        default=LOWER_MAX_FREQ,
        help="Lowercase words at or below this frequency train the suffix model.",
    )
    parser.add_argument(
        "--dash-max-freq",
        type=int,
        default=DASH_MAX_FREQ,
        help="Hyphenated words at or below this frequency train the suffix model.",
    )
    parser.add_argument(
        "--cardinal-max-freq",
        type=int,
        default=CARDINAL_MAX_FREQ,
        help="Cardinals at or below this frequency train the suffix model.",
    )
    parser.add_argument(
        "--max-tags",
        type=int,
        default=MAX_TAGS,
        help="Maximum number of tags returned per word.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log training details")
    return parser


def config_from_args(args: argparse.Namespace) -> CutoffConfig:
    for name in ("max_suffix_length", "upper_max_freq", "lower_max_freq",
                 "dash_max_freq", "cardinal_max_freq", "max_tags"):
        if getattr(args, name) < 0:
            raise SystemExit(f"--{name.replace('_', '-')} must be non-negative")
    return CutoffConfig(
        max_suffix_length=args.max_suffix_length,
        upper_max_freq=args.upper_max_freq,
        lower_max_freq=args.lower_max_freq,
        dash_max_freq=args.dash_max_freq,
        cardinal_max_freq=args.cardinal_max_freq,
        max_tags=args.max_tags,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(args)

    model = build_model(read_tagged_corpus(args.train))
    handler = SuffixWordHandler(model, config)

    print_guesses(handler, model, args.words)
    if args.dev:
        print_report(evaluate_unknown(handler, model, read_tagged_corpus(args.dev)))


if __name__ == "__main__":
    main()
