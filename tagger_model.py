#!/usr/bin/env python3
"""Lexicon and unigram tables that the suffix guesser trains from.

Tags are numbered once, when the model is built.  START_TAG and END_TAG are
synthetic tags: every sentence contributes one of each to the unigram counts,
and they appear in the lexicon as pseudo-words spelled like the tags
themselves so that consumers can recognise and skip them.
"""
from __future__ import annotations

import logging
from collections import Counter, defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

Sentence = List[Tuple[str, str]]
START_TAG = "<s>"
END_TAG = "</s>"

logger = logging.getLogger(__name__)


@dataclass
class TaggerModel:
    tag_numbers: Dict[str, int]
    lexicon: Dict[str, Dict[int, int]]
    uni_grams: Dict[int, int]
    sentence_count: int = 0

    @property
    def tag_names(self) -> Dict[int, str]:
        return {number: tag for tag, number in self.tag_numbers.items()}

    def __contains__(self, word: str) -> bool:
        return word in self.lexicon


def stable_tag_order(tag_count: Counter[str]) -> List[str]:
    """
    Deterministic tag order: START first, END last, others by
    descending frequency then alphabetical for ties.
    """
    inner = [t for t in tag_count if t not in (START_TAG, END_TAG)]
    inner.sort(key=lambda t: (-tag_count[t], t))
    return [START_TAG] + inner + [END_TAG]


def read_tagged_corpus(path: Path) -> List[Sentence]:
    sentences: List[Sentence] = []
    current: Sentence = []
    with path.open("r", encoding="utf8") as fh:
        for line in fh:
            line = line.rstrip("\n")
            if not line:
                if current:
                    sentences.append(current)
                    current = []
                continue
            try:
                word, tag = line.split("\t")
            except ValueError:
                # some files use spaces instead of tabs; fall back gracefully.
                parts = line.split()
                if len(parts) != 2:
                    raise ValueError(f"Unexpected line format: {line!r}")
                word, tag = parts
            current.append((word, tag))
    if current:
        sentences.append(current)
    return sentences


def build_model(sentences: Iterable[Sentence]) -> TaggerModel:
    word_tag_counts: Dict[str, Counter[str]] = defaultdict(Counter)
    tag_counts: Counter[str] = Counter()
    sentence_count = 0

    for sentence in sentences:
        if not sentence:
            continue
        sentence_count += 1
        for word, tag in sentence:
            word_tag_counts[word][tag] += 1
            tag_counts[tag] += 1

    # one start/end marker per sentence
    tag_counts[START_TAG] += sentence_count
    tag_counts[END_TAG] += sentence_count
    if sentence_count:
        word_tag_counts[START_TAG][START_TAG] += sentence_count
        word_tag_counts[END_TAG][END_TAG] += sentence_count

    tag_numbers = {tag: number for number, tag in enumerate(stable_tag_order(tag_counts))}
    lexicon = {
        word: {tag_numbers[tag]: count for tag, count in counts.items()}
        for word, counts in word_tag_counts.items()
    }
    uni_grams = {tag_numbers[tag]: count for tag, count in tag_counts.items()}

    logger.debug(
        "Built model: %d sentences, %d words, %d tags (incl. %s/%s)",
        sentence_count, len(lexicon), len(tag_numbers), START_TAG, END_TAG,
    )
    return TaggerModel(
        tag_numbers=tag_numbers,
        lexicon=lexicon,
        uni_grams=uni_grams,
        sentence_count=sentence_count,
    )


def load_model(path: Path) -> TaggerModel:
    return build_model(read_tagged_corpus(path))
