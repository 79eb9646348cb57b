#!/usr/bin/env python3
"""Suffix trie that estimates tag probabilities from word endings.

This follows the suffix guesser of the TnT tagger (Brants 2000).  Words are
inserted from their last character backwards, up to ``max_suffix_length``
characters.  At query time the estimate starts from the unigram tag
distribution P(t) and is refined once per matched suffix character:

    P(t | s_i) = (P_ML(t | s_i) + theta * P(t | s_{i-1})) / (1 + theta)

The returned score for a tag is P(t | s) / P(t), which is proportional to
P(s | t) and can stand in for an emission probability.
"""
from __future__ import annotations

import math
from collections import Counter
from typing import Collection, Dict, Mapping


def tag_distribution(uni_grams: Mapping[int, int], skip_tags: Collection[int]) -> Dict[int, float]:
    """Unigram P(t) over the tags not in ``skip_tags`` (zero-frequency tags dropped)."""
    kept = {tag: freq for tag, freq in uni_grams.items() if tag not in skip_tags and freq > 0}
    total = sum(kept.values())
    if total == 0:
        return {}
    return {tag: freq / total for tag, freq in kept.items()}


def calculate_theta(uni_grams: Mapping[int, int], skip_tags: Collection[int]) -> float:
    """Sample standard deviation of the unigram tag probabilities."""
    probs = list(tag_distribution(uni_grams, skip_tags).values())
    if len(probs) < 2:
        return 0.0
    p_avg = sum(probs) / len(probs)
    variance = sum((p - p_avg) ** 2 for p in probs) / (len(probs) - 1)
    return math.sqrt(variance)


class _SuffixNode:
    __slots__ = ("tag_freqs", "total", "children")

    def __init__(self) -> None:
        self.tag_freqs: Counter[int] = Counter()
        self.total = 0
        self.children: Dict[str, _SuffixNode] = {}

    def add(self, tag_freqs: Mapping[int, int]) -> None:
        for tag, freq in tag_freqs.items():
            self.tag_freqs[tag] += freq
            self.total += freq


class WordSuffixTree:
    def __init__(
        self,
        uni_grams: Mapping[int, int],
        skip_tags: Collection[int],
        theta: float,
        max_suffix_length: int,
    ) -> None:
        self.theta = theta
        self.max_suffix_length = max_suffix_length
        self.tag_probs = tag_distribution(uni_grams, skip_tags)
        self.word_count = 0
        self._root = _SuffixNode()

    def _suffix(self, word: str) -> str:
        if self.max_suffix_length <= 0:
            return ""
        return word[-self.max_suffix_length:]

    def add_word(self, word: str, tag_freqs: Mapping[int, int]) -> None:
        node = self._root
        node.add(tag_freqs)
        for ch in reversed(self._suffix(word)):
            node = node.children.setdefault(ch, _SuffixNode())
            node.add(tag_freqs)
        self.word_count += 1

    def suffix_tag_probs(self, word: str) -> Dict[int, float]:
        theta = self.theta
        probs = dict(self.tag_probs)
        node = self._root
        for ch in reversed(self._suffix(word)):
            node = node.children.get(ch)
            if node is None or node.total == 0:
                break
            probs = {
                tag: (node.tag_freqs.get(tag, 0) / node.total + theta * p) / (1.0 + theta)
                for tag, p in probs.items()
            }
        # Bayesian inversion: P(t|s) / P(t) ~ P(s|t)
        return {tag: p / self.tag_probs[tag] for tag, p in probs.items()}

    def __len__(self) -> int:
        return self.word_count
