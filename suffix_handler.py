#!/usr/bin/env python3
"""Suffix-based tag guesser for words the lexicon cannot resolve.

Words are split into four surface-shape categories (see ``word_shape``) and
each category gets its own suffix model.  Only rare words train a model:
a word goes into its category's model when its total corpus frequency is at
or below that category's cutoff.  This handler has no fallback; the suffix
model always produces an estimate, even for an unseen suffix.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Collection, Dict, Mapping, Optional, Protocol

from suffix_tree import WordSuffixTree, calculate_theta
from tagger_model import END_TAG, START_TAG, TaggerModel
from word_shape import CATEGORIES, Category, classify

logger = logging.getLogger(__name__)


class SuffixModel(Protocol):
    def add_word(self, word: str, tag_freqs: Mapping[int, int]) -> None: ...

    def suffix_tag_probs(self, word: str) -> Mapping[int, float]: ...


SuffixModelFactory = Callable[[Mapping[int, int], Collection[int], float, int], SuffixModel]


@dataclass(frozen=True)
class CutoffConfig:
    max_suffix_length: int
    upper_max_freq: int
    lower_max_freq: int
    dash_max_freq: int
    cardinal_max_freq: int
    max_tags: int

    def cutoff_for(self, category: Category) -> int:
        if category is Category.CARDINAL:
            return self.cardinal_max_freq
        if category is Category.CAPITALIZED:
            return self.upper_max_freq
        if category is Category.HYPHENATED:
            return self.dash_max_freq
        return self.lower_max_freq


def rank_tag_probs(tag_probs: Mapping[int, float], max_tags: int) -> Dict[int, float]:
    """
    Keep the ``max_tags`` most probable tags and return their log-probabilities.
    Ordered by descending probability, ties by ascending tag number; zero
    probabilities come out as -inf.
    """
    ranked = sorted(tag_probs.items(), key=lambda kv: (-kv[1], kv[0]))
    return {
        tag: math.log(prob) if prob > 0.0 else float("-inf")
        for tag, prob in ranked[:max(max_tags, 0)]
    }


class SuffixWordHandler:
    def __init__(
        self,
        model: TaggerModel,
        config: CutoffConfig,
        tree_factory: SuffixModelFactory = WordSuffixTree,
    ) -> None:
        self.config = config

        skip = {
            model.tag_numbers[token]
            for token in (START_TAG, END_TAG)
            if token in model.tag_numbers
        }
        theta = calculate_theta(model.uni_grams, skip)
        logger.debug("Suffix theta: %.6f (skipping tags %s)", theta, sorted(skip))

        self._trees: Dict[Category, SuffixModel] = {
            category: tree_factory(model.uni_grams, skip, theta, config.max_suffix_length)
            for category in CATEGORIES
        }
        self.trained_counts: Dict[Category, int] = {category: 0 for category in CATEGORIES}

        for word, tag_freqs in model.lexicon.items():
            # start/end markers are not words
            if word in (START_TAG, END_TAG):
                continue
            # incorrect lexicon entry
            if not word or not tag_freqs:
                continue

            word_freq = sum(tag_freqs.values())
            category = classify(word)
            if word_freq > config.cutoff_for(category):
                continue

            self._trees[category].add_word(word, tag_freqs)
            self.trained_counts[category] += 1

        logger.debug(
            "Suffix training: %s",
            ", ".join(f"{c.value}={n}" for c, n in self.trained_counts.items()),
        )

    def category_of(self, word: str) -> Category:
        return classify(word)

    def tag_probs(self, word: str) -> Dict[int, float]:
        tree = self._trees[classify(word)]
        return rank_tag_probs(tree.suffix_tag_probs(word), self.config.max_tags)

    def best_tag(self, word: str) -> Optional[int]:
        return next(iter(self.tag_probs(word)), None)
