"""Tests for the TnT-style suffix trie."""

import math

import pytest

from suffix_tree import WordSuffixTree, calculate_theta, tag_distribution

START, NN, VBG, NNS, END = range(5)
SKIP = {START, END}
UNI_GRAMS = {START: 10, NN: 50, VBG: 20, NNS: 30, END: 10}


def make_tree(theta=0.1, max_suffix_length=3):
    return WordSuffixTree(UNI_GRAMS, SKIP, theta, max_suffix_length)


class TestTheta:
    def test_uniform_distribution_has_zero_theta(self):
        assert calculate_theta({1: 5, 2: 5, 3: 5}, set()) == 0.0

    def test_sample_standard_deviation(self):
        # P = 0.5, 0.2, 0.3 -> mean 1/3
        mean = 1 / 3
        expected = math.sqrt(((0.5 - mean) ** 2 + (0.2 - mean) ** 2 + (0.3 - mean) ** 2) / 2)
        assert calculate_theta(UNI_GRAMS, SKIP) == pytest.approx(expected)

    def test_skip_tags_are_ignored(self):
        assert calculate_theta(UNI_GRAMS, SKIP) == calculate_theta({NN: 50, VBG: 20, NNS: 30}, set())

    def test_single_tag(self):
        assert calculate_theta({NN: 7}, set()) == 0.0

    def test_empty(self):
        assert calculate_theta({}, set()) == 0.0


def test_tag_distribution_drops_skip_and_zero_tags():
    dist = tag_distribution({START: 4, NN: 3, VBG: 1, NNS: 0}, {START})
    assert dist == {NN: pytest.approx(0.75), VBG: pytest.approx(0.25)}


class TestSuffixTagProbs:
    def test_untrained_tree_returns_flat_scores(self):
        probs = make_tree().suffix_tag_probs("anything")
        assert set(probs) == {NN, VBG, NNS}
        for value in probs.values():
            assert value == pytest.approx(1.0)

    def test_unseen_suffix_falls_back_to_prior(self):
        tree = make_tree()
        tree.add_word("running", {VBG: 2})
        for value in tree.suffix_tag_probs("zzz").values():
            assert value == pytest.approx(1.0)

    def test_trained_suffix_shifts_mass(self):
        tree = make_tree()
        tree.add_word("running", {VBG: 2})
        tree.add_word("jumping", {VBG: 1})
        tree.add_word("table", {NN: 1})
        tree.add_word("cats", {NNS: 1})

        probs = tree.suffix_tag_probs("flying")

        assert max(probs, key=probs.get) == VBG
        assert probs[VBG] > 1.0
        assert probs[NN] < 1.0

    def test_partial_match_uses_matched_part(self):
        tree = make_tree()
        tree.add_word("dogs", {NNS: 1})
        tree.add_word("bus", {NN: 1})

        probs = tree.suffix_tag_probs("trees")

        # "s" is shared by both words, "es" is unseen; P_ML(NN|s) equals P(NN)
        assert probs[NNS] > 1.0
        assert probs[NN] == pytest.approx(1.0)
        assert probs[VBG] < 1.0

    def test_single_step_update(self):
        theta = 0.5
        tree = make_tree(theta=theta, max_suffix_length=1)
        tree.add_word("ab", {NN: 3, VBG: 1})

        probs = tree.suffix_tag_probs("xb")

        prior = {NN: 0.5, VBG: 0.2, NNS: 0.3}
        ml = {NN: 0.75, VBG: 0.25, NNS: 0.0}
        for tag in (NN, VBG, NNS):
            expected = (ml[tag] + theta * prior[tag]) / (1 + theta) / prior[tag]
            assert probs[tag] == pytest.approx(expected)

    def test_suffix_length_limits_depth(self):
        tree = make_tree(max_suffix_length=1)
        tree.add_word("xyz", {NN: 1})
        # only "z" is stored, so "az" matches as well as "yz"
        assert tree.suffix_tag_probs("az") == tree.suffix_tag_probs("yz")

    def test_zero_suffix_length_ignores_word(self):
        tree = make_tree(max_suffix_length=0)
        tree.add_word("running", {VBG: 5})
        for value in tree.suffix_tag_probs("running").values():
            assert value == pytest.approx(1.0)

    def test_query_does_not_mutate(self):
        tree = make_tree()
        tree.add_word("running", {VBG: 2})
        first = tree.suffix_tag_probs("singing")
        assert tree.suffix_tag_probs("singing") == first
        assert len(tree) == 1
