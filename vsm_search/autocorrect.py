"""
Auto-correction module for query processing.

This module replaces query terms missing from the term dictionary with the
closest dictionary term, using Levenshtein distance and collection frequency.
"""

import logging
from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from rapidfuzz.distance import Levenshtein

logger = logging.getLogger(__name__)


class AutoCorrect:
    """Handles query auto-correction using edit distance and frequency."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def build_len_index(self, vocab: Iterable[str]) -> Dict[int, List[str]]:
        """
        Build a length-based index for efficient candidate lookup.

        Args:
            vocab: Vocabulary terms.

        Returns:
            Dictionary mapping term length to list of terms of that length.
        """
        index = defaultdict(list)
        for w in vocab:
            index[len(w)].append(w)
        return index

    def _candidate_words(self, word: str, by_len_index: Mapping[int, List[str]],
                         max_len_diff: int) -> List[str]:
        """Collect vocabulary terms whose length is within max_len_diff of word."""
        L = len(word)
        candidates = []
        for dL in range(-max_len_diff, max_len_diff + 1):
            bucket = by_len_index.get(L + dL)
            if bucket:
                candidates.extend(bucket)
        return candidates

    def suggest_correction(self, word: str, dictionary: Mapping[str, int], term_freq: Mapping[str, int],
                           by_len_index: Mapping[int, List[str]],
                           max_dist: int = None) -> Tuple[Optional[str], Optional[int]]:
        """
        Suggest a correction for a word.

        Ties on distance go to the more frequent term, then to the term seen
        first in the collection.

        Args:
            word: Word to correct.
            dictionary: Term -> term ID dictionary.
            term_freq: Collection frequency per term.
            by_len_index: Length-based index of the dictionary.
            max_dist: Maximum edit distance to consider.

        Returns:
            Tuple of (best_term, best_distance) or (None, None) if no good match.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE

        best_key, best_word, best_dist = None, None, None
        for cand in self._candidate_words(word, by_len_index, max_dist):
            dist = Levenshtein.distance(word, cand, score_cutoff=max_dist)
            if dist > max_dist:
                continue
            key = (dist, -term_freq.get(cand, 0), dictionary[cand])
            if best_key is None or key < best_key:
                best_key, best_word, best_dist = key, cand, dist

        return best_word, best_dist

    def autocorrect_query_terms(self, terms: Iterable[str], dictionary: Mapping[str, int],
                                term_freq: Mapping[str, int], by_len_index: Mapping[int, List[str]],
                                max_dist: int = None) -> Tuple[FrozenSet[str], List[Tuple[str, str]], List[str]]:
        """
        Auto-correct the terms of a query.

        Args:
            terms: Query terms.
            dictionary: Term -> term ID dictionary.
            term_freq: Collection frequency per term.
            by_len_index: Length-based index of the dictionary.
            max_dist: Maximum edit distance to consider.

        Returns:
            Tuple of (corrected_terms, changes, oov_no_suggest).
            - corrected_terms: Set of corrected query terms
            - changes: List of (original, corrected) pairs
            - oov_no_suggest: List of terms with no viable suggestions
        """
        corrected = set()
        changes = []
        oov_no_suggest = []

        for w in sorted(terms):
            if w in dictionary:
                corrected.add(w)
                continue

            suggestion, dist = self.suggest_correction(w, dictionary, term_freq, by_len_index, max_dist=max_dist)
            if suggestion is not None:
                corrected.add(suggestion)
                changes.append((w, suggestion))
                logger.info("Corrected query term %r -> %r (distance %d)", w, suggestion, dist)
            else:
                corrected.add(w)
                oov_no_suggest.append(w)

        return frozenset(corrected), changes, oov_no_suggest
