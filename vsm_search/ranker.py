"""
Document weighting, scoring and ranking module.

This module handles TF-IDF computation and cosine similarity ranking
for document retrieval.

IDF formula: idf = log2(N / df)
TF weighting: w = tf * idf / max_tf  (max_tf taken over the document)
"""

import heapq
import logging
import math
from collections import defaultdict
from types import MappingProxyType
from typing import AbstractSet, Dict, List, Mapping, Sequence, Tuple

from .indexer import Document

logger = logging.getLogger(__name__)


class Ranker:
    """Handles document ranking using TF-IDF and cosine similarity."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def compute_idf(self, posting_lists: Sequence[Mapping[int, int]], N: int) -> Tuple[float, ...]:
        """
        Compute IDF per term ID.

        Args:
            posting_lists: Posting lists indexed by term ID.
            N: Total number of documents.

        Returns:
            Tuple of IDF scores indexed by term ID.
        """
        # Every posting list holds at least the document the term came from.
        return tuple(math.log2(N / len(plist)) for plist in posting_lists)

    def compute_weights(self, documents: Sequence[Document], dictionary: Mapping[str, int],
                        idf: Sequence[float]) -> Tuple[Mapping[str, float], ...]:
        """
        Compute the sparse TF-IDF weight vector of every document.

        Empty documents get an empty vector.

        Args:
            documents: All documents of the collection.
            dictionary: Term -> term ID dictionary.
            idf: IDF scores indexed by term ID.

        Returns:
            Tuple indexed by doc ID of read-only term -> weight maps.
        """
        weights = []
        for doc in documents:
            if doc.is_empty():
                logger.debug("Document %d has no terms, skipping weighting", doc.doc_id)
                weights.append(MappingProxyType({}))
                continue

            max_tf = doc.max_term_frequency()
            vec = {}
            for term, positions in doc.terms.items():
                vec[term] = len(positions) * idf[dictionary[term]] / max_tf
            weights.append(MappingProxyType(vec))

        return tuple(weights)

    def compute_norms(self, weights: Sequence[Mapping[str, float]]) -> Tuple[float, ...]:
        """
        Compute the L2 norm of every document weight vector.

        Args:
            weights: Weight vectors indexed by doc ID.

        Returns:
            Tuple of norms indexed by doc ID.
        """
        return tuple(math.sqrt(sum(w * w for w in vec.values())) for vec in weights)

    def cosine_similarity(self, query_terms: AbstractSet[str], dictionary: Mapping[str, int],
                          posting_lists: Sequence[Mapping[int, int]],
                          weights: Sequence[Mapping[str, float]],
                          norms: Sequence[float]) -> Dict[int, float]:
        """
        Score documents against a query with unit query term weights.

        Args:
            query_terms: Set of query terms.
            dictionary: Term -> term ID dictionary.
            posting_lists: Posting lists indexed by term ID.
            weights: Weight vectors indexed by doc ID.
            norms: L2 norms indexed by doc ID.

        Returns:
            Dict mapping doc ID to score; documents with no nonzero
            contribution are absent.
        """
        if not query_terms:
            return {}

        q_norm = math.sqrt(len(query_terms))
        scores = defaultdict(float)
        for term in query_terms:
            term_id = dictionary.get(term)
            if term_id is None:
                continue
            for did in posting_lists[term_id]:
                dn = norms[did]
                w = weights[did][term]
                if dn == 0.0 or w == 0.0:
                    continue
                scores[did] += w / (dn * q_norm)

        return dict(scores)

    def rank(self, scores: Mapping[int, float], topk: int = None) -> List[Tuple[int, float]]:
        """
        Get the highest scoring documents.

        Args:
            scores: doc ID -> score mapping.
            topk: Number of top results to return.

        Returns:
            List of (doc_id, score) tuples sorted by score descending, then
            doc ID ascending. Never longer than the number of scored documents.
        """
        if topk is None:
            topk = self.config.TOP_K_RESULTS

        k = max(0, min(topk, len(scores)))
        if k == 0:
            return []
        return heapq.nsmallest(k, scores.items(), key=lambda x: (-x[1], x[0]))

    def top_keywords(self, doc_weights: Mapping[str, float], dictionary: Mapping[str, int],
                     topn: int = None) -> List[Tuple[str, float]]:
        """
        Get the highest weighted terms of a document.

        Args:
            doc_weights: term -> weight map of one document.
            dictionary: Term -> term ID dictionary, used to break ties in
                first-seen order.
            topn: Number of terms to return.

        Returns:
            List of (term, weight) tuples sorted by weight descending.
        """
        if topn is None:
            topn = self.config.TOP_KEYWORDS

        n = max(0, min(topn, len(doc_weights)))
        if n == 0:
            return []
        return heapq.nsmallest(n, doc_weights.items(), key=lambda x: (-x[1], dictionary[x[0]]))

    def summarize_ranking_stats(self, idf: Sequence[float], norms: Sequence[float]) -> None:
        """
        Print summary statistics about the ranking system.

        Args:
            idf: IDF scores indexed by term ID.
            norms: L2 norms indexed by doc ID.
        """
        if not idf or not norms:
            print("No ranking statistics available.")
            return

        print("\n=== Ranking Statistics ===")
        print(f"Number of terms with IDF scores: {len(idf)}")
        print(f"Number of documents with norms: {len(norms)}")

        print(f"IDF range: {min(idf):.3f} - {max(idf):.3f}")
        print(f"Average IDF: {sum(idf) / len(idf):.3f}")

        print(f"Document norm range: {min(norms):.3f} - {max(norms):.3f}")
        print(f"Average document norm: {sum(norms) / len(norms):.3f}")
        zero_norms = sum(1 for n in norms if n == 0.0)
        if zero_norms:
            print(f"Documents with zero norm: {zero_norms}")
