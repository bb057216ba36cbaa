"""
Immutable text collection and query collection.

A TextCollection is built in one pass from the token streams of its
documents: documents and term dictionary first, then posting lists,
weights and norms. After construction everything is read-only, so one
collection can be shared freely between readers.
"""

import logging
from typing import Dict, FrozenSet, Iterable, List, Mapping, NamedTuple, Optional, Tuple

from .indexer import Document, Indexer
from .ranker import Ranker
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)

Query = FrozenSet[str]


class EmptyCollectionError(ValueError):
    """Raised when a collection is built from zero documents."""


class DocumentReport(NamedTuple):
    """Reporting data for one document."""

    doc_id: int
    keywords: List[Tuple[str, float, Dict[int, Tuple[int, ...]]]]
    unique_terms: int
    norm: float


class TextCollection:
    """
    Static vector-space index over a list of documents.

    Args:
        doc_tokens: Per document, its raw word tokens in order.
        config: Configuration object.
        tokenizer: Term filter to apply to the tokens. Defaults to a
            Tokenizer built from config.

    Raises:
        EmptyCollectionError: If there are no documents.
    """

    def __init__(self, doc_tokens: Iterable[Iterable[str]], config, tokenizer: Optional[Tokenizer] = None):
        self.config = config
        self.tokenizer = tokenizer or Tokenizer(config)
        self.indexer = Indexer(config)
        self.ranker = Ranker(config)

        doc_terms = (self.tokenizer.document_terms(tokens) for tokens in doc_tokens)
        documents, self._dictionary = self.indexer.build_documents(doc_terms)
        if not documents:
            raise EmptyCollectionError("Cannot build a text collection from zero documents")
        self._documents = tuple(documents)

        self._plists = self.indexer.build_posting_lists(self._documents, self._dictionary)
        self._idf = self.ranker.compute_idf(self._plists, len(self._documents))
        self._weights = self.ranker.compute_weights(self._documents, self._dictionary, self._idf)
        self._norms = self.ranker.compute_norms(self._weights)

        logger.info("Built collection: %d documents, %d terms",
                    len(self._documents), len(self._dictionary))

    @property
    def documents(self) -> Tuple[Document, ...]:
        return self._documents

    @property
    def dictionary(self) -> Mapping[str, int]:
        return self._dictionary

    @property
    def posting_lists(self) -> Tuple[Mapping[int, int], ...]:
        return self._plists

    @property
    def weights(self) -> Tuple[Mapping[str, float], ...]:
        return self._weights

    @property
    def norms(self) -> Tuple[float, ...]:
        return self._norms

    @property
    def idf_scores(self) -> Tuple[float, ...]:
        return self._idf

    @property
    def num_documents(self) -> int:
        return len(self._documents)

    def term_id(self, term: str) -> Optional[int]:
        return self._dictionary.get(term)

    def idf(self, term: str) -> float:
        """Get the IDF of a term; unknown terms have IDF 0."""
        term_id = self._dictionary.get(term)
        if term_id is None:
            return 0.0
        return self._idf[term_id]

    def similarity(self, query: Query) -> Dict[int, float]:
        """
        Compute cosine similarity scores for a query.

        Args:
            query: Set of query terms.

        Returns:
            Dict mapping doc ID to score, only for documents that share a
            term with the query.
        """
        return self.ranker.cosine_similarity(
            query, self._dictionary, self._plists, self._weights, self._norms
        )

    def rank(self, query: Query, top_k: Optional[int] = None) -> List[Tuple[int, float]]:
        """
        Rank documents for a query.

        Args:
            query: Set of query terms.
            top_k: Number of results to return. If None, uses config default.

        Returns:
            List of (doc_id, score) tuples, best first.
        """
        return self.ranker.rank(self.similarity(query), topk=top_k)

    def document_report(self, doc_id: int, top_n: Optional[int] = None) -> DocumentReport:
        """
        Collect the reporting data for one document.

        Args:
            doc_id: Document ID.
            top_n: Number of keywords to report. If None, uses config default.

        Returns:
            DocumentReport whose keywords are (term, weight, postings) where
            postings maps every doc ID containing the term to the term's
            positions in that document.

        Raises:
            IndexError: If doc_id is not a document of this collection.
        """
        if not 0 <= doc_id < len(self._documents):
            raise IndexError(f"Document {doc_id} out of range (0..{len(self._documents) - 1})")

        keywords = []
        for term, weight in self.ranker.top_keywords(self._weights[doc_id], self._dictionary, topn=top_n):
            plist = self._plists[self._dictionary[term]]
            excerpt = {did: self._documents[did].terms[term] for did in plist}
            keywords.append((term, weight, excerpt))

        return DocumentReport(
            doc_id=doc_id,
            keywords=keywords,
            unique_terms=self._documents[doc_id].unique_terms,
            norm=self._norms[doc_id],
        )

    def get_stats(self) -> Dict[str, float]:
        """
        Get statistics about the built collection.

        Returns:
            Dictionary containing various statistics.
        """
        N = len(self._documents)
        return {
            "num_documents": N,
            "num_terms": len(self._dictionary),
            "num_postings": sum(len(plist) for plist in self._plists),
            "empty_documents": sum(1 for doc in self._documents if doc.is_empty()),
            "avg_unique_terms": sum(doc.unique_terms for doc in self._documents) / N,
        }


class QueryCollection:
    """
    Ordered list of queries.

    Args:
        queries: Parsed queries, each a set of query terms.
    """

    def __init__(self, queries: Iterable[Query]):
        self.queries: List[Query] = [frozenset(q) for q in queries]

    @classmethod
    def from_lines(cls, lines: Iterable[str], parser) -> "QueryCollection":
        """
        Parse one query per line.

        Args:
            lines: Raw query lines.
            parser: Object with a parse_query(text) method, such as a
                Tokenizer or a TextSearchEngine (which also auto-corrects).

        Returns:
            QueryCollection in line order.
        """
        return cls(parser.parse_query(line) for line in lines)

    def __len__(self) -> int:
        return len(self.queries)

    def __iter__(self):
        return iter(self.queries)

    def __getitem__(self, index: int) -> Query:
        return self.queries[index]
