"""
Term dictionary and inverted index construction.

This module builds the per-document term position maps, assigns stable
term IDs in first-seen order, and inverts the documents into posting lists.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

logger = logging.getLogger(__name__)


class Document:
    """A paragraph of the collection: term -> ordered token positions."""

    def __init__(self, doc_id: int, terms: Dict[str, List[int]]):
        self.doc_id = doc_id
        self._terms = MappingProxyType(
            {term: tuple(positions) for term, positions in terms.items()}
        )

    @property
    def terms(self) -> Mapping[str, Tuple[int, ...]]:
        return self._terms

    @property
    def unique_terms(self) -> int:
        return len(self._terms)

    def is_empty(self) -> bool:
        return not self._terms

    def term_frequency(self, term: str) -> int:
        return len(self._terms.get(term, ()))

    def max_term_frequency(self) -> int:
        """
        Get the highest raw term frequency in the document.

        Raises:
            ValueError: If the document has no terms.
        """
        if not self._terms:
            raise ValueError(f"Document {self.doc_id} has no terms")
        return max(len(positions) for positions in self._terms.values())

    def __repr__(self) -> str:
        return f"Document(doc_id={self.doc_id}, unique_terms={self.unique_terms})"


class Indexer:
    """Handles term dictionary, document index and posting list construction."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def index_document(self, doc_id: int, terms: Iterable[str], dictionary: Dict[str, int]) -> Document:
        """
        Build a document's term position map and register new terms.

        Args:
            doc_id: ID of the document (its position in the corpus).
            terms: Qualifying terms in document order.
            dictionary: Shared term -> term ID dictionary, updated in place.

        Returns:
            The constructed Document.
        """
        pos_map: Dict[str, List[int]] = {}
        for position, term in enumerate(terms):
            if term not in dictionary:
                dictionary[term] = len(dictionary)
            pos_map.setdefault(term, []).append(position)
        return Document(doc_id, pos_map)

    def build_documents(self, doc_terms: Iterable[Iterable[str]]) -> Tuple[List[Document], Mapping[str, int]]:
        """
        Index every document in order, then freeze the term dictionary.

        Args:
            doc_terms: Per document, its qualifying terms in order.

        Returns:
            Tuple of (documents, dictionary).
            - documents: List of Document, indexed by doc ID
            - dictionary: Read-only term -> term ID mapping
        """
        dictionary: Dict[str, int] = {}
        documents = []
        for doc_id, terms in enumerate(doc_terms):
            documents.append(self.index_document(doc_id, terms, dictionary))

        logger.debug("Indexed %d documents, %d distinct terms", len(documents), len(dictionary))
        return documents, MappingProxyType(dictionary)

    def build_posting_lists(self, documents: Sequence[Document],
                            dictionary: Mapping[str, int]) -> Tuple[Mapping[int, int], ...]:
        """
        Invert the documents into one posting list per term ID.

        Each document is scanned once and its term frequencies are appended
        to the lists of its terms, so postings come out in doc ID order.

        Args:
            documents: All documents of the collection.
            dictionary: Final term -> term ID dictionary.

        Returns:
            Tuple indexed by term ID of read-only doc ID -> term frequency maps.
        """
        postings: List[Dict[int, int]] = [{} for _ in range(len(dictionary))]
        for doc in documents:
            for term, positions in doc.terms.items():
                postings[dictionary[term]][doc.doc_id] = len(positions)

        return tuple(MappingProxyType(plist) for plist in postings)

    def get_posting_list(self, term: str, dictionary: Mapping[str, int],
                         posting_lists: Sequence[Mapping[int, int]]) -> Mapping[int, int]:
        """
        Get the posting list for a term.

        Args:
            term: Term to look up.
            dictionary: Term -> term ID dictionary.
            posting_lists: Posting lists indexed by term ID.

        Returns:
            doc ID -> term frequency map, empty if the term is unknown.
        """
        term_id = dictionary.get(term)
        if term_id is None:
            return MappingProxyType({})
        return posting_lists[term_id]

    def get_collection_frequency(self, term: str, dictionary: Mapping[str, int],
                                 posting_lists: Sequence[Mapping[int, int]]) -> int:
        """Get the total number of occurrences of the term in the collection."""
        return sum(self.get_posting_list(term, dictionary, posting_lists).values())

    def summarize_index(self, posting_lists: Sequence[Mapping[int, int]], N: int) -> None:
        """
        Print a summary of the inverted index.

        Args:
            posting_lists: Posting lists indexed by term ID.
            N: Total number of documents.
        """
        num_terms = len(posting_lists)
        total_postings = sum(len(plist) for plist in posting_lists)

        print("\n=== Inverted Index Summary ===")
        print(f"Unique terms: {num_terms}")
        print(f"Total postings: {total_postings}")
        if num_terms:
            print(f"Average postings per term: {total_postings / num_terms:.2f}")
        print(f"Documents indexed: {N}")

        posting_lengths = sorted(len(plist) for plist in posting_lists)
        if posting_lengths:
            print(f"Min posting list length: {posting_lengths[0]}")
            print(f"Max posting list length: {posting_lengths[-1]}")
            print(f"Median posting list length: {posting_lengths[len(posting_lengths)//2]}")
