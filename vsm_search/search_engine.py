"""
Main TextSearchEngine class that orchestrates the entire search pipeline.

This module contains the main TextSearchEngine class that coordinates
all components of the search system including collection loading, indexing,
and query processing.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .autocorrect import AutoCorrect
from .collection import DocumentReport, Query, QueryCollection, TextCollection
from .tokenizer import Tokenizer
from .utils import ResultFormatter, TextProcessor
import config

logger = logging.getLogger(__name__)


class TextSearchEngine:
    """
    Main search engine class that provides a unified interface for text search.

    This class orchestrates the pipeline from reading the collection file
    through query processing, ranking and reporting.
    """

    def __init__(self, collection_file: Optional[Union[str, Path]] = None, config_dict: Optional[Dict] = None):
        """
        Initialize the TextSearchEngine.

        Args:
            collection_file: Path to the collection file. If None, uses config default.
            config_dict: Optional configuration dictionary to override defaults.
        """
        self.config = self._load_config(config_dict)
        self.collection_file = Path(collection_file or self.config.DEFAULT_COLLECTION_FILE)

        # Initialize components
        self.text_processor = TextProcessor(self.config)
        self.tokenizer = Tokenizer(self.config)
        self.auto_correct = AutoCorrect(self.config)
        self.result_formatter = ResultFormatter(self.config)

        # State variables
        self.paragraphs: List[str] = []
        self.collection: Optional[TextCollection] = None
        self.term_freq: Dict[str, int] = {}
        self.by_len_index: Dict[int, List[str]] = {}

    def _load_config(self, config_dict: Optional[Dict]) -> Any:
        """Load configuration from config module, overridden by the provided dictionary."""
        if config_dict:
            class Config:
                def __init__(self, config_dict):
                    for key in dir(config):
                        if key.isupper():
                            setattr(self, key, getattr(config, key))
                    for key, value in config_dict.items():
                        setattr(self, key, value)
            return Config(config_dict)
        return config

    @property
    def is_built(self) -> bool:
        return self.collection is not None

    def _require_index(self) -> TextCollection:
        if self.collection is None:
            raise RuntimeError("Index not built. Call build_index() first.")
        return self.collection

    def build_index(self, paragraphs: Optional[List[str]] = None, force_rebuild: bool = False) -> TextCollection:
        """
        Build the complete search index.

        This method performs the following steps:
        1. Read paragraphs from the collection file (unless given)
        2. Tokenize and filter each paragraph
        3. Build term dictionary, posting lists, weights and norms
        4. Prepare auto-correction lookups

        Args:
            paragraphs: Paragraph texts to index instead of reading the file.
            force_rebuild: If True, rebuild index even if already built.

        Returns:
            The built TextCollection.
        """
        if self.collection is not None and not force_rebuild:
            logger.info("Index already built. Use force_rebuild=True to rebuild.")
            return self.collection

        if paragraphs is None:
            logger.info("Reading collection from %s", self.collection_file)
            paragraphs = self.text_processor.read_paragraphs(self.collection_file)
        paragraphs = list(paragraphs)
        logger.info("Loaded %d paragraphs", len(paragraphs))

        # The engine keeps its previous index if the new one cannot be built.
        collection = TextCollection(
            (self.tokenizer.tokenize(p) for p in paragraphs),
            self.config,
            tokenizer=self.tokenizer,
        )
        self.paragraphs = paragraphs
        self.collection = collection

        if self.config.AUTO_CORRECT_ENABLED:
            indexer = self.collection.indexer
            self.term_freq = {
                term: indexer.get_collection_frequency(term, self.collection.dictionary,
                                                       self.collection.posting_lists)
                for term in self.collection.dictionary
            }
            self.by_len_index = self.auto_correct.build_len_index(self.collection.dictionary)

        if self.config.VERBOSE:
            self.collection.indexer.summarize_index(self.collection.posting_lists,
                                                    self.collection.num_documents)
            self.collection.ranker.summarize_ranking_stats(self.collection.idf_scores,
                                                           self.collection.norms)
        return self.collection

    def parse_query(self, text: str) -> Query:
        """
        Turn a query line into query terms, auto-correcting if enabled.

        Args:
            text: Raw query text.

        Returns:
            Set of query terms.
        """
        query = self.tokenizer.parse_query(text)
        if self.config.AUTO_CORRECT_ENABLED and self.collection is not None:
            query, changes, _oov = self.auto_correct.autocorrect_query_terms(
                query, self.collection.dictionary, self.term_freq, self.by_len_index
            )
            if changes and self.config.VERBOSE:
                print(f"Query corrections: {changes}")
        return query

    def search(self, query: Union[str, Query], top_k: Optional[int] = None) -> List[Tuple[int, float]]:
        """
        Search for documents matching the given query.

        Args:
            query: Query text or an already parsed set of query terms.
            top_k: Number of results to return. If None, uses config default.

        Returns:
            List of (doc_id, score) tuples sorted by relevance.
        """
        collection = self._require_index()
        if isinstance(query, str):
            query = self.parse_query(query)
        return collection.rank(query, top_k=top_k)

    def document_report(self, doc_id: int, top_n: Optional[int] = None) -> DocumentReport:
        return self._require_index().document_report(doc_id, top_n=top_n)

    def load_queries(self, query_file: Optional[Union[str, Path]] = None) -> QueryCollection:
        """
        Read and parse a query file.

        Args:
            query_file: Path to the query file. If None, uses config default.

        Returns:
            QueryCollection with one query per non-blank line.
        """
        path = Path(query_file or self.config.DEFAULT_QUERY_FILE)
        lines = self.text_processor.read_queries(path)
        return QueryCollection.from_lines(lines, self)

    def run_queries(self, queries: QueryCollection, top_k: Optional[int] = None,
                    top_n: Optional[int] = None) -> None:
        """
        Rank and print the results of every query.

        Args:
            queries: Queries to run.
            top_k: Number of documents per query. If None, uses config default.
            top_n: Number of keywords per document. If None, uses config default.
        """
        collection = self._require_index()
        for query in queries:
            results = collection.rank(query, top_k=top_k)
            reports = [collection.document_report(did, top_n=top_n) for did, _ in results]
            self.result_formatter.print_query_results(query, results, reports)
        print("=" * self.config.OUTER_RULE_WIDTH)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the built index.

        Returns:
            Dictionary containing various statistics.
        """
        if self.collection is None:
            return {"error": "Index not built"}

        stats = self.collection.get_stats()
        stats["avg_paragraph_length"] = (
            sum(len(p) for p in self.paragraphs) / len(self.paragraphs) if self.paragraphs else 0
        )
        return stats
