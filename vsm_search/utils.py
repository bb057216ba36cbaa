"""
Utility functions for text ingestion and result formatting.

This module contains helpers for reading the collection and query files,
paragraph splitting, and printing search results.
"""

import re
from pathlib import Path
from typing import Dict, Iterable, List, Tuple, Union

from .collection import DocumentReport, Query


class TextProcessor:
    """Handles corpus and query file ingestion and paragraph splitting."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config
        self.blank_line_regex = re.compile(r"\n[ \t\r\f\v]*\n")

    def split_into_paragraphs(self, text: str, min_par_chars: int = None) -> List[str]:
        """
        Split raw text into paragraphs on blank-line boundaries.

        Lines of a paragraph are joined with a single space.

        Args:
            text: Raw text to split.
            min_par_chars: Minimum characters for a valid paragraph.

        Returns:
            List of paragraph strings.
        """
        if min_par_chars is None:
            min_par_chars = self.config.MIN_PARAGRAPH_CHARS

        paras = []
        for seg in self.blank_line_regex.split(text):
            p = " ".join(line.strip() for line in seg.splitlines() if line.strip())
            if p and len(p) >= min_par_chars:
                paras.append(p)
        return paras

    def read_text(self, path: Union[str, Path]) -> str:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            return f.read()

    def read_paragraphs(self, path: Union[str, Path]) -> List[str]:
        """
        Read a collection file, one paragraph per blank-line-delimited block.

        Args:
            path: Path to the collection file.

        Returns:
            List of paragraph strings in file order.
        """
        return self.split_into_paragraphs(self.read_text(path))

    def read_queries(self, path: Union[str, Path]) -> List[str]:
        """
        Read a query file, one query per non-blank line.

        Args:
            path: Path to the query file.

        Returns:
            List of query lines.
        """
        return [line.strip() for line in self.read_text(path).splitlines() if line.strip()]


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def format_postings(self, postings: Dict[int, Tuple[int, ...]]) -> str:
        """
        Render a posting list excerpt as ``| D0:1,4 | D3:0 |``.

        Args:
            postings: doc ID -> positions of the term in that document.

        Returns:
            Formatted posting string.
        """
        cells = [f"D{did}:" + ",".join(str(p) for p in positions)
                 for did, positions in postings.items()]
        return "| " + "".join(cell + " | " for cell in cells)

    def format_query(self, query: Query) -> str:
        return " ".join(sorted(query))

    def print_document_report(self, report: DocumentReport) -> None:
        """
        Print the keywords, postings and vector magnitude of a document.

        Args:
            report: Report data of the document.
        """
        print(f"DID: {report.doc_id}")
        for term, _weight, postings in report.keywords:
            print(f"{term:<14} -> {self.format_postings(postings)}")
        print(f"Number of unique keywords in document: {report.unique_terms}")
        print(f"Magnitude of the document vector (L2 norm): {report.norm:.6g}")

    def print_query_results(self, query: Query, results: List[Tuple[int, float]],
                            reports: Iterable[DocumentReport]) -> None:
        """
        Print the ranked results of one query.

        Args:
            query: The query terms.
            results: List of (doc_id, score) tuples, best first.
            reports: Document report for each result, in the same order.
        """
        inner_rule = "-" * self.config.INNER_RULE_WIDTH

        print("=" * self.config.OUTER_RULE_WIDTH)
        print(f"Query: {self.format_query(query)}")
        if not results:
            print("No matching documents found.")
            return

        for rank, ((_did, score), report) in enumerate(zip(results, reports), start=1):
            self.print_document_report(report)
            print(f"Similarity score: {score:.6g}")
            if rank < len(results):
                print(inner_rule)

    def print_stats(self, stats: Dict[str, float]) -> None:
        print("\n=== Index Statistics ===")
        for key, value in stats.items():
            if isinstance(value, float):
                print(f"{key}: {value:.2f}")
            else:
                print(f"{key}: {value}")
