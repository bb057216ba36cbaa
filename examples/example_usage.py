#!/usr/bin/env python3
"""
Example usage of the vector-space paragraph search engine.

This script demonstrates how to use the search engine programmatically
on a small in-memory collection.
"""

import sys
from pathlib import Path

# Add parent directory to path to import vsm_search
sys.path.append(str(Path(__file__).parent.parent))

from vsm_search import TextSearchEngine

PARAGRAPHS = [
    "Apples grow on apple trees in orchards across temperate regions.",
    "Bananas are tropical fruits; banana plants are large herbaceous plants.",
    "Cherry orchards bloom in spring, and cherries ripen in early summer.",
    "Orchards need pollinators: bees visit apple and cherry blossoms.",
]


def basic_search_example():
    """Demonstrate basic search functionality."""
    print("=== Basic Search Example ===")

    engine = TextSearchEngine(config_dict={"VERBOSE": False})
    engine.build_index(paragraphs=PARAGRAPHS)

    for query in ["apple orchards", "tropical banana", "spring blossoms"]:
        print(f"\nSearching for: '{query}'")
        results = engine.search(query, top_k=2)
        if not results:
            print("  No results found.")
            continue
        for i, (doc_id, score) in enumerate(results, 1):
            print(f"  {i}. Score: {score:.4f} | Doc: {doc_id} | {engine.paragraphs[doc_id][:60]}")


def report_example():
    """Demonstrate the document report and the batch query output."""
    print("\n=== Report Example ===")

    engine = TextSearchEngine(config_dict={"VERBOSE": False})
    engine.build_index(paragraphs=PARAGRAPHS)

    engine.result_formatter.print_document_report(engine.document_report(3, top_n=4))

    queries = [engine.parse_query(q) for q in ["cherry blossoms", "pollinators"]]
    engine.run_queries(queries, top_k=2, top_n=3)


def autocorrect_example():
    """Demonstrate auto-correction of unknown query terms."""
    print("\n=== Auto-correction Example ===")

    engine = TextSearchEngine(config_dict={"VERBOSE": True, "AUTO_CORRECT_ENABLED": True})
    engine.build_index(paragraphs=PARAGRAPHS)

    for query in ["chery orchard", "banan"]:
        print(f"\nOriginal query: '{query}'")
        print(f"Results: {engine.search(query)}")


def main():
    """Run all examples."""
    print("Vector-space Paragraph Search - Example Usage")
    print("=" * 50)

    basic_search_example()
    report_example()
    autocorrect_example()

    print("\n" + "=" * 50)
    print("All examples completed successfully!")


if __name__ == "__main__":
    main()
