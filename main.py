#!/usr/bin/env python3
"""
Main entry point for the vector-space paragraph search engine.

This script provides a command-line interface for the search engine.
"""

import argparse
import logging
import sys

from vsm_search import TextSearchEngine
import config


def main(argv=None):
    """Main entry point for the search engine."""
    parser = argparse.ArgumentParser(
        description="Paragraph search with TF-IDF weighting and cosine similarity",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                   # collection-100.txt with query-10.txt
  python main.py books.txt queries.txt             # Custom collection and query files
  python main.py --top-k 5 --keywords 10           # More results and keywords
  python main.py --doc 12                          # Report a single document
        """
    )

    parser.add_argument(
        "collection",
        nargs="?",
        default=config.DEFAULT_COLLECTION_FILE,
        help=f"Collection file, one paragraph per block (default: {config.DEFAULT_COLLECTION_FILE})"
    )

    parser.add_argument(
        "queries",
        nargs="?",
        default=config.DEFAULT_QUERY_FILE,
        help=f"Query file, one query per line (default: {config.DEFAULT_QUERY_FILE})"
    )

    parser.add_argument(
        "--top-k",
        type=int,
        default=config.TOP_K_RESULTS,
        help=f"Number of documents reported per query (default: {config.TOP_K_RESULTS})"
    )

    parser.add_argument(
        "--keywords",
        type=int,
        default=config.TOP_KEYWORDS,
        help=f"Number of keywords reported per document (default: {config.TOP_KEYWORDS})"
    )

    parser.add_argument(
        "--doc",
        type=int,
        default=None,
        help="Print the report of one document and exit"
    )

    parser.add_argument(
        "--autocorrect",
        action="store_true",
        help="Replace unknown query terms with the closest indexed term"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show index statistics after building"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {config.LOG_LEVEL})"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    overrides = {"VERBOSE": args.stats}
    if args.autocorrect:
        overrides["AUTO_CORRECT_ENABLED"] = True
    engine = TextSearchEngine(collection_file=args.collection, config_dict=overrides)

    # Build index
    try:
        engine.build_index()
    except Exception as e:
        print(f"Error building index: {e}")
        sys.exit(1)

    if args.stats:
        engine.result_formatter.print_stats(engine.get_stats())

    if args.doc is not None:
        try:
            report = engine.document_report(args.doc, top_n=args.keywords)
        except IndexError as e:
            print(f"Error reporting document: {e}")
            sys.exit(1)
        engine.result_formatter.print_document_report(report)
        return

    try:
        queries = engine.load_queries(args.queries)
    except Exception as e:
        print(f"Error reading queries: {e}")
        sys.exit(1)

    engine.run_queries(queries, top_k=args.top_k, top_n=args.keywords)


if __name__ == "__main__":
    main()
