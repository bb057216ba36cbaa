"""
Vector-space paragraph search

A small static search engine that indexes the paragraphs of a text
collection and ranks them against queries with TF-IDF weighting and
cosine similarity.

Main components:
- TextSearchEngine: Main search engine class
- TextCollection: Immutable index with similarity, ranking and reporting
- Tokenizer: Delimiter tokenization and term filtering
- Indexer: Term dictionary and posting list construction
- Ranker: TF-IDF weights, norms and cosine similarity ranking
- AutoCorrect: Query auto-correction using Levenshtein distance
- Utils: Collection/query file reading and result formatting
"""

from .search_engine import TextSearchEngine
from .collection import TextCollection, QueryCollection, DocumentReport, EmptyCollectionError
from .tokenizer import Tokenizer, TokenStream
from .indexer import Indexer, Document
from .ranker import Ranker
from .autocorrect import AutoCorrect
from .utils import TextProcessor, ResultFormatter

__version__ = "1.0.0"

__all__ = [
    "TextSearchEngine",
    "TextCollection",
    "QueryCollection",
    "DocumentReport",
    "EmptyCollectionError",
    "Tokenizer",
    "TokenStream",
    "Indexer",
    "Document",
    "Ranker",
    "AutoCorrect",
    "TextProcessor",
    "ResultFormatter"
]
