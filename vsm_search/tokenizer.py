"""
Word tokenization and term filtering.

This module splits raw text into word tokens on a fixed delimiter set and
applies the term filters used for documents and for queries.
"""

import re
from typing import FrozenSet, Iterable, Iterator, List, Optional


class TokenStream:
    """Lazy, restartable sequence of word tokens over a piece of text."""

    def __init__(self, text: str, pattern: "re.Pattern"):
        self._text = text
        self._pattern = pattern

    def __iter__(self) -> Iterator[str]:
        for match in self._pattern.finditer(self._text):
            yield match.group(0)

    def __repr__(self) -> str:
        return f"TokenStream({self._text[:30]!r})"


class Tokenizer:
    """Handles delimiter tokenization and document/query term filtering."""

    def __init__(self, config, stopwords: Optional[Iterable[str]] = None):
        """
        Initialize with configuration.

        Args:
            config: Configuration object.
            stopwords: Stopword set to use instead of config.STOPWORDS.
        """
        self.config = config
        self.stopwords: FrozenSet[str] = frozenset(
            config.STOPWORDS if stopwords is None else stopwords
        )
        # A token is a maximal run of characters that are neither whitespace
        # nor one of the configured delimiters.
        self.token_regex = re.compile(r"[^\s" + re.escape(config.DELIMITERS) + r"]+")

    def tokenize(self, text: str) -> TokenStream:
        """
        Split text into raw word tokens.

        Args:
            text: Text to tokenize. It is never modified.

        Returns:
            A restartable stream of tokens in text order.
        """
        if self.config.LOWERCASE:
            text = text.lower()
        return TokenStream(text, self.token_regex)

    def strip_suffix(self, word: str) -> str:
        """Remove a single trailing suffix (``s`` by default) if present."""
        suffix = self.config.STRIP_SUFFIX
        if suffix and word.endswith(suffix):
            return word[: -len(suffix)]
        return word

    def is_stopword(self, word: str) -> bool:
        return word in self.stopwords

    def normalize_document_token(self, token: str) -> Optional[str]:
        """
        Apply the document term rule to one raw token.

        The stopword check is made on the raw token; the length check on the
        suffix-stripped form.

        Args:
            token: Raw word token.

        Returns:
            The normalized term, or None if the token does not qualify.
        """
        if self.is_stopword(token):
            return None
        word = self.strip_suffix(token)
        if len(word) <= self.config.MIN_TERM_LENGTH:
            return None
        return word

    def normalize_query_token(self, token: str) -> Optional[str]:
        """Apply the query term rule: same as documents but without stopwords."""
        word = self.strip_suffix(token)
        if len(word) <= self.config.MIN_TERM_LENGTH:
            return None
        return word

    def document_terms(self, tokens: Iterable[str]) -> List[str]:
        """
        Filter raw document tokens down to the ordered list of terms.

        Args:
            tokens: Raw tokens in document order.

        Returns:
            Qualifying terms in document order (duplicates kept).
        """
        terms = []
        for tok in tokens:
            term = self.normalize_document_token(tok)
            if term is not None:
                terms.append(term)
        return terms

    def query_terms(self, tokens: Iterable[str]) -> FrozenSet[str]:
        """
        Filter raw query tokens down to a set of query terms.

        Args:
            tokens: Raw tokens of one query.

        Returns:
            Set of qualifying terms (no frequency information).
        """
        terms = set()
        for tok in tokens:
            term = self.normalize_query_token(tok)
            if term is not None:
                terms.add(term)
        return frozenset(terms)

    def parse_query(self, text: str) -> FrozenSet[str]:
        """Tokenize and filter one query line."""
        return self.query_terms(self.tokenize(text))
