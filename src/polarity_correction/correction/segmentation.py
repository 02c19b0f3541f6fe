"""
segmentation.py

Does: Split a document into the ordered sentence list the adapter consumes.
      - split_document: line-oriented split (one sentence per line)
      - split_sentences: spaCy rule-based sentencizer (no model download)
Returns: list[str] in document order.
Used by: PolarityCorrection, the CLI (--spacy), tests.
"""

from __future__ import annotations

import logging

import spacy

__all__ = ["split_document", "split_sentences", "get_sentencizer"]

logger = logging.getLogger(__name__)


def split_document(text: str, separator: str = "\n") -> list[str]:
    """
    Does: Split on `separator`, keeping interior empty segments and dropping
          trailing ones (so "a\\nb\\n" → ["a", "b"]).
    Returns: [] for empty text.
    """
    if not text:
        return []
    parts = text.split(separator)
    while parts and parts[-1] == "":
        parts.pop()
    return parts


_nlp = None


def get_sentencizer():
    """Lazily build spacy.blank('en') + 'sentencizer' once."""
    global _nlp
    if _nlp is None:
        nlp = spacy.blank("en")
        nlp.add_pipe("sentencizer")
        logger.debug("spaCy sentencizer pipeline initialised.")
        _nlp = nlp
    return _nlp


def split_sentences(text: str) -> list[str]:
    """Does: Rule-based sentence split; whitespace-only sentences are dropped."""
    if not text or not text.strip():
        return []
    doc = get_sentencizer()(text)
    return [s.text.strip() for s in doc.sents if s.text.strip()]
