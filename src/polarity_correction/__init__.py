"""
polarity_correction
===================

Does: Root package for sentence-level sentiment polarity correction.
Returns: Re-exports the correction API (adapter, consistency filter, facade).
Used by: The `polarity-correct` CLI and library callers.
"""

from .correction import (
    NEGATIVE,
    POSITIVE,
    ClassificationError,
    ClassifiedSentence,
    Polarity,
    PolarityCorrection,
    SentenceClassifier,
    classify_sentences,
    correct_document,
    filter_consistent,
    outlier_indices,
    sentences_to_text,
    split_document,
    to_polarity,
)

__all__ = [
    "Polarity",
    "POSITIVE",
    "NEGATIVE",
    "ClassifiedSentence",
    "SentenceClassifier",
    "ClassificationError",
    "to_polarity",
    "classify_sentences",
    "filter_consistent",
    "outlier_indices",
    "sentences_to_text",
    "split_document",
    "PolarityCorrection",
    "correct_document",
]
__docformat__ = "google"
