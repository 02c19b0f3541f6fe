# src/polarity_correction/classifiers/vader.py

"""
VADER sentence classifier.
--------------------------
Does:
- Lexical sentence scoring with NLTK VADER (compound score)
- compound >= pos threshold → "positive", <= neg threshold → "negative",
  otherwise "neutral" (read as negative by the adapter)
- Lazy analyzer init; lexicon download only when ALLOW_NLTK_DOWNLOAD=1
"""

from __future__ import annotations

import logging
import re

import nltk
from nltk.sentiment.vader import SentimentIntensityAnalyzer

from polarity_correction.classifiers.config import env_bool, vader_thresholds

__all__ = ["VaderClassifier", "get_vader"]

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")

_vader: SentimentIntensityAnalyzer | None = None


def get_vader() -> SentimentIntensityAnalyzer:
    """Lazily initialize VADER. Respects ALLOW_NLTK_DOWNLOAD to avoid downloading in prod."""
    global _vader
    if _vader is None:
        try:
            nltk.data.find("sentiment/vader_lexicon.zip")
        except LookupError as err:
            if env_bool("ALLOW_NLTK_DOWNLOAD", False):
                logger.info("VADER lexicon not found. Downloading because ALLOW_NLTK_DOWNLOAD=1.")
                nltk.download("vader_lexicon", quiet=True)
            else:
                msg = (
                    "VADER lexicon not found and ALLOW_NLTK_DOWNLOAD=0. "
                    "Please pre-install NLTK data."
                )
                logger.error(msg)
                raise RuntimeError(msg) from err
        _vader = SentimentIntensityAnalyzer()
    return _vader


class VaderClassifier:
    """
    Sentence classifier backed by VADER.

    `analyzer` is any object with polarity_scores(text) -> {"compound": float, ...};
    pass a fake in tests. Thresholds default to data/classifiers.json + ENV.
    Scoring errors propagate so the adapter can report them.
    """

    def __init__(
        self,
        analyzer=None,
        positive_threshold: float | None = None,
        negative_threshold: float | None = None,
    ) -> None:
        if positive_threshold is None or negative_threshold is None:
            pos, neg = vader_thresholds()
            positive_threshold = pos if positive_threshold is None else positive_threshold
            negative_threshold = neg if negative_threshold is None else negative_threshold
        if negative_threshold > positive_threshold:
            raise ValueError(
                f"negative_threshold ({negative_threshold}) exceeds "
                f"positive_threshold ({positive_threshold})"
            )
        self.analyzer = analyzer
        self.positive_threshold = positive_threshold
        self.negative_threshold = negative_threshold

    def score(self, sentence: str) -> float:
        analyzer = self.analyzer or get_vader()
        key = _WHITESPACE_RE.sub(" ", sentence.strip())
        return float(analyzer.polarity_scores(key)["compound"])

    def classify(self, sentence: str) -> str:
        compound = self.score(sentence)
        if compound >= self.positive_threshold:
            return "positive"
        if compound <= self.negative_threshold:
            return "negative"
        return "neutral"
