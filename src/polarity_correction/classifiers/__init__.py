"""
classifiers
===========

Does: Concrete sentence classifiers satisfying SentenceClassifier, plus a name-based factory.
Returns: VaderClassifier, ZeroShotClassifier, get_classifier(name).
Used by: The CLI and callers that do not bring their own classifier.
Example:
    pc = PolarityCorrection(text, get_classifier("vader"))
"""

from __future__ import annotations

from polarity_correction.correction.types import SentenceClassifier

from .vader import VaderClassifier
from .zero_shot import FakeZeroShot, ZeroShotClassifier

CLASSIFIER_NAMES = ("vader", "zero-shot")


def get_classifier(name: str) -> SentenceClassifier:
    """Build a classifier by name ('vader' | 'zero-shot')."""
    key = name.strip().lower().replace("_", "-")
    if key == "vader":
        return VaderClassifier()
    if key in {"zero-shot", "zeroshot"}:
        return ZeroShotClassifier()
    raise ValueError(f"Unknown classifier '{name}' (expected one of {', '.join(CLASSIFIER_NAMES)})")


__all__ = [
    "CLASSIFIER_NAMES",
    "FakeZeroShot",
    "VaderClassifier",
    "ZeroShotClassifier",
    "get_classifier",
]

__docformat__ = "google"
