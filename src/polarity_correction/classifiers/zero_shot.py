# src/polarity_correction/classifiers/zero_shot.py

"""
Zero-shot sentence classifier.
------------------------------
Does:
- HuggingFace zero-shot-classification pipeline over a fixed hypothesis table
- Single source of truth for (hypothesis, label) candidates, order preserved
- Lazy pipeline construction, GPU when torch reports CUDA
- Offline fake pipeline for tests/demos (POLARITY_ZERO_SHOT_FAKE=1)
"""

from __future__ import annotations

import logging
from typing import Any, TypedDict

from transformers import pipeline

from polarity_correction.classifiers.config import env_bool, zero_shot_settings

__all__ = ["ZeroShotClassifier", "FakeZeroShot", "build_zero_shot_pipeline"]

logger = logging.getLogger(__name__)


class ZeroShotResult(TypedDict):
    labels: list[str]
    scores: list[float]


class FakeZeroShot:
    """Tiny offline replacement. Ranks hypotheses with a keyword rule, deterministically."""

    _POS = ("love", "like", "great", "good", "excellent", "amazing", "happy")
    _NEG = ("hate", "dislike", "awful", "bad", "terrible", "poor", "broken")

    def __call__(self, text: str, candidate_labels: list[str]) -> ZeroShotResult:
        low = text.lower()
        if any(k in low for k in self._NEG):
            want = "negative"
        elif any(k in low for k in self._POS):
            want = "positive"
        else:
            want = "neutral"
        first = [c for c in candidate_labels if want in c.lower()]
        rest = [c for c in candidate_labels if c not in first]
        order = first + rest
        scores = [0.9] + [0.1 / max(len(order) - 1, 1)] * (len(order) - 1)
        return ZeroShotResult(labels=order, scores=scores)


def build_zero_shot_pipeline(model: str):
    """Zero-shot pipeline with device auto-detection, or the fake when POLARITY_ZERO_SHOT_FAKE=1."""
    if env_bool("POLARITY_ZERO_SHOT_FAKE", False):
        logger.info("Using FakeZeroShot pipeline (POLARITY_ZERO_SHOT_FAKE=1).")
        return FakeZeroShot()
    try:
        import torch  # optional

        device = 0 if torch.cuda.is_available() else -1
    except ImportError:
        device = -1
    logger.info("Loading zero-shot model %s (device=%s).", model, device)
    return pipeline("zero-shot-classification", model=model, device=device)


class ZeroShotClassifier:
    """
    Sentence classifier backed by an NLI zero-shot pipeline.

    Args:
        pipe: callable like the HF pipeline, (text, candidate_labels) -> {"labels": [...]}.
              Built lazily on first use when omitted.
        candidates: [(hypothesis, label), ...]. Defaults to data/classifiers.json.
        model: model name used when the pipeline is built here.
    """

    def __init__(
        self,
        pipe: Any | None = None,
        candidates: list[tuple[str, str]] | None = None,
        model: str | None = None,
    ) -> None:
        if candidates is None or model is None:
            settings = zero_shot_settings()
            candidates = settings["candidates"] if candidates is None else candidates
            model = settings["model"] if model is None else model
        if not candidates:
            raise ValueError("ZeroShotClassifier needs at least one candidate")
        self._pipe = pipe
        self.model = model
        self.hypotheses: list[str] = [h for h, _ in candidates]
        self.labels: list[str] = [lab for _, lab in candidates]

    @property
    def pipe(self):
        if self._pipe is None:
            self._pipe = build_zero_shot_pipeline(self.model)
        return self._pipe

    def _label_for(self, hypothesis: str) -> str:
        """Map the top hypothesis back to its label; case-insensitive fallback, else 'neutral'."""
        try:
            return self.labels[self.hypotheses.index(hypothesis)]
        except ValueError:
            low = hypothesis.lower()
            for idx, cand in enumerate(self.hypotheses):
                if cand.lower() == low:
                    return self.labels[idx]
            logger.warning("Unknown zero-shot label %r; treating as neutral.", hypothesis)
            return "neutral"

    def classify(self, sentence: str) -> str:
        result = self.pipe(sentence, self.hypotheses)
        return self._label_for(result["labels"][0])
