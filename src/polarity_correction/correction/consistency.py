# src/polarity_correction/correction/consistency.py

"""
Consistency Filter.
-------------------
Does:
- Single forward pass over per-sentence polarities, marking isolated outliers
  (a flip that matches neither the running class nor the next sentence)
- Trailing flip is always an outlier: it has no successor to confirm a new run
- Fallback: if nothing survives, the unfiltered sentences are returned
- Newline rendering of the surviving sentences
Returns: filter_consistent(classified) → list[str], sentences_to_text(list) → str
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from polarity_correction.correction.types import ClassifiedSentence, Polarity
from polarity_correction.utils.log import debug as topic_debug

__all__ = [
    "filter_consistent",
    "outlier_indices",
    "sentences_to_text",
]

logger = logging.getLogger(__name__)

_TOPIC = "consistency"


def _trace(enabled: bool, msg: str) -> None:
    topic_debug(msg, _TOPIC, force=enabled)


def outlier_indices(polarities: Sequence[Polarity], *, debug: bool = False) -> list[int]:
    """
    Returns the indices marked for removal, ascending.

    Index 0 seeds the running class and is never marked. For every later index:
      - same as running class          → kept
      - flip, next sentence agrees     → kept (start of a run of 2+)
      - flip, next sentence disagrees  → outlier
      - flip on the last sentence      → outlier
    The running class always moves to the current polarity, outlier or not.
    """
    n = len(polarities)
    if n == 0:
        return []

    marked: list[int] = []
    running = polarities[0]
    _trace(debug, f"#0 {running} seeds running class")
    for i in range(1, n):
        current = polarities[i]
        if current == running:
            verdict = "continues run"
        elif i == n - 1:
            marked.append(i)
            verdict = "trailing flip → outlier"
        elif current == polarities[i + 1]:
            verdict = "flip confirmed by next → new run"
        else:
            marked.append(i)
            verdict = f"isolated flip (next={polarities[i + 1]}) → outlier"
        _trace(debug, f"#{i} {current} vs running={running}: {verdict}")
        running = current
    return marked


def filter_consistent(
    classified: Sequence[ClassifiedSentence], *, debug: bool = False
) -> list[str]:
    """Drops isolated polarity outliers and returns the surviving sentences in order.

    If the removal pass leaves nothing, every input sentence is returned unfiltered.
    An empty input yields an empty list.
    """
    marked = set(outlier_indices([c.polarity for c in classified], debug=debug))
    kept = [c.sentence for i, c in enumerate(classified) if i not in marked]

    if not kept and classified:
        logger.info("All %d sentences marked; returning unfiltered input.", len(classified))
        return [c.sentence for c in classified]

    if marked:
        logger.debug("Removed %d of %d sentences: %s", len(marked), len(classified), sorted(marked))
    return kept


def sentences_to_text(sentences: Sequence[str], separator: str = "\n") -> str:
    """Join sentences back into text; every sentence (the last included) is followed by `separator`."""
    return "".join(f"{s}{separator}" for s in sentences)
