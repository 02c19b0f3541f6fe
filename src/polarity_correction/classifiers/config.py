# src/polarity_correction/classifiers/config.py

"""
config.py.

Does: Read classifier defaults from data/classifiers.json, then let ENV win.
Returns: vader_thresholds() -> (pos, neg), zero_shot_settings() -> ZeroShotSettings.
"""

from __future__ import annotations

import os
from typing import Any, TypedDict

from polarity_correction.utils.load_config import load_config

__all__ = [
    "ZeroShotSettings",
    "env_bool",
    "env_float",
    "vader_thresholds",
    "zero_shot_settings",
]

_CONFIG_NAME = "classifiers"


class ZeroShotSettings(TypedDict):
    model: str
    candidates: list[tuple[str, str]]


def env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip() not in {"0", "false", "False", ""}


def _validate(data: dict[str, Any]) -> dict[str, Any]:
    vader = data.get("vader", {})
    for key in ("positive_threshold", "negative_threshold"):
        if not isinstance(vader.get(key), (int, float)):
            raise ValueError(f"vader.{key} must be a number")
    if vader["negative_threshold"] > vader["positive_threshold"]:
        raise ValueError("vader.negative_threshold must not exceed positive_threshold")

    zs = data.get("zero_shot", {})
    if not isinstance(zs.get("model"), str) or not zs["model"]:
        raise ValueError("zero_shot.model must be a non-empty string")
    cands = zs.get("candidates")
    if not isinstance(cands, list) or not cands:
        raise ValueError("zero_shot.candidates must be a non-empty list")
    if not all(isinstance(c, list) and len(c) == 2 and all(isinstance(x, str) for x in c) for c in cands):
        raise ValueError("zero_shot.candidates entries must be [hypothesis, label] pairs")
    return data


def _load() -> dict[str, Any]:
    return load_config(_CONFIG_NAME, mode="validated_dict", validator=_validate)


def vader_thresholds() -> tuple[float, float]:
    """POLARITY_VADER_POS_TH / POLARITY_VADER_NEG_TH override the JSON defaults."""
    vader = _load()["vader"]
    pos = env_float("POLARITY_VADER_POS_TH", float(vader["positive_threshold"]))
    neg = env_float("POLARITY_VADER_NEG_TH", float(vader["negative_threshold"]))
    return pos, neg


def zero_shot_settings() -> ZeroShotSettings:
    """POLARITY_ZERO_SHOT_MODEL overrides the JSON model name. Candidate order is kept."""
    zs = _load()["zero_shot"]
    model = os.getenv("POLARITY_ZERO_SHOT_MODEL") or zs["model"]
    return ZeroShotSettings(
        model=model,
        candidates=[(hyp, label) for hyp, label in zs["candidates"]],
    )
