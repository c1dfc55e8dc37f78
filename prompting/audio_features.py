"""
Audio feature summarization.

Reduces a finished numeric feature vector (amplitude samples) to four
descriptive statistics and renders them into the analysis-request prompt.
Feature extraction itself happens upstream.
"""

import json
from dataclasses import dataclass, asdict
from typing import Any, Dict, Sequence

ANALYSIS_INSTRUCTION = (
    "Provide a detailed analysis of what this audio might contain, "
    "potential sounds or speech patterns, and any security-relevant observations."
)


@dataclass(frozen=True)
class AudioFeatureSummary:
    avg_amplitude: float
    peak_amplitude: float
    zero_crossings: int
    sample_count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def count_zero_crossings(features: Sequence[float]) -> int:
    """Adjacent pairs whose sign differs; zero counts as non-negative."""
    return sum(
        1 for previous, current in zip(features, features[1:])
        if (previous >= 0.0) != (current >= 0.0)
    )


def summarize_features(features: Sequence[float]) -> AudioFeatureSummary:
    """
    Compute mean, peak (floored at 0), zero crossings and sample count.

    Raises:
        ValueError: if ``features`` is empty
    """
    if not features:
        raise ValueError("audio feature vector must not be empty")

    return AudioFeatureSummary(
        avg_amplitude=sum(features) / len(features),
        peak_amplitude=max(0.0, max(features)),
        zero_crossings=count_zero_crossings(features),
        sample_count=len(features),
    )


def build_audio_analysis_prompt(summary: AudioFeatureSummary, metadata: Any) -> str:
    """Render the summary plus opaque metadata into the analysis template."""
    return (
        "Analyze this audio data:\n"
        f"- Average amplitude: {summary.avg_amplitude:.3f}\n"
        f"- Peak amplitude: {summary.peak_amplitude:.3f}\n"
        f"- Zero crossings: {summary.zero_crossings}\n"
        f"- Sample count: {summary.sample_count}\n"
        f"- Metadata: {json.dumps(metadata, default=str)}\n\n"
        f"{ANALYSIS_INSTRUCTION}"
    )
