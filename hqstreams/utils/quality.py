"""
Quality label filtering.

Labels are declared by each provider, not measured from the stream itself.
"""

from typing import Iterable, List

from hqstreams.schemas.type_defs import CandidateStream

HIGH_QUALITY_MARKERS = ("1080p", "4k", "2160p")


def is_high_quality(label: str) -> bool:
    """Case-insensitive check for a 1080p / 4K / 2160p label"""
    if not label:
        return False
    lowered = label.lower()
    return any(marker in lowered for marker in HIGH_QUALITY_MARKERS)


def filter_high_quality(candidates: Iterable[CandidateStream]) -> List[CandidateStream]:
    return [c for c in candidates if is_high_quality(c["quality"])]
