"""ArcGIS candidate validation.

This module decides which raw candidates returned by findAddressCandidates
are usable: a candidate must be well formed and, when a score threshold
is configured, score at least that threshold.
"""

import math
from collections.abc import Iterable, Iterator
from typing import Any

from geocoder_arcgis.core.logging import get_logger

logger = get_logger(__name__, module="arcgis_validator")


def _is_nonzero_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value != 0
    )


class CandidateValidator:
    """Filters ArcGIS candidates by structure and score."""

    def __init__(self, score_threshold: float | None = None):
        """Initialize the validator.

        Args:
            score_threshold: Minimum score to keep a candidate, None keeps all
        """
        self.score_threshold = score_threshold

    def is_well_formed(self, candidate: Any) -> bool:
        """Check that a candidate has an address, non-zero x/y and a score.

        Args:
            candidate: Decoded candidate object from the response

        Returns:
            True when every required field is present and non-empty
        """
        if not isinstance(candidate, dict):
            return False

        location = candidate.get("location")
        if not isinstance(location, dict):
            return False

        address = candidate.get("address")
        return (
            _is_nonzero_number(location.get("x"))
            and _is_nonzero_number(location.get("y"))
            and _is_nonzero_number(candidate.get("score"))
            and isinstance(address, str)
            and bool(address)
        )

    def meets_score_threshold(self, candidate: dict[str, Any]) -> bool:
        """Check the candidate score against the threshold; ties pass."""
        if self.score_threshold is None:
            return True
        return candidate["score"] >= self.score_threshold

    def filter(self, candidates: Iterable[Any]) -> Iterator[dict[str, Any]]:
        """Yield the valid candidates in their original order.

        Args:
            candidates: Raw candidates in provider order

        Yields:
            Candidates that are well formed and meet the threshold
        """
        malformed = 0
        below_threshold = 0
        for candidate in candidates:
            if not self.is_well_formed(candidate):
                malformed += 1
                continue
            if not self.meets_score_threshold(candidate):
                below_threshold += 1
                continue
            yield candidate

        logger.debug(
            "Discarded ArcGIS candidates",
            malformed=malformed,
            below_threshold=below_threshold,
            score_threshold=self.score_threshold,
        )
