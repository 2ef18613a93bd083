"""Quality-control filter for parsed ISD observations."""

from __future__ import annotations

from collections.abc import Iterable

from sweat.models import ParsedObservation

# Quality-control process versions accepted from the archive
ACCEPTED_VERSIONS: frozenset[str] = frozenset({"V02", "V03"})
# Air temperature quality code meaning "passed all quality control checks"
PASSED_FLAG = "5"


def is_admissible(observation: ParsedObservation) -> bool:
    """Check whether an observation passed NOAA quality control.

    Returns:
        True when the QC version is accepted and the temperature passed
    """
    return (
        observation.quality_version in ACCEPTED_VERSIONS
        and observation.quality_flag == PASSED_FLAG
    )


class QualityFilter:
    """Applies :func:`is_admissible` to a sequence of observations.

    The counters are diagnostic only; they never change what is kept.
    """

    def __init__(self) -> None:
        self.accepted = 0
        self.rejected = 0

    def apply(self, observations: Iterable[ParsedObservation]) -> list[ParsedObservation]:
        """Return the admissible observations, preserving order."""
        kept: list[ParsedObservation] = []
        for obs in observations:
            if is_admissible(obs):
                kept.append(obs)
            else:
                self.rejected += 1
        self.accepted += len(kept)
        return kept
