"""Domain enumerations for content resolution."""

from enum import Enum


class Stage(str, Enum):
    """Publication stage of a content variant.

    DRAFT is what editors work on; LIVE is what websites serve. Stage is
    never a fallback axis: a LIVE request is not satisfied by a DRAFT variant.
    """

    DRAFT = "draft"
    LIVE = "live"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid stage values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [stage.value for stage in cls]
