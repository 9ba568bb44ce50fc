"""Cache lifetime resolver (ICacheLifetimeResolver): declarative lifetime -> seconds."""

from content.core.constants import CACHE_LIFETIME_TYPE_SECONDS
from content.domain.exceptions import InvalidCacheLifetimeError


def _as_seconds(value: str | int | float) -> int | None:
    """Return value as non-negative int seconds, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, float):
        return int(value) if value.is_integer() and value >= 0 else None
    if isinstance(value, str):
        digits = value.strip()
        # isdigit() alone also accepts non-ASCII digits such as "²".
        if digits.isascii() and digits.isdigit():
            return int(digits)
    return None


class CacheLifetimeResolver:
    """Resolve cache lifetime descriptors of type 'seconds'."""

    SUPPORTED_TYPES: frozenset[str] = frozenset({CACHE_LIFETIME_TYPE_SECONDS})

    def supports(self, type: str, value: str | int | float) -> bool:
        """Return whether (type, value) is a supported, well-formed lifetime."""
        if type not in self.SUPPORTED_TYPES:
            return False
        return _as_seconds(value) is not None

    def resolve(self, type: str, value: str | int | float) -> int:
        """Return the lifetime in seconds.

        Raises:
            InvalidCacheLifetimeError: If the pair is not supported.
        """
        seconds = _as_seconds(value) if type in self.SUPPORTED_TYPES else None
        if seconds is None:
            raise InvalidCacheLifetimeError({"type": type, "value": value})
        return seconds
