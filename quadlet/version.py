"""Podman releases that quadlet-gen can target."""

from enum import Enum
from functools import total_ordering

_ALIASES = {
    "4.4": ["4.4.0", "4.4.1", "4.4.2", "4.4.3", "4.4.4"],
    "4.5": ["4.5.0", "4.5.1"],
    "4.6": ["4.6.0", "4.6.1", "4.6.2"],
    "4.7": ["4.7.0", "4.7.1", "4.7.2"],
    "4.8": ["4.8.0", "4.8.1", "4.8.2", "4.8.3"],
    "5.0": ["latest", "5.0.0", "5.0.1", "5.0.2", "5.0.3"],
}


@total_ordering
class PodmanVersion(Enum):
    """Versions of podman since quadlet was added.

    Members are declared oldest first and compare by release order.
    New releases must only ever be appended.
    """
    V4_4 = "4.4"
    V4_5 = "4.5"
    V4_6 = "4.6"
    V4_7 = "4.7"
    V4_8 = "4.8"
    V5_0 = "5.0"

    # Enum alias, not a new member
    LATEST = "5.0"

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other):
        if not isinstance(other, PodmanVersion):
            return NotImplemented
        return self._position < other._position

    @property
    def _position(self) -> int:
        return list(PodmanVersion).index(self)

    @property
    def aliases(self) -> list[str]:
        return list(_ALIASES[self.value])

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            token = value.strip()
            for member in cls:
                if token == member.value or token in _ALIASES[member.value]:
                    return member
        return None

    @classmethod
    def parse(cls, value: str) -> "PodmanVersion":
        """Parse a canonical version string or one of its aliases.

        Raises ValueError for unknown versions.
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"unsupported podman version '{value}', "
                f"expected one of: {', '.join(cls.tokens())}"
            ) from None

    @classmethod
    def default(cls) -> "PodmanVersion":
        return cls.LATEST

    @classmethod
    def tokens(cls) -> list[str]:
        """All accepted version strings, canonical names first."""
        canonical = [member.value for member in cls]
        aliases = [alias for member in cls for alias in member.aliases]
        return canonical + aliases
