from enum import Enum

# Podman-specific label read by `podman auto-update`
LABEL_KEY = "io.containers.autoupdate"


class ParseAutoUpdateError(ValueError):
    """Raised when parsing an unknown AutoUpdate value."""

    def __init__(self, value: str):
        super().__init__(f"unknown auto update variant `{value}`, must be `registry` or `local`")
        self.value = value


class AutoUpdate(Enum):
    """Valid values for the `AutoUpdate=` quadlet option."""
    REGISTRY = "registry"
    LOCAL = "local"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _lookup(cls, value: str) -> "AutoUpdate | None":
        for member in cls:
            if member.value == value:
                return member
        return None

    @classmethod
    def parse(cls, value: str) -> "AutoUpdate":
        member = cls._lookup(value)
        if member is None:
            raise ParseAutoUpdateError(value)
        return member

    def label(self) -> str:
        """The `io.containers.autoupdate` label equivalent to this value."""
        return f"{LABEL_KEY}={self.value}"

    @classmethod
    def extract_from_labels(cls, labels: list[str]) -> "AutoUpdate | None":
        """
        Extract all valid `io.containers.autoupdate` labels from `labels`.

        Matching labels are removed from the list in place and the value of the
        last one is returned. Labels with that key but a value other than
        `registry` or `local` are left in the list untouched.

        Returns:
            The last valid value found, None if there was none
        """
        auto_update = None
        kept = []
        for label in labels:
            key, sep, value = label.partition("=")
            found = cls._lookup(value) if key == LABEL_KEY and sep else None
            if found is None:
                kept.append(label)
            else:
                auto_update = found

        labels[:] = kept
        return auto_update
