"""Errors and helpers for downgrading quadlet files to an older podman version."""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from quadlet.rendering import format_option_value
from quadlet.version import PodmanVersion

if TYPE_CHECKING:
    from quadlet.resource import ResourceKind


class DowngradeError(Exception):
    """Raised when a quadlet file cannot be downgraded to a podman version."""

    def __init__(self, message: str, supported_version: PodmanVersion):
        super().__init__(message)
        self.supported_version = supported_version


class UnsupportedOptionError(DowngradeError):
    """A quadlet option is used that the target podman version does not know."""

    def __init__(self, option: str, value: str, supported_version: PodmanVersion):
        super().__init__(
            f"quadlet option `{option}={value}` was not "
            f"supported until podman v{supported_version}",
            supported_version,
        )
        self.option = option
        self.value = value


class UnsupportedKindError(DowngradeError):
    """The whole quadlet file kind did not exist in the target podman version."""

    def __init__(self, kind: "ResourceKind", supported_version: PodmanVersion):
        super().__init__(
            f"`.{kind}` quadlet files were not supported until podman v{supported_version}",
            supported_version,
        )
        self.kind = kind


@runtime_checkable
class Downgrade(Protocol):
    def downgrade(self, version: PodmanVersion) -> None:
        """Restrict the options in use to what `version` supports, in place.

        This is a one-way transformation, calling downgrade a second time with a
        higher version will not bring back options that were already removed.

        Raises DowngradeError for the first incompatible option found. Changes
        made before that point are kept.
        """
        ...


def is_set(value: Any) -> bool:
    """Whether an option value would be written to the quadlet file."""
    if value is None:
        return False
    if isinstance(value, (list, dict, str)):
        return len(value) > 0
    return True


def check_option(version: PodmanVersion, since: PodmanVersion, option: str, value: Any) -> None:
    """Raise UnsupportedOptionError if `option` is set and `version` predates `since`."""
    if version >= since or not is_set(value):
        return

    raise UnsupportedOptionError(option, format_option_value(value), since)
