import pytest

from quadlet.downgrade import (
    Downgrade,
    DowngradeError,
    UnsupportedKindError,
    UnsupportedOptionError,
    check_option,
    is_set,
)
from quadlet.container import Container
from quadlet.global_options import Globals
from quadlet.resource import ResourceKind
from quadlet.version import PodmanVersion


def test_option_error_message():
    """Test option errors name the option, value and version"""
    error = UnsupportedOptionError("Pull", "always", PodmanVersion.V4_8)
    assert str(error) == "quadlet option `Pull=always` was not supported until podman v4.8"
    assert error.option == "Pull"
    assert error.value == "always"
    assert error.supported_version is PodmanVersion.V4_8
    assert isinstance(error, DowngradeError)


def test_kind_error_message():
    """Test kind errors name the file extension and version"""
    error = UnsupportedKindError(ResourceKind.POD, PodmanVersion.V5_0)
    assert str(error) == "`.pod` quadlet files were not supported until podman v5.0"
    assert error.kind is ResourceKind.POD
    assert isinstance(error, DowngradeError)


def test_is_set():
    """Test which values count as set"""
    assert not is_set(None)
    assert not is_set([])
    assert not is_set({})
    assert not is_set("")
    assert is_set(False)
    assert is_set(0)
    assert is_set(["a"])


def test_check_option_passes_when_supported():
    """Test no error when the version is new enough"""
    check_option(PodmanVersion.V4_8, PodmanVersion.V4_8, "Pull", "always")
    check_option(PodmanVersion.V5_0, PodmanVersion.V4_8, "Pull", "always")


def test_check_option_passes_when_unset():
    """Test unset options are never a problem"""
    check_option(PodmanVersion.V4_4, PodmanVersion.V4_8, "Pull", None)
    check_option(PodmanVersion.V4_4, PodmanVersion.V4_8, "DNS", [])


def test_check_option_raises():
    """Test old versions reject set options"""
    with pytest.raises(UnsupportedOptionError) as exc_info:
        check_option(PodmanVersion.V4_7, PodmanVersion.V4_8, "DNS", ["1.1.1.1", "8.8.8.8"])

    assert exc_info.value.value == "1.1.1.1 8.8.8.8"
    assert exc_info.value.supported_version is PodmanVersion.V4_8


def test_models_implement_downgrade():
    """Test models satisfy the Downgrade protocol"""
    assert isinstance(Container(image="x"), Downgrade)
    assert isinstance(Globals(), Downgrade)
