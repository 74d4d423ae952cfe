from pathlib import Path

import pytest

from quadlet.downgrade import UnsupportedOptionError
from quadlet.host_paths import absolutize
from quadlet.volume import Volume
from quadlet.version import PodmanVersion


def test_render():
    """Test rendering a volume section"""
    volume = Volume(copy=False, device="./data", type="bind", options="bind", user="1000")
    assert str(volume) == (
        "[Volume]\n"
        "Copy=false\n"
        "Device=./data\n"
        "Type=bind\n"
        "Options=bind\n"
        "User=1000\n"
    )


def test_copy_by_field_name():
    """Test copy_ can be set by field name too"""
    assert Volume(copy_=True).copy_ is True


def test_host_paths():
    """Test the device is the only host path"""
    assert list(Volume().host_paths()) == []

    volume = Volume(device="./data")
    handles = list(volume.host_paths())
    assert [h.path for h in handles] == [Path("data")]

    handles[0].path = Path("/srv/data")
    assert volume.device == "/srv/data"
    assert "Device=/srv/data\n" in str(volume)


@pytest.mark.parametrize("field, option, since", [
    ("driver", "Driver", PodmanVersion.V4_8),
    ("image", "Image", PodmanVersion.V4_8),
    ("volume_name", "VolumeName", PodmanVersion.V4_7),
])
def test_downgrade_rejects_gated_options(field, option, since):
    """Test gated options are rejected before their version"""
    Volume(**{field: "x"}).downgrade(since)

    with pytest.raises(UnsupportedOptionError) as exc_info:
        Volume(**{field: "x"}).downgrade(PodmanVersion.V4_6)
    assert exc_info.value.option == option
    assert exc_info.value.supported_version is since


@pytest.mark.parametrize("device", ["tmpfs", "nfs.example.com:/export/data"])
def test_device_without_host_path(device):
    """Test devices that are not host paths are left alone"""
    volume = Volume(type="nfs" if ":" in device else "tmpfs", device=device)
    assert list(volume.host_paths()) == []

    assert absolutize(volume, Path("/base")) == 0
    assert volume.device == device


def test_render_quotes_labels_with_spaces():
    """Test a label with whitespace stays a single value"""
    assert 'Label="description=app data"\n' in str(Volume(label=["description=app data"]))
