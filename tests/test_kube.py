from pathlib import Path

import pytest
from pydantic import ValidationError

from quadlet.auto_update import AutoUpdate
from quadlet.downgrade import UnsupportedOptionError
from quadlet.kube import Kube, KubeAutoUpdate
from quadlet.version import PodmanVersion


def test_kube_auto_update_parsing():
    """Test `[container/]value` parsing"""
    assert KubeAutoUpdate.model_validate("registry") == KubeAutoUpdate(auto_update=AutoUpdate.REGISTRY)
    parsed = KubeAutoUpdate.model_validate("app/local")
    assert parsed.container == "app"
    assert parsed.auto_update is AutoUpdate.LOCAL
    assert str(parsed) == "app/local"


def test_kube_auto_update_invalid_value():
    """Test unknown values are rejected"""
    with pytest.raises(ValidationError):
        KubeAutoUpdate.model_validate("app/sometimes")


def test_annotation():
    """Test the kube play annotation equivalent"""
    assert KubeAutoUpdate.model_validate("registry").annotation == "io.containers.autoupdate=registry"
    assert KubeAutoUpdate.model_validate("app/local").annotation == "io.containers.autoupdate/app=local"


def test_render():
    """Test rendering a kube section"""
    kube = Kube(yaml="web.yml", config_map=["web-config.yml"], auto_update=["app/registry"], network=["web"])
    assert str(kube) == (
        "[Kube]\n"
        "Yaml=web.yml\n"
        "ConfigMap=web-config.yml\n"
        "AutoUpdate=app/registry\n"
        "Network=web\n"
    )


def test_downgrade_auto_update_becomes_annotation():
    """Test AutoUpdate= turns into --annotation before 4.8"""
    kube = Kube(yaml="web.yml", auto_update=["registry", "app/local"])
    kube.downgrade(PodmanVersion.V4_7)

    assert kube.auto_update == []
    assert kube.podman_args == [
        "--annotation", "io.containers.autoupdate=registry",
        "--annotation", "io.containers.autoupdate/app=local",
    ]


def test_downgrade_auto_update_before_podman_args():
    """Test the annotation fallback needs PodmanArgs= from 4.5"""
    kube = Kube(yaml="web.yml", auto_update=["registry"])

    with pytest.raises(UnsupportedOptionError, match="PodmanArgs="):
        kube.downgrade(PodmanVersion.V4_4)

    assert kube.auto_update == []


@pytest.mark.parametrize("field, value, option, since", [
    ("kube_down_force", True, "KubeDownForce", PodmanVersion.V5_0),
    ("exit_code_propagation", "all", "ExitCodePropagation", PodmanVersion.V4_7),
    ("set_working_directory", "yaml", "SetWorkingDirectory", PodmanVersion.V4_6),
    ("log_driver", "journald", "LogDriver", PodmanVersion.V4_5),
])
def test_downgrade_rejects_gated_options(field, value, option, since):
    """Test each gated option is rejected one version too early"""
    older = list(PodmanVersion)[list(PodmanVersion).index(since) - 1]

    kube = Kube(yaml="web.yml", **{field: value})
    kube.model_copy(deep=True).downgrade(since)

    with pytest.raises(UnsupportedOptionError) as exc_info:
        kube.downgrade(older)
    assert exc_info.value.option == option
    assert exc_info.value.supported_version is since


def test_host_paths():
    """Test yaml and config maps are host paths"""
    kube = Kube(yaml="web.yml", config_map=["a.yml", "b.yml"])
    assert [h.path for h in kube.host_paths()] == [Path("web.yml"), Path("a.yml"), Path("b.yml")]
