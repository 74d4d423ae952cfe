import pytest

from quadlet.version import PodmanVersion


def test_canonical_string():
    """Test versions render as their canonical dotted string"""
    assert str(PodmanVersion.V4_4) == "4.4"
    assert str(PodmanVersion.V5_0) == "5.0"


def test_parse_canonical_and_patch_aliases():
    """Test patch releases resolve to their minor version"""
    assert PodmanVersion.parse("4.6") is PodmanVersion.V4_6
    assert PodmanVersion.parse("4.6.1") is PodmanVersion.V4_6
    assert PodmanVersion("4.8.3") is PodmanVersion.V4_8


def test_latest_alias_is_newest():
    """Test latest, LATEST and default() all point at the newest version"""
    newest = list(PodmanVersion)[-1]
    assert PodmanVersion.parse("latest") is newest
    assert PodmanVersion.LATEST is newest
    assert PodmanVersion.default() is newest
    assert max(PodmanVersion) is newest


def test_latest_is_not_a_separate_member():
    """Test the LATEST alias does not add a version"""
    assert [str(v) for v in PodmanVersion] == ["4.4", "4.5", "4.6", "4.7", "4.8", "5.0"]


def test_ordering_follows_declaration():
    """Test ordering is total and follows release order"""
    versions = list(PodmanVersion)
    assert sorted(reversed(versions)) == versions
    for older, newer in zip(versions, versions[1:]):
        assert older < newer
        assert newer > older
        assert older <= newer
        assert not newer <= older


def test_compare_with_other_types_fails():
    """Test versions are not comparable with plain values"""
    with pytest.raises(TypeError):
        PodmanVersion.V4_4 < "4.5"


def test_parse_unknown_version():
    """Test unknown versions are rejected with the accepted tokens listed"""
    with pytest.raises(ValueError, match="unsupported podman version '3.4'"):
        PodmanVersion.parse("3.4")


def test_tokens_include_aliases():
    """Test tokens lists canonical names and aliases"""
    tokens = PodmanVersion.tokens()
    assert tokens[:6] == ["4.4", "4.5", "4.6", "4.7", "4.8", "5.0"]
    assert "4.4.4" in tokens
    assert "latest" in tokens
    assert PodmanVersion.V4_5.aliases == ["4.5.0", "4.5.1"]
