from pathlib import Path
from typing import Iterator

from quadlet.base import QuadletModel
from quadlet.downgrade import check_option
from quadlet.host_paths import HostPath
from quadlet.rendering import Entries, collect_entries, join_command
from quadlet.version import PodmanVersion


class Image(QuadletModel):
    """Options for the `[Image]` section of a `.image` file"""
    SECTION = "Image"

    image: str
    all_tags: bool | None = None
    arch: str | None = None
    auth_file: Path | None = None
    cert_dir: Path | None = None
    creds: str | None = None
    decryption_key: Path | None = None
    os: str | None = None
    tls_verify: bool | None = None
    variant: str | None = None
    podman_args: list[str] = []

    # podman 5.0
    image_tag: str | None = None

    def entries(self) -> Entries:
        return collect_entries([
            ("Image", self.image),
            ("AllTags", self.all_tags),
            ("Arch", self.arch),
            ("AuthFile", self.auth_file),
            ("CertDir", self.cert_dir),
            ("Creds", self.creds),
            ("DecryptionKey", self.decryption_key),
            ("ImageTag", self.image_tag),
            ("OS", self.os),
            ("TLSVerify", self.tls_verify),
            ("Variant", self.variant),
            ("PodmanArgs", join_command(self.podman_args)),
        ])

    def host_paths(self) -> Iterator[HostPath]:
        for name in ("auth_file", "cert_dir", "decryption_key"):
            if getattr(self, name) is not None:
                yield HostPath.attribute(self, name)

    def downgrade(self, version: PodmanVersion) -> None:
        # `.image` files as a whole are gated by Resource.downgrade()
        check_option(version, PodmanVersion.V5_0, "ImageTag", self.image_tag)
