"""Plain systemd sections written around the quadlet section."""

from quadlet.base import QuadletModel
from quadlet.rendering import Entries, collect_entries, join_command


class Unit(QuadletModel):
    SECTION = "Unit"

    description: str | None = None
    documentation: list[str] = []
    wants: list[str] = []
    requires: list[str] = []
    binds_to: list[str] = []
    after: list[str] = []
    before: list[str] = []

    def entries(self) -> Entries:
        return collect_entries([
            ("Description", self.description),
            ("Documentation", " ".join(self.documentation) or None),
            ("Wants", self.wants),
            ("Requires", self.requires),
            ("BindsTo", self.binds_to),
            ("After", self.after),
            ("Before", self.before),
        ])


class Service(QuadletModel):
    SECTION = "Service"

    restart: str | None = None
    timeout_start_sec: int | None = None
    timeout_stop_sec: int | None = None
    exec_start_pre: list[list[str]] = []
    exec_stop_post: list[list[str]] = []

    def entries(self) -> Entries:
        return collect_entries([
            ("Restart", self.restart),
            ("TimeoutStartSec", self.timeout_start_sec),
            ("TimeoutStopSec", self.timeout_stop_sec),
            ("ExecStartPre", [join_command(command) for command in self.exec_start_pre if command]),
            ("ExecStopPost", [join_command(command) for command in self.exec_stop_post if command]),
        ])


class Install(QuadletModel):
    SECTION = "Install"

    wanted_by: list[str] = []
    required_by: list[str] = []

    def entries(self) -> Entries:
        return collect_entries([
            ("WantedBy", self.wanted_by),
            ("RequiredBy", self.required_by),
        ])
