from quadlet.systemd import Install, Service, Unit


def test_unit():
    """Test rendering the unit section"""
    unit = Unit(description="Web", documentation=["https://nginx.org", "man:nginx(8)"], wants=["db.service"])
    assert str(unit) == (
        "[Unit]\n"
        "Description=Web\n"
        "Documentation=https://nginx.org man:nginx(8)\n"
        "Wants=db.service\n"
    )


def test_service():
    """Test commands are shell quoted, one entry each"""
    service = Service(
        restart="on-failure",
        timeout_start_sec=900,
        exec_start_pre=[["mkdir", "-p", "/srv/web data"], []],
    )
    assert str(service) == (
        "[Service]\n"
        "Restart=on-failure\n"
        "TimeoutStartSec=900\n"
        "ExecStartPre=mkdir -p '/srv/web data'\n"
    )


def test_install():
    """Test rendering the install section"""
    assert str(Install(wanted_by=["default.target", "multi-user.target"])) == (
        "[Install]\n"
        "WantedBy=default.target\n"
        "WantedBy=multi-user.target\n"
    )
