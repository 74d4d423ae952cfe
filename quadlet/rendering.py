import shlex
from enum import Enum
from typing import Any, Iterable

from jinja2 import Environment

Entries = list[tuple[str, str]]

SECTION_TEMPLATE = """\
{% if header %}
[{{ header }}]
{% endif %}
{% for key, value in entries %}
{{ key }}={{ value }}
{% endfor %}
"""

FILE_TEMPLATE = (
    "{% if unit is not none %}{{ unit }}\n{% endif %}"
    "{{ resource }}{{ globals }}"
    "{% if service is not none %}\n{{ service }}{% endif %}"
    "{% if install is not none %}\n{{ install }}{% endif %}"
)

# Block tags in FILE_TEMPLATE are followed by significant newlines, so it
# gets an environment without trim_blocks.
_section_template = Environment(trim_blocks=True, autoescape=False).from_string(SECTION_TEMPLATE)
_file_template = Environment(autoescape=False, keep_trailing_newline=True).from_string(FILE_TEMPLATE)


def format_value(value: Any) -> str:
    """Format a single option value the way systemd expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def quote(value: str) -> str:
    """Wrap a value in double quotes if systemd would otherwise split it."""
    if value and not any(c.isspace() for c in value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_option_value(value: Any) -> str:
    """Format a whole option value, lists and mappings included, as one string."""
    if isinstance(value, dict):
        return " ".join(quote(f"{k}={format_value(v)}") for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return " ".join(format_value(item) for item in value)
    return format_value(value)


def join_command(args: list[str] | None) -> str | None:
    """Join command arguments with shell quoting, None if there are none."""
    if not args:
        return None
    return shlex.join(args)


def collect_entries(options: Iterable[tuple[str, Any]]) -> Entries:
    """
    Turn (key, value) pairs into rendered entries.

    - None and empty values are skipped
    - lists produce one entry per item
    - mappings produce one `key=value` entry per item
    """
    entries: Entries = []
    for key, value in options:
        if value is None:
            continue
        if isinstance(value, dict):
            entries.extend((key, quote(f"{k}={format_value(v)}")) for k, v in value.items())
        elif isinstance(value, (list, tuple)):
            entries.extend((key, format_value(item)) for item in value)
        else:
            entries.append((key, format_value(value)))
    return entries


def render_section(header: str | None, entries: Entries) -> str:
    """Render an INI section. Without a header only the entries are written."""
    return _section_template.render(header=header, entries=entries)


def render_file(file) -> str:
    """Render a quadlet File: unit, resource plus globals, service, install."""
    return _file_template.render(
        unit=file.unit,
        resource=file.resource,
        globals=file.globals,
        service=file.service,
        install=file.install,
    )
