"""Unified CLI for quadlet-gen."""

import sys
from pathlib import Path

from pydantic import ValidationError
from ruamel.yaml.error import YAMLError

from quadlet.config import ConfigLoader, get_absolute_host_paths, get_output_dir, get_podman_version
from quadlet.downgrade import DowngradeError
from quadlet.file import File
from quadlet.host_paths import absolutize
from quadlet.resolver import FileResolver
from quadlet.version import PodmanVersion

DESCRIPTIONS_DIR = "quadlets"


def print_usage() -> None:
    """Print main usage information."""
    print("Usage: quadlet <command> [args]", file=sys.stderr)
    print()
    print("Commands:")
    print("  generate [files]        Generate quadlet files from description files")
    print("  service-name <files>    Print the systemd service names quadlet will generate")
    print("  versions                List supported podman versions")
    print()
    print("Without files, generate uses every *.yml below quadlets/")
    print()
    print("Generate options:")
    print("  --podman-version V      Podman version to generate for (default: latest)")
    print("                          Older versions drop or reject newer options")
    print("  --output DIR            Directory to write quadlet files to (default: .)")
    print("  --absolute-host-paths   Make relative host paths absolute, relative to")
    print("                          the description file's directory")
    print()
    print("Options can also be set in .quadlet.yml:")
    print("  podman_version, output_dir, absolute_host_paths")
    print()
    print("Examples:")
    print("  quadlet generate")
    print("  quadlet generate quadlets/web.yml --podman-version 4.6")
    print("  quadlet generate --output ~/.config/containers/systemd")
    print("  quadlet service-name quadlets/web.yml")


def find_descriptions() -> list[Path]:
    """Find all description files below quadlets/, sorted by path."""
    return sorted(Path(DESCRIPTIONS_DIR).glob("**/*.yml"))


def load_file(path: Path) -> File:
    """Load and resolve a single description file."""
    config = ConfigLoader.load(path)
    return FileResolver().resolve(config, path)


def cmd_generate(args: list[str]) -> int:
    """Generate quadlet files."""
    paths = []
    version_arg = None
    output_arg = None
    absolute = None

    i = 0
    while i < len(args):
        if args[i] == "--podman-version" and i + 1 < len(args):
            version_arg = args[i + 1]
            i += 2
        elif args[i] == "--output" and i + 1 < len(args):
            output_arg = args[i + 1]
            i += 2
        elif args[i] == "--absolute-host-paths":
            absolute = True
            i += 1
        elif args[i].startswith("--"):
            print(f"Unknown argument: {args[i]}", file=sys.stderr)
            return 1
        else:
            paths.append(Path(args[i]))
            i += 1

    try:
        version = PodmanVersion.parse(version_arg) if version_arg else get_podman_version()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_dir = Path(output_arg) if output_arg else get_output_dir()
    if absolute is None:
        absolute = get_absolute_host_paths()

    if not paths:
        paths = find_descriptions()
        if not paths:
            print(f"Error: No description files found in {DESCRIPTIONS_DIR}/", file=sys.stderr)
            return 1

    print(f"Generating {len(paths)} quadlet file(s) for podman {version}...")

    failed = []
    for path in paths:
        try:
            file = load_file(path)
            if absolute:
                absolutize(file, path.parent.absolute())
            file.downgrade(version)
        except (ValidationError, YAMLError, DowngradeError, OSError) as e:
            print(f"Error: {path}: {e}", file=sys.stderr)
            failed.append(str(path))
            continue

        output_dir.mkdir(parents=True, exist_ok=True)
        target = output_dir / file.file_name()
        target.write_text(str(file))
        print(f"  {path} -> {target} ({file.service_name()})")

    if failed:
        print(f"\nFailed to generate: {', '.join(failed)}", file=sys.stderr)
        return 1

    print(f"\nGenerated {len(paths)} quadlet file(s) in {output_dir}")
    return 0


def cmd_service_name(args: list[str]) -> int:
    """Print generated service names."""
    if not args:
        print("Error: service-name requires at least one description file", file=sys.stderr)
        return 1

    exit_code = 0
    for arg in args:
        try:
            file = load_file(Path(arg))
        except (ValidationError, YAMLError, OSError) as e:
            print(f"Error: {arg}: {e}", file=sys.stderr)
            exit_code = 1
            continue
        print(file.service_name())

    return exit_code


def cmd_versions(args: list[str]) -> int:
    """List supported podman versions."""
    for version in PodmanVersion:
        print(f"{version}  ({', '.join(version.aliases)})")
    return 0


def main():
    if len(sys.argv) < 2:
        print_usage()
        sys.exit(1)

    command = sys.argv[1]
    args = sys.argv[2:]

    if command in ("--help", "-h"):
        print_usage()
        sys.exit(0)
    elif command == "generate":
        sys.exit(cmd_generate(args))
    elif command == "service-name":
        sys.exit(cmd_service_name(args))
    elif command == "versions":
        sys.exit(cmd_versions(args))
    else:
        print(f"Unknown command: {command}", file=sys.stderr)
        print_usage()
        sys.exit(1)


if __name__ == "__main__":
    main()
