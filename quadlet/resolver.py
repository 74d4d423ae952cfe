from pathlib import Path

from quadlet.auto_update import AutoUpdate
from quadlet.config import FileConfig
from quadlet.container import Container
from quadlet.file import File
from quadlet.resource import Resource


class FileResolver:
    """Transforms description configs into quadlet File models"""

    def resolve(self, config: FileConfig, path: Path) -> File:
        """
        Resolve a description config into a File.

        Args:
            config: Loaded description
            path: Path of the description file (e.g. quadlets/web.yml)

        Returns:
            File ready to be downgraded and rendered
        """
        # Explicit name wins, otherwise web.yml -> web
        name = config.name or path.stem

        payload = getattr(config, config.resource_key).model_copy(deep=True)

        if isinstance(payload, Container) and payload.auto_update is None:
            # The label form is what `podman run --label` users write
            payload.auto_update = AutoUpdate.extract_from_labels(payload.label)

        return File(
            name=name,
            resource=Resource(payload),
            unit=config.unit.model_copy(deep=True) if config.unit is not None else None,
            globals=config.globals.model_copy(deep=True),
            service=config.service.model_copy(deep=True) if config.service is not None else None,
            install=config.install.model_copy(deep=True) if config.install is not None else None,
        )
