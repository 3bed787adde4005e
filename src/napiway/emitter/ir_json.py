"""Emitter that writes the IR of one target as JSON documents.

Layout of the output directory::

    api.json                 target settings plus the full ApiIR
    endpoints/<Name>.json    one EndpointIR per endpoint
"""

import json
from pathlib import Path

from napiway.emitter.output import clear_output_dir, write_files
from napiway.ir.models import ApiIR
from napiway.log import get_logger
from napiway.spec.base import SpecModel

logger = get_logger(__name__)


class JsonIrEmitter:
    """Renders an ApiIR to files and writes them into the target's output directory."""

    def render(self, api: ApiIR, target_settings: SpecModel) -> dict[str, str]:
        """Return {relative path: content} without touching the filesystem."""
        files: dict[str, str] = {}
        manifest = {
            "target": api.target,
            "settings": target_settings.model_dump(mode="json", by_alias=True),
            "api": api.model_dump(mode="json"),
        }
        files["api.json"] = json.dumps(manifest, indent=2) + "\n"
        for endpoint in api.endpoints:
            files[f"endpoints/{endpoint.name}.json"] = endpoint.model_dump_json(indent=2) + "\n"
        return files

    def emit(self, api: ApiIR, target_settings: SpecModel, output_dir: Path) -> list[Path]:
        """Clear ``output_dir`` and write the rendered files into it."""
        files = self.render(api, target_settings)
        clear_output_dir(output_dir)
        written = write_files(output_dir, files)
        logger.debug("wrote %d files to %s", len(written), output_dir)
        return written
