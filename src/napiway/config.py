"""Loads and validates the generator config file.

The config is a YAML document with the API specification under ``spec`` and
one block per generation target (``goServer``, ``goSdk``, ``tsSdk``).
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from napiway.errors import ConfigError, SpecValidationError
from napiway.spec.base import Specification, SpecModel
from napiway.spec.validator import validate_spec

TARGET_NAMES = ("goServer", "goSdk", "tsSdk")


class GoServerGeneration(SpecModel):
    """Go server helpers: one handler file per endpoint."""

    output_dir: str = ""
    # Usually the last element of the output directory path.
    package_name: str = ""


class GoSDKGeneration(SpecModel):
    output_dir: str = ""
    module_name: str = ""  # e.g. "github.com/username/project/sdk"

    @property
    def package_name(self) -> str:
        return self.module_name.rsplit("/", 1)[-1]


class TsSDKGeneration(SpecModel):
    """TypeScript SDK; the optional fields end up in package.json."""

    output_dir: str = ""
    package_name: str = ""
    description: str | None = None
    author: str | None = None
    license: str | None = None
    repository: str | None = None
    website: str | None = None
    keywords: list[str] = []


class Config(SpecModel):
    go_server: GoServerGeneration | None = None
    go_sdk: GoSDKGeneration | None = None
    ts_sdk: TsSDKGeneration | None = None
    spec: Specification

    def targets(self) -> list[tuple[str, SpecModel]]:
        """Configured target blocks in a fixed order, keyed by their YAML name."""
        blocks = {"goServer": self.go_server, "goSdk": self.go_sdk, "tsSdk": self.ts_sdk}
        return [(name, blocks[name]) for name in TARGET_NAMES if blocks[name] is not None]


def load_config(path: Path) -> Config:
    """Read a YAML config file into a Config model.

    Relative output directories are resolved against the config file's
    directory. The result is not validated yet; call ``validate_config``.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid config {path}: {e}") from e

    base_dir = path.parent
    for _, block in config.targets():
        if block.output_dir and not Path(block.output_dir).is_absolute():
            block.output_dir = str(base_dir / block.output_dir)
    return config


def validate_config(config: Config) -> None:
    """Check the target blocks, then the specification."""
    if not config.targets():
        raise ConfigError("at least one of goServer, goSdk, or tsSdk generation must be specified")

    for name, block in config.targets():
        missing = _missing_target_field(name, block)
        if missing:
            raise ConfigError(f"invalid {name} configuration: {missing} is required for {name} generation")

    try:
        validate_spec(config.spec)
    except SpecValidationError as e:
        raise e.wrap("invalid spec") from None


def _missing_target_field(name: str, block: SpecModel) -> str | None:
    if not block.output_dir:
        return "outputDir"
    if name == "goSdk":
        return None if block.module_name else "moduleName"
    return None if block.package_name else "packageName"
