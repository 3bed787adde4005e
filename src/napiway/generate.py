"""The generation run: validate the config, build IR and emit every target."""

from pathlib import Path

from napiway.config import Config, validate_config
from napiway.emitter.ir_json import JsonIrEmitter
from napiway.ir.assembler import build_api
from napiway.ir.models import ApiIR
from napiway.ir.resolver import resolver_for_target
from napiway.log import get_logger

logger = get_logger(__name__)


def build_target_irs(config: Config, max_workers: int | None = None) -> dict[str, ApiIR]:
    """Build a fresh ApiIR for each configured target. The config must be validated."""
    irs = {}
    for name, _ in config.targets():
        irs[name] = build_api(config.spec, resolver_for_target(name), target=name, max_workers=max_workers)
    return irs


def run_generation(config: Config, emitter=None, max_workers: int | None = None) -> dict[str, list[Path]]:
    """Validate, then emit every target in turn.

    Output directories are only cleared once validation has passed.
    Returns {target name: written files}.
    """
    validate_config(config)
    emitter = emitter or JsonIrEmitter()

    irs = build_target_irs(config, max_workers=max_workers)
    results = {}
    for name, block in config.targets():
        output_dir = Path(block.output_dir).resolve()
        logger.info("generating %s into %s", name, output_dir)
        results[name] = emitter.emit(irs[name], block, output_dir)
    return results
