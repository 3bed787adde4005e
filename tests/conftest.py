from pathlib import Path

import pytest

from napiway.config import load_config, validate_config

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def config():
    """The fixture config, loaded and validated."""
    cfg = load_config(FIXTURES / "spec.yaml")
    validate_config(cfg)
    return cfg


@pytest.fixture
def spec(config):
    return config.spec
