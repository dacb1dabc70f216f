"""Configuration validation."""

import pytest

from antflow.config import AllocatorConfig, Side, StrategyConfig
from antflow.errors import ConfigError


def test_defaults():
    assert AllocatorConfig().sizing == "min"
    assert StrategyConfig().egg_radius == 5
    assert StrategyConfig().line_strength == 100


@pytest.mark.parametrize("kwargs", [{"sizing": "avg"}, {"max_passes": 0}])
def test_bad_allocator_config(kwargs):
    with pytest.raises(ConfigError):
        AllocatorConfig(**kwargs)


@pytest.mark.parametrize("kwargs", [{"egg_radius": -1}, {"line_strength": 0}])
def test_bad_strategy_config(kwargs):
    with pytest.raises(ConfigError):
        StrategyConfig(**kwargs)


def test_side_parsing():
    assert Side.parse("allied") == Side.ALLIED
    assert Side.parse(" Enemy ") == Side.ENEMY
    with pytest.raises(ConfigError):
        Side.parse("neutral")
