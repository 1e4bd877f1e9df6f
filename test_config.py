# test_config.py
import json

import numpy as np
import pytest

from arraygrid import ConfigError, DEFAULT_PARAMS, IntegerGrid, get_param, load_config, set_params


def test_defaults():
    assert get_param('dtype') == DEFAULT_PARAMS['dtype']
    assert get_param('window_stride') == 1
    assert IntegerGrid(2, 2).dtype == np.int64


def test_load_config_from_file(tmp_path):
    config_path = tmp_path / "grid_config.json"
    with open(config_path, 'w') as f:
        json.dump({'dtype': 'int32', 'window_stride': 4}, f)

    params = load_config(str(config_path), window_stride=3)

    assert params['dtype'] == 'int32'
    assert params['window_stride'] == 3
    assert IntegerGrid(2, 2).dtype == np.int32


def test_set_params():
    set_params(sum_dtype='int32')
    assert get_param('sum_dtype') == 'int32'


@pytest.mark.parametrize("overrides", [
    {'dtype': 'float32'},
    {'sum_dtype': 'uint64'},
    {'dtype': 'not-a-dtype'},
    {'window_stride': 0},
    {'window_stride': True},
    {'scales': [16, 32]},
])
def test_invalid_config(overrides):
    with pytest.raises(ConfigError):
        load_config(**overrides)
    with pytest.raises(ConfigError):
        set_params(**overrides)

    # a failed update leaves the defaults in place
    assert get_param('dtype') == DEFAULT_PARAMS['dtype']
    assert get_param('window_stride') == 1


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "missing.json"))


def test_unknown_param():
    with pytest.raises(ConfigError):
        get_param('threshold')
