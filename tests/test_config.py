#!/usr/bin/env python
# SPDX-FileCopyrightText: (C) 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0
import os

import pytest
import numpy as np
from pydantic import ValidationError

from mhlort.config import RngConfig, RuntimeConfig, apply_config, get_runtime_config, \
    load_config, make_rng, set_runtime_config
from mhlort.utils.common import parse_yaml

CONFIG_DIR = os.path.join(os.path.dirname(__file__), '..', 'config')

@pytest.fixture(autouse=True)
def restore_runtime_config():
    yield
    set_runtime_config(None)


@pytest.mark.unit
def test_runtime_yaml_config():
    cfg = load_config(os.path.join(CONFIG_DIR, 'runtime.yaml'))
    assert cfg.loglevel == 'WARNING'
    assert cfg.allow_placeholder_ops is True
    assert cfg.rng.bitgen == 'PCG64'
    assert cfg.rng.seed is None

@pytest.mark.unit
def test_config_from_file(tmp_path):
    cfgfile = tmp_path / 'rt.yaml'
    cfgfile.write_text('loglevel: debug\nallow_placeholder_ops: false\nrng:\n  bitgen: SFC64\n  seed: 5\n')
    cfg = load_config(cfgfile)
    assert cfg.loglevel == 'DEBUG'
    assert cfg.allow_placeholder_ops is False
    assert cfg.rng == RngConfig(bitgen='SFC64', seed=5)

@pytest.mark.unit
def test_empty_config_file(tmp_path):
    cfgfile = tmp_path / 'empty.yaml'
    cfgfile.write_text('')
    assert parse_yaml(cfgfile) == {}
    assert load_config(cfgfile) == RuntimeConfig()

@pytest.mark.unit
def test_config_validation():
    with pytest.raises(ValidationError):
        RuntimeConfig(loglevel='chatty')
    with pytest.raises(ValidationError):
        RuntimeConfig(rng={'bitgen': 'Xorshift'})
    with pytest.raises(ValidationError):
        RuntimeConfig(rng={'seed': -1})
    with pytest.raises(ValidationError):
        RuntimeConfig(unknown_key=1)

@pytest.mark.unit
def test_runtime_config_singleton():
    assert get_runtime_config() == RuntimeConfig()
    cfg = RuntimeConfig(allow_placeholder_ops=False)
    apply_config(cfg)
    assert get_runtime_config() is cfg
    set_runtime_config(None)
    assert get_runtime_config().allow_placeholder_ops is True

@pytest.mark.unit
def test_make_rng():
    seeded = RuntimeConfig(rng=RngConfig(bitgen='MT19937', seed=11))
    g = make_rng(seeded)
    assert isinstance(g, np.random.Generator)
    assert isinstance(g.bit_generator, np.random.MT19937)
    assert make_rng(seeded).integers(0, 10**9) == make_rng(seeded).integers(0, 10**9)
    assert isinstance(make_rng().bit_generator, np.random.PCG64)
