#!/usr/bin/env python3
"""Test suite for building the engine from configuration and product files"""

from datetime import timedelta

import numpy as np
import pytest
import yaml

from pygnssim.gnss.initialize import init_gnss_satellites
from pygnssim.io.config import GnssSatellitesConfig

from sp3_fixtures import EPOCH0, EPOCH0_UNIX, make_clk_page, make_sp3_page, true_position, write_page


def _settings(root, **overrides):
    settings = {
        'calculation': True,
        'directory_path': str(root),
        'true_position_file_sort': 'IGS',
        'true_position_first': 'igs21610.sp3',
        'true_position_last': 'igs21611.sp3',
        'true_position_interpolation_method': 0,
        'true_position_interpolation_number': 9,
        'true_clock_file_sort': 'IGS',
        'true_clock_file_extension': '.clk_30s',
        'true_clock_first': 'igs21610.clk_30s',
        'true_clock_last': 'igs21611.clk_30s',
        'true_clock_interpolation_number': 4,
        'estimate_position_file_sort': 'IGU',
        'estimate_position_first': 'igu21610_00.sp3',
        'estimate_position_last': 'igu21610_06.sp3',
        'estimate_position_interpolation_method': 1,
        'estimate_position_interpolation_number': 7,
        'estimate_clock_file_sort': 'IGU',
        'estimate_clock_file_extension': '.sp3',
        'estimate_clock_first': 'igu21610_00.sp3',
        'estimate_clock_last': 'igu21610_06.sp3',
        'estimate_clock_interpolation_number': 3,
        'estimate_ur_observe_or_predict': 'observe1',
    }
    settings.update(overrides)
    return settings


@pytest.fixture
def product_tree(tmp_path):
    for day in range(2):
        start = EPOCH0 + timedelta(days=day)
        write_page(tmp_path / 'IGS' / 'igs' / f'igs2161{day}.sp3', make_sp3_page(start))
        write_page(tmp_path / 'IGS' / 'igs' / 'clk_30s' / f'igs2161{day}.clk_30s',
                   make_clk_page(start, num_epochs=2880, interval=30.0))
    # Ultra-rapid: 48 h files issued every 6 h
    for hour in (0, 6):
        start = EPOCH0 + timedelta(hours=hour)
        write_page(tmp_path / 'IGS' / 'igu' / f'igu21610_{hour:02d}.sp3',
                   make_sp3_page(start, num_epochs=192, interval=900.0), eof=False)
    return tmp_path


def test_init_from_config(product_tree):
    config = GnssSatellitesConfig.from_dict(_settings(product_tree))
    satellites = init_gnss_satellites(config)
    assert satellites.is_calc_enabled

    # First observed segment of each ultra-rapid file: 00-06 h and 06-12 h.
    # Steps stay below the 30 s sampling of the true clock.
    start = EPOCH0_UNIX + 5 * 3600.0
    satellites.set_up(start, 20.0)
    g05 = satellites.index_from_id('G05')
    for elapsed in np.arange(0.0, 2 * 3600.0, 20.0):
        satellites.update(elapsed)
        assert satellites.is_valid(g05)
        np.testing.assert_allclose(satellites.get_satellite_position_ecef(g05),
                                   true_position('G05', start + elapsed), atol=1.0)


def test_estimate_outside_selected_segments(product_tree):
    satellites = init_gnss_satellites(GnssSatellitesConfig.from_dict(_settings(product_tree)))
    satellites.set_up(EPOCH0_UNIX + 14 * 3600.0)
    g05 = satellites.index_from_id('G05')
    assert satellites.true_info.is_valid(g05)
    assert not satellites.is_valid(g05)


def test_init_from_yaml_file(product_tree, tmp_path):
    path = tmp_path / 'gnss.yaml'
    path.write_text(yaml.safe_dump({'GNSS_SATELLITES': _settings(product_tree)}))
    satellites = init_gnss_satellites(path)
    satellites.set_up(EPOCH0_UNIX + 3 * 3600.0)
    assert satellites.is_valid(satellites.index_from_id('R01'))


def test_disabled_calculation(tmp_path):
    satellites = init_gnss_satellites(GnssSatellitesConfig.from_dict({'calculation': False}))
    assert not satellites.is_calc_enabled
    assert not satellites.is_valid(0)


def test_missing_product_file(product_tree):
    settings = _settings(product_tree, true_position_last='igs21612.sp3')
    with pytest.raises(FileNotFoundError):
        init_gnss_satellites(GnssSatellitesConfig.from_dict(settings))


def test_predicted_segment_with_clock_file(product_tree):
    settings = _settings(product_tree,
                         estimate_clock_file_sort='IGS',
                         estimate_clock_file_extension='.clk_30s',
                         estimate_clock_first='igs21610.clk_30s',
                         estimate_clock_last='igs21611.clk_30s',
                         estimate_ur_observe_or_predict='predict1')
    with pytest.raises(ValueError):
        init_gnss_satellites(GnssSatellitesConfig.from_dict(settings))


def test_unknown_ultra_rapid_selector(product_tree):
    settings = _settings(product_tree, estimate_ur_observe_or_predict='observe9')
    with pytest.raises(ValueError):
        init_gnss_satellites(GnssSatellitesConfig.from_dict(settings))


def test_ultra_rapid_position_with_daily_sp3_clock(product_tree):
    settings = _settings(product_tree,
                         estimate_clock_file_sort='IGS',
                         estimate_clock_first='igs21610.sp3',
                         estimate_clock_last='igs21611.sp3')
    satellites = init_gnss_satellites(GnssSatellitesConfig.from_dict(settings))
    g05 = satellites.index_from_id('G05')

    # Whole days of clock samples, not one segment per file
    assert len(satellites.estimate_info.clock.window(g05).times) == 2 * 288

    satellites.set_up(EPOCH0_UNIX + 5 * 3600.0)
    assert satellites.estimate_info.position.is_valid(g05)
    assert satellites.estimate_info.clock.is_valid(g05)


def test_daily_position_with_ultra_rapid_sp3_clock(product_tree):
    settings = _settings(product_tree,
                         estimate_position_file_sort='IGS',
                         estimate_position_first='igs21610.sp3',
                         estimate_position_last='igs21611.sp3')
    satellites = init_gnss_satellites(GnssSatellitesConfig.from_dict(settings))
    g05 = satellites.index_from_id('G05')

    # observe1 of both ultra-rapid files: 00-06 h and 06-12 h
    times = satellites.estimate_info.clock.window(g05).times
    assert times[-1] - times[0] < 12 * 3600.0

    satellites.set_up(EPOCH0_UNIX + 20 * 3600.0)
    assert satellites.estimate_info.position.is_valid(g05)
    assert not satellites.estimate_info.clock.is_valid(g05)
