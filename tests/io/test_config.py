#!/usr/bin/env python3
"""Test suite for engine configuration loading"""

import json
import unittest

import pytest
import yaml

from pygnssim.io.config import GnssSatellitesConfig, ProductSource, load_config

SETTINGS = {
    'calculation': True,
    'directory_path': '/data/gnss/',
    'true_position_file_sort': 'IGS',
    'true_position_first': 'igs21610.sp3',
    'true_position_last': 'igs21611.sp3',
    'true_position_interpolation_method': 0,
    'true_position_interpolation_number': 9,
    'true_clock_file_sort': 'IGS',
    'true_clock_file_extension': '.clk_30s',
    'true_clock_first': 'igs21610.clk_30s',
    'true_clock_last': 'igs21611.clk_30s',
    'true_clock_interpolation_number': 3,
    'estimate_position_file_sort': 'IGU',
    'estimate_position_first': 'igu21610_00.sp3',
    'estimate_position_last': 'igu21611_00.sp3',
    'estimate_position_interpolation_method': 1,
    'estimate_position_interpolation_number': 9,
    'estimate_clock_file_sort': 'IGU',
    'estimate_clock_file_extension': '.sp3',
    'estimate_clock_first': 'igu21610_00.sp3',
    'estimate_clock_last': 'igu21611_00.sp3',
    'estimate_clock_interpolation_number': 3,
    'estimate_ur_observe_or_predict': 'observe2',
}


class TestGnssSatellitesConfig(unittest.TestCase):

    def test_from_dict(self):
        config = GnssSatellitesConfig.from_dict(SETTINGS)
        self.assertTrue(config.calculation)
        self.assertEqual(config.directory_path, '/data/gnss/')
        self.assertEqual(config.true_position,
                         ProductSource('IGS', 'igs21610.sp3', 'igs21611.sp3', 9, 0, None))
        self.assertEqual(config.true_clock.file_extension, '.clk_30s')
        self.assertEqual(config.estimate_position.interpolation_method, 1)
        self.assertEqual(config.estimate_ur_observe_or_predict, 'observe2')

    def test_disabled(self):
        config = GnssSatellitesConfig.from_dict({'calculation': 'DISABLE'})
        self.assertFalse(config.calculation)
        self.assertIsNone(config.true_position)

    def test_missing_key(self):
        settings = dict(SETTINGS)
        del settings['estimate_clock_first']
        with self.assertRaises(ValueError):
            GnssSatellitesConfig.from_dict(settings)

    def test_missing_calculation(self):
        with self.assertRaises(ValueError):
            GnssSatellitesConfig.from_dict({})

    def test_interpolation_number_too_small(self):
        with self.assertRaises(ValueError):
            GnssSatellitesConfig.from_dict(dict(SETTINGS, true_clock_interpolation_number=1))

    def test_unknown_interpolation_method(self):
        with self.assertRaises(ValueError):
            GnssSatellitesConfig.from_dict(dict(SETTINGS, true_position_interpolation_method=2))

    def test_ini_style_booleans(self):
        config = GnssSatellitesConfig.from_dict(dict(SETTINGS, calculation='ENABLE'))
        self.assertTrue(config.calculation)
        with self.assertRaises(ValueError):
            GnssSatellitesConfig.from_dict(dict(SETTINGS, calculation='maybe'))


def test_load_yaml_with_logging_section(tmp_path):
    path = tmp_path / 'gnss.yaml'
    path.write_text(yaml.safe_dump({
        'GNSS_SATELLITES': SETTINGS,
        'logging': {'default_level': 'DEBUG'},
    }))
    config = load_config(path)
    assert config.true_position.interpolation_number == 9
    assert config.logging == {'default_level': 'DEBUG'}


def test_load_json_top_level(tmp_path):
    path = tmp_path / 'gnss.json'
    path.write_text(json.dumps(SETTINGS))
    config = load_config(str(path))
    assert config.estimate_clock.file_extension == '.sp3'
    assert config.logging is None


def test_load_unsupported_format(tmp_path):
    path = tmp_path / 'gnss.ini'
    path.write_text("[GNSS_SATELLITES]\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / 'missing.yaml')


if __name__ == '__main__':
    unittest.main()
