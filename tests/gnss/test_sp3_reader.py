#!/usr/bin/env python3
"""Test suite for SP3 / CLK product parsing"""

import unittest
from datetime import timedelta

import numpy as np
import pytest

from pygnssim.core.constants import CLIGHT
from pygnssim.core.satellite_numbering import ConstellationIndex
from pygnssim.core.time import unix_to_julian_date
from pygnssim.coordinate import ecef2eci
from pygnssim.gnss.sp3_reader import (
    UltraRapidMode,
    parse_sp3_header,
    read_clk_clock,
    read_sp3_clock,
    read_sp3_position,
)

from sp3_fixtures import (
    EPOCH0,
    EPOCH0_UNIX,
    make_clk_page,
    make_sp3_page,
    stored_position,
    true_clock_us,
    two_day_pages,
)


class TestUltraRapidMode(unittest.TestCase):

    def test_from_string(self):
        self.assertEqual(UltraRapidMode.from_string('observe1'), UltraRapidMode.OBSERVE1)
        self.assertEqual(UltraRapidMode.from_string('observe4'), UltraRapidMode.OBSERVE4)
        self.assertEqual(UltraRapidMode.from_string('predict2'), UltraRapidMode.PREDICT2)

    def test_from_string_invalid(self):
        for text in ('observe5', 'predict0', 'unknown', ''):
            with self.assertRaises(ValueError):
                UltraRapidMode.from_string(text)

    def test_segment(self):
        self.assertEqual(UltraRapidMode.OBSERVE1.segment, 0)
        self.assertEqual(UltraRapidMode.PREDICT4.segment, 7)
        self.assertTrue(UltraRapidMode.PREDICT1.is_predict)
        self.assertFalse(UltraRapidMode.OBSERVE4.is_predict)
        with self.assertRaises(ValueError):
            UltraRapidMode.NOT_USE.segment


class TestSp3Header(unittest.TestCase):

    def test_parse(self):
        header = parse_sp3_header(make_sp3_page(num_epochs=96, interval=900.0))
        self.assertEqual(header.num_epochs, 96)
        self.assertEqual(header.interval, 900.0)
        self.assertEqual(header.num_satellites, 5)
        self.assertEqual(header.data_start, 5)

    def test_malformed(self):
        with self.assertRaises(ValueError):
            parse_sp3_header(["#cP2021", "##", "+"])

    def test_no_epoch(self):
        page = make_sp3_page(num_epochs=1)[:5]
        with self.assertRaises(ValueError):
            parse_sp3_header(page)


class TestSp3Position(unittest.TestCase):

    def setUp(self):
        self.index = ConstellationIndex()

    def test_two_day_product(self):
        product = read_sp3_position(two_day_pages(), UltraRapidMode.NOT_USE, self.index)
        g01 = product.ecef[self.index.index_from_id('G01')]
        self.assertEqual(len(g01), 576)
        self.assertEqual(product.interval, 300.0)
        self.assertEqual(product.start_time, EPOCH0_UNIX)
        self.assertEqual(product.end_time, EPOCH0_UNIX + 575 * 300.0)
        np.testing.assert_allclose(g01.values[12], stored_position('G01', EPOCH0_UNIX + 3600.0),
                                   rtol=1e-12)
        # Untracked satellites stay empty
        self.assertEqual(len(product.ecef[self.index.index_from_id('G03')]), 0)

    def test_eci_is_rotated_ecef(self):
        product = read_sp3_position([make_sp3_page(num_epochs=4)], UltraRapidMode.NOT_USE,
                                    self.index)
        sat = self.index.index_from_id('E01')
        for n in range(4):
            t = product.ecef[sat].times[n]
            expected = ecef2eci(product.ecef[sat].values[n], unix_to_julian_date(t))
            np.testing.assert_allclose(product.eci[sat].values[n], expected, atol=1e-6)

    def test_unavailable_records_skipped(self):
        page = make_sp3_page(num_epochs=10, missing={'G02': {3, 4}})
        product = read_sp3_position([page], UltraRapidMode.NOT_USE, self.index)
        g02 = product.ecef[self.index.index_from_id('G02')]
        self.assertEqual(len(g02), 8)
        self.assertNotIn(EPOCH0_UNIX + 900.0, g02.times)
        self.assertEqual(len(product.ecef[self.index.index_from_id('G01')]), 10)

    def test_unknown_satellite_skipped(self):
        page = make_sp3_page(num_epochs=3, satellites=('G01', 'S20', 'G40'))
        product = read_sp3_position([page], UltraRapidMode.NOT_USE, self.index)
        self.assertEqual(sum(len(s) for s in product.ecef), 3)

    def test_truncated_page(self):
        page = make_sp3_page(num_epochs=10)
        product = read_sp3_position([page[:-12]], UltraRapidMode.NOT_USE, self.index)
        self.assertEqual(len(product.ecef[self.index.index_from_id('G01')]), 8)

    def test_ultra_rapid_segment(self):
        """A 48 h ultra-rapid file holds eight 6 h segments"""
        page = make_sp3_page(num_epochs=576, interval=300.0)
        product = read_sp3_position([page], UltraRapidMode.OBSERVE2, self.index)
        g01 = product.ecef[self.index.index_from_id('G01')]
        self.assertEqual(len(g01), 72)
        self.assertEqual(g01.times[0], EPOCH0_UNIX + 6 * 3600.0)
        self.assertEqual(g01.times[-1], EPOCH0_UNIX + 12 * 3600.0 - 300.0)

        whole = read_sp3_position([page], UltraRapidMode.UNKNOWN, self.index)
        self.assertEqual(len(whole.ecef[self.index.index_from_id('G01')]), 576)


class TestSp3Clock(unittest.TestCase):

    def test_clock_in_meters(self):
        index = ConstellationIndex()
        page = make_sp3_page(num_epochs=6, bad_clock={'R01': {2}})
        product = read_sp3_clock([page], UltraRapidMode.NOT_USE, index)
        g05 = product.clock[index.index_from_id('G05')]
        t = EPOCH0_UNIX + 600.0
        self.assertAlmostEqual(g05.values[2, 0], true_clock_us('G05', t) * 1e-6 * CLIGHT, places=3)
        self.assertEqual(len(product.clock[index.index_from_id('R01')]), 5)


class TestClkClock(unittest.TestCase):

    def setUp(self):
        self.index = ConstellationIndex()
        self.pages = [make_clk_page(num_epochs=2880, interval=30.0)]

    def test_full_day_window(self):
        period = (EPOCH0_UNIX, EPOCH0_UNIX + 3600.0)
        product = read_clk_clock(self.pages, UltraRapidMode.NOT_USE, self.index, period)
        g01 = product.clock[self.index.index_from_id('G01')]
        # [start, end + 30 s)
        self.assertEqual(len(g01), 121)
        self.assertEqual(g01.times[-1], EPOCH0_UNIX + 3600.0)
        self.assertEqual(product.interval, 30.0)
        self.assertAlmostEqual(g01.values[10, 0],
                               true_clock_us('G01', EPOCH0_UNIX + 300.0) * 1e-6 * CLIGHT, places=4)

    def test_ultra_rapid_segment(self):
        product = read_clk_clock(self.pages, UltraRapidMode.OBSERVE2, self.index, (0.0, 0.0))
        g01 = product.clock[self.index.index_from_id('G01')]
        self.assertEqual(len(g01), 720)
        self.assertEqual(g01.times[0], EPOCH0_UNIX + 6 * 3600.0)

    def test_predict_segment_rejected(self):
        with self.assertRaises(ValueError):
            read_clk_clock(self.pages, UltraRapidMode.PREDICT1, self.index, (0.0, 0.0))


def test_clk_interval_is_smallest_spacing():
    index = ConstellationIndex()
    pages = [make_clk_page(num_epochs=10, interval=300.0),
             make_clk_page(EPOCH0 + timedelta(seconds=3000), num_epochs=10, interval=30.0)]
    product = read_clk_clock(pages, UltraRapidMode.NOT_USE, index,
                             (EPOCH0_UNIX, EPOCH0_UNIX + 86400.0))
    assert product.interval == pytest.approx(30.0)


if __name__ == '__main__':
    unittest.main()
