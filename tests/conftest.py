"""Shared fixtures: engines built from synthetic product pages"""

from datetime import timedelta

import pytest

from pygnssim.core.satellite_numbering import ConstellationIndex
from pygnssim.gnss.gnss_satellites import GnssSatellites
from pygnssim.gnss.satellite_information import SatelliteInformation

from sp3_fixtures import EPOCH0, make_clk_page, two_day_pages


@pytest.fixture
def constellation_index():
    return ConstellationIndex()


@pytest.fixture
def true_info(constellation_index):
    """Two days of SP3 orbits with the SP3 clock field, N = 9 / 3"""
    pages = two_day_pages()
    return SatelliteInformation.from_pages(pages, 9, pages, '.sp3', 3,
                                           constellation_index, name="true")


@pytest.fixture
def estimate_info(constellation_index):
    """Same orbits with clocks from CLK files, N = 9 / 4"""
    pages = two_day_pages()
    clk_pages = [make_clk_page(EPOCH0 + timedelta(days=d)) for d in range(2)]
    return SatelliteInformation.from_pages(pages, 9, clk_pages, '.clk', 4,
                                           constellation_index, name="estimate")


@pytest.fixture
def engine(constellation_index, true_info, estimate_info):
    satellites = GnssSatellites(True, constellation_index)
    satellites.initialize(true_info, estimate_info)
    return satellites
