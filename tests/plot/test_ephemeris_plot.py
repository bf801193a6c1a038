#!/usr/bin/env python3
"""Test suite for ephemeris error plots"""

import matplotlib
matplotlib.use('Agg')

import numpy as np
import pandas as pd
import pytest

from pygnssim.plot import plot_ephemeris_errors


@pytest.fixture
def error_frame():
    elapsed = np.arange(0.0, 3600.0, 60.0)
    return pd.DataFrame({
        'elapsed_s': elapsed,
        'G01_x': 0.01 * np.sin(elapsed / 600.0),
        'G01_y': 0.02 * np.cos(elapsed / 600.0),
        'G01_z': np.full_like(elapsed, 0.005),
        'G01_clock': 1e-3 * elapsed / 3600.0,
    })


def test_plot_has_position_and_clock_axes(error_frame, tmp_path):
    fig = plot_ephemeris_errors(error_frame, 'G01')
    ax_pos, ax_clk = fig.axes
    assert len(ax_pos.get_lines()) == 4
    assert len(ax_clk.get_lines()) == 1
    np.testing.assert_allclose(ax_clk.get_lines()[0].get_xdata(), error_frame['elapsed_s'] / 3600.0)
    assert fig._suptitle.get_text() == 'G01'
    fig.savefig(tmp_path / 'errors.png')
    assert (tmp_path / 'errors.png').exists()


def test_plot_unknown_satellite(error_frame):
    with pytest.raises(KeyError):
        plot_ephemeris_errors(error_frame, 'G02')
