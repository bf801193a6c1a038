# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Plots of estimated-minus-true ephemeris errors"""

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

COLORS = ['#1f77b4', '#ff7f0e', '#2ca02c', '#d62728']


def plot_ephemeris_errors(frame: pd.DataFrame, satellite: str,
                          title: Optional[str] = None) -> plt.Figure:
    """
    Plot position and clock errors of one satellite over time

    Parameters
    ----------
    frame : pd.DataFrame
        ``error`` table of :class:`~pygnssim.gnss.observers.DataFrameObserver`
    satellite : str
        Satellite ID, e.g. ``"G05"``
    title : str, optional
        Figure title, defaults to the satellite ID

    Returns
    -------
    matplotlib.figure.Figure
        Figure with the ECEF position error (top) and clock error (bottom)

    Raises
    ------
    KeyError
        If the frame holds no columns for ``satellite``
    """
    columns = [f"{satellite}_{label}" for label in ('x', 'y', 'z', 'clock')]
    missing = [c for c in columns if c not in frame.columns]
    if missing:
        raise KeyError(f"No columns for {satellite}: {missing}")

    hours = frame['elapsed_s'].to_numpy() / 3600.0
    fig, (ax_pos, ax_clk) = plt.subplots(2, 1, sharex=True, figsize=(10, 6))

    for color, label in zip(COLORS, ('x', 'y', 'z')):
        ax_pos.plot(hours, frame[f"{satellite}_{label}"].to_numpy(), color=color, label=label)
    norm = np.linalg.norm(frame[columns[:3]].to_numpy(), axis=1)
    ax_pos.plot(hours, norm, color='k', linestyle='--', label='norm')
    ax_pos.set_ylabel('Position error [m]')
    ax_pos.legend(loc='upper right')
    ax_pos.grid(True)

    ax_clk.plot(hours, frame[columns[3]].to_numpy(), color=COLORS[3])
    ax_clk.set_ylabel('Clock error [m]')
    ax_clk.set_xlabel('Elapsed time [h]')
    ax_clk.grid(True)

    fig.suptitle(title or satellite)
    fig.tight_layout()
    return fig
