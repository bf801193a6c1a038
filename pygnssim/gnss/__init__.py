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

"""GNSS ephemeris and clock interpolation

- **SP3/CLK parsing** into per-satellite time series
- **Interpolation windows** with trigonometric and Lagrange kernels
- **Ephemeris tracks** evaluated at simulation time
- **GnssSatellites** engine with true and estimated ephemeris

Example Usage:
    >>> from pygnssim.gnss import init_gnss_satellites
    >>> satellites = init_gnss_satellites('gnss_satellites.yaml')
    >>> satellites.set_up(start_time, step_width_s=1.0)
    >>> satellites.update(60.0)
    >>> satellites.get_satellite_position_ecef(satellites.index_from_id('G05'))
"""

from .ephemeris_track import ClockTrack, EphemerisTrack, PositionTrack
from .gnss_satellites import GnssSatellites
from .initialize import init_gnss_satellites
from .interpolation_window import InterpolationWindow
from .observers import DataFrameObserver, EphemerisObserver, NullObserver
from .satellite_information import SatelliteInformation
from .sp3_interpolation import (
    InterpolationMethod,
    get_kernel,
    lagrange_interpolation,
    trigonometric_interpolation,
)
from .sp3_reader import (
    UltraRapidMode,
    parse_sp3_header,
    read_clk_clock,
    read_sp3_clock,
    read_sp3_position,
)
from .time_series import TimeSeries
