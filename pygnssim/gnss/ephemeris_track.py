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

"""Ephemeris tracks: interpolation windows of every satellite for one quantity"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..core.constants import CLOCK_WINDOW_SLACK, POSITION_WINDOW_SLACK
from ..logger import LogLevel
from .interpolation_window import InterpolationWindow
from .sp3_interpolation import InterpolationMethod, get_kernel, lagrange_interpolation
from .sp3_reader import ClockProduct, PositionProduct
from .time_series import TimeSeries

logger = logging.getLogger(__name__)

# Allowed backwards jitter of the simulation clock (s)
MONOTONIC_TOLERANCE = 1e-9


class EphemerisTrack:
    """Windows of all satellites for one tracked quantity

    Parameters
    ----------
    windows : list of InterpolationWindow
        One window per flat satellite index
    name : str
        Track name used in log messages
    """

    def __init__(self, windows: List[InterpolationWindow], name: str):
        self._windows = windows
        self.name = name
        self._last_time: Optional[float] = None

    @property
    def number_of_satellites(self) -> int:
        return len(self._windows)

    @property
    def is_set_up(self) -> bool:
        return self._last_time is not None

    def set_up(self, start_time: float, step_width_s: float = 0.0):
        """
        Bind every satellite window to the simulation start time

        Parameters
        ----------
        start_time : float
            Simulation start (unix s)
        step_width_s : float
            Simulation step (s), a window moves at most one sample per step
        """
        if self._windows and step_width_s >= self._windows[0].interval:
            logger.warning(f"{self.name}: step {step_width_s} s is not shorter than the product "
                           f"interval {self._windows[0].interval} s, windows will lag behind")
        for window in self._windows:
            window.bind(start_time)
        self._last_time = start_time
        logger.info(f"{self.name}: {self.count_valid()}/{self.number_of_satellites} "
                    f"satellites valid at set up")

    def update(self, current_time: float):
        """
        Move every window to ``current_time``

        Raises
        ------
        RuntimeError
            If called before :meth:`set_up`
        ValueError
            If ``current_time`` is earlier than the previous update
        """
        if self._last_time is None:
            raise RuntimeError(f"{self.name}: update called before set_up")
        if current_time < self._last_time - MONOTONIC_TOLERANCE:
            raise ValueError(f"{self.name}: time went backwards "
                             f"({current_time} < {self._last_time})")
        self._last_time = current_time

        trace = logger.isEnabledFor(LogLevel.TRACE.value)
        for i, window in enumerate(self._windows):
            was_valid = window.valid
            nearest = window.nearest_index
            window.advance(current_time)
            if trace and nearest != window.nearest_index:
                logger.trace(f"{self.name}: satellite {i} window moved to sample "
                             f"{window.nearest_index} at {current_time:.3f}")
            if was_valid != window.valid:
                logger.debug(f"{self.name}: satellite {i} "
                             f"{'valid' if window.valid else 'invalid'} at {current_time:.3f}")

    def is_valid(self, index: int) -> bool:
        if not 0 <= index < len(self._windows):
            return False
        return self._windows[index].valid

    def count_valid(self) -> int:
        return sum(window.valid for window in self._windows)

    def window(self, index: int) -> InterpolationWindow:
        return self._windows[index]

    def _value(self, index: int, dimension: int) -> np.ndarray:
        if not 0 <= index < len(self._windows):
            return np.zeros(dimension)
        return self._windows[index].value


def _stack(series: Sequence[TimeSeries]) -> np.ndarray:
    return np.hstack([s.values for s in series])


class PositionTrack(EphemerisTrack):
    """Satellite positions in ECEF and ECI

    Both frames share one window whose samples stack ECEF and ECI
    components, since the kernels work componentwise.
    """

    def __init__(self, product: PositionProduct, interpolation_number: int,
                 method: InterpolationMethod = InterpolationMethod.TRIGONOMETRIC,
                 name: str = "position"):
        kernel = get_kernel(method)
        windows = [
            InterpolationWindow(ecef.times, _stack((ecef, eci)), interpolation_number,
                                product.interval, POSITION_WINDOW_SLACK, kernel)
            for ecef, eci in zip(product.ecef, product.eci)
        ]
        super().__init__(windows, name)
        self.method = InterpolationMethod(method)
        self.interval = product.interval

    def get_position_ecef(self, index: int) -> np.ndarray:
        """ECEF position (m), zero for an invalid or unknown satellite"""
        return self._value(index, 6)[:3]

    def get_position_eci(self, index: int) -> np.ndarray:
        """ECI position (m), zero for an invalid or unknown satellite"""
        return self._value(index, 6)[3:]


class ClockTrack(EphemerisTrack):
    """Satellite clock offsets in meters, Lagrange interpolated

    Clock windows tolerate no missing sample.
    """

    def __init__(self, product: ClockProduct, interpolation_number: int,
                 name: str = "clock"):
        windows = [
            InterpolationWindow(series.times, series.values, interpolation_number,
                                product.interval, CLOCK_WINDOW_SLACK, lagrange_interpolation)
            for series in product.clock
        ]
        super().__init__(windows, name)
        self.interval = product.interval

    def get_clock(self, index: int) -> float:
        """Clock offset (m), zero for an invalid or unknown satellite"""
        return float(self._value(index, 1)[0])
