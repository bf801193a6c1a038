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

"""Sliding interpolation window over one satellite's time series"""

from typing import Callable, Tuple

import numpy as np

from ..core.constants import TIME_EPSILON


class InterpolationWindow:
    """Fixed-size window of samples centred on the current query time

    The window holds ``size`` consecutive samples around ``nearest_index``:
    relative indices ``[-(size // 2), (size + 1) // 2)``, i.e. ``[-n, n]`` for
    ``size = 2n + 1`` and ``[-n, n)`` for ``size = 2n``.

    The window is valid when it holds exactly ``size`` samples, spans at most
    ``(size - 1 + slack) * interval`` and the query time is within
    ``interval`` of the nearest sample. Invalid windows evaluate to zero.

    :meth:`advance` moves the window by at most one sample per call, so query
    times must be non-decreasing and steps short compared with the sampling
    interval.

    Parameters
    ----------
    times : np.ndarray
        Sample epochs in increasing order, shape (n,)
    values : np.ndarray
        Samples, shape (n, k)
    size : int
        Number of samples in the window
    interval : float
        Nominal sampling interval (s)
    slack : int
        Number of missing samples tolerated inside the window span
    kernel : callable
        ``kernel(times, values, t) -> np.ndarray`` evaluating a window
    """

    def __init__(self, times: np.ndarray, values: np.ndarray, size: int, interval: float,
                 slack: int, kernel: Callable[[np.ndarray, np.ndarray, float], np.ndarray]):
        if size < 2:
            raise ValueError(f"Interpolation window needs at least 2 samples, got {size}")
        if len(times) != len(values):
            raise ValueError("times and values must have the same length")
        self.times = times
        self.values = values
        self.size = size
        self.interval = interval
        self.span_limit = interval * (size - 1 + slack) + TIME_EPSILON
        self.kernel = kernel

        self.nearest_index = 0
        self.valid = False
        self._lo = 0
        self._hi = 0
        self._value = np.zeros(values.shape[1])

    @property
    def value(self) -> np.ndarray:
        """Value at the last evaluated time (copy), zero when invalid"""
        return self._value.copy()

    @property
    def window_times(self) -> np.ndarray:
        return self.times[self._lo:self._hi].copy()

    def bind(self, start_time: float) -> Tuple[np.ndarray, bool]:
        """
        Locate the sample nearest to ``start_time`` and build the window there

        Returns
        -------
        value : np.ndarray
            Value at ``start_time``
        valid : bool
            Window validity
        """
        n = len(self.times)
        if n == 0:
            return self._invalidate()

        index = int(np.searchsorted(self.times, start_time, side='left'))
        if index == n:
            self.nearest_index = n
            return self._invalidate()

        if self.size % 2 and index != 0:
            if abs(start_time - self.times[index - 1]) < abs(start_time - self.times[index]):
                index -= 1
        self.nearest_index = index
        self._rebuild()
        return self.evaluate(start_time)

    def advance(self, query_time: float) -> Tuple[np.ndarray, bool]:
        """
        Slide the window one sample forward if the next sample is closer

        Returns
        -------
        value : np.ndarray
            Value at ``query_time``
        valid : bool
            Window validity
        """
        n = len(self.times)
        if n == 0 or self.nearest_index >= n:
            return self._invalidate()

        index = self.nearest_index
        if index + 1 < n:
            if abs(query_time - self.times[index + 1]) < abs(query_time - self.times[index]):
                self.nearest_index = index + 1
                self._rebuild()
        return self.evaluate(query_time)

    def evaluate(self, query_time: float) -> Tuple[np.ndarray, bool]:
        """
        Evaluate the current window at ``query_time``

        Samples coinciding with the query (within 1e-4 s) are returned as
        stored, otherwise the kernel interpolates the window.
        """
        if len(self.times) == 0 or self.nearest_index >= len(self.times):
            return self._invalidate()

        nearest_time = self.times[self.nearest_index]
        if abs(query_time - nearest_time) > self.interval:
            return self._invalidate()
        if self._hi - self._lo != self.size:
            return self._invalidate()
        if self.times[self._hi - 1] - self.times[self._lo] > self.span_limit:
            return self._invalidate()

        self.valid = True
        if abs(query_time - nearest_time) < TIME_EPSILON:
            self._value = self.values[self.nearest_index].copy()
        else:
            self._value = self.kernel(self.times[self._lo:self._hi],
                                      self.values[self._lo:self._hi],
                                      float(query_time))
        return self._value.copy(), True

    def _rebuild(self):
        n = len(self.times)
        self._lo = max(0, self.nearest_index - self.size // 2)
        self._hi = min(n, self.nearest_index + (self.size + 1) // 2)

    def _invalidate(self) -> Tuple[np.ndarray, bool]:
        self.valid = False
        self._value = np.zeros(self.values.shape[1])
        return self._value.copy(), False
