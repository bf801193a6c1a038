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

"""Per-satellite time series built from product files"""

from typing import List, Optional

import numpy as np


class TimeSeries:
    """Chronological samples of one satellite quantity

    Samples are appended in file order. A sample whose epoch lies within the
    correction tolerance of the last stored epoch replaces it, since
    consecutive product files repeat their boundary epoch.

    Parameters
    ----------
    dimension : int
        Number of components of each sample (3 for positions, 1 for clocks)
    """

    def __init__(self, dimension: int):
        self.dimension = dimension
        self._times: List[float] = []
        self._values: List[np.ndarray] = []
        self._times_array: Optional[np.ndarray] = None
        self._values_array: Optional[np.ndarray] = None

    def __len__(self):
        return len(self._times)

    def __bool__(self):
        return bool(self._times)

    def append(self, time: float, value, tolerance: float) -> bool:
        """
        Add a sample, overwriting the last one if it is a correction

        Parameters
        ----------
        time : float
            Epoch (unix s)
        value : array_like
            Sample with ``dimension`` components
        tolerance : float
            Epochs closer than this to the last stored one replace it (s)

        Returns
        -------
        bool
            True if a new epoch was appended, False if the last one was replaced
        """
        value = np.array(value, dtype=np.float64).reshape(self.dimension)
        if self._times and time <= self._times[-1] - tolerance:
            raise ValueError(f"Sample at {time} is older than the last stored epoch "
                             f"{self._times[-1]}")

        self._times_array = None
        self._values_array = None
        if self._times and abs(time - self._times[-1]) < tolerance:
            self._times[-1] = time
            self._values[-1] = value
            return False
        self._times.append(time)
        self._values.append(value)
        return True

    @property
    def times(self) -> np.ndarray:
        """Sample epochs, shape (n,)"""
        if self._times_array is None:
            self._times_array = np.array(self._times, dtype=np.float64)
        return self._times_array

    @property
    def values(self) -> np.ndarray:
        """Samples, shape (n, dimension)"""
        if self._values_array is None:
            if self._values:
                self._values_array = np.vstack(self._values)
            else:
                self._values_array = np.zeros((0, self.dimension))
        return self._values_array

    def last_time(self) -> Optional[float]:
        return self._times[-1] if self._times else None

    def min_spacing(self) -> Optional[float]:
        """Smallest spacing between consecutive epochs, None with fewer than 2 samples"""
        if len(self._times) < 2:
            return None
        return float(np.min(np.diff(self.times)))
