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

"""Pseudorange synthesis"""

import numpy as np

from .ionosphere import simple_ionospheric_delay


def geometric_range(satellite_position: np.ndarray, receiver_position: np.ndarray) -> float:
    """Euclidean distance between satellite and receiver (m)"""
    return float(np.linalg.norm(np.asarray(receiver_position, dtype=np.float64)
                                - np.asarray(satellite_position, dtype=np.float64)))


def compute_pseudorange(satellite_position: np.ndarray, satellite_clock_m: float,
                        receiver_position: np.ndarray, receiver_clock_m: float,
                        frequency_mhz: float) -> float:
    """
    Simulated pseudorange

    Parameters:
    -----------
    satellite_position : np.ndarray
        Satellite position (m)
    satellite_clock_m : float
        Satellite clock offset (m)
    receiver_position : np.ndarray
        Receiver position in the satellite's frame (m)
    receiver_clock_m : float
        Receiver clock offset (m)
    frequency_mhz : float
        Carrier frequency (MHz)

    Returns:
    --------
    float
        Range + clock difference + ionospheric delay (m)
    """
    rho = geometric_range(satellite_position, receiver_position)
    iono = simple_ionospheric_delay(receiver_position, satellite_position, frequency_mhz)
    return rho + (receiver_clock_m - satellite_clock_m) + iono
