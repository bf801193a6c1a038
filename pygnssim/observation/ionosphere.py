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

"""Simplified single-layer ionospheric delay model.

The delay shrinks linearly with receiver altitude and vanishes above
1000 km, grows with the slant of the line of sight, and scales with the
inverse square of the carrier frequency. It is meant for simulated
measurements, not for correcting real ones.
"""

import numpy as np

from ..coordinate.geocentric import angle_between_vectors, geocentric_altitude_km
from ..core.constants import IONO_DEFAULT_DELAY_M, IONO_MAX_ALTITUDE_KM, IONO_REFERENCE_FREQ_MHZ


def simple_ionospheric_delay(receiver_position: np.ndarray, satellite_position: np.ndarray,
                             frequency_mhz: float) -> float:
    """Ionospheric delay for a receiver/satellite pair.

    Parameters
    ----------
    receiver_position : np.ndarray
        Receiver position (m), same frame as the satellite
    satellite_position : np.ndarray
        Satellite position (m)
    frequency_mhz : float
        Carrier frequency in MHz

    Returns
    -------
    float
        Delay in meters, 0 when the receiver is at or above 1000 km

    Notes
    -----
    ``delay = 20 * (1000 - h) / 1000 / cos(z) * (1500 / f)^2`` with ``h`` the
    receiver altitude in km and ``z`` the angle between the receiver
    position vector and the line of sight.
    """
    if frequency_mhz <= 0.0:
        raise ValueError(f"Frequency must be positive, got {frequency_mhz} MHz")

    receiver_position = np.asarray(receiver_position, dtype=np.float64)
    satellite_position = np.asarray(satellite_position, dtype=np.float64)

    altitude_km = geocentric_altitude_km(receiver_position)
    if altitude_km >= IONO_MAX_ALTITUDE_KM:
        return 0.0

    zenith = angle_between_vectors(receiver_position, satellite_position - receiver_position)
    delay = IONO_DEFAULT_DELAY_M * (IONO_MAX_ALTITUDE_KM - altitude_km) / IONO_MAX_ALTITUDE_KM
    delay /= np.cos(zenith)
    delay *= (IONO_REFERENCE_FREQ_MHZ / frequency_mhz) ** 2
    return float(delay)
