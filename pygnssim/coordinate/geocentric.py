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

"""Geocentric helpers for receiver/satellite geometry"""

import numpy as np

from ..core.constants import RE_WGS84


def geocentric_altitude_km(position: np.ndarray) -> float:
    """Altitude above the equatorial radius of a spherical earth (km)"""
    return float(np.linalg.norm(position)) / 1000.0 - RE_WGS84 / 1000.0


def angle_between_vectors(v1: np.ndarray, v2: np.ndarray) -> float:
    """
    Angle between two vectors

    Returns:
    --------
    float
        Angle in radians in [0, pi], 0 if either vector is zero
    """
    n1 = np.linalg.norm(v1)
    n2 = np.linalg.norm(v2)
    if n1 == 0.0 or n2 == 0.0:
        return 0.0
    cos_angle = np.dot(v1, v2) / (n1 * n2)
    return float(np.arccos(np.clip(cos_angle, -1.0, 1.0)))
