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

"""Direction Cosine Matrix (DCM) transformations between ECEF and ECI"""

import numpy as np


def eci2ecef_dcm(theta: float) -> np.ndarray:
    """
    Earth-Centered-Inertial to Earth-Centered-Earth-Fixed direction cosine matrix

    Parameters:
    -----------
    theta : float
        Earth rotation angle, e.g. Greenwich sidereal time (rad)

    Returns:
    --------
    C_i_e : np.ndarray
        ECI->ECEF direction cosine matrix (3x3)
    """
    sin_t = np.sin(theta)
    cos_t = np.cos(theta)

    return np.array([
        [cos_t, sin_t, 0.0],
        [-sin_t, cos_t, 0.0],
        [0.0, 0.0, 1.0]
    ], dtype=np.float64)


def ecef2eci_dcm(theta: float) -> np.ndarray:
    """
    Earth-Centered-Earth-Fixed to Earth-Centered-Inertial direction cosine matrix

    Parameters:
    -----------
    theta : float
        Earth rotation angle, e.g. Greenwich sidereal time (rad)

    Returns:
    --------
    C_e_i : np.ndarray
        ECEF->ECI direction cosine matrix (3x3)
    """
    return eci2ecef_dcm(theta).T
