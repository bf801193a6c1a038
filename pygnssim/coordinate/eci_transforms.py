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

"""Earth-Centered Inertial (ECI) coordinate transformations"""

import numpy as np

from ..core.time import gmst
from .dcm import ecef2eci_dcm, eci2ecef_dcm


def ecef2eci(xyz_ecef: np.ndarray, julian_date: float) -> np.ndarray:
    """
    Convert ECEF to ECI coordinates by the sidereal rotation of the epoch

    Parameters:
    -----------
    xyz_ecef : np.ndarray
        ECEF coordinates, a single [x, y, z] or an (n, 3) array (m)
    julian_date : float
        Julian date of the epoch

    Returns:
    --------
    xyz_eci : np.ndarray
        ECI coordinates with the shape of the input (m)
    """
    C_e_i = ecef2eci_dcm(gmst(julian_date))
    return np.asarray(xyz_ecef, dtype=np.float64) @ C_e_i.T


def eci2ecef(xyz_eci: np.ndarray, julian_date: float) -> np.ndarray:
    """
    Convert ECI to ECEF coordinates by the sidereal rotation of the epoch

    Parameters:
    -----------
    xyz_eci : np.ndarray
        ECI coordinates, a single [x, y, z] or an (n, 3) array (m)
    julian_date : float
        Julian date of the epoch

    Returns:
    --------
    xyz_ecef : np.ndarray
        ECEF coordinates with the shape of the input (m)
    """
    C_i_e = eci2ecef_dcm(gmst(julian_date))
    return np.asarray(xyz_eci, dtype=np.float64) @ C_i_e.T
