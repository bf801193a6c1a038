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

"""Carrier phase synthesis"""

import math
from typing import Tuple

import numpy as np

from ..core.constants import CLIGHT
from .ionosphere import simple_ionospheric_delay
from .pseudorange import geometric_range


def carrier_wavelength(frequency_mhz: float) -> float:
    """Carrier wavelength (m) of a frequency given in MHz"""
    if frequency_mhz <= 0.0:
        raise ValueError(f"Frequency must be positive, got {frequency_mhz} MHz")
    return CLIGHT * 1e-6 / frequency_mhz


def compute_carrier_phase(satellite_position: np.ndarray, satellite_clock_m: float,
                          receiver_position: np.ndarray, receiver_clock_m: float,
                          frequency_mhz: float) -> Tuple[float, float]:
    """
    Simulated carrier phase split into fraction and integer ambiguity

    The ionosphere advances the phase, so its delay is subtracted from the
    range, unlike for the pseudorange.

    Returns:
    --------
    fractional_cycles : float
        Phase in [0, 1) cycles
    integer_ambiguity : float
        Whole number of cycles (floor of the total phase)
    """
    rho = geometric_range(satellite_position, receiver_position)
    iono = simple_ionospheric_delay(receiver_position, satellite_position, frequency_mhz)
    phase_range = rho + (receiver_clock_m - satellite_clock_m) - iono

    cycles = phase_range / carrier_wavelength(frequency_mhz)
    ambiguity = math.floor(cycles)
    return cycles - ambiguity, float(ambiguity)
