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

"""Receiver-side observables from the true ephemeris track"""

from typing import TYPE_CHECKING, Tuple

import numpy as np

from ..coordinate.frames import Frame
from .carrier_phase import compute_carrier_phase
from .ionosphere import simple_ionospheric_delay
from .pseudorange import compute_pseudorange

if TYPE_CHECKING:
    from ..gnss.gnss_satellites import GnssSatellites


class ObservableGenerator:
    """Synthesise pseudorange, carrier phase and ionospheric delay

    Measurements are built from the *true* ephemeris of the engine; a
    satellite that is not valid in both tracks, or an index outside the
    tracked range, yields zero results instead of raising.

    Parameters
    ----------
    satellites : GnssSatellites
        Engine providing the satellite states
    """

    def __init__(self, satellites: 'GnssSatellites'):
        self.satellites = satellites

    def _true_state(self, index: int, frame: Frame):
        true_info = self.satellites.true_info
        if Frame(frame) == Frame.ECI:
            position = true_info.get_position_eci(index)
        else:
            position = true_info.get_position_ecef(index)
        return position, true_info.get_clock(index)

    def pseudorange(self, index: int, receiver_position: np.ndarray, receiver_clock_m: float,
                    frequency_mhz: float, frame: Frame = Frame.ECEF) -> float:
        """
        Pseudorange to a satellite

        Parameters
        ----------
        index : int
            Flat satellite index
        receiver_position : np.ndarray
            Receiver position in ``frame`` (m)
        receiver_clock_m : float
            Receiver clock offset (m)
        frequency_mhz : float
            Carrier frequency (MHz)
        frame : Frame
            Frame of the receiver position

        Returns
        -------
        float
            Pseudorange (m), 0.0 for an invalid satellite
        """
        if not self.satellites.is_valid(index):
            return 0.0
        position, clock = self._true_state(index, frame)
        return compute_pseudorange(position, clock, receiver_position, receiver_clock_m,
                                   frequency_mhz)

    def carrier_phase(self, index: int, receiver_position: np.ndarray, receiver_clock_m: float,
                      frequency_mhz: float, frame: Frame = Frame.ECEF) -> Tuple[float, float]:
        """Carrier phase as (fractional cycles, integer ambiguity), (0.0, 0.0) if invalid"""
        if not self.satellites.is_valid(index):
            return 0.0, 0.0
        position, clock = self._true_state(index, frame)
        return compute_carrier_phase(position, clock, receiver_position, receiver_clock_m,
                                     frequency_mhz)

    def ionospheric_delay(self, index: int, receiver_position: np.ndarray,
                          frequency_mhz: float, frame: Frame = Frame.ECEF) -> float:
        """Ionospheric delay (m) on the path to a satellite, 0.0 if invalid"""
        if not self.satellites.is_valid(index):
            return 0.0
        position, _ = self._true_state(index, frame)
        return simple_ionospheric_delay(receiver_position, position, frequency_mhz)
