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

"""GNSS satellite engine: true and estimated ephemeris behind one facade"""

import logging
from datetime import datetime
from typing import Optional, Tuple, Union

import numpy as np

from ..coordinate.frames import Frame
from ..core.satellite_numbering import ConstellationIndex
from ..core.time import CalendarTime, calendar_to_unix
from ..io.log_output import write_scalar, write_scalar_header, write_vector, write_vector_header
from ..observation.observables import ObservableGenerator
from .observers import EphemerisObserver, NullObserver
from .satellite_information import SatelliteInformation

logger = logging.getLogger(__name__)

StartTime = Union[CalendarTime, datetime, float]


class GnssSatellites:
    """True and estimated states of every GNSS satellite

    The *true* ephemeris drives simulated measurements, the *estimate*
    ephemeris is what an on-board navigation solution would use. A satellite
    is visible to consumers only when it is valid in both; every accessor
    returns zeros otherwise.

    Usage: :meth:`initialize` with parsed tracks, :meth:`set_up` once at
    simulation start, then :meth:`update` once per step with non-decreasing
    elapsed time.

    Parameters
    ----------
    is_calc_enabled : bool
        When False the engine stays idle and every satellite is invalid
    constellation_index : ConstellationIndex, optional
        Satellite numbering, the default constellation sizes if omitted
    observer : EphemerisObserver, optional
        Notified after every update, no-op by default
    """

    def __init__(self, is_calc_enabled: bool = True,
                 constellation_index: Optional[ConstellationIndex] = None,
                 observer: Optional[EphemerisObserver] = None):
        self.is_calc_enabled = is_calc_enabled
        self.constellation_index = constellation_index or ConstellationIndex()
        self.observer = observer or NullObserver()
        self.true_info: Optional[SatelliteInformation] = None
        self.estimate_info: Optional[SatelliteInformation] = None
        self.observables = ObservableGenerator(self)
        self.start_time: Optional[float] = None
        self.elapsed_time_s = 0.0

    def initialize(self, true_info: SatelliteInformation, estimate_info: SatelliteInformation):
        """Attach the parsed true and estimate tracks"""
        for name, info in (('true', true_info), ('estimate', estimate_info)):
            if info.number_of_satellites != self.number_of_satellites:
                raise ValueError(f"{name} ephemeris tracks {info.number_of_satellites} "
                                 f"satellites, expected {self.number_of_satellites}")
        self.true_info = true_info
        self.estimate_info = estimate_info

    @property
    def is_ready(self) -> bool:
        return (self.is_calc_enabled and self.true_info is not None
                and self.estimate_info is not None)

    @property
    def number_of_satellites(self) -> int:
        return self.constellation_index.number_of_satellites

    @property
    def current_time(self) -> Optional[float]:
        """Unix time of the last set up / update, None before set up"""
        if self.start_time is None:
            return None
        return self.start_time + self.elapsed_time_s

    def set_up(self, start_time: StartTime, step_width_s: float = 1.0):
        """
        Bind all tracks to the simulation start

        Parameters
        ----------
        start_time : CalendarTime, datetime or float
            Simulation start, a float is taken as unix seconds
        step_width_s : float
            Simulation step (s)
        """
        if not self.is_calc_enabled:
            return
        if not self.is_ready:
            raise RuntimeError("GnssSatellites.set_up called before initialize")

        if isinstance(start_time, datetime):
            start_time = CalendarTime.from_datetime(start_time)
        if isinstance(start_time, CalendarTime):
            start_time = calendar_to_unix(start_time)

        self.start_time = float(start_time)
        self.elapsed_time_s = 0.0
        self.true_info.set_up(self.start_time, step_width_s)
        self.estimate_info.set_up(self.start_time, step_width_s)
        valid = sum(self.is_valid(i) for i in range(self.number_of_satellites))
        logger.info(f"Set up at unix time {self.start_time:.3f} s, step {step_width_s} s: "
                    f"{valid}/{self.number_of_satellites} satellites valid")

    def update(self, elapsed_time_s: float):
        """
        Evaluate every satellite at ``start + elapsed_time_s``

        Raises
        ------
        ValueError
            If ``elapsed_time_s`` is earlier than the previous update
        """
        if not self.is_calc_enabled:
            return
        if self.start_time is None:
            raise RuntimeError("GnssSatellites.update called before set_up")

        current = self.start_time + elapsed_time_s
        self.true_info.update(current)
        self.estimate_info.update(current)
        self.elapsed_time_s = elapsed_time_s
        self.observer.on_update(elapsed_time_s, self)

    # Identification

    def index_from_id(self, sat_id: str) -> int:
        return self.constellation_index.index_from_id(sat_id)

    def id_from_index(self, index: int) -> str:
        return self.constellation_index.id_from_index(index)

    def is_valid(self, index: int) -> bool:
        """True when both the true and the estimate tracks are valid"""
        if not self.is_ready or not 0 <= index < self.number_of_satellites:
            return False
        return self.true_info.is_valid(index) and self.estimate_info.is_valid(index)

    # Estimated states

    def get_satellite_position_ecef(self, index: int) -> np.ndarray:
        if not self.is_valid(index):
            return np.zeros(3)
        return self.estimate_info.get_position_ecef(index)

    def get_satellite_position_eci(self, index: int) -> np.ndarray:
        if not self.is_valid(index):
            return np.zeros(3)
        return self.estimate_info.get_position_eci(index)

    def get_satellite_clock(self, index: int) -> float:
        if not self.is_valid(index):
            return 0.0
        return self.estimate_info.get_clock(index)

    # True states

    def get_true_position_ecef(self, index: int) -> np.ndarray:
        if not self.is_valid(index):
            return np.zeros(3)
        return self.true_info.get_position_ecef(index)

    def get_true_position_eci(self, index: int) -> np.ndarray:
        if not self.is_valid(index):
            return np.zeros(3)
        return self.true_info.get_position_eci(index)

    def get_true_clock(self, index: int) -> float:
        if not self.is_valid(index):
            return 0.0
        return self.true_info.get_clock(index)

    # Observables

    def get_pseudorange(self, index: int, receiver_position: np.ndarray,
                        receiver_clock_m: float, frequency_mhz: float,
                        frame: Frame = Frame.ECEF) -> float:
        return self.observables.pseudorange(index, receiver_position, receiver_clock_m,
                                            frequency_mhz, frame)

    def get_carrier_phase(self, index: int, receiver_position: np.ndarray,
                          receiver_clock_m: float, frequency_mhz: float,
                          frame: Frame = Frame.ECEF) -> Tuple[float, float]:
        return self.observables.carrier_phase(index, receiver_position, receiver_clock_m,
                                              frequency_mhz, frame)

    def get_ionospheric_delay(self, index: int, receiver_position: np.ndarray,
                              frequency_mhz: float, frame: Frame = Frame.ECEF) -> float:
        return self.observables.ionospheric_delay(index, receiver_position, frequency_mhz, frame)

    # Columnar log

    def get_log_header(self) -> str:
        """Header columns: true ECEF position and clock of every GPS satellite"""
        header = ""
        for gps_index in range(self.constellation_index.count('G')):
            header += write_vector_header(f"GPS{gps_index}_position", "ecef", "m", 3)
            header += write_scalar_header(f"GPS{gps_index}_clock_offset", "m")
        return header

    def get_log_value(self) -> str:
        """Value columns matching :meth:`get_log_header`"""
        value = ""
        for index in self.constellation_index.indices_of('G'):
            if self.is_ready:
                position = self.true_info.get_position_ecef(index)
                clock = self.true_info.get_clock(index)
            else:
                position, clock = np.zeros(3), 0.0
            value += write_vector(position, 16)
            value += write_scalar(clock)
        return value
