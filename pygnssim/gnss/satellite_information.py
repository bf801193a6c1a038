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

"""Position and clock tracks of one ephemeris source (true or estimated)"""

from typing import Sequence

import numpy as np

from ..core.satellite_numbering import ConstellationIndex
from .ephemeris_track import ClockTrack, PositionTrack
from .sp3_interpolation import InterpolationMethod
from .sp3_reader import (
    Page,
    UltraRapidMode,
    read_clk_clock,
    read_sp3_clock,
    read_sp3_position,
)


class SatelliteInformation:
    """Position and clock of every satellite from one ephemeris source

    A satellite is valid only when both its position and its clock are.

    Parameters
    ----------
    position : PositionTrack
        Position track
    clock : ClockTrack
        Clock track
    """

    def __init__(self, position: PositionTrack, clock: ClockTrack):
        if position.number_of_satellites != clock.number_of_satellites:
            raise ValueError(f"Position track has {position.number_of_satellites} satellites, "
                             f"clock track {clock.number_of_satellites}")
        self.position = position
        self.clock = clock

    @classmethod
    def from_pages(cls, position_pages: Sequence[Page], position_interpolation_number: int,
                   clock_pages: Sequence[Page], clock_file_extension: str,
                   clock_interpolation_number: int, index: ConstellationIndex,
                   position_method: InterpolationMethod = InterpolationMethod.TRIGONOMETRIC,
                   position_ur_mode: UltraRapidMode = UltraRapidMode.NOT_USE,
                   clock_ur_mode: UltraRapidMode = UltraRapidMode.NOT_USE,
                   name: str = "") -> 'SatelliteInformation':
        """
        Parse product pages into tracks

        Parameters
        ----------
        position_pages : sequence of pages
            SP3 files with the orbit
        position_interpolation_number : int
            Window size of the position track
        clock_pages : sequence of pages
            SP3 or CLK files with the clock
        clock_file_extension : str
            ``.sp3`` reads the SP3 clock field, anything else the CLK format
        clock_interpolation_number : int
            Window size of the clock track
        index : ConstellationIndex
            Satellite numbering
        position_method : InterpolationMethod
            Position kernel
        position_ur_mode, clock_ur_mode : UltraRapidMode
            Ultra-rapid segment selectors
        name : str
            Prefix of track names in log messages
        """
        position_product = read_sp3_position(position_pages, position_ur_mode, index)
        if clock_file_extension == '.sp3':
            clock_product = read_sp3_clock(clock_pages, clock_ur_mode, index)
        else:
            clock_product = read_clk_clock(
                clock_pages, clock_ur_mode, index,
                (position_product.start_time, position_product.end_time))

        prefix = f"{name} " if name else ""
        return cls(
            PositionTrack(position_product, position_interpolation_number, position_method,
                          name=f"{prefix}position"),
            ClockTrack(clock_product, clock_interpolation_number, name=f"{prefix}clock"),
        )

    @property
    def number_of_satellites(self) -> int:
        return self.position.number_of_satellites

    def set_up(self, start_time: float, step_width_s: float = 0.0):
        self.position.set_up(start_time, step_width_s)
        self.clock.set_up(start_time, step_width_s)

    def update(self, current_time: float):
        self.position.update(current_time)
        self.clock.update(current_time)

    def is_valid(self, index: int) -> bool:
        return self.position.is_valid(index) and self.clock.is_valid(index)

    def get_position_ecef(self, index: int) -> np.ndarray:
        return self.position.get_position_ecef(index)

    def get_position_eci(self, index: int) -> np.ndarray:
        return self.position.get_position_eci(index)

    def get_clock(self, index: int) -> float:
        return self.clock.get_clock(index)
