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

"""Observers notified after every engine update

The engine calls ``observer.on_update(elapsed_s, satellites)`` once per
:meth:`GnssSatellites.update`. The default observer does nothing;
:class:`DataFrameObserver` records true, estimated and estimated-minus-true
states for offline inspection.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Protocol, Union

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from .gnss_satellites import GnssSatellites

logger = logging.getLogger(__name__)


class EphemerisObserver(Protocol):
    """Receiver of per-step engine state"""

    def on_update(self, elapsed_s: float, satellites: 'GnssSatellites') -> None:
        ...


class NullObserver:
    """Observer that ignores every update"""

    def on_update(self, elapsed_s: float, satellites: 'GnssSatellites') -> None:
        pass


class DataFrameObserver:
    """Record satellite states of one constellation at every update

    Three tables are kept, one row per update:

    - ``true``: true-track position (ECEF, m) and clock (m)
    - ``estimate``: estimate-track position and clock
    - ``error``: estimate minus true, only where both tracks are valid

    Invalid entries are recorded as zeros.

    Parameters
    ----------
    system_char : str
        Constellation to record ('G' for GPS)
    """

    TABLES = ('true', 'estimate', 'error')
    FILE_NAMES = {'true': 'true.csv', 'estimate': 'estimation.csv', 'error': 'sa.csv'}

    def __init__(self, system_char: str = 'G'):
        self.system_char = system_char
        self._rows: Dict[str, List[dict]] = {name: [] for name in self.TABLES}

    def on_update(self, elapsed_s: float, satellites: 'GnssSatellites') -> None:
        rows = {name: {'elapsed_s': elapsed_s} for name in self.TABLES}
        for index in satellites.constellation_index.indices_of(self.system_char):
            sat_id = satellites.id_from_index(index)
            true_info = satellites.true_info
            estimate_info = satellites.estimate_info

            true_state = np.zeros(4)
            if true_info.is_valid(index):
                true_state = np.append(true_info.get_position_ecef(index),
                                       true_info.get_clock(index))
            estimate_state = np.zeros(4)
            if estimate_info.is_valid(index):
                estimate_state = np.append(estimate_info.get_position_ecef(index),
                                           estimate_info.get_clock(index))
            error_state = np.zeros(4)
            if satellites.is_valid(index):
                error_state = estimate_state - true_state

            for name, state in zip(self.TABLES, (true_state, estimate_state, error_state)):
                for label, value in zip(('x', 'y', 'z', 'clock'), state):
                    rows[name][f"{sat_id}_{label}"] = value

        for name in self.TABLES:
            self._rows[name].append(rows[name])

    def frame(self, name: str) -> pd.DataFrame:
        """
        Recorded table as a DataFrame

        Parameters
        ----------
        name : str
            One of 'true', 'estimate', 'error'
        """
        if name not in self._rows:
            raise ValueError(f"Unknown table {name!r}, expected one of {self.TABLES}")
        return pd.DataFrame(self._rows[name])

    def to_csv(self, directory: Union[str, Path]) -> List[Path]:
        """Write the three tables as CSV files into ``directory``"""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        paths = []
        for name in self.TABLES:
            path = directory / self.FILE_NAMES[name]
            self.frame(name).to_csv(path, index=False, float_format='%.10f')
            paths.append(path)
        logger.info(f"Wrote {len(self._rows['true'])} recorded steps to {directory}")
        return paths
