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

"""Flat satellite numbering across the tracked GNSS constellations.

Every tracked satellite gets an index in ``[0, total)``. Constellations are laid
out back to back in a fixed order, each occupying as many slots as it has
satellites:

- GPS (G): 0-31
- GLONASS (R): 32-57
- Galileo (E): 58-93
- BeiDou (C): 94-109
- QZSS (J): 110-116

The populations come from an immutable :class:`ConstellationConfig` handed to
:class:`ConstellationIndex`, so a simulation can track a different set of
satellites without touching module state.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

# Flag returned for identifiers that do not map to a tracked satellite
INVALID_INDEX = 2**31 - 1

# Constellation order in the flat index
SYSTEM_CHARS = ('G', 'R', 'E', 'C', 'J')

SYSTEM_NAMES = {
    'G': 'GPS',
    'R': 'GLONASS',
    'E': 'GALILEO',
    'C': 'BEIDOU',
    'J': 'QZSS',
}


@dataclass(frozen=True)
class ConstellationConfig:
    """Number of satellites tracked per constellation.

    Attributes
    ----------
    gps, glonass, galileo, beidou, qzss : int
        Population of each constellation
    """
    gps: int = 32
    glonass: int = 26
    galileo: int = 36
    beidou: int = 16
    qzss: int = 7

    def __post_init__(self):
        for name, count in self.counts().items():
            if count < 0:
                raise ValueError(f"Negative satellite count for {SYSTEM_NAMES[name]}: {count}")

    def counts(self) -> Dict[str, int]:
        """Satellite count keyed by constellation character, in index order"""
        return {
            'G': self.gps,
            'R': self.glonass,
            'E': self.galileo,
            'C': self.beidou,
            'J': self.qzss,
        }


@dataclass(frozen=True)
class ConstellationIndex:
    """Bidirectional mapping between satellite IDs (e.g. ``"G12"``) and flat indices.

    Parameters
    ----------
    config : ConstellationConfig
        Per-constellation populations, fixed for the lifetime of the index

    Examples
    --------
    >>> index = ConstellationIndex()
    >>> index.index_from_id('G01')
    0
    >>> index.index_from_id('PR01')  # SP3 record prefix is accepted
    32
    >>> index.id_from_index(58)
    'E01'
    """
    config: ConstellationConfig = field(default_factory=ConstellationConfig)
    _offsets: Tuple[Tuple[str, int, int], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        offsets = []
        start = 0
        for char, count in self.config.counts().items():
            offsets.append((char, start, count))
            start += count
        object.__setattr__(self, '_offsets', tuple(offsets))

    @property
    def number_of_satellites(self) -> int:
        """Total number of tracked satellites"""
        char, start, count = self._offsets[-1]
        return start + count

    def offset(self, system_char: str) -> int:
        """First flat index of a constellation"""
        for char, start, _ in self._offsets:
            if char == system_char:
                return start
        raise KeyError(f"Unknown constellation: {system_char}")

    def count(self, system_char: str) -> int:
        """Number of tracked satellites of a constellation"""
        return self.config.counts()[system_char]

    def index_from_id(self, sat_id: str) -> int:
        """
        Convert a satellite ID to its flat index

        Parameters
        ----------
        sat_id : str
            Constellation character followed by the PRN, optionally prefixed
            with the SP3 record character ``P`` (``"G05"``, ``"PG05"``)

        Returns
        -------
        int
            Flat index, or ``INVALID_INDEX`` when the ID is not tracked
        """
        sat_id = sat_id.strip()
        if len(sat_id) > 1 and sat_id[0] == 'P' and sat_id[1] in SYSTEM_CHARS:
            sat_id = sat_id[1:]
        if len(sat_id) < 2:
            return INVALID_INDEX

        system_char, number = sat_id[0], sat_id[1:].strip()
        if system_char not in SYSTEM_CHARS or not number.isdigit():
            return INVALID_INDEX

        prn = int(number)
        if not 1 <= prn <= self.count(system_char):
            return INVALID_INDEX
        return self.offset(system_char) + prn - 1

    def id_from_index(self, index: int) -> str:
        """
        Convert a flat index back to the satellite ID

        Raises
        ------
        IndexError
            If ``index`` is not in ``[0, number_of_satellites)``
        """
        if not 0 <= index < self.number_of_satellites:
            raise IndexError(f"Satellite index {index} out of range "
                             f"[0, {self.number_of_satellites})")
        for char, start, count in self._offsets:
            if index < start + count:
                return f"{char}{index - start + 1:02d}"
        raise IndexError(f"Satellite index {index} out of range")

    def indices_of(self, system_char: str) -> range:
        """Flat indices occupied by a constellation"""
        start = self.offset(system_char)
        return range(start, start + self.count(system_char))
