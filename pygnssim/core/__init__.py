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

"""Core definitions of the GNSS satellite engine.

- **Constants**: physical constants and the numeric flags used by precise
  orbit/clock products
- **Satellite Numbering**: flat satellite indices across GPS, GLONASS,
  Galileo, BeiDou and QZSS, driven by an immutable constellation config
- **Time**: calendar epochs, unix/Julian date conversion and sidereal time

Example Usage:
    >>> from pygnssim.core import ConstellationIndex, CalendarTime
    >>> index = ConstellationIndex()
    >>> index.index_from_id('E05')
    62
    >>> CalendarTime(2024, 1, 1).to_unix_seconds()
    1704067200.0
"""

from .constants import *
from .satellite_numbering import (
    INVALID_INDEX,
    SYSTEM_CHARS,
    SYSTEM_NAMES,
    ConstellationConfig,
    ConstellationIndex,
)
from .time import (
    CalendarTime,
    calendar_to_unix,
    gmst,
    unix_to_calendar,
    unix_to_julian_date,
)
