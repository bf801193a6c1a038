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

"""Calendar and sidereal time helpers used by product parsing"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Sequence

import numpy as np

from .constants import JD_J2000, JD_UNIX_EPOCH, SECONDS_PER_DAY

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class CalendarTime:
    """UTC calendar epoch as written in product files

    Attributes
    ----------
    year, month, day, hour, minute : int
        Calendar fields, month and day are 1-based
    second : float
        Seconds of minute, may carry a fraction
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> 'CalendarTime':
        """Build from ``[yyyy, mm, dd, hh, mi, ss.sss]`` text tokens"""
        if len(tokens) < 6:
            raise ValueError(f"Calendar epoch needs 6 fields, got {len(tokens)}")
        return cls(int(tokens[0]), int(tokens[1]), int(tokens[2]),
                   int(tokens[3]), int(tokens[4]), float(tokens[5]))

    @classmethod
    def from_datetime(cls, dt: datetime) -> 'CalendarTime':
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute,
                   dt.second + dt.microsecond * 1e-6)

    def to_datetime(self) -> datetime:
        whole = int(math.floor(self.second))
        return (datetime(self.year, self.month, self.day, self.hour, self.minute,
                         tzinfo=timezone.utc)
                + timedelta(seconds=whole)
                + timedelta(microseconds=round((self.second - whole) * 1e6)))

    def to_unix_seconds(self) -> float:
        """Seconds since 1970-01-01T00:00:00 UTC"""
        return calendar_to_unix(self)

    def julian_date(self) -> float:
        return unix_to_julian_date(self.to_unix_seconds())


def calendar_to_unix(epoch: CalendarTime) -> float:
    """
    Convert a UTC calendar epoch to unix seconds

    Leap seconds are ignored, which matches how the product files label
    their epochs (GPS time written as a calendar date).

    Parameters
    ----------
    epoch : CalendarTime
        Calendar epoch

    Returns
    -------
    float
        Unix time (s), fractional seconds preserved
    """
    whole = datetime(epoch.year, epoch.month, epoch.day, epoch.hour, epoch.minute,
                     tzinfo=timezone.utc)
    return (whole - UNIX_EPOCH).total_seconds() + epoch.second


def unix_to_calendar(unix_seconds: float) -> CalendarTime:
    """Inverse of :func:`calendar_to_unix`"""
    days, rem = divmod(unix_seconds, SECONDS_PER_DAY)
    day_start = UNIX_EPOCH + timedelta(days=int(days))
    hour, rem = divmod(rem, 3600.0)
    minute, second = divmod(rem, 60.0)
    return CalendarTime(day_start.year, day_start.month, day_start.day,
                        int(hour), int(minute), second)


def unix_to_julian_date(unix_seconds: float) -> float:
    return JD_UNIX_EPOCH + unix_seconds / SECONDS_PER_DAY


def gmst(julian_date: float) -> float:
    """
    Greenwich mean sidereal time (IAU-82)

    Parameters
    ----------
    julian_date : float
        Julian date (UT1 approximated by the epoch's own scale)

    Returns
    -------
    float
        GMST angle in radians, wrapped to [0, 2*pi)
    """
    tut1 = (julian_date - JD_J2000) / 36525.0
    gmst_sec = (67310.54841
                + (876600.0 * 3600.0 + 8640184.812866) * tut1
                + 0.093104 * tut1 ** 2
                - 6.2e-6 * tut1 ** 3)
    # 240 s of sidereal time per degree
    angle = np.deg2rad((gmst_sec % SECONDS_PER_DAY) / 240.0)
    return float(angle % (2.0 * np.pi))


def days_in_year(year: int) -> int:
    leap = (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
    return 366 if leap else 365
