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

"""Parsers turning SP3 / CLK product pages into per-satellite time series

A *page* is the list of text lines of one product file, as returned by
:mod:`pygnssim.io.product_files`. Positions are stored both in ECEF and in
ECI (rotated by the sidereal angle of each epoch), clocks are stored in
meters.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..core.constants import (
    CLIGHT,
    CLK_CORRECTION_TOLERANCE,
    CLK_PERIOD_MARGIN,
    SP3_CORRECTION_TOLERANCE,
    SP3_NAN,
    SP3_NAN_TOLERANCE,
    TIME_EPSILON,
    ULTRA_RAPID_PARTITIONS,
    ULTRA_RAPID_SEGMENT,
)
from ..core.satellite_numbering import INVALID_INDEX, ConstellationIndex
from ..core.time import CalendarTime, calendar_to_unix, gmst, unix_to_julian_date
from ..coordinate.dcm import ecef2eci_dcm
from .time_series import TimeSeries

logger = logging.getLogger(__name__)

Page = Sequence[str]


class UltraRapidMode(IntEnum):
    """Segment selector for ultra-rapid products

    An ultra-rapid orbit file spans 48 hours split into eight 6-hour
    segments: four observed ones followed by four predicted ones.
    """
    NOT_USE = 0
    UNKNOWN = 1
    OBSERVE1 = 2
    OBSERVE2 = 3
    OBSERVE3 = 4
    OBSERVE4 = 5
    PREDICT1 = 6
    PREDICT2 = 7
    PREDICT3 = 8
    PREDICT4 = 9

    @property
    def segment(self) -> int:
        """Index of the selected 6-hour segment (0-7)"""
        if self < UltraRapidMode.OBSERVE1:
            raise ValueError(f"{self.name} does not select a segment")
        return int(self) - int(UltraRapidMode.OBSERVE1)

    @property
    def is_predict(self) -> bool:
        return self >= UltraRapidMode.PREDICT1

    @classmethod
    def from_string(cls, text: str) -> 'UltraRapidMode':
        """Parse ``observe1``..``observe4`` / ``predict1``..``predict4``"""
        text = text.strip().lower()
        for prefix, first in (('observe', cls.OBSERVE1), ('predict', cls.PREDICT1)):
            if text.startswith(prefix) and text[-1] in '1234':
                return cls(int(first) + int(text[-1]) - 1)
        raise ValueError(f"Unknown ultra-rapid selector: {text!r}")


@dataclass
class Sp3Header:
    """Fields of the SP3 header needed to walk the data records"""
    num_epochs: int
    interval: float
    num_satellites: int
    data_start: int


@dataclass
class PositionProduct:
    """Parsed position track"""
    ecef: List[TimeSeries]
    eci: List[TimeSeries]
    interval: float
    start_time: float
    end_time: float


@dataclass
class ClockProduct:
    """Parsed clock track, clock offsets in meters"""
    clock: List[TimeSeries]
    interval: float


def parse_sp3_header(page: Page) -> Sp3Header:
    """
    Read epoch count, interval and satellite count of an SP3 page

    Raises
    ------
    ValueError
        If the header lines are missing or malformed
    """
    try:
        num_epochs = int(page[0].split()[6])
        interval = float(page[1].split()[3])
        num_satellites = int(page[2].split()[1])
    except (IndexError, ValueError) as e:
        raise ValueError(f"Malformed SP3 header: {e}") from e

    data_start = next((i for i in range(3, len(page)) if page[i].startswith('*')), None)
    if data_start is None:
        raise ValueError("SP3 page has no epoch record")
    return Sp3Header(num_epochs, interval, num_satellites, data_start)


def _record_range(header: Sp3Header, ur_mode: UltraRapidMode) -> Tuple[int, int]:
    block = (header.num_satellites + 1) * header.num_epochs
    if ur_mode in (UltraRapidMode.NOT_USE, UltraRapidMode.UNKNOWN):
        return header.data_start, header.data_start + block
    part = block // ULTRA_RAPID_PARTITIONS
    start = header.data_start + part * ur_mode.segment
    return start, start + part


def _iter_sp3_records(page: Page, header: Sp3Header, ur_mode: UltraRapidMode):
    """Yield ``(epoch, tokens)`` for every satellite record of the selected range"""
    start, end = _record_range(header, ur_mode)
    if end > len(page):
        logger.warning(f"SP3 page holds {len(page)} lines, header announces {end}; "
                       "reading what is present")
        end = len(page)

    epoch = None
    for i in range(end - start):
        tokens = page[start + i].split()
        if i % (header.num_satellites + 1) == 0:
            if not tokens or tokens[0] != '*':
                raise ValueError(f"Expected epoch record at line {start + i}: {page[start + i]!r}")
            epoch = CalendarTime.from_tokens(tokens[1:7])
            continue
        yield epoch, tokens


def _new_series(count: int, dimension: int) -> List[TimeSeries]:
    return [TimeSeries(dimension) for _ in range(count)]


def _parse_field(text: str) -> Optional[float]:
    """Float value of an SP3 field, None if unavailable"""
    try:
        value = float(text)
    except ValueError:
        return None
    if abs(value - SP3_NAN) < SP3_NAN_TOLERANCE:
        return None
    return value


def read_sp3_position(pages: Sequence[Page], ur_mode: UltraRapidMode,
                      index: ConstellationIndex) -> PositionProduct:
    """
    Parse SP3 pages into ECEF/ECI position time series

    Parameters
    ----------
    pages : sequence of pages
        SP3 files as lists of lines, in chronological order
    ur_mode : UltraRapidMode
        Segment selector for ultra-rapid products
    index : ConstellationIndex
        Satellite numbering

    Returns
    -------
    PositionProduct
        Time series in meters, nominal interval and covered epoch range
    """
    num_sats = index.number_of_satellites
    ecef_series = _new_series(num_sats, 3)
    eci_series = _new_series(num_sats, 3)
    interval = 0.0
    start_time = np.inf
    end_time = -np.inf
    skipped = 0

    for page_number, page in enumerate(pages):
        header = parse_sp3_header(page)
        interval = header.interval

        last_epoch = None
        dcm = None
        unix_time = 0.0
        for epoch, tokens in _iter_sp3_records(page, header, ur_mode):
            if epoch is not last_epoch:
                last_epoch = epoch
                unix_time = calendar_to_unix(epoch)
                dcm = ecef2eci_dcm(gmst(unix_to_julian_date(unix_time)))
                start_time = min(start_time, unix_time)
                end_time = max(end_time, unix_time)

            sat = index.index_from_id(tokens[0]) if tokens else INVALID_INDEX
            if sat == INVALID_INDEX or len(tokens) < 4:
                skipped += 1
                continue

            coords = [_parse_field(text) for text in tokens[1:4]]
            if any(c is None for c in coords):
                skipped += 1
                continue

            ecef = np.array(coords) * 1000.0
            try:
                ecef_series[sat].append(unix_time, ecef, SP3_CORRECTION_TOLERANCE)
            except ValueError as e:
                logger.debug(f"{tokens[0]}: {e}")
                skipped += 1
                continue
            eci_series[sat].append(unix_time, dcm @ ecef, SP3_CORRECTION_TOLERANCE)

        logger.debug(f"Parsed SP3 position page {page_number}: {header.num_epochs} epochs, "
                     f"{header.num_satellites} satellites")

    samples = sum(len(s) for s in ecef_series)
    logger.info(f"Read {len(pages)} SP3 position page(s): {samples} samples, "
                f"{skipped} records skipped")
    return PositionProduct(ecef_series, eci_series, interval, start_time, end_time)


def read_sp3_clock(pages: Sequence[Page], ur_mode: UltraRapidMode,
                   index: ConstellationIndex) -> ClockProduct:
    """
    Parse the clock field of SP3 pages into clock offset time series

    The SP3 clock field is in microseconds, it is stored in meters.
    """
    clock_series = _new_series(index.number_of_satellites, 1)
    interval = 0.0
    skipped = 0

    for page in pages:
        header = parse_sp3_header(page)
        interval = header.interval

        last_epoch = None
        unix_time = 0.0
        for epoch, tokens in _iter_sp3_records(page, header, ur_mode):
            if epoch is not last_epoch:
                last_epoch = epoch
                unix_time = calendar_to_unix(epoch)

            sat = index.index_from_id(tokens[0]) if tokens else INVALID_INDEX
            clock = _parse_field(tokens[4]) if len(tokens) >= 5 else None
            if sat == INVALID_INDEX or clock is None:
                skipped += 1
                continue

            try:
                clock_series[sat].append(unix_time, clock * CLIGHT * 1e-6,
                                         SP3_CORRECTION_TOLERANCE)
            except ValueError as e:
                logger.debug(f"{tokens[0]}: {e}")
                skipped += 1

    samples = sum(len(s) for s in clock_series)
    logger.info(f"Read {len(pages)} SP3 clock page(s): {samples} samples, "
                f"{skipped} records skipped")
    return ClockProduct(clock_series, interval)


def read_clk_clock(pages: Sequence[Page], ur_mode: UltraRapidMode,
                   index: ConstellationIndex,
                   period: Tuple[float, float]) -> ClockProduct:
    """
    Parse satellite clock records (``AS`` lines) of CLK pages

    Parameters
    ----------
    pages : sequence of pages
        Clock files as lists of lines
    ur_mode : UltraRapidMode
        NOT_USE for full-day products, OBSERVE1..4 for an ultra-rapid segment
    index : ConstellationIndex
        Satellite numbering
    period : tuple of float
        (start, end) epochs of the position track; full-day products keep the
        samples in ``[start, end + 30 s)``

    Returns
    -------
    ClockProduct
        Clock offsets in meters; the nominal interval is the smallest spacing
        found between consecutive samples of a satellite

    Raises
    ------
    ValueError
        If a predicted ultra-rapid segment is requested, CLK products carry
        no predictions
    """
    if ur_mode.is_predict:
        raise ValueError(f"Clock files cannot serve the predicted segment {ur_mode.name}")

    clock_series = _new_series(index.number_of_satellites, 1)
    interval = 1e9
    skipped = 0

    for page in pages:
        if ur_mode in (UltraRapidMode.NOT_USE, UltraRapidMode.UNKNOWN):
            start_time, end_time = period[0], period[1] + CLK_PERIOD_MARGIN
        else:
            start_time, end_time = None, None

        for line in page:
            if not line.startswith('AS '):
                continue
            tokens = line.split()
            if len(tokens) < 10:
                skipped += 1
                continue

            try:
                unix_time = calendar_to_unix(CalendarTime.from_tokens(tokens[2:8]))
                clock_bias = float(tokens[9]) * CLIGHT
            except ValueError:
                skipped += 1
                continue

            if start_time is None:
                start_time = unix_time + ur_mode.segment * ULTRA_RAPID_SEGMENT
                end_time = start_time + ULTRA_RAPID_SEGMENT

            if start_time - unix_time > TIME_EPSILON:
                continue
            if end_time - unix_time < TIME_EPSILON:
                break

            sat = index.index_from_id(tokens[1])
            if sat == INVALID_INDEX:
                skipped += 1
                continue

            series = clock_series[sat]
            previous = series.last_time()
            try:
                appended = series.append(unix_time, clock_bias, CLK_CORRECTION_TOLERANCE)
            except ValueError as e:
                logger.debug(f"{tokens[1]}: {e}")
                skipped += 1
                continue
            if appended and previous is not None:
                interval = min(interval, unix_time - previous)

    samples = sum(len(s) for s in clock_series)
    logger.info(f"Read {len(pages)} CLK page(s): {samples} samples, {skipped} records skipped, "
                f"interval {interval:.1f} s")
    return ClockProduct(clock_series, interval)
