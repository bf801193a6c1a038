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

"""Locating and reading SP3 / clock product files on disk

Product files live under ``<directory_path>/<agency>/<product>/``. A run
covers a consecutive range of files given by its first and last names; the
names in between are derived from the naming convention of the product:

- ``COD0MGXFIN_<yyyy><ddd>0000_01D_05M_ORB.SP3`` daily MGEX files
- ``<head><wwww><d>_<hh><foot>`` ultra-rapid files, one every 6 hours
- ``<head><wwww><d><foot>`` daily files named by GPS week and day
"""

import logging
import os
from typing import Iterator, List, Tuple

from ..core.time import days_in_year

logger = logging.getLogger(__name__)

# Upper bound on the files of one run, guards against a last name that the
# sequence never reaches
MAX_PRODUCT_FILES = 4 * 366

COD_HEADER = "COD0MGXFIN_"
COD_FOOTER = "0000_01D_05M_ORB.SP3"

_IGS_PRODUCTS = {'S': 'igs', 'R': 'igr', 'U': 'igu'}
_AGENCY_PRODUCTS = {'F': 'final', 'R': 'rapid', 'U': 'ultra_rapid'}


def directory_for_file_sort(file_sort: str) -> str:
    """
    Relative directory of a product kind

    Parameters
    ----------
    file_sort : str
        ``IGS``/``IGR``/``IGU``, ``madoca`` or ``<Agency>_<Final|Rapid|Ultra...>``

    Returns
    -------
    str
        Directory with a trailing separator, e.g. ``IGS/igu/``

    Raises
    ------
    ValueError
        If the product kind is not recognized
    """
    if file_sort.startswith("IG"):
        product = _IGS_PRODUCTS.get(file_sort[2:3])
        if product is None:
            raise ValueError(f"Unknown IGS product: {file_sort}")
        return f"IGS/{product}/"

    if file_sort.startswith("ma"):
        return "JAXA/madoca/"

    agency, sep, kind = file_sort.partition('_')
    if not sep or not agency:
        raise ValueError(f"file_sort has something wrong: {file_sort}")
    product = _AGENCY_PRODUCTS.get(kind[:1])
    if product is None:
        raise ValueError(f"file_sort has something wrong: {file_sort}")
    return f"{agency}/{product}/"


def is_ultra_rapid_sp3(file_sort: str) -> bool:
    return file_sort.startswith("IGU") or "Ultra" in file_sort


def is_ultra_rapid_clock(file_sort: str) -> bool:
    return "Ultra" in file_sort


def _split_gps_week_name(first: str, with_hour: bool) -> Tuple[str, int, int, int, str]:
    """Split ``<head><wwww><d>[_<hh>]<foot>`` into its parts"""
    for i, char in enumerate(first):
        if char.isdigit():
            try:
                week = int(first[i:i + 4])
                day = int(first[i + 4])
                if with_hour:
                    hour = int(first[i + 6:i + 8])
                    return first[:i], week, day, hour, first[i + 8:]
                return first[:i], week, day, 0, first[i + 5:]
            except (IndexError, ValueError) as e:
                raise ValueError(f"Cannot parse GPS week/day from file name {first}") from e
    raise ValueError(f"No GPS week in file name {first}")


def _cod_names(first: str) -> Iterator[str]:
    try:
        year = int(first[len(COD_HEADER):len(COD_HEADER) + 4])
        day = int(first[len(COD_HEADER) + 4:len(COD_HEADER) + 7])
    except ValueError as e:
        raise ValueError(f"Cannot parse year/day of year from file name {first}") from e

    while True:
        if day > days_in_year(year):
            year += 1
            day = 1
        yield f"{COD_HEADER}{year}{day:03d}{COD_FOOTER}"
        day += 1


def _ultra_rapid_names(first: str) -> Iterator[str]:
    head, week, day, hour, foot = _split_gps_week_name(first, with_hour=True)
    while True:
        if hour >= 24:
            hour = 0
            day += 1
        if day >= 7:
            week += 1
            day = 0
        yield f"{head}{week}{day}_{hour:02d}{foot}"
        hour += 6


def _daily_names(first: str) -> Iterator[str]:
    head, week, day, _, foot = _split_gps_week_name(first, with_hour=False)
    while True:
        if day >= 7:
            week += 1
            day = 0
        yield f"{head}{week}{day}{foot}"
        day += 1


def _collect(names: Iterator[str], last: str) -> List[str]:
    result = []
    for name in names:
        result.append(name)
        if name == last:
            return result
        if len(result) >= MAX_PRODUCT_FILES:
            break
    raise ValueError(f"Last file {last} is not reached from {result[0]} "
                     f"within {MAX_PRODUCT_FILES} files")


def sp3_file_names(file_sort: str, first: str, last: str) -> List[str]:
    """
    Names of the consecutive SP3 files from ``first`` to ``last`` inclusive

    Raises
    ------
    ValueError
        If ``last`` does not follow ``first`` in the naming sequence
    """
    if first.startswith("COD"):
        return _collect(_cod_names(first), last)
    if is_ultra_rapid_sp3(file_sort):
        return _collect(_ultra_rapid_names(first), last)
    return _collect(_daily_names(first), last)


def clock_file_names(file_sort: str, first: str, last: str) -> List[str]:
    """Names of the consecutive clock files from ``first`` to ``last`` inclusive"""
    if is_ultra_rapid_clock(file_sort):
        return _collect(_ultra_rapid_names(first), last)
    return _collect(_daily_names(first), last)


def read_file_contents(path: str) -> List[str]:
    """
    Read a product file as a list of lines

    A trailing ``EOF`` marker line is dropped.

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"GNSS product file not found: {path}")
    with open(path) as f:
        lines = f.read().splitlines()
    if lines and lines[-1] == "EOF":
        lines.pop()
    return lines


def read_sp3_files(directory_path: str, file_sort: str, first: str,
                   last: str) -> Tuple[List[List[str]], bool]:
    """
    Read a range of SP3 files

    Parameters
    ----------
    directory_path : str
        Root of the product tree
    file_sort : str
        Product kind, selects the sub directory and naming convention
    first, last : str
        First and last file names

    Returns
    -------
    pages : list of list of str
        Lines of every file, in order
    is_ultra_rapid : bool
        True for ultra-rapid products, whose segment still has to be chosen
    """
    directory = os.path.join(directory_path, directory_for_file_sort(file_sort))
    names = sp3_file_names(file_sort, first, last)
    pages = [read_file_contents(os.path.join(directory, name)) for name in names]
    is_ultra_rapid = not first.startswith("COD") and is_ultra_rapid_sp3(file_sort)
    logger.info(f"Read {len(pages)} SP3 files from {directory} ({first} .. {last})")
    return pages, is_ultra_rapid


def read_clock_files(directory_path: str, extension: str, file_sort: str, first: str,
                     last: str) -> Tuple[List[List[str]], bool]:
    """
    Read a range of clock files

    Clock files sit in a sub directory named after the extension without its
    dot, e.g. ``IGS/igs/clk_30s/`` for ``.clk_30s``.

    Returns
    -------
    pages : list of list of str
        Lines of every file, in order
    is_ultra_rapid : bool
        True for ultra-rapid products
    """
    if not extension.startswith('.') or len(extension) < 2:
        raise ValueError(f"Clock file extension must look like '.clk', got {extension!r}")
    directory = os.path.join(directory_path, directory_for_file_sort(file_sort), extension[1:])
    names = clock_file_names(file_sort, first, last)
    pages = [read_file_contents(os.path.join(directory, name)) for name in names]
    logger.info(f"Read {len(pages)} clock files from {directory} ({first} .. {last})")
    return pages, is_ultra_rapid_clock(file_sort)
