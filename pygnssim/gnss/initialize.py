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

"""Build a :class:`GnssSatellites` engine from its configuration"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..core.satellite_numbering import ConstellationIndex
from ..io.config import GnssSatellitesConfig, ProductSource, load_config
from ..io.product_files import read_clock_files, read_sp3_files
from .gnss_satellites import GnssSatellites
from .observers import EphemerisObserver
from .satellite_information import SatelliteInformation
from .sp3_interpolation import InterpolationMethod
from .sp3_reader import UltraRapidMode

logger = logging.getLogger(__name__)


def _read_position(directory_path: str, source: ProductSource):
    pages, is_ultra_rapid = read_sp3_files(directory_path, source.file_sort,
                                           source.first, source.last)
    mode = UltraRapidMode.UNKNOWN if is_ultra_rapid else UltraRapidMode.NOT_USE
    return pages, mode


def _read_clock(directory_path: str, source: ProductSource):
    """Clock pages and their segment selector, None for CLK products"""
    if source.file_extension == '.sp3':
        pages, is_ultra_rapid = read_sp3_files(directory_path, source.file_sort,
                                               source.first, source.last)
        mode = UltraRapidMode.UNKNOWN if is_ultra_rapid else UltraRapidMode.NOT_USE
        return pages, mode
    pages, _ = read_clock_files(directory_path, source.file_extension, source.file_sort,
                                source.first, source.last)
    return pages, None


def _build_information(directory_path: str, position: ProductSource, clock: ProductSource,
                       index: ConstellationIndex, name: str,
                       estimate_mode: Optional[UltraRapidMode] = None) -> SatelliteInformation:
    position_pages, position_mode = _read_position(directory_path, position)
    if estimate_mode is not None and position_mode != UltraRapidMode.NOT_USE:
        position_mode = estimate_mode

    clock_pages, clock_mode = _read_clock(directory_path, clock)
    if clock_mode is None:
        # CLK products follow the position segment
        clock_mode = position_mode
    elif estimate_mode is not None and clock_mode != UltraRapidMode.NOT_USE:
        clock_mode = estimate_mode

    return SatelliteInformation.from_pages(
        position_pages, position.interpolation_number,
        clock_pages, clock.file_extension, clock.interpolation_number,
        index,
        position_method=InterpolationMethod(position.interpolation_method),
        position_ur_mode=position_mode,
        clock_ur_mode=clock_mode,
        name=name,
    )


def init_gnss_satellites(config: Union[GnssSatellitesConfig, str, Path],
                         constellation_index: Optional[ConstellationIndex] = None,
                         observer: Optional[EphemerisObserver] = None) -> GnssSatellites:
    """
    Read the configured product files and build the engine

    Parameters
    ----------
    config : GnssSatellitesConfig or path
        Engine configuration, or a YAML/JSON file holding it
    constellation_index : ConstellationIndex, optional
        Satellite numbering
    observer : EphemerisObserver, optional
        Called after every update

    Returns
    -------
    GnssSatellites
        Initialized engine, idle if calculation is disabled

    Raises
    ------
    FileNotFoundError
        If a product file is missing
    ValueError
        If the configuration or a product file is invalid
    """
    if not isinstance(config, GnssSatellitesConfig):
        config = load_config(config)

    satellites = GnssSatellites(config.calculation, constellation_index, observer)
    if not config.calculation:
        logger.info("GNSS satellite calculation disabled")
        return satellites

    index = satellites.constellation_index
    true_info = _build_information(config.directory_path, config.true_position,
                                   config.true_clock, index, "true")
    estimate_mode = UltraRapidMode.from_string(config.estimate_ur_observe_or_predict)
    estimate_info = _build_information(config.directory_path, config.estimate_position,
                                       config.estimate_clock, index, "estimate",
                                       estimate_mode=estimate_mode)

    satellites.initialize(true_info, estimate_info)
    logger.info(f"GNSS satellites initialized: {index.number_of_satellites} satellites")
    return satellites
