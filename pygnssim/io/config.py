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

"""Configuration of the GNSS satellite engine

Loaded from YAML or JSON. Settings sit under a ``GNSS_SATELLITES`` section
(or at the top level of the file), with an optional ``logging`` section
passed to :func:`pygnssim.logger.setup_logger_from_config`::

    GNSS_SATELLITES:
      calculation: true
      directory_path: ../ExtLibraries/GNSS/
      true_position_file_sort: IGS
      true_position_first: igs21610.sp3
      true_position_last: igs21611.sp3
      true_position_interpolation_method: 0
      true_position_interpolation_number: 9
      true_clock_file_extension: .clk_30s
      ...
      estimate_ur_observe_or_predict: observe1
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

SECTION = "GNSS_SATELLITES"
PRODUCTS = ('true_position', 'true_clock', 'estimate_position', 'estimate_clock')
MIN_INTERPOLATION_NUMBER = 2


@dataclass(frozen=True)
class ProductSource:
    """Where one track (position or clock, true or estimate) is read from

    Attributes
    ----------
    file_sort : str
        Product kind, e.g. ``IGS``, ``IGU``, ``madoca``, ``JAXA_Final``
    first, last : str
        First and last file name of the range
    interpolation_number : int
        Samples per interpolation window
    interpolation_method : int
        0 trigonometric, 1 Lagrange (position products only)
    file_extension : str, optional
        ``.sp3`` or a clock extension such as ``.clk_30s`` (clock products only)
    """
    file_sort: str
    first: str
    last: str
    interpolation_number: int
    interpolation_method: int = 0
    file_extension: Optional[str] = None


@dataclass(frozen=True)
class GnssSatellitesConfig:
    calculation: bool
    directory_path: str = ""
    true_position: Optional[ProductSource] = None
    true_clock: Optional[ProductSource] = None
    estimate_position: Optional[ProductSource] = None
    estimate_clock: Optional[ProductSource] = None
    estimate_ur_observe_or_predict: str = "observe1"
    logging: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, section: Dict[str, Any],
                  logging_config: Optional[Dict[str, Any]] = None) -> 'GnssSatellitesConfig':
        """
        Build from the ``GNSS_SATELLITES`` mapping

        Raises
        ------
        ValueError
            If a required key is missing or a value is out of range
        """
        calculation = _as_bool(_require(section, 'calculation'))
        if not calculation:
            return cls(calculation=False, logging=logging_config)

        sources = {}
        for product in PRODUCTS:
            number = int(_require(section, f"{product}_interpolation_number"))
            if number < MIN_INTERPOLATION_NUMBER:
                raise ValueError(f"{product}_interpolation_number must be at least "
                                 f"{MIN_INTERPOLATION_NUMBER}, got {number}")
            method = 0
            extension = None
            if product.endswith('position'):
                method = int(section.get(f"{product}_interpolation_method", 0))
                if method not in (0, 1):
                    raise ValueError(f"{product}_interpolation_method must be 0 or 1, got {method}")
            else:
                extension = str(_require(section, f"{product}_file_extension"))
            sources[product] = ProductSource(
                file_sort=str(_require(section, f"{product}_file_sort")),
                first=str(_require(section, f"{product}_first")),
                last=str(_require(section, f"{product}_last")),
                interpolation_number=number,
                interpolation_method=method,
                file_extension=extension,
            )

        return cls(
            calculation=True,
            directory_path=str(_require(section, 'directory_path')),
            estimate_ur_observe_or_predict=str(
                section.get('estimate_ur_observe_or_predict', 'observe1')),
            logging=logging_config,
            **sources,
        )


def _require(section: Dict[str, Any], key: str) -> Any:
    if key not in section:
        raise ValueError(f"Missing key in {SECTION} configuration: {key}")
    return section[key]


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        if value.strip().upper() in ('ENABLE', 'TRUE', '1', 'YES', 'ON'):
            return True
        if value.strip().upper() in ('DISABLE', 'FALSE', '0', 'NO', 'OFF'):
            return False
        raise ValueError(f"Not a boolean: {value!r}")
    return bool(value)


def load_config(filepath: Union[str, Path]) -> GnssSatellitesConfig:
    """
    Load the engine configuration from a YAML or JSON file

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ValueError
        If the format is unsupported or settings are missing
    """
    filepath = Path(filepath)
    if filepath.suffix in ['.yaml', '.yml']:
        with open(filepath) as f:
            data = yaml.safe_load(f)
    elif filepath.suffix == '.json':
        with open(filepath) as f:
            data = json.load(f)
    else:
        raise ValueError(f"Unsupported file format: {filepath.suffix}")

    if not isinstance(data, dict):
        raise ValueError(f"Configuration {filepath} is not a mapping")
    section = data.get(SECTION, data)
    return GnssSatellitesConfig.from_dict(section, data.get('logging'))
