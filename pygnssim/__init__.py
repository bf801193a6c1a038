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

"""
PyGNSSim - GNSS ephemeris and clock interpolation engine

Reads precise orbit/clock products (SP3, CLK), interpolates satellite
position and clock offset at simulation time, and derives pseudorange,
carrier phase and ionospheric delay for simulated receivers.
"""

__version__ = "1.0.0"
__author__ = "PyGNSSim Development Team"
__title__ = "pygnssim"
__description__ = "GNSS ephemeris and clock interpolation engine for spacecraft simulation"

from .core import *
from .coordinate import *
from .observation import *
from .gnss import *
from .io import GnssSatellitesConfig, load_config
