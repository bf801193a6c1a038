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

"""Coordinate frame utilities

- DCM between the Earth-fixed and inertial frames for a rotation angle
- ECEF <-> ECI conversion at a given epoch (GMST rotation)
- Geocentric altitude and vector angles used by the ionosphere model
"""

from .dcm import ecef2eci_dcm, eci2ecef_dcm
from .eci_transforms import ecef2eci, eci2ecef
from .geocentric import angle_between_vectors, geocentric_altitude_km
from .frames import Frame
