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

"""Physical constants and product-file parameters"""

import numpy as np

# Physical Constants
CLIGHT = 299792458.0           # speed of light (m/s)

# Earth Parameters (WGS84)
RE_WGS84 = 6378137.0           # earth semimajor axis (m)

# Time
SECONDS_PER_DAY = 86400.0
JD_UNIX_EPOCH = 2440587.5      # Julian date of 1970-01-01T00:00:00 UTC
JD_J2000 = 2451545.0           # Julian date of J2000.0

# Product files
SP3_NAN = 999999.999999        # "unavailable" flag in SP3 coordinate/clock fields
SP3_NAN_TOLERANCE = 1.0
SP3_CORRECTION_TOLERANCE = 1.0     # (s) samples closer than this replace the previous one
CLK_CORRECTION_TOLERANCE = 1e-4    # (s)
CLK_PERIOD_MARGIN = 30.0           # (s) clock samples kept past the last orbit epoch
ULTRA_RAPID_SEGMENT = 6 * 60 * 60.0  # (s) one ultra-rapid segment
ULTRA_RAPID_PARTITIONS = 8

# Interpolation
TIME_EPSILON = 1e-4                # (s) numerical guard on time comparisons
TRIG_OMEGA = 2.0 * np.pi / SECONDS_PER_DAY * 1.03  # (rad/s) GNSS orbit is slightly faster than a day
POSITION_WINDOW_SLACK = 3          # missing samples tolerated in a position window
CLOCK_WINDOW_SLACK = 0

# Simplified ionosphere
IONO_MAX_ALTITUDE_KM = 1000.0
IONO_DEFAULT_DELAY_M = 20.0
IONO_REFERENCE_FREQ_MHZ = 1500.0
