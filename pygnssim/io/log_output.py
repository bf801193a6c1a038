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

"""Header/value strings for the simulator's columnar (CSV) log

Each loggable writes its header once and one value line per step, with every
column terminated by a comma so the strings of several loggables can be
concatenated.
"""

from typing import Iterable

AXES = ('x', 'y', 'z')


def write_scalar_header(name: str, unit: str) -> str:
    """``name[unit],``"""
    return f"{name}[{unit}],"


def write_vector_header(name: str, frame: str, unit: str, size: int = 3) -> str:
    """``name_frame_x[unit],name_frame_y[unit],...``"""
    if size > len(AXES):
        labels = [str(i) for i in range(size)]
    else:
        labels = AXES[:size]
    return "".join(f"{name}_{frame}_{label}[{unit}]," for label in labels)


def write_scalar(value: float, precision: int = 6) -> str:
    return f"{value:.{precision}g},"


def write_vector(values: Iterable[float], precision: int = 6) -> str:
    return "".join(write_scalar(float(v), precision) for v in values)
