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
Interpolation kernels for precise ephemeris windows

Each kernel evaluates one window of samples at a query time. Windows are
passed as ``times`` with shape (n,) and ``values`` with shape (n, k), so the
same compiled kernel serves 3-vectors (positions) and scalars (clocks,
k = 1).
"""

from enum import IntEnum

import numpy as np
from numba import njit

from ..core.constants import TRIG_OMEGA


class InterpolationMethod(IntEnum):
    """Kernel selector, values match the ``*_interpolation_method`` config key"""
    TRIGONOMETRIC = 0
    LAGRANGE = 1


@njit(cache=True)
def trigonometric_interpolation(times, values, t, omega=TRIG_OMEGA):
    """
    Trigonometric interpolation for near-periodic orbits

    Weights are products of ``sin(omega * dt / 2)`` ratios, i.e. Lagrange
    interpolation in the angle of a body with angular rate ``omega``.

    Parameters
    ----------
    times : np.ndarray
        Window epochs (s), shape (n,)
    values : np.ndarray
        Window samples, shape (n, k)
    t : float
        Query time (s)
    omega : float
        Angular rate (rad/s), a GNSS orbit by default

    Returns
    -------
    np.ndarray
        Interpolated value, shape (k,)
    """
    n = times.shape[0]
    k = values.shape[1]
    result = np.zeros(k)
    for i in range(n):
        weight = 1.0
        for j in range(n):
            if i == j:
                continue
            weight *= (np.sin(omega * (t - times[j]) / 2.0)
                       / np.sin(omega * (times[i] - times[j]) / 2.0))
        for m in range(k):
            result[m] += weight * values[i, m]
    return result


@njit(cache=True)
def lagrange_interpolation(times, values, t):
    """
    Lagrange polynomial interpolation through every window sample

    Parameters
    ----------
    times : np.ndarray
        Window epochs (s), shape (n,)
    values : np.ndarray
        Window samples, shape (n, k)
    t : float
        Query time (s)

    Returns
    -------
    np.ndarray
        Interpolated value, shape (k,)
    """
    n = times.shape[0]
    k = values.shape[1]
    result = np.zeros(k)
    for i in range(n):
        weight = 1.0
        for j in range(n):
            if i == j:
                continue
            weight *= (t - times[j]) / (times[i] - times[j])
        for m in range(k):
            result[m] += weight * values[i, m]
    return result


def get_kernel(method):
    """
    Kernel function for an interpolation method

    Parameters
    ----------
    method : InterpolationMethod or int
        Method selector

    Returns
    -------
    callable
        ``kernel(times, values, t) -> np.ndarray``
    """
    method = InterpolationMethod(method)
    if method == InterpolationMethod.TRIGONOMETRIC:
        return trigonometric_interpolation
    return lagrange_interpolation
