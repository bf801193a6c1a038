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

"""Run the GNSS satellite engine over a time span

This example demonstrates:
1. Loading the engine configuration (YAML/JSON) and product files
2. Stepping true and estimated ephemeris through simulation time
3. Generating pseudorange / carrier phase for a ground receiver
4. Writing the recorded true/estimate/error tables and an error plot

Usage:
    python run_gnss_satellites.py --config gnss_satellites.yaml \\
        --start 2021-06-13T12:00:00 --duration 7200 --step 60 --output out/
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import numpy as np

from pygnssim.gnss import DataFrameObserver, init_gnss_satellites
from pygnssim.io import load_config
from pygnssim.logger import setup_logger, setup_logger_from_config

logger = logging.getLogger("pygnssim.examples.run_gnss_satellites")

# Receiver near Tokyo (ECEF, m)
RECEIVER_POSITION = np.array([-3954867.0, 3353972.0, 3701263.0])
L1_FREQUENCY_MHZ = 1575.42


def run(config_path, start, duration_s, step_s, output_dir=None, satellite='G01'):
    config = load_config(config_path)
    if config.logging:
        setup_logger_from_config(config.logging)

    observer = DataFrameObserver('G')
    satellites = init_gnss_satellites(config, observer=observer)
    if not satellites.is_calc_enabled:
        logger.warning("GNSS satellite calculation is disabled in the configuration")
        return satellites

    satellites.set_up(start, step_s)
    index = satellites.index_from_id(satellite)

    for elapsed in np.arange(0.0, duration_s + step_s / 2, step_s):
        satellites.update(float(elapsed))
        if satellites.is_valid(index):
            pseudorange = satellites.get_pseudorange(index, RECEIVER_POSITION, 0.0,
                                                     L1_FREQUENCY_MHZ)
            fraction, ambiguity = satellites.get_carrier_phase(index, RECEIVER_POSITION, 0.0,
                                                               L1_FREQUENCY_MHZ)
            logger.info(f"t={elapsed:8.1f} s {satellite}: pseudorange {pseudorange:.3f} m, "
                        f"phase {ambiguity:.0f} + {fraction:.4f} cycles")
        else:
            logger.info(f"t={elapsed:8.1f} s {satellite}: not valid")

    if output_dir:
        observer.to_csv(output_dir)
        from pygnssim.plot import plot_ephemeris_errors
        fig = plot_ephemeris_errors(observer.frame('error'), satellite)
        fig.savefig(Path(output_dir) / f"{satellite}_errors.png")
        logger.info(f"Results written to {output_dir}")

    return satellites


def main():
    import argparse
    parser = argparse.ArgumentParser(description='Interpolate GNSS ephemeris over a time span')
    parser.add_argument('--config', type=str, required=True, help='YAML or JSON configuration')
    parser.add_argument('--start', type=str, required=True,
                        help='Start epoch (UTC, ISO format, e.g. 2021-06-13T12:00:00)')
    parser.add_argument('--duration', type=float, default=3600.0, help='Duration [s]')
    parser.add_argument('--step', type=float, default=60.0, help='Step width [s]')
    parser.add_argument('--satellite', type=str, default='G01', help='Satellite to report')
    parser.add_argument('--output', type=str, help='Output directory for CSV tables and plot')
    parser.add_argument('--log-level', type=str, default='INFO', help='Log level')

    args = parser.parse_args()
    setup_logger(level=args.log_level)

    start = datetime.fromisoformat(args.start).replace(tzinfo=timezone.utc)
    try:
        run(args.config, start, args.duration, args.step, args.output, args.satellite)
    except (FileNotFoundError, ValueError) as e:
        logger.critical(f"GNSS satellite initialization failed: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
