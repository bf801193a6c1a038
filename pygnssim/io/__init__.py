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

"""Product file access, configuration and log formatting"""

from .config import GnssSatellitesConfig, ProductSource, load_config
from .log_output import (
    write_scalar,
    write_scalar_header,
    write_vector,
    write_vector_header,
)
from .product_files import (
    clock_file_names,
    directory_for_file_sort,
    read_clock_files,
    read_file_contents,
    read_sp3_files,
    sp3_file_names,
)
