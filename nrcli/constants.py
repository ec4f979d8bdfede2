# Copyright 2021 Dynatrace LLC
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

import os.path


DEFAULT_CONFIG_PATH = os.path.join(os.path.curdir, "config.json")
DEFAULT_API_URL = "https://api.newrelic.com"
NRQL_CONDITIONS_ENDPOINT = "/v2/alerts_nrql_conditions.json"
NRQL_CONDITIONS_KEY = "nrql_conditions"
API_KEY_HEADER = "X-Api-Key"
# seconds, applies to connect and read
DEFAULT_TIMEOUT = 30
CSV_EXTENSION = ".csv"
YAML_SUFFIXES = (".yaml", ".yml")
