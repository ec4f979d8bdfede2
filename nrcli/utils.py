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


class NrcliError(Exception):
    pass


class ConfigReadError(NrcliError):
    pass


class ConfigParseError(NrcliError):
    pass


class NetworkError(NrcliError):
    pass


class ResponseShapeError(NrcliError):
    def __init__(self, message, violations=None):
        super().__init__(message)
        self.violations = violations if violations is not None else []


class ThresholdFormatError(ResponseShapeError):
    pass


class FileWriteError(NrcliError):
    pass


def check_file_exists(file_path, exception_cls=FileWriteError, warn=None):
    """Returns True if file under given path exists and is a real file.
    In case the path represents a directory, exception given in the exception_cls parameter will be thrown.
    In case there's no file under the given path returns False.
    When `warn` is given it is called with an overwrite notice.
    """
    if os.path.exists(file_path):
        require_is_not_dir(file_path, exception_cls)
        if warn is not None:
            warn("%s file already exists, it will be overwritten!" % file_path)
        return True
    return False


def require_is_not_dir(file_path, exception_cls=FileWriteError):
    if os.path.isdir(file_path):
        raise exception_cls("%s is a directory, aborting!" % file_path)


def format_violations(violations):
    return "\n".join(f"  {v['path'] or '<root>'}: {v['cause']}" for v in violations)
