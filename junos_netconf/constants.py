"""
Copyright 2024 Nomios UK&I

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from enum import Enum


class Format(Enum):
    """
    Reply and configuration rendering formats.
    """

    TEXT = "text"
    XML = "xml"


class Database(Enum):
    """
    Configuration databases.
    """

    CANDIDATE = "candidate"
    COMMITTED = "committed"


class LoadAction(Enum):
    """
    Configuration load actions.
    """

    MERGE = "merge"
    OVERRIDE = "override"
    REPLACE = "replace"
    UPDATE = "update"
    SET = "set"


# attribute keys
ATTR_FORMAT = "format"
ATTR_DATABASE = "database"
ATTR_ACTION = "action"
ATTR_URL = "url"
ATTR_COMPARE = "compare"
ATTR_ROLLBACK = "rollback"
ATTR_RESCUE = "rescue"

# commit child element keys
COMMIT_SYNCHRONIZE = "synchronize"
COMMIT_CHECK = "check"
COMMIT_LOG = "log"
COMMIT_AT_TIME = "at-time"
COMMIT_CONFIRMED = "confirmed"
COMMIT_CONFIRM_TIMEOUT = "confirm-timeout"

# rollback comparison child element keys
ROLLBACK_ROLLBACK = "rollback"
ROLLBACK_COMPARE = "compare"

# load body elements
NODE_CONFIGURATION = "configuration"
NODE_CONFIGURATION_TEXT = "configuration-text"
NODE_CONFIGURATION_SET = "configuration-set"

# fixed nested elements
ELEMENT_PRIVATE = "private"
ELEMENT_PATH = "path"

DEFAULT_CONFIRM_TIMEOUT = 600
DEFAULT_DATABASE = Database.COMMITTED.value
DEFAULT_LOAD_ACTION = LoadAction.MERGE.value
DEFAULT_LOAD_FORMAT = Format.TEXT.value
DEFAULT_COMPARE_FORMAT = Format.XML.value
DEFAULT_COMPARE_ROLLBACK = 0

SHOW_CONFIGURATION_SET = "show configuration | display set"
SET_COMMAND_SEPARATOR = "\n"
