# Golf Team Builder
# Copyright (C) 2025  Golf Team Builder developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Team shape ---
TEAM_SIZE = 4
MIN_TEAM_SIZE = 2
MAX_TEAM_SIZE = TEAM_SIZE

# Seats an unmerged registration pair may still fill
PAIR_FILL_SEATS = TEAM_SIZE - 2

# Team names are 1-based in creation order
TEAM_NAME_TEMPLATE = "Team {number}"

# --- Reason texts ---
REASON_REGISTERED_TOGETHER = "Registered together"
REASON_PREFERRED_BY = "Preferred by {name}"  # the named golfer asked for this one
REASON_PREFERS = "Prefers {name}"  # this golfer asked for the named one

# --- Preference text ---
PREFERENCE_SEPARATOR = ","

# --- Handicap bounds (World Handicap System index range, plus-handicaps negative) ---
MIN_HANDICAP = -10.0
MAX_HANDICAP = 54.0

# --- Registrant files ---
JSON_EXTENSION = ".json"
CSV_EXTENSION = ".csv"
SUPPORTED_REGISTRANT_EXTENSIONS = (JSON_EXTENSION, CSV_EXTENSION)

# Keys used by the registrant source export
KEY_CONTACT_ID = "contact_id"
KEY_REGISTRATION_ID = "id"
KEY_FIRST_NAME = "first_name"
KEY_LAST_NAME = "last_name"
KEY_EMAIL = "email"
KEY_HANDICAP = "golf_handicap"
KEY_PREFERRED_TEAMMATES = "preferred_teammates"
KEY_REGISTRATION_GROUP_ID = "registration_group_id"

REGISTRANT_FIELDS = [
    KEY_REGISTRATION_ID,
    KEY_CONTACT_ID,
    KEY_FIRST_NAME,
    KEY_LAST_NAME,
    KEY_EMAIL,
    KEY_HANDICAP,
    KEY_PREFERRED_TEAMMATES,
    KEY_REGISTRATION_GROUP_ID,
]

# --- Logging ---
LOG_LEVEL_ENV_VAR = "TEAMBUILDER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
