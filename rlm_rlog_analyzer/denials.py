"""
 Unit: RLM license denials
 Project: License server log data extraction
 Description:

 rlm_rlog_analyzer/denials.py

 Copyright (C) 2008 MPI-CBG IPF

 License: GPL v3.

 This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""

"""
NOTE from the rlm docs:
The last_attempt parameter is 0 if the application will attempt another checkout,
or non-zero if this is the last attempt it will make to check the license out.
Thus, denials with last_attempt set to 0 are not "true" denials of the license to the application,
they are simply denials of the license at this license server.

By default every DENY is listed, genuine_only keeps the last attempts.
"""

import logging
from collections import namedtuple

from . import events as ev

log = logging.getLogger(__name__)

DENIAL_HEADER = ["Request", "Product", "Version", "User", "Host", "Reason"]

DenialRecord = namedtuple("DenialRecord", "timestamp product version user host reason last_attempt")


def is_genuine(event):
    return event.last_attempt.strip("0") != ""


def collect_denials(extraction, genuine_only=False):
    denials = []
    for event in extraction.events:
        if event.kind != ev.DENY:
            continue
        if genuine_only and not is_genuine(event):
            continue
        denials.append(DenialRecord(event.date_time, event.product, event.version,
                                    event.user, event.host, event.reason, event.last_attempt))
    log.info("%d denied license requests", len(denials))
    return denials


def denial_rows(denials):
    return [DENIAL_HEADER] + [list(denial[:6]) for denial in denials]
