"""
 Unit: RLM log format classifier
 Project: License server log data extraction
 Description:

 rlm_rlog_analyzer/classifier.py

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
An rlm server can write two kinds of log for a product:

1) the report log (.rlog), one event per line with fixed fields,
    the file starts with a line like "RLM Report Log Format 2, version 9.4 BL2, authentication flag 0"
2) the ISV debug log, free text lines like
    05/26 11:32 (imaris) OUT: imarisbase v6.0 by heisenberg_lab@heisenberg-8-434

Only the report log has the handles and counts we need, so the ISV log is recognised
and refused. The rlm server's own debug log has the ISV shape too, but every line is
tagged (rlm), so those lines are skipped while looking.
"""

import enum
import itertools
import logging

from . import grammar
from .errors import UnsupportedFormat

log = logging.getLogger(__name__)

DEFAULT_LOOKAHEAD = 20


class LogFormat(enum.Enum):
    REPORT_LOG = "report"


def classify_format(lines, lookahead=DEFAULT_LOOKAHEAD):
    """Find out which kind of rlm log the lines come from.

    The identifying lines are near the beginning, so only the first
    `lookahead` lines are searched. Returns LogFormat.REPORT_LOG or raises
    UnsupportedFormat.
    """
    for number, line in enumerate(itertools.islice(lines, lookahead), 1):
        if grammar.REPORT_LOG_MARKER in line:
            log.debug("report log marker on line %d", number)
            return LogFormat.REPORT_LOG
        tag = grammar.isv_tag(line)
        if tag is not None and tag != grammar.RLM_SERVER_TAG:
            log.debug("ISV log line (%s) on line %d", tag, number)
            raise UnsupportedFormat()
    raise UnsupportedFormat()
