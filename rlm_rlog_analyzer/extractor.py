"""
 Unit: RLM report log event extraction
 Project: License server log data extraction
 Description:

 rlm_rlog_analyzer/extractor.py

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
One pass over the tokenized log, in file order:

1) a line with 2 fields where the first is mm/dd/yyyy is rlm telling us the date, keep its year
2) a line starting with an event keyword is cut into an Event using that kind's columns,
    too few fields for the kind ends the run with MissingData and the line number
3) product, user and host names go into the identity sets, first seen first indexed
4) mm/dd dates get the year appended
5) START, SHUTDOWN and DENY events are also kept in their own lists for the summary,
    and we remember the last event that has a time: that is the end of the log
    for licenses that were never checked back in.

Anything else (comments, the format line, lines of kinds we don't use) is passed over.
"""

import logging

from . import events as ev
from . import grammar
from .errors import InvalidProductVersion, UnexpectedCheckinDetail
from .events import Event, IdentitySet, YearContext

log = logging.getLogger(__name__)


class Extraction:
    """Everything the extraction pass found, read only once it is returned."""

    def __init__(self):
        self.events = []
        self.products = IdentitySet()
        self.users = IdentitySet()
        self.hosts = IdentitySet()
        self.start_events = []
        self.shutdown_events = []
        self.denial_events = []
        self.end_position = None
        self.server_name = ""

    @property
    def end_event(self):
        if self.end_position is None:
            return None
        return self.events[self.end_position]


def _check_strict(event, row):
    if not grammar.is_valid_version(event.version):
        raise InvalidProductVersion(event.line)
    if event.kind == ev.IN and not grammar.is_valid_checkin_reason(row[ev.IN_REASON_COLUMN]):
        raise UnexpectedCheckinDetail(event.line)


def extract_events(rows, year=None, strict=False):
    """Turn tokenized report log rows into an Extraction.

    year is used for events seen before the log states a year of its own.
    strict also checks product versions and check-in reasons.
    """
    result = Extraction()
    year_context = YearContext(year)

    for line, row in enumerate(rows, 1):
        if len(row) == 2 and year_context.set_from_date(row[0]) is not None:
            continue
        if not row or row[0] not in ev.REPORT_LOG_SCHEMAS:
            continue

        event = Event.from_row(row, line)
        if strict and event.kind in (ev.OUT, ev.IN, ev.DENY, ev.PRODUCT):
            _check_strict(event, row)

        if event.kind in ev.USAGE_KINDS:
            result.products.add(event.product)
            result.users.add(event.user)
            result.hosts.add(event.host)
        elif event.kind == ev.PRODUCT:
            result.products.add(event.product)

        if event.kind in ev.SHORT_DATE_KINDS:
            year_context.complete_date(event)
        elif event.kind == ev.START:
            year_context.set_from_date(event.date)
            result.server_name = event.server

        result.events.append(event)
        position = len(result.events) - 1
        if event.kind != ev.PRODUCT:
            result.end_position = position

        if event.kind == ev.START:
            result.start_events.append(event)
        elif event.kind == ev.SHUTDOWN:
            result.shutdown_events.append(event)
        elif event.kind == ev.DENY:
            result.denial_events.append(event)

        log.debug("line %d: %s", line, " ".join(event.fields()))

    log.info("%d lines, %d events, %d products, %d users, %d hosts",
             len(rows), len(result.events), len(result.products),
             len(result.users), len(result.hosts))
    return result


def _short_date(date):
    return "/".join(date.split("/")[:2])


def render_rows(events):
    """Write events back out as report log rows.

    Dates are shortened to mm/dd again, and a date line is put in front of any
    event whose year the running year would not give. Extracting the rows
    returns the same events.
    """
    rows = []
    running_year = None
    for event in events:
        row = ['""'] * ev.required_fields(event.kind)
        row[0] = event.kind
        for name, column in ev.REPORT_LOG_SCHEMAS[event.kind]:
            row[column] = getattr(event, name)

        if event.kind == ev.START:
            running_year = grammar.year_of(event.date) or running_year
        elif event.kind in ev.SHORT_DATE_KINDS:
            month_day = _short_date(event.date)
            year = event.date.split("/")[2]
            rolls_over = grammar.is_new_year_midnight(month_day, event.time)
            expected = running_year
            if rolls_over and running_year is not None:
                expected = str(int(running_year) + 1)
            if expected != year:
                marker_year = str(int(year) - 1) if rolls_over else year
                rows.append([month_day + "/" + marker_year, event.time])
            running_year = year
            date_column = dict(ev.REPORT_LOG_SCHEMAS[event.kind])["date"]
            row[date_column] = month_day
        rows.append(row)
    return rows
