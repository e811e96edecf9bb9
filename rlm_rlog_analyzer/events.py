"""
 Unit: RLM report log events
 Project: License server log data extraction
 Description:

 rlm_rlog_analyzer/events.py

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
The report log entries we use, from the rlm docs (Appendix A - Reportlog File Format):

START hostname mm/dd/yyyy hh:mm:ss
SHUTDOWN user host mm/dd hh:mm:ss
PRODUCT name version pool# count #reservations soft_limit ...
OUT product version pool# user host "isv_def" count cur_use cur_resuse server_handle share_handle process_id "project" "requested product" "requested version" mm/dd hh:mm:ss
IN why product version user host "isv_def" count cur_use cur_resuse server_handle mm/dd hh:mm:ss
DENY product version user host "isv_def" count why last_attempt ... mm/dd hh:mm

for example:
OUT imarisbase 6.0 9 heisenberg_lab heisenberg-8-434 "" 1 1 0 26e 26e 410 "" "" "" 06/16 10:57:52
IN 1 imarisbase 6.0 heisenberg_lab heisenberg-8-434 "" 1 0 0 26e 06/16 11:32:55

The counts we report for OUT and IN are cur_use and cur_resuse, the number of licenses
of that product the server has handed out after this event, not the count of this one checkout.
For PRODUCT the count is the floating license limit and #reservations the reserved limit.

Instead of one grammar per line we keep a table of (field, column) for each event kind,
so the column numbers live in one place. A line of a kind has to have at least as
many fields as its highest column needs.
"""

from dataclasses import dataclass, field

from . import grammar
from .errors import InvalidIndex, MissingData

OUT = "OUT"
IN = "IN"
DENY = "DENY"
START = "START"
SHUTDOWN = "SHUTDOWN"
PRODUCT = "PRODUCT"

REPORT_LOG_SCHEMAS = {
    OUT: (("date", 16), ("time", 17), ("product", 1), ("version", 2), ("user", 4),
          ("host", 5), ("count", 8), ("handle", 10), ("reserved", 9)),
    IN: (("date", 11), ("time", 12), ("product", 2), ("version", 3), ("user", 4),
         ("host", 5), ("count", 8), ("handle", 10), ("reserved", 9)),
    DENY: (("date", 10), ("time", 11), ("product", 1), ("version", 2), ("user", 3),
           ("host", 4), ("count", 7), ("reason", 7), ("last_attempt", 8)),
    START: (("date", 2), ("time", 3), ("server", 1)),
    SHUTDOWN: (("date", 3), ("time", 4)),
    PRODUCT: (("product", 1), ("version", 2), ("count", 4), ("reserved", 5)),
}

# column of the check-in reason ("why") on IN lines, only looked at in strict mode
IN_REASON_COLUMN = 1

# kinds that name a product, user and host
USAGE_KINDS = (OUT, IN, DENY)
# kinds that get the running year appended to their mm/dd date
SHORT_DATE_KINDS = (OUT, IN, DENY, SHUTDOWN)


def required_fields(kind):
    return max(column for _, column in REPORT_LOG_SCHEMAS[kind]) + 1


@dataclass
class Event:
    """One report log entry projected through its schema.

    Fields hold the text from the log; fields a kind does not have are "".
    """
    kind: str
    date: str = ""
    time: str = ""
    product: str = ""
    version: str = ""
    user: str = ""
    host: str = ""
    count: str = ""
    handle: str = ""
    reserved: str = ""
    reason: str = ""
    last_attempt: str = ""
    server: str = ""
    line: int = field(default=0, compare=False)

    @classmethod
    def from_row(cls, row, line):
        kind = row[0]
        if len(row) < required_fields(kind):
            raise MissingData(line)
        values = {name: row[column] for name, column in REPORT_LOG_SCHEMAS[kind]}
        return cls(kind=kind, line=line, **values)

    @property
    def date_time(self):
        """Date and time as they are written to the report tables."""
        return self.date + " " + self.time

    @property
    def timestamp(self):
        """The event time as a datetime, None for PRODUCT lines."""
        if self.kind == PRODUCT:
            return None
        try:
            return grammar.parse_timestamp(self.date, self.time)
        except ValueError:
            raise MissingData(self.line) from None

    def fields(self):
        """Kind followed by the schema fields, in schema order."""
        return [self.kind] + [getattr(self, name) for name, _ in REPORT_LOG_SCHEMAS[self.kind]]


class IdentitySet:
    """Distinct names in the order they were first seen.

    The position of a name never changes once given, so it can index
    the per user, per host and per product tables.
    """

    def __init__(self, names=()):
        self._index = {}
        for name in names:
            self.add(name)

    def add(self, name):
        if name not in self._index:
            self._index[name] = len(self._index)
        return self._index[name]

    def index(self, name):
        try:
            return self._index[name]
        except KeyError:
            raise InvalidIndex(name) from None

    def __contains__(self, name):
        return name in self._index

    def __iter__(self):
        return iter(self._index)

    def __len__(self):
        return len(self._index)

    def __repr__(self):
        return "IdentitySet(%r)" % list(self._index)


class YearContext:
    """The year of the events being read.

    OUT, IN, DENY and SHUTDOWN lines only have mm/dd. The year comes from the
    START line, from the date lines rlm writes every so often (mm/dd/yyyy hh:mm),
    or from the caller when the log gives none before the first event.
    """

    def __init__(self, year=None):
        self.year = str(year) if year is not None else None

    def set_from_date(self, token):
        year = grammar.year_of(token)
        if year is not None:
            self.year = year
        return year

    def complete_date(self, event):
        """Append /year to the event's mm/dd date.

        An event at 01/01 00:mm comes before the new year's date line,
        so it moves the year on first.
        """
        if self.year is None:
            raise MissingData(event.line)
        if grammar.is_new_year_midnight(event.date, event.time):
            self.year = str(int(self.year) + 1)
        event.date = event.date + "/" + self.year
