"""
 Unit: RLM report log grammar
 Project: License server log data extraction
 Description:

 rlm_rlog_analyzer/grammar.py

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
Grammar for the few tokens of an rlog line that need more than a string compare.

The lines themselves are cut into fields by whitespace and each event kind has
fixed column positions (see events.REPORT_LOG_SCHEMAS), so pyparsing is only used
on single fields, or on the start of a line when we are guessing the log format:

digit                        ::= '0'..'9'
month                        ::= digit+
day                          ::= digit+
year                         ::= digit digit digit digit
shortDate                    ::= month'/'day                  (OUT, IN, DENY, SHUTDOWN lines)
fullDate                     ::= month'/'day'/'year           (START lines and year marker lines)
timeOfDay                    ::= hour':'min [':'sec ['.'tenths]]
productVersion               ::= ['v'] digit+ ('.' digit+)*
whyIn                        ::= 1 | 2 | 3 | 4 | 5 | 6 | 7
isvLogLine                   ::= token-with-'/' token-with-':' '(' isv ')' ...

The ISV debug log looks like
05/26 11:32 (imaris) OUT: imarisbase v6.0 by heisenberg_lab@heisenberg-8-434
and the rlm server's own debug log looks the same, but with (rlm) as the tag.

Regex with named groups is used where we want the parts back out:
the named groups turn up as keys in the ParseResults, just like setResultsName would do.
"""

from datetime import datetime

from pyparsing import (Combine, Optional, ParseException, Regex, Suppress, Word, ZeroOrMore,
                       nums, one_of, printables)


fullDate = Regex(r"(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4})")
shortDate = Regex(r"(?P<month>\d{1,2})/(?P<day>\d{1,2})")
timeOfDay = Regex(r"(?P<hour>\d{1,2}):(?P<minute>\d{2})(:(?P<second>\d{2})(\.\d+)?)?")

productVersion = Combine(Optional("v") + Word(nums) + ZeroOrMore("." + Word(nums)))
whyIn = one_of("1 2 3 4 5 6 7")

isvDate = Regex(r"\S*/\S*")
isvTime = Regex(r"\S*:\S*")
isvTag = Suppress("(") + Word(printables, exclude_chars="()").set_results_name("tag") + Suppress(")")
isvLogLine = isvDate + isvTime + isvTag

REPORT_LOG_MARKER = "RLM Report Log Format"
RLM_SERVER_TAG = "rlm"


def _matches(expr, token):
    try:
        return expr.parse_string(token, parse_all=True)
    except ParseException:
        return None


def year_of(token):
    """Year of an MM/DD/YYYY field, or None when the field is not a full date."""
    date = _matches(fullDate, token)
    if date is None:
        return None
    return date["year"]


def is_short_date(token):
    return _matches(shortDate, token) is not None


def is_new_year_midnight(date, time):
    """True for an event stamped 01/01 in the minute after midnight.

    RLM logs such an event before the line that announces the new year.
    """
    if date != "01/01":
        return False
    clock = _matches(timeOfDay, time)
    if clock is None:
        return False
    return int(clock["hour"]) == 0 and int(clock["minute"]) == 0


def parse_timestamp(date, time):
    """Turn MM/DD/YYYY and hh:mm[:ss] fields into a datetime.

    Raises ValueError when either field does not match the grammar.
    Tenths of seconds are dropped.
    """
    day = _matches(fullDate, date)
    clock = _matches(timeOfDay, time)
    if day is None or clock is None:
        raise ValueError("not a report log timestamp: %r %r" % (date, time))
    return datetime(int(day["year"]), int(day["month"]), int(day["day"]),
                    int(clock["hour"]), int(clock["minute"]), int(clock.get("second") or 0))


def is_valid_version(token):
    return _matches(productVersion, token) is not None


def is_valid_checkin_reason(token):
    return _matches(whyIn, token) is not None


def isv_tag(line):
    """The (tag) of a line shaped like the ISV debug log, or None.

    Only the start of the line has to match, the rest is free text.
    """
    try:
        found = isvLogLine.parse_string(line)
    except ParseException:
        return None
    return found["tag"]
