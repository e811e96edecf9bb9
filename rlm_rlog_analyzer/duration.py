"""
 Unit: RLM license checkout durations
 Project: License server log data extraction
 Description:

 rlm_rlog_analyzer/duration.py

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
How long was each license out, and for how long in total did each host (or user)
have each product?

For every OUT, the license came back at the first later line that is either
    an IN with the same server_handle, or
    a SHUTDOWN (the server takes back every license it handed out)
whichever comes first in the file. Not the IN closest in time, and not an IN matched on
user and host: the same user can have several checkouts of one product open at once,
and only the handle tells them apart.

Only the first matching IN counts, otherwise later hits with much later times would
make the durations very large and wrong. If nothing closes the checkout before the end
of the log, it is still checked out and we count up to the last event in the log.

Instead of scanning forward from every OUT we walk the events once and keep the
open checkouts by handle: an IN closes every open checkout with its handle, a SHUTDOWN
closes all of them. That gives the same pairs as the forward scan.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

from . import events as ev

log = logging.getLogger(__name__)

STILL_CHECKED_OUT = "(Still checked out)"

ACTIVITY_HEADER = ["Checkout Date/Time", "Checkin Date/Time", "Product", "Version",
                   "User", "Host", "Duration (HH:MM:SS)"]

BY_HOST = "host"
BY_USER = "user"


def format_duration(duration):
    """HH:MM:SS, hours can go past 24, whole seconds only."""
    total = int(duration.total_seconds())
    sign = "-" if total < 0 else ""
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    return "%s%02d:%02d:%02d" % (sign, hours, minutes, seconds)


@dataclass
class DurationRecord:
    checkout: str
    checkin: str
    product: str
    version: str
    user: str
    host: str
    duration: timedelta
    checkin_position: int = None

    @property
    def still_checked_out(self):
        return self.checkin_position is None

    def row(self):
        checkin = STILL_CHECKED_OUT if self.still_checked_out else self.checkin
        return [self.checkout, checkin, self.product, self.version, self.user, self.host,
                format_duration(self.duration)]


class DurationReport:
    """Checkout records plus total time per (host or user, product)."""

    def __init__(self, by, identities, products):
        self.by = by
        self.identities = identities
        self.products = products
        self.records = []
        self.totals = [[timedelta() for _ in range(len(products))] for _ in range(len(identities))]

    def add(self, record):
        row = self.identities.index(getattr(record, self.by))
        column = self.products.index(record.product)
        self.totals[row][column] += record.duration
        self.records.append(record)

    def total(self, name, product):
        return self.totals[self.identities.index(name)][self.products.index(product)]

    def activity_rows(self):
        return [ACTIVITY_HEADER] + [record.row() for record in self.records]

    def total_rows(self):
        header = [self.by.capitalize()] + [product + " Duration (HH:MM:SS)" for product in self.products]
        rows = [header]
        for name, durations in zip(self.identities, self.totals):
            rows.append([name] + [format_duration(duration) for duration in durations])
        return rows


def match_checkins(events):
    """Map the position of every OUT to the position of the line that ended it.

    None for checkouts still open at the end of the log. Keys are in file order.
    """
    closed_by = {}
    pending = {}
    for position, event in enumerate(events):
        if event.kind == ev.OUT:
            closed_by[position] = None
            pending.setdefault(event.handle, []).append(position)
        elif event.kind == ev.IN:
            for out_position in pending.pop(event.handle, ()):
                closed_by[out_position] = position
        elif event.kind == ev.SHUTDOWN:
            for positions in pending.values():
                for out_position in positions:
                    closed_by[out_position] = position
            pending.clear()
    return closed_by


def match_durations(extraction, by=BY_HOST):
    """Duration of every checkout, with totals by host or by user."""
    if by == BY_HOST:
        identities = extraction.hosts
    elif by == BY_USER:
        identities = extraction.users
    else:
        raise ValueError("durations are totalled by %r or %r, not %r" % (BY_HOST, BY_USER, by))

    events = extraction.events
    report = DurationReport(by, identities, extraction.products)
    end_event = extraction.end_event

    for out_position, closing_position in match_checkins(events).items():
        checkout = events[out_position]
        if closing_position is None:
            closing = end_event
            checkin = None
        else:
            closing = events[closing_position]
            checkin = closing.date_time
        duration = closing.timestamp - checkout.timestamp
        report.add(DurationRecord(checkout.date_time, checkin, checkout.product,
                                  checkout.version, checkout.user, checkout.host,
                                  duration, closing_position))

    still_out = sum(1 for record in report.records if record.still_checked_out)
    log.info("%d checkouts totalled by %s, %d still checked out",
             len(report.records), by, still_out)
    return report
