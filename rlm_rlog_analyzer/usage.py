"""
 Unit: RLM concurrent license usage
 Project: License server log data extraction
 Description:

 rlm_rlog_analyzer/usage.py

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
Replay the events and write down, after every OUT, IN and SHUTDOWN, how many licenses
of each product are in use.

For each product we report:
    floating licenses in use    - cur_use as the server logged it on the OUT or IN line
    total licenses in use       - distinct users holding at least one checkout of the product
    floating licenses limit     - from the PRODUCT line
    reserved licenses in use    - cur_resuse from the last OUT line
    reserved licenses limit     - from the PRODUCT line

The same license can be checked out several times by a user (several copies of Imaris
on one computer only take one seat), which is why we count distinct users per product
rather than checkouts.

A log can start while licenses are already checked out. Then an IN turns up for a
checkout we never saw: the user count is not taken below zero, and if the server
still reports licenses in use while we know of no user holding one, we report 1 user
for that one line only. We can't tell who holds the others, so 1 is the most we can
prove, and keeping it would make the next real OUT count 2.
"""

import logging
from collections import namedtuple
from dataclasses import dataclass

from . import events as ev

log = logging.getLogger(__name__)

ProductUsage = namedtuple("ProductUsage", "floating unique limit reserved reserved_limit")

USAGE_COLUMNS = (
    "Floating Licenses in use",
    "Total Licenses in use",
    "Floating Licenses Limit",
    "Reserved Licenses in use",
    "Reserved Licenses Limit",
)


@dataclass
class UsageSnapshot:
    timestamp: str
    usage: tuple

    def row(self):
        cells = [self.timestamp]
        for product_usage in self.usage:
            cells.extend(str(value) for value in product_usage)
        return cells


@dataclass
class UsageTable:
    header: list
    snapshots: list

    def rows(self):
        return [self.header] + [snapshot.row() for snapshot in self.snapshots]


def usage_header(products):
    header = ["Date/Time"]
    for product in products:
        header.extend(product + " " + column for column in USAGE_COLUMNS)
    return header


def _as_count(value):
    # non numeric counts read as zero
    return int(value) if value.isdigit() else 0


class UsageSimulator:
    """Running license counts, fed one event at a time in file order."""

    def __init__(self, products, users):
        self.products = products
        self.users = users
        self.active = [[0] * len(products) for _ in range(len(users))]
        self.unique = [0] * len(products)
        self.floating = [0] * len(products)
        self.limit = [0] * len(products)
        self.reserved = [0] * len(products)
        self.reserved_limit = [0] * len(products)
        self.snapshots = []

    def snapshot(self, event):
        usage = tuple(
            ProductUsage(self.floating[p], self.unique[p], self.limit[p],
                         self.reserved[p], self.reserved_limit[p])
            for p in range(len(self.products)))
        self.snapshots.append(UsageSnapshot(event.date_time, usage))

    def checkout(self, event):
        product = self.products.index(event.product)
        user = self.users.index(event.user)
        self.floating[product] = _as_count(event.count)
        self.active[user][product] += 1
        if self.active[user][product] == 1:
            self.unique[product] += 1
        self.reserved[product] = _as_count(event.reserved)
        self.snapshot(event)

    def checkin(self, event):
        product = self.products.index(event.product)
        user = self.users.index(event.user)
        self.floating[product] = _as_count(event.count)
        if self.active[user][product] > 0:
            self.active[user][product] -= 1
        if self.active[user][product] == 0 and self.unique[product] > 0:
            self.unique[product] -= 1

        if self.floating[product] > 0 and self.unique[product] == 0:
            # checked out before the log started, see module notes
            self.unique[product] = 1
            self.snapshot(event)
            self.unique[product] = 0
        else:
            self.snapshot(event)

    def shutdown(self, event):
        for counts in self.active:
            counts[:] = [0] * len(counts)
        self.unique[:] = [0] * len(self.unique)
        self.floating[:] = [0] * len(self.floating)
        self.snapshot(event)

    def product(self, event):
        product = self.products.index(event.product)
        self.limit[product] = _as_count(event.count)
        self.reserved_limit[product] = _as_count(event.reserved)

    def feed(self, event):
        if event.kind == ev.OUT:
            self.checkout(event)
        elif event.kind == ev.IN:
            self.checkin(event)
        elif event.kind == ev.SHUTDOWN:
            self.shutdown(event)
        elif event.kind == ev.PRODUCT:
            self.product(event)


def simulate_usage(extraction):
    """Concurrent usage table for the whole log.

    Runs after extraction, when every product is known, so the header
    and every row have a column group for each product.
    """
    simulator = UsageSimulator(extraction.products, extraction.users)
    for event in extraction.events:
        simulator.feed(event)
    log.info("%d concurrent usage snapshots", len(simulator.snapshots))
    return UsageTable(usage_header(extraction.products), simulator.snapshots)
