"""
 Unit: RLM report log analysis
 Project: License server log data extraction
 Description:

 rlm_rlog_analyzer/report.py

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
One run over one log file:

1) check it is a report log (classifier)
2) cut the lines into fields and then into events (tokenizer, extractor)
3) replay the events for the concurrent usage (usage)
4) pair checkouts with checkins, totalled by host and by user (duration)
5) list the denials (denials)

Each step finishes before the next one starts and works on what the one before returned.
The LogReport holds the results as tables of strings, ready for output.publish to write.
"""

import logging
import os
from collections import namedtuple

from . import output
from .classifier import DEFAULT_LOOKAHEAD, classify_format
from .denials import collect_denials, denial_rows
from .duration import BY_HOST, BY_USER, match_durations
from .extractor import extract_events
from .tokenizer import tokenize_lines
from .usage import simulate_usage

log = logging.getLogger(__name__)

OutputTarget = namedtuple("OutputTarget", "name path")

OUTPUT_SUFFIXES = (
    ("summary", "_License_Summary.txt"),
    ("processed_log", "_Processed_Log_File.txt"),
    ("concurrent_usage", "_Concurrent_License_Usage.csv"),
    ("activity", "_License_Activity.csv"),
    ("total_duration_hosts", "_Total_Duration_Hosts.csv"),
    ("total_duration_users", "_Total_Duration_Users.csv"),
    ("denied_requests", "_Denied_License_Requests.csv"),
)


def output_targets(input_path, output_dir=None):
    """Where the results of a log go, in a fixed order.

    The file names are the log's name without extension plus a suffix per table.
    Without output_dir they go next to the log.
    """
    if output_dir is None:
        output_dir = os.path.dirname(input_path)
    base_name = os.path.splitext(os.path.basename(input_path))[0]
    return [OutputTarget(name, os.path.join(output_dir, base_name + suffix))
            for name, suffix in OUTPUT_SUFFIXES]


class LogReport:

    def __init__(self, input_path, log_format, extraction, usage, by_host, by_user, denials):
        self.input_path = input_path
        self.log_format = log_format
        self.extraction = extraction
        self.usage = usage
        self.by_host = by_host
        self.by_user = by_user
        self.denials = denials

    def summary_text(self):
        extraction = self.extraction
        lines = ["Log Data Summary For:", self.input_path, ""]
        lines += ["Server Name: " + extraction.server_name, ""]

        def section(title, items):
            lines.append("%s: (%d Total)" % (title, len(items)))
            lines.extend(items)
            lines.append("")

        section("Server Start(s)", [" ".join(event.fields()[1:]) for event in extraction.start_events])
        section("Server Shutdown(s)", [" ".join(event.fields()[1:]) for event in extraction.shutdown_events])
        section("Product(s)", list(extraction.products))
        section("User(s)", list(extraction.users))
        section("Host(s)", list(extraction.hosts))
        lines.append("Denied License Request(s): %d Total" % len(self.denials))
        return "\n".join(lines) + "\n"

    def processed_log_rows(self):
        return [event.fields() for event in self.extraction.events]

    def tables(self):
        """The delimited tables, keyed by output target name."""
        return {
            "concurrent_usage": self.usage.rows(),
            "activity": self.by_host.activity_rows(),
            "total_duration_hosts": self.by_host.total_rows(),
            "total_duration_users": self.by_user.total_rows(),
            "denied_requests": denial_rows(self.denials),
        }


def analyze_lines(lines, input_path="", year=None, strict=False,
                  lookahead=DEFAULT_LOOKAHEAD, genuine_only=False):
    """Run every pass over the lines of a report log and return a LogReport."""
    log_format = classify_format(lines, lookahead)
    log.info("parsing rlog %s", input_path or "(lines)")
    extraction = extract_events(tokenize_lines(lines), year=year, strict=strict)
    usage = simulate_usage(extraction)
    by_host = match_durations(extraction, BY_HOST)
    by_user = match_durations(extraction, BY_USER)
    denials = collect_denials(extraction, genuine_only=genuine_only)
    return LogReport(input_path, log_format, extraction, usage, by_host, by_user, denials)


def analyze_file(path, **options):
    return analyze_lines(output.read_log_lines(path), input_path=path, **options)
