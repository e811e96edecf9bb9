"""
 Unit: RLM report log file input and output
 Project: License server log data extraction
 Description:

 rlm_rlog_analyzer/output.py

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
Read the log in one go, and write the result tables as delimited text
that excel and friends can open. Comma by default, semicolon works better
with some excel locales.
"""

import csv
import logging
import os

from .errors import CannotFindDirectory, CannotOpenFile

log = logging.getLogger(__name__)


def read_log_lines(path):
    if not path:
        raise CannotOpenFile(path)
    try:
        with open(path, encoding="utf-8", errors="replace") as log_file:
            lines = log_file.read().splitlines()
    except OSError:
        raise CannotOpenFile(path) from None
    log.info("read %d lines from %s", len(lines), path)
    return lines


def check_directory(path):
    if not path or not os.path.isdir(path):
        raise CannotFindDirectory(path)


def existing_outputs(targets):
    """Targets whose file is already there, so the caller can refuse to overwrite."""
    return [target for target in targets if os.path.exists(target.path)]


def write_text(path, text):
    try:
        with open(path, "w", encoding="utf-8") as out_file:
            out_file.write(text)
    except OSError:
        raise CannotOpenFile(path) from None


def write_table(path, rows, delimiter=","):
    try:
        with open(path, "w", newline="", encoding="utf-8") as out_file:
            writer = csv.writer(out_file, delimiter=delimiter, lineterminator="\n")
            writer.writerows(rows)
    except OSError:
        raise CannotOpenFile(path) from None


def publish(report, targets, delimiter=","):
    """Write every table of a LogReport to its target."""
    for target in targets:
        check_directory(os.path.dirname(target.path) or ".")

    tables = report.tables()
    for target in targets:
        if target.name == "summary":
            write_text(target.path, report.summary_text())
        elif target.name == "processed_log":
            rows = report.processed_log_rows()
            write_text(target.path, "".join(" ".join(row) + "\n" for row in rows))
        else:
            write_table(target.path, tables[target.name], delimiter)
        log.info("wrote %s", target.path)
