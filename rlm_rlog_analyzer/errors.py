"""
 Unit: RLM report log errors
 Project: License server log data extraction
 Description:

 rlm_rlog_analyzer/errors.py

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
Every error here ends the run. There is no skip-and-continue for a bad line:
a log we cannot read completely gives usage numbers we cannot trust.
"""


class RlogError(Exception):
    """Base class, carries a human readable message."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class UnsupportedFormat(RlogError):
    def __init__(self):
        super().__init__(
            "Log file format invalid. Only RLM report formatted logs are supported. "
            "ISV logs are not supported")


class LineError(RlogError):
    """An error tied to one line of the log, numbered from 1."""

    def __init__(self, message, line):
        super().__init__("%s on line %d" % (message, line))
        self.line = line


class MissingData(LineError):
    def __init__(self, line):
        super().__init__("Missing data", line)


class InvalidProductVersion(LineError):
    def __init__(self, line):
        super().__init__("Invalid product version formatting", line)


class UnexpectedCheckinDetail(LineError):
    def __init__(self, line):
        super().__init__("Unexpected license check-in (IN) event details", line)


class InvalidIndex(RlogError):
    def __init__(self, name):
        super().__init__("No index to '%s'" % name)
        self.name = name


class CannotOpenFile(RlogError):
    def __init__(self, path):
        if not path:
            message = "No file selected"
        else:
            message = "Unable to open file: %s" % path
        super().__init__(message)
        self.path = path


class CannotFindDirectory(RlogError):
    def __init__(self, path):
        if not path:
            message = "No directory selected"
        else:
            message = "Unable to open directory: %s" % path
        super().__init__(message)
        self.path = path
