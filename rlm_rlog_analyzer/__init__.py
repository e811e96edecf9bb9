#! /usr/bin/env python

"""
 Unit: Imaris license server log data extraction
 Project: License server log data extraction
 Created: 12.08.2008, DJW
 Description:

 rlm_rlog_analyzer

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
__author__ = "MPI-CBG IPF <http://www.mpi-cbg.de/>"
__version__ = "2.0.0"

"""
python rlm log file parser / data extractor

What does it need to do?:
parse a reprise license manager report log (.rlog) and do these things:
1) concurrent license usage per product over time: licenses the server handed out,
    distinct users holding them, and the limits from the PRODUCT lines
2) how long each checkout lasted, and the total duration each host and each user
    had each product
3) list the DENYs, to see how much usage is prevented by limited license number
4) output as delimited text for import into excel, plus a human readable summary

rlm can also write an ISV debug log; that one is recognised and refused.
"""

from .errors import (CannotFindDirectory, CannotOpenFile, InvalidIndex, InvalidProductVersion,
                     MissingData, RlogError, UnexpectedCheckinDetail, UnsupportedFormat)
from .report import LogReport, OutputTarget, analyze_file, analyze_lines, output_targets

__all__ = [
    "CannotFindDirectory", "CannotOpenFile", "InvalidIndex", "InvalidProductVersion",
    "MissingData", "RlogError", "UnexpectedCheckinDetail", "UnsupportedFormat",
    "LogReport", "OutputTarget", "analyze_file", "analyze_lines", "output_targets",
]
