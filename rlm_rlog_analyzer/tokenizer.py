"""
 Unit: RLM report log tokenizer
 Project: License server log data extraction
 Description:

 rlm_rlog_analyzer/tokenizer.py

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


def tokenize_line(line):
    """Split one log line into its whitespace delimited fields.

    Empty quoted fields such as the isv_def "" stay one field each.
    """
    return line.split()


def tokenize_lines(lines):
    return [tokenize_line(line) for line in lines]
