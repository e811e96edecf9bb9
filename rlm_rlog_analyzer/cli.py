"""
 Unit: RLM report log analyzer command line
 Project: License server log data extraction
 Description:

 rlm_rlog_analyzer/cli.py

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
here we use optparse python module to make a standard unix like command line interface
that does help and reads command line arguments.

rlm-rlog-analyzer -l imaris.rlog -r results/
"""

import logging
import os
from optparse import OptionParser

from . import __version__, output
from .classifier import DEFAULT_LOOKAHEAD
from .errors import RlogError
from .report import analyze_file, output_targets

log = logging.getLogger(__name__)

commandLineUsage = "usage: %prog -l LOGFILE [-r RESULTS] [options]"


def build_parser():
    parser = OptionParser(usage=commandLineUsage, version="%prog " + __version__)
    parser.add_option("-l", "--log",
                      action="store", type="string", dest="logfile",
                      help="define name of input LOGFILE", metavar="LOGFILE")
    parser.add_option("-r", "--results",
                      action="store", type="string", dest="results",
                      help="directory for the RESULTS files, default is the directory of the log",
                      metavar="RESULTS")
    parser.add_option("-d", "--delimiter",
                      action="store", type="string", dest="delimiter", default=",",
                      help="delimiter of the table files [default: %default]")
    parser.add_option("-y", "--year",
                      action="store", type="int", dest="year",
                      help="year of the events logged before the log states a year")
    parser.add_option("--lookahead",
                      action="store", type="int", dest="lookahead", default=DEFAULT_LOOKAHEAD,
                      help="lines searched for the log format marker [default: %default]")
    parser.add_option("--strict",
                      action="store_true", dest="strict", default=False,
                      help="stop on malformed product versions and check-in details")
    parser.add_option("--genuine-denials",
                      action="store_true", dest="genuine_only", default=False,
                      help="only list denials that were the application's last attempt")
    parser.add_option("-f", "--force",
                      action="store_true", dest="force", default=False,
                      help="overwrite existing result files")
    parser.add_option("-v", "--verbose",
                      action="store_const", const=logging.DEBUG, dest="loglevel", default=logging.INFO,
                      help="log every event found")
    parser.add_option("-q", "--quiet",
                      action="store_const", const=logging.WARNING, dest="loglevel",
                      help="only log problems")
    return parser


def main(argv=None):
    parser = build_parser()
    (options, args) = parser.parse_args(argv)
    if options.logfile is None:
        parser.error("you must give command line option: -l LOGFILE")
    if args:
        parser.error("unexpected arguments: %s" % " ".join(args))
    if len(options.delimiter) != 1:
        parser.error("the delimiter must be a single character")

    logging.basicConfig(level=options.loglevel, format="%(levelname)-7s %(name)s: %(message)s")

    try:
        output_dir = options.results
        if output_dir is None:
            output_dir = os.path.dirname(options.logfile)
        output.check_directory(output_dir or ".")
        targets = output_targets(options.logfile, output_dir)
        existing = output.existing_outputs(targets)
        if existing and not options.force:
            log.error("result files already exist, use --force to overwrite:\n%s",
                      "\n".join(target.path for target in existing))
            return 1
        report = analyze_file(options.logfile, year=options.year, strict=options.strict,
                              lookahead=options.lookahead, genuine_only=options.genuine_only)
        output.publish(report, targets, delimiter=options.delimiter)
    except RlogError as error:
        log.error("%s", error)
        return 1

    log.info("Done! Have a nice time analysing the results!")
    return 0
