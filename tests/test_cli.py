"""
 Unit: command line tests
 Project: License server log data extraction
 Description:

 tests/test_cli.py

 Copyright (C) 2008 MPI-CBG IPF

 License: GPL v3.
"""

import logging
import os

import pytest

from rlm_rlog_analyzer.cli import build_parser, main
from rlm_rlog_analyzer.report import output_targets


def test_defaults():
    (options, args) = build_parser().parse_args(["-l", "imaris.rlog"])
    assert args == []
    assert options.delimiter == ","
    assert options.lookahead == 20
    assert options.year is None
    assert options.loglevel == logging.INFO
    assert not options.force
    assert not options.strict
    assert not options.genuine_only


def test_verbose_and_quiet():
    parser = build_parser()
    assert parser.parse_args(["-l", "x", "-v"])[0].loglevel == logging.DEBUG
    assert parser.parse_args(["-l", "x", "-q"])[0].loglevel == logging.WARNING


def test_writes_results(sample_log_file, tmp_path):
    results = tmp_path / "results"
    results.mkdir()
    assert main(["-l", str(sample_log_file), "-r", str(results)]) == 0
    for target in output_targets(str(sample_log_file), str(results)):
        assert os.path.isfile(target.path)


def test_results_next_to_log_by_default(sample_log_file, tmp_path):
    assert main(["-l", str(sample_log_file)]) == 0
    assert (tmp_path / "imaris_Concurrent_License_Usage.csv").exists()


def test_refuses_to_overwrite_without_force(sample_log_file, tmp_path, caplog):
    assert main(["-l", str(sample_log_file)]) == 0
    with caplog.at_level(logging.ERROR):
        assert main(["-l", str(sample_log_file)]) == 1
    assert "--force" in caplog.text
    assert main(["-l", str(sample_log_file), "-f"]) == 0


def test_semicolon_delimiter(sample_log_file, tmp_path):
    assert main(["-l", str(sample_log_file), "-d", ";"]) == 0
    header = (tmp_path / "imaris_Total_Duration_Hosts.csv").read_text().splitlines()[0]
    assert header == "Host;imarisbase Duration (HH:MM:SS);imarisfilament Duration (HH:MM:SS)"


def test_isv_log_is_refused(tmp_path, caplog):
    log_file = tmp_path / "imaris.log"
    log_file.write_text("05/26 11:32 (imaris) OUT: imarisbase v6.0 by heisenberg_lab@heisenberg-8-434\n")
    with caplog.at_level(logging.ERROR):
        assert main(["-l", str(log_file)]) == 1
    assert "ISV logs are not supported" in caplog.text
    assert not (tmp_path / "imaris_License_Summary.txt").exists()


def test_missing_log_file(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["-l", str(tmp_path / "nothing.rlog")]) == 1
    assert "Unable to open file" in caplog.text


def test_missing_results_directory(sample_log_file, tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["-l", str(sample_log_file), "-r", str(tmp_path / "missing")]) == 1
    assert "Unable to open directory" in caplog.text


@pytest.mark.parametrize("argv", [
    [],
    ["-l", "imaris.rlog", "extra"],
    ["-l", "imaris.rlog", "-d", ";;"],
])
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as raised:
        main(argv)
    assert raised.value.code == 2
