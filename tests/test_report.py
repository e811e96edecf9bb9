"""
 Unit: report and output tests
 Project: License server log data extraction
 Description:

 tests/test_report.py

 Copyright (C) 2008 MPI-CBG IPF

 License: GPL v3.
"""

import os
from pathlib import Path

import pytest

from rlm_rlog_analyzer import (CannotFindDirectory, CannotOpenFile, UnsupportedFormat,
                               analyze_file, analyze_lines, output_targets)
from rlm_rlog_analyzer import output


def test_output_targets_order():
    targets = output_targets(os.path.join("logs", "imaris.rlog"), "results")
    assert [target.name for target in targets] == [
        "summary", "processed_log", "concurrent_usage", "activity",
        "total_duration_hosts", "total_duration_users", "denied_requests",
    ]
    assert targets[0].path == os.path.join("results", "imaris_License_Summary.txt")
    assert targets[6].path == os.path.join("results", "imaris_Denied_License_Requests.csv")


def test_output_targets_next_to_log():
    targets = output_targets(os.path.join("logs", "imaris.rlog"))
    assert targets[2].path == os.path.join("logs", "imaris_Concurrent_License_Usage.csv")


def test_analyze_lines(sample_lines):
    report = analyze_lines(sample_lines, input_path="imaris.rlog")
    assert len(report.usage.snapshots) == 7
    assert len(report.by_host.records) == len(report.by_user.records) == 4
    assert len(report.denials) == 2
    assert set(report.tables()) == {"concurrent_usage", "activity", "total_duration_hosts",
                                    "total_duration_users", "denied_requests"}


def test_analyze_lines_genuine_denials(sample_lines):
    report = analyze_lines(sample_lines, genuine_only=True)
    assert len(report.denials) == 1


def test_analyze_lines_refuses_isv_log():
    with pytest.raises(UnsupportedFormat):
        analyze_lines(["05/26 11:32 (imaris) OUT: imarisbase v6.0 by heisenberg_lab@heisenberg-8-434"])


def test_summary_text(sample_lines):
    summary = analyze_lines(sample_lines, input_path="imaris.rlog").summary_text()
    assert summary.startswith("Log Data Summary For:\nimaris.rlog\n\nServer Name: imaris-server\n")
    assert "Server Start(s): (2 Total)\n06/16/2024 09:00:00 imaris-server\n06/17/2024 08:00:00 imaris-server\n" in summary
    assert "Server Shutdown(s): (1 Total)\n06/16/2024 18:00:00\n" in summary
    assert "Product(s): (2 Total)\nimarisbase\nimarisfilament\n" in summary
    assert "User(s): (4 Total)\n" in summary
    assert "Host(s): (4 Total)\npc-01\npc-02\npc-03\npc-04\n" in summary
    assert "Denied License Request(s): 2 Total" in summary


def test_processed_log_rows(sample_lines):
    rows = analyze_lines(sample_lines).processed_log_rows()
    assert rows[0] == ["START", "06/16/2024", "09:00:00", "imaris-server"]
    assert rows[1] == ["PRODUCT", "imarisbase", "9.2", "5", "1"]
    assert rows[3][:3] == ["OUT", "06/16/2024", "10:00:00"]


def test_read_log_lines(sample_log_file, sample_lines):
    assert output.read_log_lines(str(sample_log_file)) == sample_lines


@pytest.mark.parametrize("path", ["", "does/not/exist.rlog"])
def test_read_log_lines_cannot_open(tmp_path, path):
    with pytest.raises(CannotOpenFile) as raised:
        output.read_log_lines(str(tmp_path / path) if path else path)
    if not path:
        assert str(raised.value) == "No file selected"
    else:
        assert str(raised.value).startswith("Unable to open file: ")


def test_check_directory(tmp_path):
    output.check_directory(str(tmp_path))
    with pytest.raises(CannotFindDirectory):
        output.check_directory(str(tmp_path / "missing"))
    with pytest.raises(CannotFindDirectory) as raised:
        output.check_directory("")
    assert str(raised.value) == "No directory selected"


def test_publish(sample_log_file, tmp_path):
    results = tmp_path / "results"
    results.mkdir()
    targets = output_targets(str(sample_log_file), str(results))
    assert output.existing_outputs(targets) == []

    output.publish(analyze_file(str(sample_log_file)), targets)
    assert output.existing_outputs(targets) == targets

    files = {target.name: Path(target.path).read_text().splitlines() for target in targets}
    assert files["summary"][0] == "Log Data Summary For:"
    assert files["processed_log"][0] == "START 06/16/2024 09:00:00 imaris-server"
    assert files["concurrent_usage"][1] == "06/16/2024 10:00:00,1,1,5,0,1,0,0,2,0,0"
    assert files["activity"][0] == ("Checkout Date/Time,Checkin Date/Time,Product,Version,"
                                    "User,Host,Duration (HH:MM:SS)")
    assert files["activity"][4] == "06/17/2024 09:00:00,(Still checked out),imarisbase,9.2,dave,pc-04,00:00:00"
    assert files["total_duration_hosts"][1] == "pc-01,02:30:00,02:00:00"
    assert files["total_duration_users"][2] == "bob,07:30:00,00:00:00"
    assert files["denied_requests"] == [
        "Request,Product,Version,User,Host,Reason",
        "06/16/2024 12:45,imarisbase,9.2,carol,pc-03,-4",
        "06/16/2024 12:46,imarisbase,9.2,carol,pc-03,-4",
    ]


def test_publish_semicolon(sample_log_file, tmp_path):
    targets = output_targets(str(sample_log_file), str(tmp_path))
    output.publish(analyze_file(str(sample_log_file)), targets, delimiter=";")
    with open(targets[5].path) as users_file:
        assert users_file.readline() == "User;imarisbase Duration (HH:MM:SS);imarisfilament Duration (HH:MM:SS)\n"


def test_publish_missing_directory(sample_log_file, tmp_path):
    targets = output_targets(str(sample_log_file), str(tmp_path / "missing"))
    with pytest.raises(CannotFindDirectory):
        output.publish(analyze_file(str(sample_log_file)), targets)
