"""
 Unit: test fixtures
 Project: License server log data extraction
 Description:

 tests/conftest.py

 Copyright (C) 2008 MPI-CBG IPF

 License: GPL v3.
"""

import pytest

from rlm_rlog_analyzer.extractor import extract_events
from rlm_rlog_analyzer.tokenizer import tokenize_lines

"""
you can put test rlog data here, just cut and paste from an .rlog file.

Two licenses of imarisbase and one of imarisfilament are checked out on 06/16,
alice checks hers back in, carol gets denied twice (the second time rlm will try again),
bob is still out when the server shuts down, and dave is still out at the end of the log.
"""

SAMPLE_RLOG = """\
RLM Report Log Format 2, version 9.4 BL2, authentication flag 0
START imaris-server 06/16/2024 09:00:00
PRODUCT imarisbase 9.2 1 5 1 0 "" "" "" ""
PRODUCT imarisfilament 9.2 2 2 0 0 "" "" "" ""
06/16/2024 09:00
OUT imarisbase 9.2 1 alice pc-01 "" 1 1 0 a1 a1 410 "" "" "" 06/16 10:00:00
OUT imarisbase 9.2 1 bob pc-02 "" 1 2 1 b2 b2 411 "" "" "" 06/16 10:30:00
OUT imarisfilament 9.2 2 alice pc-01 "" 1 1 0 c3 c3 410 "" "" "" 06/16 11:00:00
IN 1 imarisbase 9.2 alice pc-01 "" 1 1 1 a1 06/16 12:30:00
DENY imarisbase 9.2 carol pc-03 "" 1 -4 1 "" 06/16 12:45
DENY imarisbase 9.2 carol pc-03 "" 1 -4 0 "" 06/16 12:46
IN 1 imarisfilament 9.2 alice pc-01 "" 1 0 0 c3 06/16 13:00:00
SHUTDOWN admin imaris-server 06/16 18:00:00
START imaris-server 06/17/2024 08:00:00
OUT imarisbase 9.2 1 dave pc-04 "" 1 1 0 d4 d4 412 "" "" "" 06/17 09:00:00
""".splitlines()

NEW_YEAR_RLOG = """\
RLM Report Log Format 2, version 9.4 BL2, authentication flag 0
START imaris-server 12/31/2023 22:00:00
OUT imarisbase 9.2 1 alice pc-01 "" 1 1 0 a1 a1 410 "" "" "" 12/31 23:30:00
OUT imarisbase 9.2 1 bob pc-02 "" 1 2 0 b2 b2 411 "" "" "" 01/01 00:00:20
01/01/2024 00:01
IN 1 imarisbase 9.2 alice pc-01 "" 1 1 0 a1 01/01 00:30:00
IN 1 imarisbase 9.2 bob pc-02 "" 1 0 0 b2 01/01 01:00:00
""".splitlines()


@pytest.fixture
def sample_lines():
    return list(SAMPLE_RLOG)


@pytest.fixture
def sample_extraction(sample_lines):
    return extract_events(tokenize_lines(sample_lines))


@pytest.fixture
def new_year_extraction():
    return extract_events(tokenize_lines(NEW_YEAR_RLOG))


@pytest.fixture
def sample_log_file(tmp_path, sample_lines):
    path = tmp_path / "imaris.rlog"
    path.write_text("\n".join(sample_lines) + "\n")
    return path
