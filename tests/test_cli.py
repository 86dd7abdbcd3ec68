import os
import lzma
import tempfile

import pytest

from mpsconv.cli import main, check_file, EXIT_OK, EXIT_FILE_ERROR, EXIT_USAGE, EXIT_PARSE_ERROR


@pytest.fixture
def mps_file(testprob):
    tmpdir = tempfile.mkdtemp()
    fname = os.path.join(tmpdir, "testprob.mps")
    with open(fname, "w") as f:
        f.write(testprob)
    yield fname
    os.remove(fname)
    os.rmdir(tmpdir)


def test_convert(mps_file, capsys):
    assert main([mps_file]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Conversion successful!" in out
    assert "Problem Type: min" in out
    assert "Objective Function Name: COST" in out
    assert "Number of Constraints: 3" in out
    assert "Number of Variables: 3" in out
    assert "Eqin vector:" not in out

def test_verbose(mps_file, capsys):
    assert main([mps_file, "--verbose"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Eqin vector:" in out
    assert "['XONE', 'YTWO', 'ZTHREE']" in out
    assert "['LIM1', 'LIM2', 'MYEQN']" in out

def test_usage_error(capsys):
    assert main([]) == EXIT_USAGE

def test_not_mps(tmp_path, capsys):
    fname = tmp_path / "problem.txt"
    fname.write_text("NAME T\n")
    assert main([str(fname)]) == EXIT_FILE_ERROR
    assert "Not an .mps file" in capsys.readouterr().err

def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.mps")]) == EXIT_FILE_ERROR
    assert "does not exist" in capsys.readouterr().err

def test_parse_error(tmp_path, capsys):
    fname = tmp_path / "bad.mps"
    fname.write_text("NAME T\nROWS\n N COST\nCOLUMNS\n X LIM1 1\nRHS\nENDATA\n")
    assert main([str(fname)]) == EXIT_PARSE_ERROR
    err = capsys.readouterr().err
    assert "Line Number: 5" in err
    assert '" X LIM1 1"' in err

def test_truncated(tmp_path, capsys):
    fname = tmp_path / "short.mps"
    fname.write_text("NAME T\nROWS\n")
    assert main([str(fname)]) == EXIT_PARSE_ERROR
    assert "missing ENDATA" in capsys.readouterr().err

def test_corrupt_xz(tmp_path, testprob, capsys):
    fname = tmp_path / "bad.mps.xz"
    fname.write_bytes(b"NAME T\nROWS\n")
    assert main([str(fname)]) == EXIT_FILE_ERROR
    assert "ERROR:" in capsys.readouterr().err

    fname.write_bytes(lzma.compress(testprob.encode())[:40])
    assert main([str(fname)]) == EXIT_FILE_ERROR

def test_strict_rhs(tmp_path, testprob):
    fname = tmp_path / "dup.mps"
    fname.write_text(testprob.replace("ENDATA", "    RHS1      MYEQN                8\nENDATA"))
    assert main([str(fname)]) == EXIT_OK
    assert main([str(fname), "--strict-rhs"]) == EXIT_PARSE_ERROR

def test_check_file(mps_file):
    assert check_file(mps_file) is None
    assert check_file("model.lp") is not None
