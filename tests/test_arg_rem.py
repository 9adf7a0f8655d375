import pytest

from argtab.arg_rem import ArgRem


def test_fields():
    rem = ArgRem("<extra>", "some remark")
    assert rem.datatype == "<extra>"
    assert rem.glossary == "some remark"
    assert rem.shortopts is None
    assert rem.longopts is None


def test_counts_fixed_at_one():
    rem = ArgRem(None, "text")
    assert (rem.mincount, rem.maxcount) == (1, 1)
    assert rem.has_value is False


def test_scan_rejected():
    rem = ArgRem(None, "text")
    with pytest.raises(TypeError):
        rem.scan("value")
    assert rem.count == 0


def test_check_does_not_report_missing():
    rem = ArgRem(None, "text")
    assert rem.check() is None
    assert rem.count == 0


def test_reset_keeps_count_zero():
    rem = ArgRem("x", None)
    rem.reset()
    assert rem.count == 0