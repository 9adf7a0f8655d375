import pytest

from argtab.arg_str import ArgStr
from argtab.base import ArgError, ErrorCode


def test_default_datatype():
    arg = ArgStr("s")
    assert arg.datatype == "<string>"
    assert arg.has_value is True


def test_custom_datatype_kept():
    arg = ArgStr("s", "name", "<name>", 0, 1, "a name")
    assert arg.datatype == "<name>"
    assert arg.glossary == "a name"
    assert arg.longopts == "name"


def test_maxcount_raised_to_mincount():
    arg = ArgStr("s", None, None, 3, 1)
    assert arg.maxcount == 3
    assert arg.sval == ["", "", ""]


def test_scan_stores_values_in_order():
    arg = ArgStr("s", None, None, 0, 3)
    arg.scan("alpha")
    arg.scan("beta")
    assert arg.count == 2
    assert arg.values == ["alpha", "beta"]
    assert arg.sval[2] == ""


def test_scan_without_value_counts_only():
    arg = ArgStr("s", None, None, 0, 2)
    arg.scan(None)
    assert arg.count == 1
    assert arg.sval == ["", ""]


def test_excess_option_raises_maxcount():
    arg = ArgStr("s")
    arg.scan("one")
    with pytest.raises(ArgError) as info:
        arg.scan("two")
    assert info.value.code is ErrorCode.MAXCOUNT
    assert info.value.value == "two"
    assert "excess option" in str(info.value)
    assert arg.count == 1
    assert arg.values == ["one"]


def test_reset_clears_values():
    arg = ArgStr("s", None, None, 0, 2)
    arg.scan("x")
    arg.scan("y")
    arg.reset()
    assert arg.count == 0
    assert arg.sval == ["", ""]


def test_check_missing_required():
    arg = ArgStr("s", None, None, 1, 1)
    with pytest.raises(ArgError) as info:
        arg.check()
    assert info.value.code is ErrorCode.MINCOUNT
    assert str(info.value) == "missing option -s <string>"


def test_check_passes_after_scan():
    arg = ArgStr("s", None, None, 1, 1)
    arg.scan("value")
    arg.check()
    assert arg.values == ["value"]


def test_reuse_after_reset():
    arg = ArgStr("s")
    arg.scan("first")
    arg.reset()
    arg.scan("second")
    assert arg.values == ["second"]