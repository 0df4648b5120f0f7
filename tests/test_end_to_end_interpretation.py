import pytest

from tests.utils import run_text


PROGRAMS = [
    ("print 1+2+3;", [6]),
    ("print 2*3*4;", [24]),
    ("print 1+2*3;", [7]),
    ("print 2*3+1;", [7]),
    ("print 1+1; print 5*6;", [2, 30]),
    ("print 10 * 10 + 5 * 2 * 3 + 1;", [131]),
    ("print 0; print 0*0+0;", [0, 0]),
    ("print 007 + 1;", [8]),
    ("\n\nprint\n3\n*\n3\n;\n", [9]),
]


@pytest.mark.parametrize("src,expected", PROGRAMS)
def test_printed_values(src, expected):
    values, out = run_text(src)
    assert values == expected
    assert out == "".join(f"{v}\n" for v in expected)


@pytest.mark.parametrize(
    "expr",
    ["1+2*3+4", "9*9*9+1*2", "5", "3*3+4*4", "1+1+1+1*2*2*2", "123456789*1000+1"],
)
def test_matches_python_integer_arithmetic(expr):
    # Python's own grammar gives * the same precedence over +.
    values, _ = run_text(f"print {expr};")
    assert values == [eval(expr)]
