import pytest

from rumtopf.number_parser import number


@pytest.mark.parametrize(
    "string, exp",
    [
        # Integers
        ("0", 0.0),
        ("123", 123.0),
        # Decimals
        ("1.5", 1.5),
        ("1.", 1.0),
        (".5", 0.5),
        # Signs
        ("-2", -2.0),
        ("+2", 2.0),
        # Exponents
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
        # Very small values underflow to zero rather than failing
        ("1e-400", 0.0),
    ],
)
def test_number(string: str, exp: float) -> None:
    value = number(string)
    assert isinstance(value, float)
    assert value == exp


@pytest.mark.parametrize(
    "string",
    [
        "",
        ".",
        "foo",
        "1/2",
        "1 2",
        " 1",
        "1,5",
        "1_000",
        "inf",
        "nan",
        # Too large to represent
        "1e400",
        "-1e400",
        "9" * 400,
        # Non-ASCII digits
        "٣",
        "３",
    ],
)
def test_number_invalid(string: str) -> None:
    with pytest.raises(ValueError):
        number(string)
