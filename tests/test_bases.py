import pytest

from algodrills.bases import base_to_base, base_to_dec, dec_to_base

CASES = [
    (1, 2, "1"),
    (2, 2, "10"),
    (7, 3, "21"),
    (14, 2, "1110"),
    (14, 16, "E"),
    (17, 16, "11"),
    (3735928559, 2, "11011110101011011011111011101111"),
    (3735928559, 3, "100122100210211112102"),
    (3735928559, 5, "30122344203214"),
    (3735928559, 6, "1414413525315"),
    (3735928559, 7, "161402603666"),
    (3735928559, 8, "33653337357"),
    (3735928559, 9, "10570724472"),
    (3735928559, 10, "3735928559"),
    (3735928559, 11, "164791A470"),
    (3735928559, 12, "8831A383B"),
    (3735928559, 13, "476CC321C"),
    (3735928559, 14, "276253DDD"),
    (3735928559, 15, "16CEB1BDE"),
    (3735928559, 16, "DEADBEEF"),
]


@pytest.mark.parametrize("want,base,have", CASES)
def test_base_to_dec(want, base, have):
    assert base_to_dec(have, base) == want


@pytest.mark.parametrize("dec,base,want", CASES)
def test_dec_to_base(dec, base, want):
    assert dec_to_base(dec, base) == want


@pytest.mark.parametrize(
    "value,base,new_base,want",
    [
        ("E", 16, 2, "1110"),
        ("11011110101011011011111011101111", 2, 3, "100122100210211112102"),
        ("8831A383B", 12, 16, "DEADBEEF"),
    ],
)
def test_base_to_base(value, base, new_base, want):
    assert base_to_base(value, base, new_base) == want


@pytest.mark.parametrize("base", range(2, 17))
def test_round_trip_every_base(base):
    assert base_to_dec(dec_to_base(3735928559, base), base) == 3735928559


def test_base_four_round_trip_through_base_ten():
    in_four = base_to_base("3735928559", 10, 4)
    assert len(in_four) == 16
    assert base_to_base(in_four, 4, 16) == "DEADBEEF"


def test_lower_case_digits_accepted():
    assert base_to_dec("deadbeef", 16) == 3735928559


def test_zero_is_empty_string():
    assert dec_to_base(0, 10) == ""


def test_invalid_digit_rejected():
    with pytest.raises(ValueError):
        base_to_dec("12", 2)


def test_unknown_character_rejected():
    with pytest.raises(ValueError):
        base_to_dec("G", 16)


@pytest.mark.parametrize("base", [0, 1, 17])
def test_base_out_of_range(base):
    with pytest.raises(ValueError):
        dec_to_base(5, base)
    with pytest.raises(ValueError):
        base_to_dec("1", base)


def test_negative_rejected():
    with pytest.raises(ValueError):
        dec_to_base(-3, 10)