import pytest

from scratchpad.house import House


def test_sample_apartment_price():
    assert House(45, 2, 1).price() == 70000


def test_empty_house_costs_nothing():
    assert House(0, 0, 0).price() == 0


@pytest.mark.parametrize("base", [House(45, 2, 1), House(10, 0, 3), House(0, 5, 0)])
def test_price_is_additive(base):
    extra = House(3, 1, 2)
    combined = House(
        base.sqr_feet + extra.sqr_feet,
        base.num_bed + extra.num_bed,
        base.num_bath + extra.num_bath,
    )
    assert combined.price() == base.price() + extra.price()


def test_bedroom_worth_two_bathrooms():
    assert House(0, 1, 0).price() == House(0, 0, 2).price()


def test_str_summary():
    assert str(House(45, 2, 1)) == "Sqr: 45, bed: 2, bath: 1 TOTAL = 70000"