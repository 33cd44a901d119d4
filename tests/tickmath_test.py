import pytest

from tickmath import MAX_SQRT_RATIO, MAX_TICK, MIN_SQRT_RATIO, MIN_TICK
from tickmath import PriceOutOfRange, TickMathError, TickOutOfRange
from tickmath import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio
from tickmath.constants import MAGIC_RATIOS, Q128


# values checked against the solidity library
SQRT_RATIO_VECTORS = [
    (MIN_TICK, 4295128739),
    (MIN_TICK + 1, 4295343490),
    (50, 79426470787362580746886972461),
    (100, 79625275426524748796330556128),
    (250, 80224679980005306637834519095),
    (500, 81233731461783161732293370115),
    (1000, 83290069058676223003182343270),
    (2500, 89776708723587163891445672585),
    (3000, 92049301871182272007977902845),
    (4000, 96768528593268422080558758223),
    (5000, 101729702841318637793976746270),
    (50000, 965075977353221155028623082916),
    (150000, 143194173941309278083010301478497),
    (250000, 21246587762933397357449903968194344),
    (500000, 5697689776495288729098254600827762987878),
    (738203, 847134979253254120489401328389043031315994541),
    (MAX_TICK - 1, 1461373636630004318706518188784493106690254656249),
    (MAX_TICK, 1461446703485210103287273052203988822378723970342),
]


class TestGetSqrtRatioAtTick:

    @pytest.mark.parametrize("tick", [MIN_TICK - 1, MAX_TICK + 1])
    def test_rejects_out_of_range(self, tick):
        with pytest.raises(TickOutOfRange) as info:
            get_sqrt_ratio_at_tick(tick)
        assert info.value.tick == tick

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            get_sqrt_ratio_at_tick(MAX_TICK * 2)
        assert issubclass(TickOutOfRange, TickMathError)

    @pytest.mark.parametrize("tick,expected", SQRT_RATIO_VECTORS)
    def test_literal_values(self, tick, expected):
        assert get_sqrt_ratio_at_tick(tick) == expected

    def test_bounds_match_constants(self):
        assert get_sqrt_ratio_at_tick(MIN_TICK) == MIN_SQRT_RATIO
        assert get_sqrt_ratio_at_tick(MAX_TICK) == MAX_SQRT_RATIO

    def test_tick_zero_is_one(self):
        assert get_sqrt_ratio_at_tick(0) == 2 ** 96

    def test_every_bit_has_a_ratio(self):
        assert len(MAGIC_RATIOS) == MAX_TICK.bit_length()
        assert all(ratio < Q128 for ratio in MAGIC_RATIOS)

    def test_monotonic_on_samples(self):
        ticks = list(range(MIN_TICK, MAX_TICK, 997)) + [MAX_TICK]
        prices = [get_sqrt_ratio_at_tick(t) for t in ticks]
        assert all(a < b for a, b in zip(prices, prices[1:]))

    @pytest.mark.parametrize("start", [MIN_TICK, -1000, -1, 1000, MAX_TICK - 500])
    def test_monotonic_on_neighbours(self, start):
        prices = [get_sqrt_ratio_at_tick(t) for t in range(start, start + 500)]
        assert all(a < b for a, b in zip(prices, prices[1:]))

    @pytest.mark.parametrize("tick", [1, 7, 50, 12345, 500000, MAX_TICK])
    def test_positive_and_negative_are_reciprocal(self, tick):
        product = get_sqrt_ratio_at_tick(tick) * get_sqrt_ratio_at_tick(-tick)
        # rounding keeps the product within a few parts in 2 ** 32
        assert abs(product - 2 ** 192) < 2 ** 192 >> 30

    def test_results_inside_bounds(self):
        for tick in range(MIN_TICK, MAX_TICK + 1, 7919):
            assert MIN_SQRT_RATIO <= get_sqrt_ratio_at_tick(tick) <= MAX_SQRT_RATIO


class TestGetTickAtSqrtRatio:

    @pytest.mark.parametrize(
        "sqrt_price", [0, MIN_SQRT_RATIO - 1, MAX_SQRT_RATIO, 2 ** 160]
    )
    def test_rejects_out_of_range(self, sqrt_price):
        with pytest.raises(PriceOutOfRange) as info:
            get_tick_at_sqrt_ratio(sqrt_price)
        assert info.value.sqrt_price_x96 == sqrt_price

    def test_ratio_of_min_tick(self):
        assert get_tick_at_sqrt_ratio(MIN_SQRT_RATIO) == MIN_TICK

    def test_ratio_of_min_tick_plus_one(self):
        assert get_tick_at_sqrt_ratio(4295343490) == MIN_TICK + 1

    def test_ratio_closest_to_max_tick(self):
        assert get_tick_at_sqrt_ratio(MAX_SQRT_RATIO - 1) == MAX_TICK - 1

    def test_ratio_of_max_tick_minus_one(self):
        sqrt_price = get_sqrt_ratio_at_tick(MAX_TICK - 1)
        assert get_tick_at_sqrt_ratio(sqrt_price) == MAX_TICK - 1

    def test_price_of_one(self):
        assert get_tick_at_sqrt_ratio(2 ** 96) == 0

    @pytest.mark.parametrize("tick,sqrt_price", SQRT_RATIO_VECTORS[:-1])
    def test_inverse_of_literal_values(self, tick, sqrt_price):
        assert get_tick_at_sqrt_ratio(sqrt_price) == tick

    def test_round_trip_on_samples(self):
        for tick in range(MIN_TICK, MAX_TICK, 1009):
            assert get_tick_at_sqrt_ratio(get_sqrt_ratio_at_tick(tick)) == tick

    @pytest.mark.parametrize(
        "tick", [MIN_TICK, MIN_TICK + 1, -50000, -1, 0, 1, 50000, MAX_TICK - 2]
    )
    def test_prices_between_ticks_round_down(self, tick):
        low = get_sqrt_ratio_at_tick(tick)
        high = get_sqrt_ratio_at_tick(tick + 1)
        assert get_tick_at_sqrt_ratio(low + 1) == tick
        assert get_tick_at_sqrt_ratio((low + high) // 2) == tick
        assert get_tick_at_sqrt_ratio(high - 1) == tick
        assert get_tick_at_sqrt_ratio(high) == tick + 1

    def test_result_is_greatest_tick_below_price(self):
        for sqrt_price in range(MIN_SQRT_RATIO, MAX_SQRT_RATIO, MAX_SQRT_RATIO // 211):
            tick = get_tick_at_sqrt_ratio(sqrt_price)
            assert MIN_TICK <= tick <= MAX_TICK
            assert get_sqrt_ratio_at_tick(tick) <= sqrt_price
            assert get_sqrt_ratio_at_tick(tick + 1) > sqrt_price


def test_package_logging_only_touches_its_own_logger():
    import logging

    import tickmath

    assert tickmath.fh in logging.getLogger("tickmath").handlers
    for name in ("store", "main"):
        assert tickmath.fh not in logging.getLogger(name).handlers
        assert tickmath.sh not in logging.getLogger(name).handlers
