import pytest

from pressroom.utils import estimate_reading_time


@pytest.mark.parametrize("description", ["", "   ", "\n\t  ", None])
def test_empty_description_uses_floor(description):
    assert estimate_reading_time(description) == 2


def test_short_description_uses_floor():
    assert estimate_reading_time("ten words " * 5) == 2


def test_longer_description_scales_up():
    # 60 words -> 600 word-equivalents -> 600 / 265 = 2.26 -> 3 minutes
    assert estimate_reading_time(" ".join(["word"] * 60)) == 3


def test_exact_multiple_does_not_round_up():
    # 53 words -> 530 word-equivalents -> exactly 2 minutes
    assert estimate_reading_time(" ".join(["word"] * 53)) == 2


def test_reading_time_is_always_a_positive_int():
    for count in range(0, 200, 7):
        minutes = estimate_reading_time(" ".join(["w"] * count))
        assert isinstance(minutes, int)
        assert minutes >= 1
