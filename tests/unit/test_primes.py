"""
Тесты для Primes — is_prime, primes_up_to
"""

import pytest

from src.core.math.primes import is_prime, primes_up_to


class TestIsPrime:
    """Тесты для is_prime"""

    @pytest.mark.parametrize("n", [-10, 0, 1, 4, 6, 8, 9])
    def test_non_primes(self, n: int) -> None:
        assert is_prime(n) is False

    @pytest.mark.parametrize("n", [2, 3, 5, 7, 11])
    def test_primes(self, n: int) -> None:
        assert is_prime(n) is True

    def test_perfect_squares_of_primes(self) -> None:
        """Делитель ровно на границе isqrt(n) находится"""
        assert not is_prime(25)
        assert not is_prime(49)
        assert not is_prime(121)

    def test_large_prime(self) -> None:
        assert is_prime(1_000_003)
        assert not is_prime(1_000_001)  # 101 * 9901

    def test_negative_primes_magnitude_not_prime(self) -> None:
        assert not is_prime(-7)


class TestPrimesUpTo:
    """Тесты для primes_up_to"""

    def test_first_primes(self) -> None:
        assert primes_up_to(20) == [2, 3, 5, 7, 11, 13, 17, 19]

    def test_limit_below_two(self) -> None:
        assert primes_up_to(1) == []
        assert primes_up_to(-5) == []

    def test_limit_inclusive(self) -> None:
        assert primes_up_to(7)[-1] == 7
