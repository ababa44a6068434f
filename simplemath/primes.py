"""Prime counting and prime sums."""

from __future__ import annotations

import math

from .errors import Undefined, Unimplemented

_U64_MAX = 2**64 - 1

_PRIME_COUNT = {
    10**0: 0,
    10**1: 4,
    10**2: 25,
    10**3: 168,
    10**4: 1229,
    10**5: 9592,
    10**6: 78498,
    10**7: 664579,
    10**8: 5761455,
    10**9: 50847534,
    10**10: 455052511,
    10**11: 4118054813,
    10**12: 37607912018,
    10**13: 346065536839,
    10**14: 3204941750802,
    10**15: 29844570422669,
    10**16: 279238341033925,
    10**17: 2623557157654233,
    10**18: 24739954287740860,
    10**19: 234057667276344607,
    10**20: 2220819602560918840,
    10**21: 21127269486018731928,
    10**22: 201467286689315906290,
    10**23: 1925320391606803968923,
    10**24: 18435599767349200867866,
    10**25: 176846309399143769411680,
    10**26: 1699246750872437141327603,
    10**27: 16352460426841680446427399,
}

_PRIME_SUM = {
    10**0: 0,
    10**1: 17,
    10**2: 1060,
    10**3: 76127,
    10**4: 5736396,
    10**5: 454396537,
    10**6: 37550402023,
    10**7: 3203324994356,
    10**8: 279209790387276,
    10**9: 24739512092254535,
    10**10: 2220822432581729238,
    10**11: 201467077743744681014,
    10**12: 18435588552550705911377,
    10**13: 1699246443377779418889494,
    10**14: 157589260710736940541561021,
    10**15: 14692398516908006398225702366,
    10**16: 1376110854313351899159632866552,
    10**17: 129408626276669278966252031311350,
    10**18: 12212914292949226570880576733896687,
    10**19: 1156251260549368082781614413945980126,
    10**20: 109778913483063648128485839045703833541,
    10**21: 10449550362130704786220283253063405651965,
    10**22: 996973504763259668279213971353794878368213,
    10**23: 95320530117168404458544684912403185555509650,
    10**24: 9131187511156941634384410084928380134453142199,
    10**25: 876268031750623105684911815303505535704119354853,
}


def prime_count_i(n: int) -> int:
    """Number of primes not above n, for the tabulated powers of ten."""
    if n in _PRIME_COUNT:
        return _PRIME_COUNT[n]
    if n < 0:
        raise Undefined("wrong def")
    raise Unimplemented()


def prime_sum_u64(n: int) -> int:
    """Sum of the primes not above n, by the Lucy Hedgehog sieve."""
    if not 1 <= n <= _U64_MAX:
        raise ValueError("n must lie between 1 and 2**64 - 1")
    r = math.isqrt(n)
    values = [n // i for i in range(1, r + 1)]
    values.extend(range(values[-1] - 1, -1, -1))
    sums = {v: (v + 1) * v // 2 - 1 for v in values}
    for p in range(2, r + 1):
        if sums[p] > sums[p - 1]:
            below, square = sums[p - 1], p * p
            for v in values:
                if v < square:
                    break
                sums[v] -= p * (sums[v // p] - below)
    return sums[n]


def prime_sum_i(n: int) -> int:
    """Sum of the primes not above n."""
    if n in _PRIME_SUM:
        return _PRIME_SUM[n]
    if n < 0:
        raise Undefined("wrong def")
    if n > _U64_MAX:
        raise Unimplemented()
    return prime_sum_u64(n)