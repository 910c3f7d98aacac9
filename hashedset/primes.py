"""
Prime arithmetic behind the bucket table's growth policy.
"""
from math import isqrt


def is_prime(number: int) -> bool:
    """
    Trial-division primality test over every divisor from 2 up to and
    including the integer square root. 1 (and anything below) is not prime.
    """
    if number < 2:
        return False
    for divisor in range(2, isqrt(number) + 1):
        if number % divisor == 0:
            return False
    return True


def next_prime(start: int) -> int:
    """
    Returns the smallest prime >= start of the form 6k±1.
    Multiples of 2 and 3 are never tried, so neither 2 nor 3 is returned.
    """
    number = max(start, 0)
    while True:
        if number % 6 in (1, 5) and is_prime(number):
            return number
        number += 1
