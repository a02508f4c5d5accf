"""
暴力校验器 - 小范围内直接枚举，验证数字块算法
只用于 10^8 以内，大范围请用 rotated_divisor.modular_sum
"""

from typing import Iterator

import config

# 超过这个指数枚举太慢
MAX_EXPONENT = 8


def rotate_right(n: int) -> int:
    """把最后一位移到最前面: 142857 → 714285"""
    digits = str(n)
    return int(digits[-1] + digits[:-1])


def divides_rotation(n: int) -> bool:
    return rotate_right(n) % n == 0


def qualifying_numbers(upper_exponent: int) -> Iterator[int]:
    """
    按位数枚举 10 < n < 10^upper_exponent 中满足条件的 n
    右旋按位数直接算：(n % 10) * 10^(L-1) + n // 10
    """
    if not 1 <= upper_exponent <= MAX_EXPONENT:
        raise ValueError(f"暴力枚举指数必须在 1..{MAX_EXPONENT} 之间: {upper_exponent}")

    for length in range(config.MIN_DIGITS, upper_exponent + 1):
        top = 10 ** (length - 1)
        for n in range(max(top, 11), top * 10):
            if ((n % 10) * top + n // 10) % n == 0:
                yield n


def brute_force_sum(upper_exponent: int, modulus: int | None = config.MODULUS) -> int:
    """直接求和，modulus=None 时返回精确值"""
    total = sum(qualifying_numbers(upper_exponent))
    if modulus is None:
        return total
    return total % modulus
