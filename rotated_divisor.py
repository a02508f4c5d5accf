"""
旋转整除求和 - 核心求解器
求 10^1 < n < 10^100 中所有「能整除其右旋数」的整数之和的末 5 位

右旋：把最后一位移到最前面，例如 142857 → 714285 = 5 × 142857

思路（不用大数）：
1. 右旋数 = 乘数 × 原数，乘数只能是 1..9（否则位数会变多）
2. 固定乘数 m 和末位 d，后续每一位都能由「乘法 + 进位」唯一推出，
   直到候选值回到 d（进位为 0），得到一个周期为 p 的循环数字块
3. 数字块可以重复拼接：142857 满足，142857142857 也满足
   → 位数 ≤ L 的共有 L // p 个，末 5 位相同（p ≥ 5）
4. 特殊情况：
   - 首位为 0 的数字块无效（如 m=2, d=1 得 052631578947368421）
   - 乘数 1 = 全部数字相同，单独按 repunit 计算，排除个位数
"""

from dataclasses import dataclass
from typing import Iterator

import config


class PatternError(Exception):
    """内部不变量被破坏（不可恢复）"""


class DigitOverflowError(PatternError):
    """数字块转整数越界"""


class CycleNotClosedError(PatternError):
    """乘法进位循环在步数上限内没有闭合"""


@dataclass(frozen=True)
class Pattern:
    """一个 (乘数, 末位) 组合生成的循环数字块"""
    multiplier: int             # 右旋数 / 原数
    digit: int                  # 末位（种子）
    low_digits: tuple           # 最低 5 位，低位在前
    period: int                 # 循环周期（数字块位数）
    leading_digit: int          # 数字块最高位

    @property
    def is_valid(self) -> bool:
        return self.leading_digit > 0

    @property
    def low_value(self) -> int:
        return digits_to_int(self.low_digits)


# ═══════════════════════════════════════════
# 数字块生成
# ═══════════════════════════════════════════

def generate_pattern(multiplier: int, digit: int, max_steps: int | None = None) -> Pattern:
    """
    从末位 digit 开始做「乘 multiplier + 进位」，直到候选值等于 digit

    例: m=5, d=7
      7×5 = 35       → 下一位 5，进位 3
      5×5+3 = 28     → 下一位 8，进位 2
      8×5+2 = 42     → 下一位 2，进位 4
      2×5+4 = 14     → 下一位 4，进位 1
      4×5+1 = 21     → 下一位 1，进位 2
      1×5+2 = 7      → 回到 7，周期 6，数字块 142857
    """
    if multiplier not in config.MULTIPLIERS:
        raise ValueError(f"乘数必须在 2..9 之间: {multiplier}")
    if digit not in config.DIGITS:
        raise ValueError(f"末位必须在 1..9 之间: {digit}")
    if max_steps is None:
        max_steps = config.MAX_STEPS

    digits = [digit] + [0] * (config.LOW_DIGITS - 1)
    next_digit = 0
    steps = 1
    candidate = multiplier * digit

    while candidate != digit:
        if steps >= max_steps:
            raise CycleNotClosedError(
                f"m={multiplier}, d={digit} 在 {max_steps} 步内未闭合"
            )
        next_digit = candidate % 10
        if steps < config.LOW_DIGITS:
            digits[steps] = next_digit
        carry = candidate // 10
        candidate = multiplier * next_digit + carry
        steps += 1

    return Pattern(
        multiplier=multiplier,
        digit=digit,
        low_digits=tuple(digits),
        period=steps,
        leading_digit=next_digit,
    )


def iter_patterns(max_steps: int | None = None) -> Iterator[Pattern]:
    """遍历所有 (乘数 2..9, 末位 1..9) 组合"""
    for multiplier in config.MULTIPLIERS:
        for digit in config.DIGITS:
            yield generate_pattern(multiplier, digit, max_steps)


def digits_to_int(digits, limit: int = config.MODULUS) -> int:
    """
    低位在前的数字序列 → 整数
    结果必须 < limit，越界直接抛错，不做截断
    """
    result = 0
    pow10 = 1
    for d in digits:
        if not 0 <= d <= 9:
            raise DigitOverflowError(f"非法数字: {d}")
        result += d * pow10
        pow10 *= 10
    if result >= limit:
        raise DigitOverflowError(f"{result} 超出上限 {limit}")
    return result


# ═══════════════════════════════════════════
# 校验 + 累加
# ═══════════════════════════════════════════

def repetitions(pattern: Pattern, max_length: int) -> int:
    """位数 ≤ max_length 时数字块能重复的次数"""
    return max_length // pattern.period


def fold_pattern(pattern: Pattern, max_length: int | None = None) -> int:
    """单个数字块对末 5 位之和的贡献，首位为 0 的贡献 0"""
    if max_length is None:
        max_length = config.UPPER_EXPONENT
    if not pattern.is_valid:
        return 0

    reps = repetitions(pattern, max_length)
    if reps == 0:
        return 0
    # 每次重复的末 5 位都等于数字块的末 5 位
    if pattern.period < config.LOW_DIGITS:
        raise PatternError(
            f"m={pattern.multiplier}, d={pattern.digit} 周期 {pattern.period} 小于 {config.LOW_DIGITS}"
        )
    return pattern.low_value * reps % config.MODULUS


def pattern_contributions(max_length: int | None = None, max_steps: int | None = None) -> Iterator[int]:
    for pattern in iter_patterns(max_steps):
        yield fold_pattern(pattern, max_length)


# ═══════════════════════════════════════════
# 乘数 1：全部数字相同
# ═══════════════════════════════════════════

def _repunit(n: int) -> int:
    """n 个 1"""
    return (10 ** n - 1) // 9


def repunit_contribution(max_length: int | None = None) -> int:
    """
    位数 2..max_length、每位都是 i 的数之和（mod 100000）
    i 个 repunit 的末 5 位在 n ≥ 5 后恒为 11111：
      n = 2,3,4 → 11 + 111 + 1111 = 1233
      n = 5..L  → 每个 11111
    """
    if max_length is None:
        max_length = config.UPPER_EXPONENT
    if max_length < 1:
        raise ValueError(f"最大位数必须 >= 1: {max_length}")

    short_lengths = range(config.MIN_DIGITS, min(max_length, config.LOW_DIGITS - 1) + 1)
    short = sum(_repunit(n) for n in short_lengths)
    long_count = max(0, max_length - config.LOW_DIGITS + 1)
    per_digit = short + long_count * _repunit(config.LOW_DIGITS)

    return sum(i * per_digit for i in config.DIGITS) % config.MODULUS


# ═══════════════════════════════════════════
# 汇总
# ═══════════════════════════════════════════

def modular_sum(upper_exponent: int | None = None, max_steps: int | None = None) -> int:
    """10 < n < 10^upper_exponent 中所有满足条件的 n 之和 mod 100000"""
    if upper_exponent is None:
        upper_exponent = config.UPPER_EXPONENT
    if upper_exponent < 1:
        raise ValueError(f"指数必须 >= 1: {upper_exponent}")

    # n < 10^E 最多 E 位
    max_length = upper_exponent
    total = sum(pattern_contributions(max_length, max_steps))
    total += repunit_contribution(max_length)
    return total % config.MODULUS
