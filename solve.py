#!/usr/bin/env python3
"""
旋转整除求和入口
默认只输出一行结果

用法:
  python solve.py                  # 输出 10 < n < 10^100 的结果
  python solve.py --details        # 先打印每个数字块的明细
  python solve.py --verify 6       # 与 10^6 以内的暴力枚举对比
  python solve.py --exponent 20    # 改变上界指数
"""

import argparse
import sys

from rich.console import Console

import brute_force
import config
from dashboard import PatternReport
from rotated_divisor import PatternError, modular_sum

console = Console()
err_console = Console(stderr=True)


def _verify(exponent: int, max_steps: int) -> bool:
    """暴力枚举与数字块算法对比"""
    expected = brute_force.brute_force_sum(exponent)
    actual = modular_sum(exponent, max_steps)
    if expected == actual:
        console.print(f"[green]✓ 10^{exponent} 以内校验通过: {actual}[/green]")
        return True
    err_console.print(f"[red]✗ 10^{exponent} 以内校验失败: 暴力 {expected} ≠ 数字块 {actual}[/red]")
    return False


def main(argv=None):
    parser = argparse.ArgumentParser(description="能整除其右旋数的整数之和 (mod 100000)")
    parser.add_argument("--exponent", type=int, default=None,
                        help=f"上界指数 E，统计 10 < n < 10^E（默认 {config.UPPER_EXPONENT}）")
    parser.add_argument("--details", action="store_true", help="打印每个数字块的明细")
    parser.add_argument("--verify", type=int, default=None, metavar="N",
                        help=f"与 10^N 以内的暴力枚举对比（N ≤ {brute_force.MAX_EXPONENT}）")
    args = parser.parse_args(argv)

    exponent = args.exponent if args.exponent is not None else config.UPPER_EXPONENT
    config.check_config(exponent, config.MAX_STEPS)

    if args.verify is not None and not 1 <= args.verify <= brute_force.MAX_EXPONENT:
        parser.error(f"--verify 必须在 1..{brute_force.MAX_EXPONENT} 之间")

    try:
        if args.verify is not None and not _verify(args.verify, config.MAX_STEPS):
            sys.exit(1)

        if args.details:
            report = PatternReport(exponent, config.MAX_STEPS).collect()
            report.render(console)

        result = modular_sum(exponent, config.MAX_STEPS)
    except PatternError as e:
        err_console.print(f"[red]✗ 内部错误: {e}[/red]")
        sys.exit(1)

    print(result)


if __name__ == "__main__":
    main()
