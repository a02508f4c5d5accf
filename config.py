"""
旋转整除求和 - 配置管理
优先从环境变量读取，fallback 到 .env 文件
"""

import os
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load .env 作为 fallback（本地调试用）
ENV_PATH = Path(__file__).parent / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)

# ─── 可覆盖的运行参数 ───
# 统计范围: 10^1 < n < 10^UPPER_EXPONENT，同时也是最大位数
UPPER_EXPONENT = int(os.environ.get("ROTDIV_UPPER_EXPONENT", "100"))

# 乘法进位循环的步数上限（正常输入最长周期为 58）
MAX_STEPS = int(os.environ.get("ROTDIV_MAX_STEPS", "200"))

# ─── 固定常量 ───
MODULUS = 100000
LOW_DIGITS = 5            # 只记录最低 5 位，足够求 mod 100000
MIN_DIGITS = 2            # 题目排除个位数 1..9

MULTIPLIERS = range(2, 10)   # 乘数 1 单独按 repunit 处理
DIGITS = range(1, 10)        # 末位 0 不可能满足条件


def check_config(upper_exponent: int | None = None, max_steps: int | None = None):
    """
    检查运行参数是否合法
    不合法时打印缺陷列表并退出
    """
    if upper_exponent is None:
        upper_exponent = UPPER_EXPONENT
    if max_steps is None:
        max_steps = MAX_STEPS

    problems = []

    if upper_exponent < 1:
        problems.append(f"ROTDIV_UPPER_EXPONENT 必须 >= 1 (当前 {upper_exponent})")
    if max_steps < 1:
        problems.append(f"ROTDIV_MAX_STEPS 必须 >= 1 (当前 {max_steps})")

    if problems:
        from rich.console import Console
        console = Console(stderr=True)
        console.print("\n[bold red]⚠ 配置错误：[/bold red]")
        for p in problems:
            console.print(f"  [red]• {p}[/red]")
        console.print(f"\n[dim]请检查环境变量或 {ENV_PATH}[/dim]\n")
        sys.exit(1)
