"""
Rich 明细面板
列出每个 (乘数, 末位) 组合的周期、首位、末 5 位和贡献
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

import config
from rotated_divisor import fold_pattern, iter_patterns, repetitions, repunit_contribution


class PatternReport:
    """数字块明细报表"""

    def __init__(self, upper_exponent: int | None = None, max_steps: int | None = None):
        self.upper_exponent = upper_exponent if upper_exponent is not None else config.UPPER_EXPONENT
        self.max_steps = max_steps
        self.rows: list[dict] = []
        self.pattern_total = 0
        self.repunit_total = 0

    def collect(self) -> "PatternReport":
        """生成所有数字块并计算贡献"""
        self.rows = []
        self.pattern_total = 0
        for pattern in iter_patterns(self.max_steps):
            contribution = fold_pattern(pattern, self.upper_exponent)
            self.rows.append({
                "pattern": pattern,
                "reps": repetitions(pattern, self.upper_exponent) if pattern.is_valid else 0,
                "contribution": contribution,
            })
            self.pattern_total += contribution
        self.pattern_total %= config.MODULUS
        self.repunit_total = repunit_contribution(self.upper_exponent)
        return self

    @property
    def result(self) -> int:
        return (self.pattern_total + self.repunit_total) % config.MODULUS

    def build_table(self) -> Table:
        table = Table(title=f"数字块明细 (n < 10^{self.upper_exponent})", expand=False)
        table.add_column("乘数", justify="right", style="bold")
        table.add_column("末位", justify="right")
        table.add_column("周期", justify="right")
        table.add_column("首位", justify="right")
        table.add_column("末5位", justify="right")
        table.add_column("重复", justify="right")
        table.add_column("贡献", justify="right")
        table.add_column("状态")

        for row in self.rows:
            p = row["pattern"]
            if not p.is_valid:
                status = "[dim]前导零[/dim]"
            elif row["reps"] == 0:
                status = "[yellow]超出位数[/yellow]"
            else:
                status = "[green]有效[/green]"
            table.add_row(
                str(p.multiplier),
                str(p.digit),
                str(p.period),
                str(p.leading_digit),
                f"{p.low_value:05d}",
                str(row["reps"]),
                str(row["contribution"]),
                status,
            )
        return table

    def _build_summary(self) -> Panel:
        text = Text()
        text.append("  数字块合计: ", style="bold")
        text.append(f"{self.pattern_total}\n", style="cyan")
        text.append("  Repunit 合计: ", style="bold")
        text.append(f"{self.repunit_total}\n", style="cyan")
        text.append("  结果 (mod 100000): ", style="bold")
        text.append(str(self.result), style="bold green")
        return Panel(text, title="[bold]汇总[/bold]", border_style="green")

    def render(self, console: Console):
        if not self.rows:
            self.collect()
        console.print(self.build_table())
        console.print(self._build_summary())
