"""
Terminal and JSON presentation of scan results.

Numbers are rounded here and nowhere else: 4 decimals for percentages,
8 for asset amounts and rates.
"""

import sys
from typing import Any, TextIO

import orjson

from arbscan.core.engine import ScanResult
from arbscan.core.types import CrossExchangeOpportunity, TriangularOpportunity
from arbscan.utils.math import format_amount, format_profit


class OpportunityReporter:
    """
    Renders ranked opportunities as box-drawn tables.

    One panel per detection mode, followed by a one-line summary.
    """

    # Box drawing characters
    BOX_TL = "\u2554"  # ╔
    BOX_TR = "\u2557"  # ╗
    BOX_BL = "\u255a"  # ╚
    BOX_BR = "\u255d"  # ╝
    BOX_H = "\u2550"  # ═
    BOX_V = "\u2551"  # ║
    BOX_LT = "\u2560"  # ╠
    BOX_RT = "\u2563"  # ╣

    def __init__(
        self,
        width: int = 96,
        output: TextIO | None = None,
        reference_asset: str = "USD",
    ) -> None:
        """
        Initialize reporter.

        Args:
            width: Panel width in characters.
            output: Output stream (default: stdout).
            reference_asset: Unit shown next to exchange prices.
        """
        self._width = width
        self._output = output or sys.stdout
        self._reference_asset = reference_asset

    def _pad(self, text: str, width: int) -> str:
        """Pad text to width."""
        return text.ljust(width)[:width]

    def _line(self, content: str) -> str:
        return f"{self.BOX_V}{self._pad(content, self._width - 2)}{self.BOX_V}"

    def _divider(self) -> str:
        return f"{self.BOX_LT}{self.BOX_H * (self._width - 2)}{self.BOX_RT}"

    def _top(self) -> str:
        return f"{self.BOX_TL}{self.BOX_H * (self._width - 2)}{self.BOX_TR}"

    def _bottom(self) -> str:
        return f"{self.BOX_BL}{self.BOX_H * (self._width - 2)}{self.BOX_BR}"

    def _panel(self, title: str, rows: list[str], empty_text: str) -> list[str]:
        lines = [self._top(), self._line(f"  {title}"), self._divider()]
        if rows:
            lines.extend(self._line(row) for row in rows)
        else:
            lines.append(self._line(f"  {empty_text}"))
        lines.append(self._bottom())
        return lines

    def render_triangular(self, opportunities: list[TriangularOpportunity]) -> str:
        """Render the triangular opportunities panel."""
        rows: list[str] = []
        for i, opp in enumerate(opportunities, 1):
            rows.append(
                f"  {i:>3}. {opp.route:<28} {format_profit(opp.profit_percent):>11}"
                f"  {format_amount(opp.start_notional)} -> {format_amount(opp.end_notional)}"
            )
            steps = "  ".join(
                f"{opp.path[n]}->{opp.path[n + 1]}: {format_amount(rate)}"
                for n, rate in enumerate(opp.hop_rates)
            )
            rows.append(f"       {steps}")

        return "\n".join(
            self._panel(
                "TRIANGULAR OPPORTUNITIES",
                rows,
                "No triangular opportunities found.",
            )
        )

    def render_cross_exchange(self, opportunities: list[CrossExchangeOpportunity]) -> str:
        """Render the cross-exchange opportunities panel."""
        unit = self._reference_asset
        rows = [
            f"  {i:>3}. {opp.asset:<6} buy {opp.buy_exchange:<9} {format_amount(opp.buy_price)} {unit}"
            f"  sell {opp.sell_exchange:<9} {format_amount(opp.sell_price)} {unit}"
            f"  {format_profit(opp.profit_percent):>10}"
            for i, opp in enumerate(opportunities, 1)
        ]

        return "\n".join(
            self._panel(
                "CROSS-EXCHANGE OPPORTUNITIES",
                rows,
                "No cross-exchange opportunities found.",
            )
        )

    def render(self, result: ScanResult) -> str:
        """
        Render both panels and a summary line.

        Returns:
            Formatted report string.
        """
        stats = result.stats
        best = (
            format_profit(stats.best_profit_percent)
            if stats.best_profit_percent is not None
            else "---"
        )
        summary = (
            f"Cycles: {stats.cycles_enumerated} ({stats.cycles_skipped} skipped)  |  "
            f"Quoted assets: {stats.assets_quoted}  |  Best candidate: {best}"
        )

        return "\n".join(
            [
                self.render_triangular(result.triangular),
                self.render_cross_exchange(result.cross_exchange),
                summary,
            ]
        )

    def display(self, result: ScanResult) -> None:
        """Write the report to the output stream."""
        self._output.write(self.render(result))
        self._output.write("\n")
        self._output.flush()


def result_to_dict(result: ScanResult) -> dict[str, Any]:
    """Serializable view of a scan result."""
    return {
        "triangular": [opp.to_dict() for opp in result.triangular],
        "cross_exchange": [opp.to_dict() for opp in result.cross_exchange],
        "stats": {
            "cycles_enumerated": result.stats.cycles_enumerated,
            "cycles_skipped": result.stats.cycles_skipped,
            "assets_quoted": result.stats.assets_quoted,
            "triangular_kept": result.stats.triangular_kept,
            "cross_exchange_kept": result.stats.cross_exchange_kept,
        },
    }


def to_json(result: ScanResult, indent: bool = False) -> bytes:
    """
    Encode a scan result as JSON.

    Args:
        result: Result to encode.
        indent: Pretty-print with two-space indentation.
    """
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(result_to_dict(result), option=option)
