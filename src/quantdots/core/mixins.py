"""Mixin classes for result dataclasses.

Text formatting shared by the summary() reports of all result types.
"""

from __future__ import annotations

from typing import Any, Sequence


class ResultSummaryMixin:
    """Common formatting utilities for result summaries.

    Reports are plain text: a boxed header, label/value rows, optional
    sections and a footer with the computation time.
    """

    @staticmethod
    def _format_header(title: str, width: int = 80) -> str:
        """Format a centred title between two rules."""
        border = "=" * width
        return f"{border}\n{title.center(width).rstrip()}\n{border}"

    @staticmethod
    def _format_metric(label: str, value: Any, width: int = 40) -> str:
        """Format a label-value row, padded with dots to a fixed width.

        Floats are shown with 6 significant digits, switching to
        scientific notation for very small or very large magnitudes.
        """
        if isinstance(value, float):
            formatted_value = f"{value:.6g}"
        elif value is None:
            formatted_value = "N/A"
        else:
            formatted_value = str(value)

        dots = "." * max(1, width - len(label) - len(formatted_value) - 2)
        return f"  {label} {dots} {formatted_value}"

    @staticmethod
    def _format_section(title: str) -> str:
        """Format a section subheader."""
        return f"\n{title}:\n{'-' * len(title)}"

    @staticmethod
    def _format_columns(
        centers: Sequence[float],
        counts: Sequence[int],
        max_rows: int = 8,
        marker: str = "o",
    ) -> str:
        """Render dotplot columns as text, one row per column.

        Args:
            centers: x-coordinate of each column, left to right
            counts: Number of dots in each column
            max_rows: Columns shown before the rest are summarised
            marker: Character drawn for each dot

        Returns:
            Multi-line string such as ``   11.875 | o o o``
        """
        if not centers:
            return "  (no columns)"

        rows = [
            f"  {center:>10.4g} | {' '.join(marker * count)}"
            for center, count in zip(centers[:max_rows], counts[:max_rows])
        ]
        if len(centers) > max_rows:
            rows.append(f"  ... and {len(centers) - max_rows} more column(s)")
        return "\n".join(rows)

    @staticmethod
    def _format_footer(computation_time_ms: float, width: int = 80) -> str:
        """Format the report footer with computation time."""
        if computation_time_ms < 1000:
            time_str = f"{computation_time_ms:.2f} ms"
        else:
            time_str = f"{computation_time_ms / 1000:.2f} s"
        return f"\nComputation Time: {time_str}\n{'=' * width}"
