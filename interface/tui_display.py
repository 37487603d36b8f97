"""Display utilities mixin for TUI - text width, trimming, padding."""

from wcwidth import wcwidth


class DisplayMixin:
    """Mixin providing text display utilities with proper Unicode width handling."""

    @staticmethod
    def _display_width(text: str) -> int:
        """Return visual width of text accounting for wide/narrow characters."""
        width = 0
        for ch in text:
            w = wcwidth(ch)
            if w is None:
                w = 0
            width += max(0, w)
        return width

    @staticmethod
    def _trim_display(text: str, width: int) -> str:
        """Trim text so visible width doesn't exceed specified width, marking the cut with an ellipsis."""
        if width <= 0:
            return ""
        if DisplayMixin._display_width(text) <= width:
            return text
        acc = []
        used = 0
        for ch in text:
            w = wcwidth(ch) or 0
            if w < 0:
                w = 0
            if used + w > width - 1:
                break
            acc.append(ch)
            used += w
        return "".join(acc) + "…"

    @staticmethod
    def _pad_display(text: str, width: int) -> str:
        """Trim and pad with spaces to exact visible width."""
        trimmed = DisplayMixin._trim_display(text, width)
        trimmed_width = DisplayMixin._display_width(trimmed)
        if trimmed_width < width:
            trimmed += " " * (width - trimmed_width)
        return trimmed


__all__ = ["DisplayMixin"]
