from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display service with tqdm (TTY only).

- Single tqdm instance, disabled when stdout is not a TTY (CI / redirects)
- Shows generated documents: current / total, with postfix stats
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """Return True if stdout is a TTY and progress should be displayed."""
    return sys.stdout.isatty()


class ProgressTracker:
    """Progress tracker for per-series document generation.

    In non-TTY environments the progress bar is disabled to avoid ANSI
    control sequence spam in logs.
    """

    def __init__(self, total: int, *, description: str = "Generating documents", unit: str = "doc") -> None:
        self.total = total
        self.description = description
        self.current = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total,
                desc=description,
                unit=unit,
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def start(self, label: str) -> None:
        """Start processing one item (shown next to the description)."""
        self.current += 1
        if self.enabled and self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({label})")

    def finish(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_description(self.description)

    def set_postfix(self, **kwargs: Any) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.set_postfix(**kwargs)

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
