#!/usr/bin/env python3

"""Progress tracking for batch decoding runs."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import perf_counter

import psutil


class ProgressTracker:
    """
    Track and report batch decoding progress with summary statistics.

    Provides contextual timing, per-item success/failure counting, and
    operation logging for the command line tool.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = perf_counter()
        self.item_count = 0
        self.failure_count = 0
        self.operation_stack: list[str] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = perf_counter()
        self.operation_stack.append(operation_name)

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = perf_counter() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = perf_counter() - start_time
            context = " -> ".join(self.operation_stack)
            self.logger.error(f"Failed operation: {context} after {elapsed:.3f}s: {e}")
            raise
        finally:
            self.operation_stack.pop()

    def count_item(self, succeeded: bool = True) -> None:
        """Record one processed item."""
        self.item_count += 1
        if not succeeded:
            self.failure_count += 1

    @property
    def success_count(self) -> int:
        """Number of items processed without failure."""
        return self.item_count - self.failure_count

    def report_summary(self) -> None:
        """Report final processing statistics."""
        total_time = perf_counter() - self.start_time
        rate = self.item_count / total_time if total_time > 0 else 0

        self.logger.info(
            f"Processed {self.item_count} item(s): {self.success_count} succeeded, "
            f"{self.failure_count} failed in {total_time:.3f}s ({rate:.1f} items/s)"
        )

    def log_memory_usage(self) -> None:
        """Log resident memory of the current process."""
        try:
            memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.debug(f"Could not get memory usage: {e}")
            return
        self.logger.debug(f"Memory usage: {memory_mb:.1f} MB")

    def reset(self) -> None:
        """Reset all counters and timers."""
        self.start_time = perf_counter()
        self.item_count = 0
        self.failure_count = 0
        self.operation_stack.clear()
