"""Metrics logging utilities."""

from collections import defaultdict
from typing import Any, Dict, List, Optional
import csv
import os
from datetime import datetime


class MetricsLogger:
    """CSV logger for per-move search metrics."""

    def __init__(self, log_dir: str = "data/logs", prefix: str = "moves"):
        """
        Initialize metrics logger.

        Args:
            log_dir: Directory to save logs
            prefix: File name prefix of the CSV file
        """
        self.log_dir = log_dir
        os.makedirs(log_dir, exist_ok=True)

        self.metrics = defaultdict(list)
        self.current_step = 0

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.csv_path = os.path.join(log_dir, f"{prefix}_{timestamp}.csv")
        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_writer = None
        self.csv_fieldnames = ["step"]

    def log_dict(self, metrics_dict: Dict[str, Any], step: Optional[int] = None) -> None:
        """
        Log several values for one step.

        Args:
            metrics_dict: Dictionary of metric names to values
            step: Step number (uses current_step if None)
        """
        if step is None:
            step = self.current_step

        new_fields = [key for key in metrics_dict if key not in self.csv_fieldnames]
        if new_fields:
            self.csv_fieldnames.extend(new_fields)
            self._rewrite_header()

        row = {"step": step}
        for field in self.csv_fieldnames[1:]:
            row[field] = metrics_dict.get(field)
        self.csv_writer.writerow(row)
        self.csv_file.flush()

        for key, value in metrics_dict.items():
            self.metrics[key].append((step, value))

    def _rewrite_header(self) -> None:
        existing_data = []
        if self.csv_writer is not None:
            # New columns appeared: rewrite what was written so far under the wider header
            self.csv_file.close()
            with open(self.csv_path, "r", newline="") as f:
                existing_data = list(csv.DictReader(f))
            self.csv_file = open(self.csv_path, "w", newline="")

        self.csv_writer = csv.DictWriter(self.csv_file, fieldnames=self.csv_fieldnames)
        self.csv_writer.writeheader()
        for row in existing_data:
            self.csv_writer.writerow({field: row.get(field) for field in self.csv_fieldnames})

    def increment_step(self) -> None:
        self.current_step += 1

    def get_metric(self, key: str) -> List[tuple]:
        """Return all logged ``(step, value)`` pairs for a metric."""
        return self.metrics.get(key, [])

    def close(self) -> None:
        """Close the logger and CSV file."""
        if self.csv_file:
            self.csv_file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
