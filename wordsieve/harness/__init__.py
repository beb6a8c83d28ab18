from .core import run_case, run_batch, BatchTally
from .io import write_csv, write_manifest
from .report import summarize, format_report

__all__ = ["run_case", "run_batch", "BatchTally", "write_csv", "write_manifest", "summarize",
           "format_report"]
