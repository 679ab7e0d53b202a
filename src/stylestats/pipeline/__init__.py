from stylestats.pipeline.processor import parse_event_id, process_file
from stylestats.pipeline.runner import run, run_report

__all__ = ["parse_event_id", "process_file", "run", "run_report"]
