from .core import load_cases, replay_case, replay_batch
from .io import write_csv, write_manifest

__all__ = ["load_cases", "replay_case", "replay_batch", "write_csv", "write_manifest"]
