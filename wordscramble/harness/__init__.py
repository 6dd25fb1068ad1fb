from .core import replay_case, run_batch, survey_root
from .io import write_csv, write_manifest

__all__ = ["replay_case", "run_batch", "survey_root", "write_csv", "write_manifest"]
