from datetime import datetime
from pathlib import Path


def get_target_run_folder(application_name: str, runs_root: str = "./runs") -> Path:
    # <runs_root>/<application_name>/<timestamp>, created on demand
    target = Path(runs_root) / application_name / datetime.now().strftime('%Y%m%d_%H%M%S')
    target.mkdir(parents=True, exist_ok=True)
    return target
