import logging
from typing import Any, Dict, Iterable, List

import pandas as pd

from bambu_cloud.features.task_schema import TASK_COLUMNS, TASK_DTYPES, enforce_dtypes
from bambu_cloud.schemas import Task

logger = logging.getLogger(__name__)


def task_to_row(task: Task) -> Dict[str, Any]:
    """Flattens one task into a row of the export table."""
    row = task.model_dump(exclude={"ams_detail_mapping"})
    row["cover"] = str(task.cover)
    row["ams_slots"] = len(task.ams_detail_mapping)
    row["filament_types"] = ",".join(detail.filament_type for detail in task.ams_detail_mapping)
    return {col: row[col] for col in TASK_COLUMNS}


def tasks_to_frame(tasks: Iterable[Task]) -> pd.DataFrame:
    """
    Builds the task table, one row per task, in the order received.
    An empty input gives an empty frame that still carries every column.
    """
    rows: List[Dict[str, Any]] = [task_to_row(task) for task in tasks]
    df = pd.DataFrame(rows, columns=list(TASK_COLUMNS))
    df = enforce_dtypes(df, TASK_DTYPES)
    logger.debug(f"Built task table with {len(df)} rows")
    return df


def summarize_tasks(df: pd.DataFrame) -> Dict[str, Any]:
    """Totals over a task table: count, grams, millimetres, seconds and tasks per device."""
    if df.empty:
        return {
            "tasks": 0,
            "total_weight_g": 0.0,
            "total_length_mm": 0,
            "total_cost_time_s": 0,
            "tasks_per_device": {},
        }

    per_device = df['device_name'].fillna(df['device_id']).value_counts()
    return {
        "tasks": int(len(df)),
        "total_weight_g": float(df['weight'].sum()),
        "total_length_mm": int(df['length'].sum()),
        "total_cost_time_s": int(df['cost_time'].sum()),
        "tasks_per_device": {str(k): int(v) for k, v in per_device.items()},
    }
