import argparse
import logging
import sys

import requests

from bambu_cloud.cli.common import add_login_arguments, describe, load_settings, login_from_args, resolve_out
from bambu_cloud.errors import ConfigurationError, LoginError
from bambu_cloud.io.writers import write_table
from bambu_cloud.preprocessing.tasks import summarize_tasks, tasks_to_frame

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="List print tasks of a cloud account")
    add_login_arguments(p)
    p.add_argument("--device", help="Only list tasks of this device id")
    p.add_argument("--out", help="Export tasks to this .parquet or .csv file (relative paths go under BAMBU_OUT_DIR)")

    a = p.parse_args(argv)
    cfg = load_settings(a)
    if cfg is None:
        return 1

    try:
        cloud = login_from_args(a, cfg)
    except (ConfigurationError, LoginError) as e:
        logger.error(describe(e))
        return 1

    with cloud:
        try:
            tasks = cloud.get_tasks(only_device=a.device)
        except (requests.RequestException, ValueError) as e:
            # ValueError also covers pydantic ValidationError on malformed payloads
            logger.error(f"Could not fetch tasks: {e}")
            return 1

    df = tasks_to_frame(tasks)
    summary = summarize_tasks(df)
    logger.info(f"Fetched {summary['tasks']} tasks")
    logger.info(f"Filament used: {summary['total_weight_g']:.1f} g, {summary['total_length_mm'] / 1000:.1f} m")
    logger.info(f"Print time: {summary['total_cost_time_s'] / 3600:.1f} h")
    for device, count in summary["tasks_per_device"].items():
        logger.info(f"  {device}: {count} tasks")

    for task in tasks:
        print(f"{task.start_time:%Y-%m-%d %H:%M}  {task.device_name:<16} {task.weight:>8.1f} g  {task.title}")

    if a.out:
        try:
            out = write_table(df, resolve_out(a.out, cfg))
        except (OSError, ValueError) as e:
            logger.error(f"Could not export tasks: {e}")
            return 1
        logger.info(f"Wrote {out}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
