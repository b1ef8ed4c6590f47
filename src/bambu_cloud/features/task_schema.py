"""
Schema definitions for task exports.

Defines the flat column layout and dtypes of the task table so that
parquet/csv exports keep the same types across runs.
"""
import logging

logger = logging.getLogger(__name__)

# Task export schema, one row per print task
TASK_DTYPES = {
    # Identifiers
    'id': 'Int64',
    'design_id': 'Int64',
    'instance_id': 'Int64',
    'model_id': 'string',
    'profile_id': 'Int64',

    # Titles
    'title': 'string',
    'design_title': 'string',
    'plate_index': 'Int64',
    'plate_name': 'string',
    'cover': 'string',  # URL of the plate thumbnail

    # Device
    'device_id': 'string',
    'device_name': 'string',
    'device_model': 'string',
    'bed_type': 'string',
    'mode': 'string',

    # Status
    'status': 'Int64',
    'feedback_status': 'Int64',
    'is_public_profile': 'boolean',
    'is_printable': 'boolean',

    # Timing
    'start_time': 'datetime64[ns, UTC]',
    'end_time': 'datetime64[ns, UTC]',
    'cost_time': 'Int64',  # seconds

    # Consumption
    'weight': 'float64',  # grams
    'length': 'Int64',  # millimetres

    # AMS summary
    'ams_slots': 'Int64',
    'filament_types': 'string',  # comma separated, slot order
}

TASK_COLUMNS: tuple[str, ...] = tuple(TASK_DTYPES.keys())


def enforce_dtypes(df, dtype_dict: dict, skip_missing: bool = True):
    """
    Enforce data types on a DataFrame according to a dtype dictionary.

    Parameters:
    df (pd.DataFrame): DataFrame to enforce types on
    dtype_dict (dict): Dictionary mapping column names to dtype strings
    skip_missing (bool): If True, skip columns not in DataFrame (default: True)

    Returns:
    pd.DataFrame: DataFrame with enforced types

    Raises:
    KeyError: if a column is missing and skip_missing is False
    """
    import pandas as pd

    for col, dtype in dtype_dict.items():
        if col not in df.columns:
            if skip_missing:
                continue
            raise KeyError(f"Column '{col}' not found in DataFrame")

        if dtype.startswith('datetime64'):
            converted = pd.to_datetime(df[col], errors='coerce', utc=True)
            nat_count = (converted.isna() & df[col].notna()).sum()
            if nat_count > 0:
                logger.warning(f"Column '{col}': {nat_count} values could not be converted and set to NaT")
            df[col] = converted.astype(dtype)
        else:
            df[col] = df[col].astype(dtype)

    return df
