from pathlib import Path
import pandas as pd


def _tmp_path(out: Path) -> Path:
    out.parent.mkdir(parents=True, exist_ok=True)
    return out.with_suffix(out.suffix + ".tmp")


def atomic_write_parquet(df: pd.DataFrame, out: Path) -> None:
    tmp = _tmp_path(out)
    df.to_parquet(tmp, index=False)
    tmp.replace(out)             # atomic replace on same filesystem


def atomic_write_csv(df: pd.DataFrame, out: Path) -> None:
    tmp = _tmp_path(out)
    df.to_csv(tmp, index=False, encoding="utf-8")
    tmp.replace(out)


def write_table(df: pd.DataFrame, out: Path) -> Path:
    """Writes parquet or csv depending on the file suffix."""
    out = Path(out)
    suffix = out.suffix.lower()
    if suffix == ".parquet":
        atomic_write_parquet(df, out)
    elif suffix == ".csv":
        atomic_write_csv(df, out)
    else:
        raise ValueError(f"Unsupported export format '{out.suffix}', use .parquet or .csv")
    return out
