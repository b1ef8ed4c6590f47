import argparse
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from bambu_cloud import logging_setup
from bambu_cloud.adapters.bambu.bambu import BambuCloud
from bambu_cloud.errors import ConfigurationError
from bambu_cloud.schemas import Region
from bambu_cloud.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def add_login_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--region", type=Region.parse, help="Cloud region (China, Europe, NorthAmerica, AsiaPacific, Other)")
    p.add_argument("--email", help="Account email (defaults to BAMBU_EMAIL)")
    p.add_argument("--password", help="Account password (defaults to BAMBU_PASSWORD)")
    p.add_argument("--log_level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")


def load_settings(a: argparse.Namespace) -> Optional[Settings]:
    """
    Reads settings and initializes logging.
    Returns None (after logging why) when BAMBU_* values are invalid.
    """
    try:
        cfg = get_settings()
    except ValidationError as e:
        logging_setup.setup_logging(a.log_level)
        logger.error(f"Invalid settings: {e}")
        return None

    logging_setup.setup_logging(a.log_level or cfg.log_level)
    return cfg


def login_from_args(a: argparse.Namespace, cfg: Settings) -> BambuCloud:
    """Command line values win over settings."""
    region: Region = a.region or cfg.region
    email: Optional[str] = a.email or cfg.email
    password: Optional[str] = a.password or (cfg.password.get_secret_value() if cfg.password else None)
    if not email or not password:
        raise ConfigurationError("No credentials: pass --email/--password or set BAMBU_EMAIL/BAMBU_PASSWORD")
    return BambuCloud.login(region, email, password, settings=cfg)


def resolve_out(out: str, cfg: Settings) -> Path:
    """Relative export paths land in the configured export folder (BAMBU_OUT_DIR)."""
    path = Path(out)
    if path.is_absolute():
        return path
    return cfg.out_dir / path


def describe(e: Exception) -> str:
    return f"{e} ({e.__cause__})" if e.__cause__ else str(e)
