import argparse
import logging
import sys

import requests

from bambu_cloud.cli.common import add_login_arguments, describe, load_settings, login_from_args
from bambu_cloud.errors import CameraUrlError, ConfigurationError, LoginError

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="List printers bound to a cloud account")
    add_login_arguments(p)
    p.add_argument("--camera", action="store_true", help="Also request a camera stream URL per device")

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
            devices = cloud.get_devices()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Could not fetch devices: {e}")
            return 1
        logger.info(f"{len(devices)} devices on account {cloud.username} (mqtt: {cloud.mqtt_host})")

        for device in devices:
            state = "online" if device.online else "offline"
            print(f"{device.dev_id}  {device.name:<16} {device.dev_product_name:<10} {state:<7} {device.print_status}")

            if a.camera:
                try:
                    print(f"    camera: {cloud.get_camera_url(device)}")
                except (CameraUrlError, requests.RequestException) as e:
                    logger.warning(f"No camera URL for {device.dev_id}: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
