# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for benchforge.

The one-time setup that happens before any CLI command does real work:
  1. Validate the Python version
  2. Apply the log level and log file to every benchforge logger
  3. Log a host snapshot so generation logs can be correlated with a machine
"""

import logging
from pathlib import Path
from typing import Optional

from benchforge.config.schema import GlobalConfig
from benchforge.logging.logger import configure_package_logging, get_logger
from benchforge.runtime.environment import check_minimum_python, get_host_info


def bootstrap(config: GlobalConfig, log_level: Optional[str] = None) -> logging.Logger:
    """
    Run the bootstrap sequence and return the runtime logger.

    Args:
        config: The validated global configuration.
        log_level: Level from the command line; wins over `config.log_level`.
    """
    check_minimum_python()

    level = log_level or config.log_level
    log_file = Path(config.log_file) if config.log_file is not None else None
    logger = get_logger("benchforge.runtime", log_level=level, log_file=log_file)
    configure_package_logging(level, log_file)

    host = get_host_info()
    logger.info(
        "benchforge bootstrap complete",
        extra={
            "python_version": host.python_version,
            "platform": host.platform,
            "architecture": host.architecture,
            "log_level": level,
        },
    )
    return logger
