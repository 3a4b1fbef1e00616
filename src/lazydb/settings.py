import logging
import sys
from pathlib import Path

import toml

DEFAULT_SETTINGS_PATH = Path('system.toml')
DEFAULT_DRIVER = 'lazydb.drivers.mysql.MySQLDriver'

logger = logging.getLogger('lazydb')
logger.setLevel(logging.INFO)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
logger.propagate = True


def load_settings(path=DEFAULT_SETTINGS_PATH):
    """Read a settings file and apply its ``[lazydb]`` section.

    Returns a dict with ``driver``, ``log_level`` and the raw ``database`` table.
    """
    config = toml.load(Path(path).as_posix())
    lazydb_config = config.get('lazydb', {})
    settings = {
        'driver': lazydb_config.get('driver', DEFAULT_DRIVER),
        'log_level': lazydb_config.get('log_level', 'INFO'),
        'database': config.get('database', {}),
    }
    logger.setLevel(logging.getLevelName(settings['log_level']))
    return settings
