import logging
import os

logger = logging.getLogger('SaltColor')

# Unknown level names fall back to WARNING
level = os.environ.get('SALT_COLOR_LOG_LEVEL', 'WARNING').upper()
if not isinstance(logging.getLevelName(level), int):
    level = 'WARNING'
logger.setLevel(level)

# Formatter
formatter = logging.Formatter('%(asctime)s | %(levelname)s | %(name)s - %(message)s')

# Stream Handler
if not logger.handlers:
    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    logger.addHandler(sh)
