import os

DEFAULT_SEPARATOR = ' '
DEFAULT_DELIMITER = '\t'
DEFAULT_ENCODING = 'utf-8'

LOG_FORMAT = '{asctime}:{levelname}:{name}:{message}'
LOG_DATE_FORMAT = '%d-%m-%Y %H:%M:%S'
LOG_BACKUP_COUNT = 3

# Environment overrides, read by the command line front end only.
SEPARATOR_ENV = 'WIDETABLE_SEPARATOR'
DELIMITER_ENV = 'WIDETABLE_DELIMITER'
LOG_LEVEL_ENV = 'WIDETABLE_LOG_LEVEL'


def env_default(name, default):
    return os.environ.get(name, default)
