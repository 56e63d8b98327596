"""Logging configuration"""

import os
import sys

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_logger_config(log_dir='/var/tmp', log_filename='storefront.log', debug=False, local_loglevel='INFO'):
    """
    Return the logging config dictionary to assign to the LOGGING setting.

    Records go to stdout and to a rotating file in log_dir. Theme resolution logs at DEBUG
    (lookups) and INFO (default theme fallbacks), so the storefront.theming logger follows `debug`.
    """
    # Revert to INFO if an invalid string is passed in
    if local_loglevel not in LOG_LEVELS:
        local_loglevel = 'INFO'

    handlers = ['console', 'local']
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s %(levelname)s %(process)d '
                          '[%(name)s] %(filename)s:%(lineno)d - %(message)s',
            },
        },
        'handlers': {
            'console': {
                'level': 'DEBUG' if debug else 'INFO',
                'class': 'logging.StreamHandler',
                'formatter': 'standard',
                'stream': sys.stdout,
            },
            'local': {
                'level': local_loglevel,
                'class': 'logging.handlers.RotatingFileHandler',
                'formatter': 'standard',
                'filename': os.path.join(log_dir, log_filename),
                'maxBytes': 1024 * 1024 * 2,
                'backupCount': 5,
            },
        },
        'loggers': {
            'django': {
                'handlers': handlers,
                'propagate': False,
                'level': 'INFO',
            },
            'storefront': {
                'handlers': handlers,
                'propagate': False,
                'level': 'DEBUG' if debug else 'INFO',
            },
            '': {
                'handlers': handlers,
                'level': 'WARNING',
            },
        }
    }
