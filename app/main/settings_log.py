# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Django logging configuration.

Project loggers follow LOG_LEVEL, Django internals stay at INFO (request errors only).
"""


def build_logging(log_level: str = 'INFO') -> dict:
    """Return the LOGGING dict for the given project log level."""
    log_level = log_level.upper()

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'console': {
                'format': '{asctime} {name} {levelname} {message}',
                'style': '{',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
        },
        'handlers': {
            'console': {
                'level': log_level,
                'class': 'logging.StreamHandler',
                'formatter': 'console',
            },
        },
        'root': {
            'handlers': ['console'],
            'level': log_level,
        },
        'loggers': {
            'django': {
                'handlers': ['console'],
                'level': 'INFO',
                'propagate': False,
            },
            'django.request': {
                'handlers': ['console'],
                'level': 'ERROR',
                'propagate': False,
            },
            'django.db.backends': {
                'handlers': ['console'],
                'level': 'INFO',
                'propagate': False,
            },
            'catalog': {
                'handlers': ['console'],
                'level': log_level,
                'propagate': False,
            },
            'main': {
                'handlers': ['console'],
                'level': log_level,
                'propagate': False,
            },
            'celery': {
                'handlers': ['console'],
                'level': log_level,
                'propagate': False,
            },
        },
    }

