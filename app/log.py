"""
Logging Setup

Informational messages go to stdout, errors to stderr with the source
location attached.
"""

import logging
import logging.config


class BelowErrorFilter(logging.Filter):
    def filter(self, record):
        return record.levelno < logging.ERROR


def configure_logging(app):
    level = app.config.get('LOG_LEVEL', 'INFO')
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'filters': {
            'below_error': {'()': BelowErrorFilter},
        },
        'formatters': {
            'info': {
                'format': 'INFO\t%(asctime)s %(message)s',
                'datefmt': '%Y/%m/%d %H:%M:%S',
            },
            'error': {
                'format': 'ERROR\t%(asctime)s %(filename)s:%(lineno)d: %(message)s',
                'datefmt': '%Y/%m/%d %H:%M:%S',
            },
        },
        'handlers': {
            'stdout': {
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stdout',
                'formatter': 'info',
                'filters': ['below_error'],
            },
            'stderr': {
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stderr',
                'formatter': 'error',
                'level': 'ERROR',
            },
        },
        'loggers': {
            app.name: {'level': level, 'handlers': ['stdout', 'stderr'], 'propagate': False},
        },
    })
