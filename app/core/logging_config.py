import logging.config

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        },
    },
    'handlers': {
        'default': {
            'level': 'DEBUG',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout',
        },
    },
    'loggers': {
        '': {  # root logger
            'handlers': ['default'],
            'level': 'INFO',
            'propagate': True
        },
        'app': {
            'handlers': ['default'],
            'level': 'INFO',
            'propagate': False
        },
    }
}


def setup_logging(level: str = "INFO"):
    """Configure logging for the application"""
    config = {**LOGGING_CONFIG, 'loggers': {k: dict(v) for k, v in LOGGING_CONFIG['loggers'].items()}}
    config['loggers']['app']['level'] = level.upper()
    logging.config.dictConfig(config)
