import os


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Static assets are cache-busted by deploy, keep them for an hour
    SEND_FILE_MAX_AGE_DEFAULT = 3600

    # JSON Settings
    JSON_AS_ASCII = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Site meta
    SITE_TITLE = 'Shambhav Kumar Rao | Full Stack Developer & AI Enthusiast'
    SITE_DESCRIPTION = 'Portfolio of Shambhav Kumar Rao: web apps, AI interfaces and tools.'


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing'
    LOG_LEVEL = 'WARNING'


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
