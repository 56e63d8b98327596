from path import Path

from storefront.settings.base import *

ALLOWED_HOSTS = ['*']

# Disable file logging, test environments have no log directory.
LOGGING['handlers']['local'] = {'class': 'logging.NullHandler'}

# Disable console logging to cut down on log size. pytest will capture the logs for us.
LOGGING['handlers']['console'] = {'class': 'logging.NullHandler'}

# END TEST SETTINGS

DATABASES = {
    'default': {
        'ENGINE': os.environ.get('DB_ENGINE', 'django.db.backends.sqlite3'),
        'NAME': os.environ.get('DB_NAME', ':memory:'),
        'USER': os.environ.get('DB_USER', ''),
        'PASSWORD': os.environ.get('DB_PASSWORD', ''),
        'HOST': os.environ.get('DB_HOST', ''),
        'PORT': os.environ.get('DB_PORT', ''),
        'CONN_MAX_AGE': int(os.environ.get('CONN_MAX_AGE', 0)),
        'ATOMIC_REQUESTS': True,
    },
}

PASSWORD_HASHERS = (
    'django.contrib.auth.hashers.MD5PasswordHasher',
)

# Theme settings
# Theme fixtures used by the tests live in storefront/tests/Themes
THEME_ROOT = Path(DJANGO_ROOT + "/tests")
THEME_URL = '/static/'
# End Theme settings
