import os
from os.path import abspath, basename, dirname, join, normpath
from sys import path

from storefront.settings.logger import get_logger_config

# PATH CONFIGURATION
# Absolute filesystem path to the Django project directory
DJANGO_ROOT = dirname(dirname(abspath(__file__)))

# Absolute filesystem path to the top-level project folder
SITE_ROOT = dirname(DJANGO_ROOT)

# Site name
SITE_NAME = basename(DJANGO_ROOT)

# Add our project to our pythonpath; this way, we don't need to type our project
# name in our dotted import paths
path.append(DJANGO_ROOT)
# END PATH CONFIGURATION


# DEBUG CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#debug
DEBUG = False
# END DEBUG CONFIGURATION


# SECRET CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
# Note: This key should only be used for development and testing.
SECRET_KEY = os.environ.get('STOREFRONT_SECRET_KEY', 'insecure-secret-key')
# END SECRET CONFIGURATION


# DATABASE CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#databases
# Note that we use connection pooling/persistent connections (CONN_MAX_AGE)
# in production, but the Django docs discourage its use in development.
DATABASES = {
    'default': {
        'ENGINE': os.environ.get('DB_ENGINE', 'django.db.backends.sqlite3'),
        'NAME': os.environ.get('DB_NAME', normpath(join(SITE_ROOT, 'storefront.db'))),
        'USER': os.environ.get('DB_USER', ''),
        'PASSWORD': os.environ.get('DB_PASSWORD', ''),
        'HOST': os.environ.get('DB_HOST', ''),
        'PORT': os.environ.get('DB_PORT', ''),
        'ATOMIC_REQUESTS': True,
        'CONN_MAX_AGE': int(os.environ.get('CONN_MAX_AGE', 60)),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'
# END DATABASE CONFIGURATION


# CACHE CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#caches
# The default cache is shared by every worker thread and backs the theme and template location caches.
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'storefront',
    }
}
# END CACHE CONFIGURATION


# GENERAL CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#time-zone
TIME_ZONE = 'UTC'

# See: https://docs.djangoproject.com/en/dev/ref/settings/#language-code
LANGUAGE_CODE = 'en'

# See: https://docs.djangoproject.com/en/dev/ref/settings/#use-i18n
USE_I18N = True

# See: https://docs.djangoproject.com/en/dev/ref/settings/#use-tz
USE_TZ = True

ALLOWED_HOSTS = []
# END GENERAL CONFIGURATION


# TEMPLATE CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#templates
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': (
            normpath(join(DJANGO_ROOT, 'templates')),
        ),
        'OPTIONS': {
            'loaders': [
                # ThemedTemplateLoader should come before any other loader to give theme templates
                # priority over system templates
                'storefront.theming.template_loaders.ThemedTemplateLoader',
                'django.template.loaders.filesystem.Loader',
                'django.template.loaders.app_directories.Loader',
            ],
            'context_processors': (
                'django.contrib.auth.context_processors.auth',
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
            ),
            'debug': True,  # Django will only display debug pages if the global DEBUG setting is set to True.
        }
    },
]
# END TEMPLATE CONFIGURATION


# MIDDLEWARE CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#middleware
MIDDLEWARE = (
    'edx_django_utils.cache.middleware.RequestCacheMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'waffle.middleware.WaffleMiddleware',
    'threadlocals.middleware.ThreadLocalMiddleware',
    # NOTE: CurrentThemeMiddleware reads the current request from thread locals, so it
    # MUST appear AFTER ThreadLocalMiddleware.
    'storefront.theming.middleware.CurrentThemeMiddleware',
    'edx_django_utils.cache.middleware.TieredCacheMiddleware',
)
# END MIDDLEWARE CONFIGURATION


# URL CONFIGURATION
# See: https://docs.djangoproject.com/en/dev/ref/settings/#root-urlconf
ROOT_URLCONF = '{}.urls'.format(SITE_NAME)
# END URL CONFIGURATION


# APP CONFIGURATION
DJANGO_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.admin',
    'waffle',
]

# Apps specific to this project go here.
LOCAL_APPS = [
    'storefront.resellers',
    'storefront.theming',
]

# See: https://docs.djangoproject.com/en/dev/ref/settings/#installed-apps
INSTALLED_APPS = DJANGO_APPS + LOCAL_APPS
# END APP CONFIGURATION


# LOGGING CONFIGURATION
LOGGING = get_logger_config(
    log_dir=os.environ.get('STOREFRONT_LOG_DIR', '/var/tmp'),
    debug=DEBUG,
    local_loglevel=os.environ.get('STOREFRONT_LOG_LEVEL', 'INFO'),
)
# END LOGGING CONFIGURATION


# Theme settings
# enable or disable theming
ENABLE_THEMING = True

# name for waffle switch to use for disabling theming on runtime.
# Note: management commands ignore this switch
DISABLE_THEMING_ON_RUNTIME_SWITCH = "disable_theming_on_runtime"

# Directory that "~/" in theme locations refers to
THEME_ROOT = DJANGO_ROOT

# URL prefix used when a themed file is linked from a page
THEME_URL = '/'

# Search locations for views, masters and partial views.
# {0} is the view name, {1} the controller (url namespace) and {2} the theme.
THEME_VIEW_LOCATION_FORMATS = [
    "~/Themes/{2}/Views/{1}/{0}.html",
    "~/Themes/{2}/Views/Shared/{0}.html",
]

THEME_MASTER_LOCATION_FORMATS = [
    "~/Themes/{2}/Views/{1}/{0}.master.html",
    "~/Themes/{2}/Views/Shared/{0}.master.html",
]

# Partial views are searched in the same locations as regular views
THEME_PARTIAL_VIEW_LOCATION_FORMATS = THEME_VIEW_LOCATION_FORMATS

# Location of the stylesheet of a theme, {0} is the theme
THEME_STYLESHEET_LOCATION_FORMAT = "~/Themes/{0}/Content/Site.css"

# Master used by views that do not name one, set to None if views do not require a master
THEME_DEFAULT_MASTER_NAME = 'Site'

# Cache time out for resolved themes and template locations
THEME_CACHE_TIMEOUT = 30 * 60

# End Theme settings
