DEFAULT_THEME = 'Default'

THEME_CACHE_KEY_FORMAT = 'theme_for_{domain}'

VIEW_CACHE_KEY_PREFIX = 'View'
MASTER_CACHE_KEY_PREFIX = 'Master'
PARTIAL_VIEW_CACHE_KEY_PREFIX = 'Partial'
