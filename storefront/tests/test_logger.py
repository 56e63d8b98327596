"""
Tests for the logging configuration.
"""


import os

from django.test import SimpleTestCase

from storefront.settings.logger import get_logger_config


class LoggerConfigTests(SimpleTestCase):

    def test_handlers(self):
        """ Verify records go to the console and to a rotating file in the log directory. """
        config = get_logger_config(log_dir='/tmp/logs', log_filename='test.log')

        self.assertEqual(set(config['handlers']), {'console', 'local'})
        self.assertEqual(config['handlers']['local']['class'], 'logging.handlers.RotatingFileHandler')
        self.assertEqual(config['handlers']['local']['filename'], os.path.join('/tmp/logs', 'test.log'))
        self.assertEqual(set(config['formatters']), {'standard'})

    def test_invalid_loglevel(self):
        """ Verify an unknown log level falls back to INFO. """
        config = get_logger_config(local_loglevel='VERBOSE')
        self.assertEqual(config['handlers']['local']['level'], 'INFO')

    def test_debug(self):
        config = get_logger_config(debug=True)
        self.assertEqual(config['handlers']['console']['level'], 'DEBUG')
        self.assertEqual(config['loggers']['storefront']['level'], 'DEBUG')

        config = get_logger_config()
        self.assertEqual(config['loggers']['storefront']['level'], 'INFO')
