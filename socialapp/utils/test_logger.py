import logging
import os
import shutil
import tempfile
import unittest
from socialapp.config.settings import SocialSettings
from socialapp.utils.logger import setup_logger

class TestSetupLogger(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.names = []

    def tearDown(self):
        for name in self.names:
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def make(self, name, **overrides):
        self.names.append(name)
        return setup_logger(name, SocialSettings(_env_file=None, **overrides))

    def test_writes_to_file_in_log_dir(self):
        logger = self.make('socialapp.test.file', log_dir=self.temp_dir)
        logger.debug('graph ready')
        for handler in logger.handlers:
            handler.flush()
        with open(os.path.join(self.temp_dir, 'social.log'), encoding='utf-8') as f:
            content = f.read()
        self.assertIn('DEBUG - socialapp.test.file - graph ready', content)

    def test_console_only_when_file_disabled(self):
        logger = self.make('socialapp.test.console', log_file_enabled=False, console_log_level='WARNING')
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.handlers[0].level, logging.WARNING)

    def test_second_setup_keeps_handlers(self):
        first = self.make('socialapp.test.twice', log_dir=self.temp_dir)
        second = self.make('socialapp.test.twice', log_dir=self.temp_dir)
        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 2)

if __name__ == '__main__':
    unittest.main()
