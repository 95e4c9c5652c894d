import logging
import os
from unittest import mock

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase

from ts.environment.server import EnvironmentSettings

logging.disable(logging.CRITICAL)


class EnvironmentSettingsTestCase(SimpleTestCase):

    BASE_ENV = {
        'DJANGO_SETTINGS_MODULE': 'ts.settings.ci',
        'DJANGO_SECRET_KEY': 'test-secret',
        'TS_DB_PATH': '/tmp/ts-test',
    }

    def _get(self, **extra_env):
        env = dict(self.BASE_ENV)
        env.update(extra_env)
        with mock.patch.dict(os.environ, env, clear=True):
            return EnvironmentSettings.get()

    def test_sqlite_configuration(self):
        env_settings = self._get()
        self.assertTrue(env_settings.has_sqlite_database)
        self.assertFalse(env_settings.has_server_database)
        self.assertEqual(env_settings.SECRET_KEY, 'test-secret')
        self.assertEqual(env_settings.environment_name, 'ci')
        self.assertTrue(env_settings.VERSION)

    def test_missing_secret_key(self):
        with mock.patch.dict(os.environ, {'TS_DB_PATH': '/tmp/ts-test'}, clear=True):
            with self.assertRaises(ImproperlyConfigured):
                EnvironmentSettings.get()

    def test_missing_database(self):
        with mock.patch.dict(os.environ, {'DJANGO_SECRET_KEY': 'x'}, clear=True):
            with self.assertRaises(ImproperlyConfigured):
                EnvironmentSettings.get()

    def test_server_database(self):
        env_settings = self._get(
            TS_DB_PATH='',
            TS_DB_HOST='db',
            TS_DB_PORT='5432',
            TS_DB_NAME='ts',
            TS_DB_USER='ts',
            TS_DB_PASSWORD='pw',
        )
        self.assertTrue(env_settings.has_server_database)
        self.assertFalse(env_settings.has_sqlite_database)

    def test_redis_settings(self):
        env_settings = self._get(
            TS_REDIS_HOST='cache',
            TS_REDIS_PORT='not-a-port',
            TS_REDIS_KEY_PREFIX='ts:',
            TS_SHARING_CACHE_ENABLED='off',
        )
        self.assertEqual(env_settings.REDIS_HOST, 'cache')
        self.assertEqual(env_settings.REDIS_PORT, 6379)
        self.assertEqual(env_settings.REDIS_KEY_PREFIX, 'ts:')
        self.assertFalse(env_settings.SHARING_CACHE_ENABLED)

    def test_extra_host_urls(self):
        env_settings = self._get(TS_EXTRA_HOST_URLS='https://share.example.com, http://10.0.0.5:8080;bogus')
        self.assertIn('share.example.com', env_settings.ALLOWED_HOSTS)
        self.assertIn('10.0.0.5', env_settings.ALLOWED_HOSTS)
        self.assertIn('localhost', env_settings.ALLOWED_HOSTS)

    def test_to_bool(self):
        for value in ['true', 'YES', ' 1 ', 'on', True]:
            self.assertTrue(EnvironmentSettings.to_bool(value))
            continue
        for value in ['false', '0', '', 'off', False, None]:
            self.assertFalse(EnvironmentSettings.to_bool(value))
            continue

    def test_parse_url_list_str(self):
        self.assertEqual(
            EnvironmentSettings.parse_url_list_str('https://a.example.com:8443/path http://b.example.com'),
            [
                ('a.example.com', 'https://a.example.com:8443'),
                ('b.example.com', 'http://b.example.com'),
            ],
        )
