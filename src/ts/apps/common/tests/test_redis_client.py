import logging
from unittest import mock

import redis

from django.test import SimpleTestCase, override_settings

from ts.apps.common import redis_client

logging.disable(logging.CRITICAL)


@override_settings(REDIS_HOST='cache.internal', REDIS_PORT=6380)
class RedisClientTestCase(SimpleTestCase):

    def setUp(self):
        redis_client.clear_redis_client()
        self.addCleanup(redis_client.clear_redis_client)

    def test_connects_once(self):
        with mock.patch.object(redis, 'StrictRedis') as mock_redis:
            first = redis_client.get_redis_client()
            second = redis_client.get_redis_client()

        self.assertIs(first, second)
        mock_redis.assert_called_once()
        self.assertEqual(mock_redis.call_args.kwargs['host'], 'cache.internal')
        self.assertEqual(mock_redis.call_args.kwargs['port'], 6380)

    def test_unreachable_server_gives_none_and_no_retry(self):
        with mock.patch.object(redis, 'StrictRedis') as mock_redis:
            mock_redis.return_value.ping.side_effect = redis.exceptions.ConnectionError('refused')
            self.assertIsNone(redis_client.get_redis_client())
            self.assertIsNone(redis_client.get_redis_client())

        mock_redis.assert_called_once()

    def test_clear_allows_reconnect(self):
        with mock.patch.object(redis, 'StrictRedis') as mock_redis:
            redis_client.get_redis_client()
            redis_client.clear_redis_client()
            redis_client.get_redis_client()

        self.assertEqual(mock_redis.call_count, 2)

    def test_timeout_on_connect_gives_none(self):
        with mock.patch.object(redis, 'StrictRedis') as mock_redis:
            mock_redis.return_value.ping.side_effect = redis.exceptions.TimeoutError('Timeout connecting to server')
            self.assertIsNone(redis_client.get_redis_client())
