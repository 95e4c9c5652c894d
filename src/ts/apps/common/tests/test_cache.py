import logging
from unittest import mock

import redis

from django.test import SimpleTestCase, override_settings

from ts.apps.common import cache as cache_module
from ts.apps.common.cache import SharingCacheInvalidator

logging.disable(logging.CRITICAL)


@override_settings(SHARING_CACHE_ENABLED=True, REDIS_KEY_PREFIX='test:')
class SharingCacheInvalidatorTestCase(SimpleTestCase):

    def setUp(self):
        self.invalidator = SharingCacheInvalidator()
        self.mock_client = mock.MagicMock()
        patcher = mock.patch.object(cache_module, 'get_redis_client', return_value=self.mock_client)
        self.mock_get_client = patcher.start()
        self.addCleanup(patcher.stop)

    def test_key_format(self):
        self.assertEqual(self.invalidator.user_trips_key(5), 'test:user:5:trips')
        self.assertEqual(self.invalidator.user_companions_key(5), 'test:user:5:companions')
        self.assertEqual(self.invalidator.trip_details_key(9), 'test:trip:9:details')

    def test_invalidate_user_trips_deletes_each_account_key(self):
        self.invalidator.invalidate_user_trips(1, None, 2)
        self.mock_client.delete.assert_called_once_with('test:user:1:trips', 'test:user:2:trips')

    def test_invalidate_trip_details(self):
        self.invalidator.invalidate_trip_details(9)
        self.mock_client.delete.assert_called_once_with('test:trip:9:details')

    def test_nothing_to_delete(self):
        self.invalidator.invalidate_user_companions()
        self.invalidator.invalidate_trip_details(None)
        self.mock_client.delete.assert_not_called()

    def test_redis_error_is_swallowed(self):
        self.mock_client.delete.side_effect = redis.exceptions.ConnectionError('down')
        self.assertEqual(self.invalidator._delete_keys(['test:user:1:trips']), [])

    def test_client_lookup_error_is_swallowed(self):
        self.mock_get_client.side_effect = redis.exceptions.TimeoutError('Timeout connecting to server')
        self.assertEqual(self.invalidator._delete_keys(['test:user:1:trips']), [])
        self.invalidator.invalidate_user_trips(1)

    def test_missing_client_is_skipped(self):
        self.mock_get_client.return_value = None
        self.assertEqual(self.invalidator._delete_keys(['test:user:1:trips']), [])

    @override_settings(SHARING_CACHE_ENABLED=False)
    def test_disabled(self):
        self.invalidator.invalidate_user_trips(1)
        self.mock_get_client.assert_not_called()
