import logging
from typing import Iterable, List

import redis

from django.conf import settings

from .redis_client import get_redis_client
from .singleton import Singleton

logger = logging.getLogger(__name__)


class SharingCacheInvalidator( Singleton ):
    """
    Fire-and-forget invalidation of cached per-user and per-trip views after
    a sharing mutation. Nothing here may raise into the caller: a missing
    or failing Redis only produces a log line.
    """

    def user_trips_key( self, account_id ) -> str:
        return f'{settings.REDIS_KEY_PREFIX}user:{account_id}:trips'

    def user_companions_key( self, account_id ) -> str:
        return f'{settings.REDIS_KEY_PREFIX}user:{account_id}:companions'

    def trip_details_key( self, trip_id ) -> str:
        return f'{settings.REDIS_KEY_PREFIX}trip:{trip_id}:details'

    def invalidate_user_trips( self, *account_ids ) -> None:
        self._delete_keys([ self.user_trips_key( x ) for x in account_ids if x ])
        return

    def invalidate_user_companions( self, *account_ids ) -> None:
        self._delete_keys([ self.user_companions_key( x ) for x in account_ids if x ])
        return

    def invalidate_trip_details( self, trip_id ) -> None:
        if trip_id:
            self._delete_keys([ self.trip_details_key( trip_id ) ])
        return

    def _delete_keys( self, key_list : Iterable[ str ] ) -> List[ str ]:
        key_list = list( key_list )
        if not key_list or not getattr( settings, 'SHARING_CACHE_ENABLED', False ):
            return []
        try:
            client = get_redis_client()
            if client is None:
                logger.debug( 'No cache client; skipping invalidation of %s', key_list )
                return []
            client.delete( *key_list )
        except redis.exceptions.RedisError as e:
            logger.warning( f'Cache invalidation failed for {key_list}: {e}' )
            return []
        return key_list
