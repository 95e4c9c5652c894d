import logging
from typing import Optional

import redis

from django.conf import settings

logger = logging.getLogger(__name__)

# The app runs without a reachable Redis, so a None client is not enough
# to know whether a connection attempt was already made.
#
_g_global_redis_initialized_attempted = False

# According to docs, the Redis client is thread safe.
#
_g_global_redis_client = None


def initialize_global_cache_client() -> None:
    """ Connect once per process; failures leave the client unset. """
    global _g_global_redis_initialized_attempted
    global _g_global_redis_client

    if _g_global_redis_initialized_attempted:
        return
    _g_global_redis_initialized_attempted = True

    host = settings.REDIS_HOST
    port = settings.REDIS_PORT or 6379
    logger.info( 'Attempting to connect to Redis at %s:%s ...', host, port )

    try:
        client = redis.StrictRedis( host = host,
                                    port = port,
                                    db = 0,
                                    socket_timeout = 5,
                                    socket_connect_timeout = 5,
                                    decode_responses = True )
        client.ping()
        _g_global_redis_client = client
        logger.info( 'Successfully connected to Redis at %s:%s', host, port )

    except ( ConnectionRefusedError, redis.exceptions.RedisError ) as e:
        logger.error( f'Could not connect to Redis server: {e}' )
        _g_global_redis_client = None
    except ValueError as ve:
        logger.exception( f'Problem setting up Redis client: {ve}' )
        _g_global_redis_client = None
    return


def get_redis_client() -> Optional[ redis.StrictRedis ]:
    if not _g_global_redis_client:
        initialize_global_cache_client()
    return _g_global_redis_client


def clear_redis_client() -> None:
    """ Forget the client and allow a fresh connection attempt. """
    global _g_global_redis_initialized_attempted
    global _g_global_redis_client
    if _g_global_redis_client:
        logger.info( 'Clearing existing Redis connection' )
    _g_global_redis_initialized_attempted = False
    _g_global_redis_client = None
    return
