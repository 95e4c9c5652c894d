from dataclasses import dataclass, field
import os
import re
from typing import List, Tuple
import urllib.parse

from django.core.exceptions import ImproperlyConfigured


@dataclass
class EnvironmentSettings:
    """
    Encapsulates the parsing of the environment variables that are needed.
    """

    # If the default value is "None" then the variable is required and its
    # absence will raise an ImproperlyConfigured error.  Optional
    # arguments should have a non-None value (empty string, zero, etc.)
    #
    DJANGO_SETTINGS_MODULE     : str           = None
    DJANGO_SERVER_PORT         : int           = 8000
    VERSION                    : str           = 'unknown'
    SECRET_KEY                 : str           = None
    ALLOWED_HOSTS              : Tuple[ str ]  = field( default_factory = tuple )
    # Server-based database: TS_DB_HOST, TS_DB_PORT, TS_DB_NAME, TS_DB_USER, TS_DB_PASSWORD
    DATABASE_HOST              : str           = None
    DATABASE_PORT              : str           = None
    DATABASE_NAME              : str           = None
    DATABASE_USER              : str           = None
    DATABASE_PASSWORD          : str           = None
    # SQLite (file-based): TS_DB_PATH
    DATABASES_NAME_PATH        : str           = None
    REDIS_HOST                 : str           = 'localhost'
    REDIS_PORT                 : int           = 6379
    REDIS_KEY_PREFIX           : str           = ''
    SHARING_CACHE_ENABLED      : bool          = True

    @property
    def environment_name(self) -> str:
        if not self.DJANGO_SETTINGS_MODULE:
            return 'unknown'
        parts = self.DJANGO_SETTINGS_MODULE.split('.')
        if len(parts) > 1:
            return parts[-1]
        return 'unknown'

    @property
    def has_server_database(self) -> bool:
        server_vars = [
            self.DATABASE_HOST,
            self.DATABASE_PORT,
            self.DATABASE_NAME,
            self.DATABASE_USER,
            self.DATABASE_PASSWORD,
        ]
        return all( v is not None and v != '' for v in server_vars )

    @property
    def has_sqlite_database(self) -> bool:
        return bool( self.DATABASES_NAME_PATH )

    @classmethod
    def get( cls ) -> 'EnvironmentSettings':
        env_settings = EnvironmentSettings()

        ###########
        # Core Django Settings

        env_settings.DJANGO_SETTINGS_MODULE = cls.get_env_variable(
            'DJANGO_SETTINGS_MODULE',
            '',
        )
        try:
            env_settings.DJANGO_SERVER_PORT = int(
                cls.get_env_variable(
                    'DJANGO_SERVER_PORT',
                    env_settings.DJANGO_SERVER_PORT,
                )
            )
        except ( TypeError, ValueError ):
            pass
        env_settings.VERSION = cls.read_version_file()
        env_settings.SECRET_KEY = cls.get_env_variable(
            'DJANGO_SECRET_KEY',
            env_settings.SECRET_KEY,
        )

        ###########
        # Databases
        # Either a server database OR SQLite must be configured (validated at end)

        env_settings.DATABASE_HOST = cls.get_env_variable('TS_DB_HOST', '')
        env_settings.DATABASE_PORT = cls.get_env_variable('TS_DB_PORT', '')
        env_settings.DATABASE_NAME = cls.get_env_variable('TS_DB_NAME', '')
        env_settings.DATABASE_USER = cls.get_env_variable('TS_DB_USER', '')
        env_settings.DATABASE_PASSWORD = cls.get_env_variable('TS_DB_PASSWORD', '')
        env_settings.DATABASES_NAME_PATH = cls.get_env_variable('TS_DB_PATH', '')

        ###########
        # Redis (sharing cache invalidation)

        env_settings.REDIS_HOST = cls.get_env_variable(
            'TS_REDIS_HOST',
            env_settings.REDIS_HOST,
        )
        try:
            env_settings.REDIS_PORT = int( cls.get_env_variable('TS_REDIS_PORT') )
        except ( ImproperlyConfigured, TypeError, ValueError ):
            pass
        env_settings.REDIS_KEY_PREFIX = cls.get_env_variable(
            'TS_REDIS_KEY_PREFIX',
            env_settings.REDIS_KEY_PREFIX,
        )
        env_settings.SHARING_CACHE_ENABLED = cls.to_bool( cls.get_env_variable(
            'TS_SHARING_CACHE_ENABLED',
            env_settings.SHARING_CACHE_ENABLED,
        ))

        ###########
        # Strict host checking

        allowed_host_list = [
            '127.0.0.1',
            'localhost',
        ]
        extra_host_urls_str = cls.get_env_variable( 'TS_EXTRA_HOST_URLS', '' )
        if extra_host_urls_str:
            for host, url in cls.parse_url_list_str( extra_host_urls_str ):
                allowed_host_list.append( host )
                continue
        env_settings.ALLOWED_HOSTS += tuple( allowed_host_list )

        env_settings.validate_database_config()
        return env_settings

    def validate_database_config(self) -> None:
        if not self.has_server_database and not self.has_sqlite_database:
            raise ImproperlyConfigured(
                "Database not configured. Provide either:\n"
                "  - Server: TS_DB_HOST, TS_DB_PORT, TS_DB_NAME, TS_DB_USER, TS_DB_PASSWORD\n"
                "  - SQLite: TS_DB_PATH"
            )
        return

    @classmethod
    def read_version_file( cls ) -> str:
        # TS_VERSION at the repository root is the single source of truth.
        version_file_path = os.path.join( os.path.dirname(__file__), '..', '..', '..', 'TS_VERSION' )
        try:
            with open( version_file_path, 'r' ) as f:
                return f.read().strip()
        except ( FileNotFoundError, IOError ) as e:
            raise ImproperlyConfigured( f'Cannot read version file {version_file_path}: {e}' )

    @classmethod
    def get_env_variable( cls, var_name, default = None ) -> str:
        try:
            return os.environ[var_name]
        except KeyError:
            if default is not None:
                return default
            error_msg = "Set the %s environment variable" % var_name
            raise ImproperlyConfigured(error_msg)

    @classmethod
    def to_bool( cls, value: object ) -> bool:
        if isinstance( value, bool ):
            return value
        if isinstance( value, str ):
            return value.strip().lower() in { 'true', '1', 'on', 'yes', 'y', 't', 'enabled' }
        return bool( value )

    @classmethod
    def parse_url_list_str( cls, a_string : str ) -> List[ Tuple[ str, str ] ]:
        host_url_tuple_list = list()
        for url_str in re.split( r'[\s\;\,]+', a_string ):
            if not url_str:
                continue
            parsed_url = urllib.parse.urlparse( url_str )
            if not ( parsed_url.scheme and parsed_url.hostname ):
                continue
            try:
                port = parsed_url.port
            except ValueError:
                continue
            if port:
                normalized_url_str = f'{parsed_url.scheme}://{parsed_url.hostname}:{port}'
            else:
                normalized_url_str = f'{parsed_url.scheme}://{parsed_url.hostname}'
            host_url_tuple_list.append( ( parsed_url.hostname, normalized_url_str ) )
            continue
        return host_url_tuple_list
