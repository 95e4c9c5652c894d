import logging
from typing import Optional, Tuple

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from ts.apps.common.singleton import Singleton
from ts.exceptions import (
    AlreadyExistsError,
    IdentifierRequiredError,
    PlaceholderDetailsRequiredError,
)

User = get_user_model()
logger = logging.getLogger(__name__)


class AccountManager( Singleton ):
    """
    Resolves sharing identifiers (email or phone) to accounts.

    Sharing with an identifier nobody has registered creates a placeholder
    account. Registering later with that identifier claims the placeholder,
    so every companion edge and attendee grant already pointing at it
    carries over to the real account.
    """

    @classmethod
    def is_email_identifier( cls, identifier : str ) -> bool:
        return bool( '@' in identifier )

    @classmethod
    def identifier_lookup( cls, identifier : str ) -> dict:
        if not identifier or not identifier.strip():
            raise IdentifierRequiredError( 'An email address or phone number is required' )
        if cls.is_email_identifier( identifier ):
            return { 'email': identifier.strip().lower() }
        return { 'phone': identifier.strip() }

    def find_by_identifier( self, identifier : str ) -> Optional[ User ]:
        return User.objects.filter( **self.identifier_lookup( identifier )).first()

    def get_or_create_placeholder( self,
                                   identifier  : str,
                                   first_name  : str  = None,
                                   last_name   : str  = None ) -> Tuple[ User, bool ]:
        user = self.find_by_identifier( identifier )
        if user:
            return ( user, False )

        if not ( first_name and first_name.strip() and last_name and last_name.strip() ):
            raise PlaceholderDetailsRequiredError(
                'First name and last initial are required to share with someone without an account'
            )

        lookup = self.identifier_lookup( identifier )
        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    email = lookup.get( 'email' ),
                    phone = lookup.get( 'phone' ),
                    password = None,
                    first_name = first_name.strip(),
                    last_name = last_name.strip()[0],
                    is_placeholder = True,
                )
        except IntegrityError:
            # Someone registered or was added concurrently with this identifier.
            user = self.find_by_identifier( identifier )
            if user is None:
                raise
            return ( user, False )

        logger.info( f'Created placeholder account {user.uuid} for a sharing request' )
        return ( user, True )

    def register( self,
                  password    : str,
                  first_name  : str,
                  last_name   : str,
                  email       : str  = None,
                  phone       : str  = None ) -> User:
        """
        Create a real account, or claim the placeholder holding the email
        or phone. Fails with AlreadyExistsError when a real account holds
        either identifier.
        """
        lookup_list = list()
        if email and email.strip():
            lookup_list.append( self.identifier_lookup( email ))
        if phone and phone.strip():
            lookup_list.append( self.identifier_lookup( phone ))
        if not lookup_list:
            raise IdentifierRequiredError( 'An email address or phone number is required' )

        normalized = dict()
        for lookup in lookup_list:
            normalized.update( lookup )

        with transaction.atomic():
            existing_user_map = dict()
            for lookup in lookup_list:
                for user in User.objects.select_for_update().filter( **lookup ):
                    existing_user_map[ user.pk ] = user
                    continue
                continue

            # Email and phone must resolve to at most one placeholder.
            if ( len( existing_user_map ) > 1
                 or any( not x.is_placeholder for x in existing_user_map.values() )):
                raise AlreadyExistsError( 'An account with this email or phone number already exists' )
            existing_user = next( iter( existing_user_map.values() ), None )

            if existing_user:
                if 'email' in normalized:
                    existing_user.email = normalized['email']
                if 'phone' in normalized:
                    existing_user.phone = normalized['phone']
                existing_user.first_name = first_name
                existing_user.last_name = last_name
                existing_user.is_placeholder = False
                existing_user.set_password( password )
                existing_user.save()
                logger.info( f'Placeholder account {existing_user.uuid} claimed by registration' )
                return existing_user

            try:
                with transaction.atomic():
                    return User.objects.create_user(
                        email = normalized.get( 'email' ),
                        phone = normalized.get( 'phone' ),
                        password = password,
                        first_name = first_name,
                        last_name = last_name,
                    )
            except IntegrityError:
                # A concurrent registration took the email or phone.
                raise AlreadyExistsError( 'An account with this email or phone number already exists' )
