import logging
from typing import List, Optional

from django.db import DatabaseError, IntegrityError, transaction

from ts.apps.common.cache import SharingCacheInvalidator
from ts.apps.common.singleton import Singleton
from ts.apps.user.account_manager import AccountManager
from ts.exceptions import (
    AlreadyExistsError,
    InvalidLevelError,
    NotFoundError,
    SelfReferenceError,
)

from .enums import CompanionPermissionLevel
from .models import Companion
from .schemas import OutgoingCompanionData

logger = logging.getLogger(__name__)


class CompanionDirectory( Singleton ):
    """
    Owns companion edges and the pair invariant: for every edge (A, B)
    the edge (B, A) exists too. Pairs are inserted and deleted in one
    transaction; each edge's level is changed only through its grantor.

    Resolution direction: edge (A, B, L) gives A level L over B's trips
    and items. Adding a companion therefore gives the adder access to the
    added account, and the added account receives a NONE reciprocal until
    they raise it themselves.
    """

    def __init_singleton__(self):
        self._account_manager = AccountManager()
        self._cache_invalidator = SharingCacheInvalidator()
        return

    @classmethod
    def coerce_level( cls, level ) -> CompanionPermissionLevel:
        try:
            return CompanionPermissionLevel.coerce( level )
        except ValueError:
            raise InvalidLevelError( f'Invalid companion permission level "{level}"' )

    def add_companion( self,
                       grantor_id  : int,
                       identifier  : str,
                       level       : CompanionPermissionLevel  = CompanionPermissionLevel.VIEW,
                       first_name  : str                       = None,
                       last_name   : str                       = None ) -> Companion:
        """
        Link the grantor to the account behind an email or phone, creating
        a placeholder account (which needs the names) when there is none.
        Returns the grantor's edge with the grantee loaded.

        Placeholder creation is not part of the pair transaction; a
        placeholder can outlive a failed pair insert.
        """
        level = self.coerce_level( level )
        grantee, _ = self._account_manager.get_or_create_placeholder(
            identifier = identifier,
            first_name = first_name,
            last_name = last_name,
        )
        if grantee.pk == grantor_id:
            raise SelfReferenceError( 'Cannot add yourself as a companion' )

        if Companion.objects.edge( grantor_id, grantee.pk ).exists():
            raise AlreadyExistsError( 'Companion relationship already exists' )

        try:
            with transaction.atomic():
                companion = Companion.objects.create(
                    grantor_id = grantor_id,
                    grantee_id = grantee.pk,
                    level = level,
                )
                Companion.objects.create(
                    grantor_id = grantee.pk,
                    grantee_id = grantor_id,
                    level = CompanionPermissionLevel.NONE,
                )
        except IntegrityError:
            # Lost a race with a concurrent add for the same pair.
            raise AlreadyExistsError( 'Companion relationship already exists' )
        except DatabaseError as e:
            logger.error( f'Adding companion pair {grantor_id} <-> {grantee.pk} failed: {e}' )
            raise

        logger.debug( f'Companion pair created: {grantor_id} -> {grantee.pk} ({level})' )
        self._notify_changed( grantor_id, grantee.pk )
        return Companion.objects.select_related( 'grantee' ).get( pk = companion.pk )

    def remove_companion( self, grantor_id : int, grantee_id : int ) -> bool:
        """ Deletes both edges. Removing an absent relationship succeeds. """
        try:
            with transaction.atomic():
                deleted_count, _ = Companion.objects.pair( grantor_id, grantee_id ).delete()
        except DatabaseError as e:
            logger.error( f'Removing companion pair {grantor_id} <-> {grantee_id} failed: {e}' )
            raise

        if deleted_count:
            logger.debug( f'Companion pair removed: {grantor_id} <-> {grantee_id}' )
            self._notify_changed( grantor_id, grantee_id )
        return True

    def update_permission( self,
                           grantor_id  : int,
                           grantee_id  : int,
                           level       : CompanionPermissionLevel ) -> Companion:
        level = self.coerce_level( level )
        companion = Companion.objects.edge( grantor_id, grantee_id ).select_related( 'grantee' ).first()
        if companion is None:
            raise NotFoundError( 'Companion relationship not found' )

        companion.level = level
        companion.save( update_fields = [ 'level', 'modified_datetime' ] )
        self._notify_changed( grantor_id, grantee_id )
        return companion

    def get_outgoing( self, account_id : int ) -> List[ OutgoingCompanionData ]:
        companion_list = list(
            Companion.objects.outgoing( account_id ).select_related( 'grantee' )
        )
        grantee_ids = [ x.grantee_id for x in companion_list ]
        reverse_level_map = {
            x.grantor_id: x.level
            for x in Companion.objects.filter( grantor_id__in = grantee_ids,
                                               grantee_id = account_id )
        }
        return [
            OutgoingCompanionData(
                companion = companion,
                reverse_level = reverse_level_map.get( companion.grantee_id,
                                                       CompanionPermissionLevel.NONE ),
            )
            for companion in companion_list
        ]

    def get_incoming( self, account_id : int ) -> List[ Companion ]:
        return list( Companion.objects.incoming( account_id ).select_related( 'grantor' ))

    def resolve_level( self, grantor_id : int, grantee_id : int ) -> Optional[ CompanionPermissionLevel ]:
        if grantor_id is None or grantee_id is None:
            return None
        companion = Companion.objects.edge( grantor_id, grantee_id ).only( 'level' ).first()
        if companion is None:
            return None
        return companion.level

    def level_granted_to( self, account_id : int, other_id : int ) -> Optional[ CompanionPermissionLevel ]:
        """ Level of the other account's edge towards account_id. """
        return self.resolve_level( other_id, account_id )

    def can_view_all( self, account_id : int, owner_id : int ) -> bool:
        if account_id is not None and account_id == owner_id:
            return True
        level = self.resolve_level( account_id, owner_id )
        return bool( level is not None and level.can_view )

    def can_manage_all( self, account_id : int, owner_id : int ) -> bool:
        if account_id is not None and account_id == owner_id:
            return True
        level = self.resolve_level( account_id, owner_id )
        return bool( level is not None and level.can_manage_all )

    def _notify_changed( self, first_id : int, second_id : int ):
        self._cache_invalidator.invalidate_user_companions( first_id, second_id )
        self._cache_invalidator.invalidate_user_trips( first_id, second_id )
        return
