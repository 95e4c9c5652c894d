from django.db import models
from django.db.models import Q


class CompanionQuerySet( models.QuerySet ):

    def outgoing( self, account_id ):
        return self.filter( grantor_id = account_id )

    def incoming( self, account_id ):
        return self.filter( grantee_id = account_id )

    def edge( self, grantor_id, grantee_id ):
        return self.filter( grantor_id = grantor_id, grantee_id = grantee_id )

    def pair( self, first_id, second_id ):
        """ Both directions of a relationship. """
        return self.filter(
            Q( grantor_id = first_id, grantee_id = second_id )
            | Q( grantor_id = second_id, grantee_id = first_id )
        )


class CompanionManager( models.Manager.from_queryset( CompanionQuerySet )):
    pass
