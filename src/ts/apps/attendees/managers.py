from django.db import models


class AttendeeQuerySet( models.QuerySet ):

    def for_resource( self, resource_kind, resource_id ):
        return self.filter( resource_kind = resource_kind, resource_id = resource_id )

    def for_account( self, account_id ):
        return self.filter( account_id = account_id )


class AttendeeManager( models.Manager.from_queryset( AttendeeQuerySet )):
    pass
