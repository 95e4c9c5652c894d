from django.core.exceptions import BadRequest
from django.http import Http404

from ts.apps.items.resources import ResourceLocator
from ts.apps.trips.models import ShareableModel
from ts.exceptions import InvalidResourceKindError

from .enums import PermissionAction
from .resolver import PermissionResolver


class ResourceViewMixin:

    def get_resource( self, resource_kind, resource_id ) -> ShareableModel:
        if not resource_kind or resource_id in ( None, '' ):
            raise BadRequest( 'resource_kind and resource_id are required' )
        try:
            resource_id = int( resource_id )
        except ( TypeError, ValueError ):
            raise BadRequest( 'resource_id must be an integer' )
        try:
            resource = ResourceLocator().find( resource_kind, resource_id )
        except InvalidResourceKindError as e:
            raise BadRequest( str(e) )
        if resource is None:
            raise Http404()
        return resource

    def assert_can_view( self, request, resource : ShareableModel ) -> None:
        PermissionResolver().verify_access( resource, request.user.pk, PermissionAction.VIEW )

    def assert_can_manage( self, request, resource : ShareableModel ) -> None:
        PermissionResolver().verify_access( resource, request.user.pk, PermissionAction.MANAGE )

    def assert_can_delete( self, request, resource : ShareableModel ) -> None:
        PermissionResolver().verify_access( resource, request.user.pk, PermissionAction.DELETE )
