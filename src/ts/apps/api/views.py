from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView


class TsApiView( APIView ):
    """
    Base class for sharing API views.

    Successful (2xx) response data is wrapped as {"data": ...}. Error
    responses pass through unchanged.
    """

    def finalize_response(
        self,
        request: Request,
        response: Response,
        *args,
        **kwargs
    ) -> Response:
        response = super().finalize_response( request, response, *args, **kwargs )

        if getattr( response, 'data', None ) is not None and 200 <= response.status_code < 300:
            response.data = {
                'data': response.data,
            }
        return response
