"""
URL configuration for the Groceteria backend
"""
from django.urls import path, re_path, include

from api.exceptions import endpoint_not_found

urlpatterns = [
    # API endpoints
    path('api/v1/', include('api.urls')),

    # Anything unmatched gets the JSON error body, whatever DEBUG is
    re_path(r'^.*$', endpoint_not_found),
]

handler404 = 'api.exceptions.endpoint_not_found'
handler500 = 'api.exceptions.server_error'
