from django.contrib import admin
from django.urls import include, re_path

from trackball.urls.api import urlpatterns as api_urlpatterns


admin.site.site_header = 'Trackball admin'

urlpatterns = [
    re_path(r'^admin/', admin.site.urls),
    re_path(r'^api/', include(api_urlpatterns)),
]
