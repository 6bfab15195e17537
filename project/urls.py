"""
URL configuration for the robots.txt lite project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/

The settings pages are included before `admin.site.urls` because the admin
ends with a catch-all pattern.
"""
from django.contrib import admin
from django.urls import path

from robots_txt_lite.options_pages import site as options_site
from robots_txt_lite.views.system_views import robots_txt

urlpatterns = [
    path('admin/options/', options_site.urls),
    path('admin/', admin.site.urls),

    path('robots.txt', robots_txt, name='robots_txt'),
]
