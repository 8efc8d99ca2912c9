"""
Home URL Configuration
"""
from django.urls import path
from .controllers import HomeController

app_name = 'home'

urlpatterns = [
    path('', HomeController.as_view('Index'), name='index'),
    path('about/', HomeController.as_view('About'), name='about'),
    path('contact/', HomeController.as_view('Contact'), name='contact'),
]
