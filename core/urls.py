"""
URL configuration for core project.

The `urlpatterns` list routes URLs to controller actions. Each app exposes
its own urlpatterns, namespaced by controller name, so that
Controller.redirect_to_action() can resolve '<controller>:<action>'.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('home.urls')),  # Home pages (Index, About, Contact)
]
