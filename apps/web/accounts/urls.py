"""
URL routing for auth endpoints.
"""

from django.urls import path

from apps.web.accounts import views

app_name = "accounts"

urlpatterns = [
    path("register", views.register, name="register"),
    path("login", views.login, name="login"),
]
