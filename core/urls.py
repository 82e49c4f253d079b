"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("api/analytics/", views.analytics_api, name="analytics_api"),
    path("api/analytics/<str:chart>.svg", views.analytics_chart_svg, name="analytics_chart_svg"),
]
