from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'checkins'

# Router for ViewSets
router = DefaultRouter()
router.register(r'', views.CheckinViewSet, basename='checkin')

urlpatterns = [
    # Checkin ViewSet routes
    # GET    /api/checkins/                - List startup's checkins
    # POST   /api/checkins/                - Create checkin
    # GET    /api/checkins/{id}/           - Get checkin
    # PATCH  /api/checkins/{id}/           - Update checkin

    # Custom checkin actions
    # GET    /api/checkins/window/         - Current window state
    # GET    /api/checkins/current/        - Current cycle's checkin
    # GET    /api/checkins/{id}/comments/  - List comments
    # POST   /api/checkins/{id}/comments/  - Add comment

    # Include router URLs
    path('', include(router.urls)),
]
