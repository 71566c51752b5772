from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    path('', views.index, name='index'),

    # Onboarding
    path('account-type/', views.account_type, name='account-type'),
    path('complete-account/', views.complete_account, name='complete-account'),
    path('welcome/', views.welcome, name='welcome'),

    # Profile ('me' resolves to the current user)
    path('<str:user_id>/', views.show, name='show'),
    path('<str:user_id>/edit/', views.edit, name='edit'),
    path('<str:user_id>/update/', views.update_profile, name='update'),

    # Chat account
    path('<str:user_id>/chat/', views.chat, name='chat'),
    path('<str:user_id>/chat/reset/', views.reset_chat, name='reset-chat'),
]
