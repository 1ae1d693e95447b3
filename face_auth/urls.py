# face_auth/urls.py
from django.urls import path
from face_auth.presentation.api import FaceAuthenticateAPIView

app_name = "face_auth"

urlpatterns = [
    path('face-auth/authenticate', FaceAuthenticateAPIView.as_view(), name='authenticate'),
]
