"""Views for authentication flows (register, login)."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.permissions import AllowAny  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from . import services
from .auth_serializers import AuthResponseSerializer, LoginSerializer, RegisterSerializer


def _auth_payload(user) -> dict:
    return {"id": user.pk, **services.tokens_for_user(user)}


class RegisterView(APIView):
    permission_classes = [AllowAny]
    authentication_classes: list = []

    @extend_schema(request=RegisterSerializer, responses={201: AuthResponseSerializer})
    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.register_user(**serializer.validated_data)
        return Response(_auth_payload(user), status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes: list = []

    def get_authenticate_header(self, request):  # type: ignore
        # Failed logins answer 401 with a Bearer challenge.
        return 'Bearer realm="api"'

    @extend_schema(request=LoginSerializer, responses={200: AuthResponseSerializer})
    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.authenticate_user(**serializer.validated_data)
        return Response(_auth_payload(user), status=status.HTTP_200_OK)
