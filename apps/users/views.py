"""User API views."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from . import services
from .serializers import UserSerializer, UserUpdateSerializer

User = get_user_model()


class UserViewSet(viewsets.ModelViewSet):
    """Account management.

    - any authenticated user can list and read profiles
    - ``PUT``/``PATCH`` change only the fields sent, and only on your own account
    - ``validUser`` confirms that the bearer token is still accepted
    """

    serializer_class = UserSerializer
    queryset = User.objects.all()
    lookup_value_regex = r"\d+"
    http_method_names = ["get", "put", "patch", "delete", "head", "options"]

    def get_object(self):  # type: ignore
        return services.get_user(self.kwargs["pk"])

    @extend_schema(request=UserUpdateSerializer, responses={200: UserSerializer})
    def update(self, request, *args, **kwargs):  # type: ignore
        user = self.get_object()
        serializer = UserUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = services.update_user(request.user, user, serializer.validated_data)
        return Response(UserSerializer(user).data)

    def partial_update(self, request, *args, **kwargs):  # type: ignore
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        services.delete_user(request.user, self.get_object())
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["get"])
    def role(self, request, pk=None):
        """Role name of the user (``USER`` or ``OWNER``)."""
        user = self.get_object()
        return Response({"message": user.role})

    @action(detail=False, methods=["get"], url_path="validUser", url_name="valid-user")
    def valid_user(self, request):
        return Response({"token": "valid"})
