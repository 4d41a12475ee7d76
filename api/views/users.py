"""
User account endpoints: registration, login, profile and account status
"""
import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.users.services import UserService
from api.serializers import (
    EmailRequestSerializer,
    LoginRequestSerializer,
    UserProfileSerializer,
    UserRegistrationSerializer,
    UserSerializer,
)
from .base import parse_body

logger = logging.getLogger(__name__)


class UserRegisterView(APIView):
    """
    Register a shopper or vendor account.
    """
    permission_classes = [AllowAny]

    def post(self, request):
        data = parse_body(request, UserRegistrationSerializer)
        logger.info(f"Registration request for {data['email']} as {data['role']}")

        user = UserService().register(data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class UserLoginView(APIView):
    """
    Check an email/password pair and return the matching account.
    """
    permission_classes = [AllowAny]

    def post(self, request):
        data = parse_body(request, LoginRequestSerializer)
        user = UserService().authenticate(data['email'], data['password'])
        return Response(UserSerializer(user).data)


class UserForgotPasswordView(APIView):
    """
    Look up the account behind an email before a password reset.
    """
    permission_classes = [AllowAny]

    def post(self, request):
        data = parse_body(request, EmailRequestSerializer)
        user = UserService().get_by_email(data['email'])
        return Response(UserSerializer(user).data)


class UserListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        users = UserService().list_users()
        return Response(UserSerializer(users, many=True).data)


class UserDetailView(APIView):
    """
    Fetch, replace or delete one account.
    """
    permission_classes = [AllowAny]

    def get(self, request, user_id):
        user = UserService().get_user(user_id)
        return Response(UserSerializer(user).data)

    def put(self, request, user_id):
        data = parse_body(request, UserProfileSerializer)
        user = UserService().update(user_id, data)
        return Response(UserSerializer(user).data)

    def delete(self, request, user_id):
        UserService().delete(user_id)
        return Response(status=status.HTTP_200_OK)


class VendorListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(UserSerializer(UserService().list_vendors(), many=True).data)


class RegularUserListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(UserSerializer(UserService().list_regular_users(), many=True).data)


class ActiveUserListView(APIView):
    """
    Active accounts, optionally narrowed to one role with ?role=.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        role = request.query_params.get('role')
        service = UserService()
        users = service.list_active_by_role(role.upper()) if role else service.list_active()
        return Response(UserSerializer(users, many=True).data)


class UsersByDistrictView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, district):
        return Response(UserSerializer(UserService().list_by_district(district), many=True).data)


class UserToggleStatusView(APIView):
    """
    Flip an account between active and deactivated.
    """
    permission_classes = [AllowAny]

    def put(self, request, user_id):
        user = UserService().toggle_active(user_id)
        return Response(UserSerializer(user).data)


class CheckEmailView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, email):
        return Response(UserService().email_exists(email))
