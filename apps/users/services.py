"""
User Service - registration, login and profile management

Handles:
- Registration with unique email and hashed credentials
- Login against the stored hash
- Profile updates, activation toggling and deletion
- Lookups by id, email, role, district and active flag
"""
import logging
from typing import Any, Dict, List

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError
from django.utils import timezone

from apps.core.exceptions import BadRequestException, ConflictException, ResourceNotFoundException
from apps.core.utils import get_or_not_found
from .models import Role, User

logger = logging.getLogger(__name__)


PROFILE_FIELDS = (
    'first_name',
    'last_name',
    'district',
    'state',
    'phone_number',
    'address',
    'zipcode',
    'role',
)

OPTIONAL_PROFILE_FIELDS = ('gender', 'date_of_birth')


class UserService:
    """
    Domain operations on User accounts.
    """

    def register(self, data: Dict[str, Any]) -> User:
        email = data['email']
        if self.email_exists(email):
            raise ConflictException("Email already exists")

        user = User(
            email=email,
            **{name: data[name] for name in PROFILE_FIELDS if name in data},
            **{name: data[name] for name in OPTIONAL_PROFILE_FIELDS if data.get(name) is not None},
        )
        user.set_password(data['password'])
        user.is_active = True
        try:
            with transaction.atomic():
                user.save()
        except IntegrityError:
            raise ConflictException("Email already exists")

        logger.info(f"Registered {user.role} account {user.id} ({user.email})")
        return user

    def authenticate(self, email: str, password: str) -> User:
        """
        Return the user whose email and password both match.

        An unknown email and a wrong password fail the same way so the
        response does not reveal which one was wrong.
        """
        user = User.objects.filter(email=email).first()
        if user is None or not user.check_password(password):
            raise ResourceNotFoundException("User", "email and password", email)

        if not user.is_active:
            raise BadRequestException("User account is deactivated")

        logger.info(f"User {user.id} logged in")
        return user

    def update(self, user_id: int, data: Dict[str, Any]) -> User:
        user = self.get_user(user_id)

        for name in PROFILE_FIELDS:
            if name in data:
                setattr(user, name, data[name])
        for name in OPTIONAL_PROFILE_FIELDS:
            if data.get(name) is not None:
                setattr(user, name, data[name])

        user.save()
        logger.info(f"Updated profile of user {user.id}")
        return user

    def get_user(self, user_id: int) -> User:
        return get_or_not_found(User, "User", "Id", user_id)

    def get_by_email(self, email: str) -> User:
        return get_or_not_found(User, "User", "email", email, email=email)

    def list_users(self) -> List[User]:
        return list(User.objects.all())

    def list_vendors(self) -> List[User]:
        return list(User.objects.filter(role=Role.VENDOR))

    def list_regular_users(self) -> List[User]:
        return list(User.objects.filter(role=Role.USER))

    def list_by_district(self, district: str) -> List[User]:
        return list(User.objects.filter(district=district))

    def list_active(self) -> List[User]:
        return list(User.objects.filter(is_active=True))

    def list_active_by_role(self, role: str) -> List[User]:
        if role not in Role.values:
            raise BadRequestException(f"Role must be one of: {', '.join(Role.values)}")
        return list(User.objects.filter(role=role, is_active=True))

    def email_exists(self, email: str) -> bool:
        return User.objects.filter(email=email).exists()

    def toggle_active(self, user_id: int) -> User:
        user = self.get_user(user_id)
        user.is_active = not user.is_active
        user.updated_at = timezone.now()
        user.save(update_fields=['is_active', 'updated_at'])

        logger.info(f"User {user.id} is now {'active' if user.is_active else 'inactive'}")
        return user

    @transaction.atomic
    def delete(self, user_id: int) -> None:
        """
        Hard-delete a user that owns nothing.

        Users with cart lines, orders, payments or listed items are refused
        so that no row is left pointing at a missing user.
        """
        user = self.get_user(user_id)

        dependents = self._dependents(user)
        if dependents:
            raise ConflictException(
                f"User {user_id} still has {', '.join(dependents)}; remove them before deleting the account"
            )

        try:
            user.delete()
        except ProtectedError as e:
            raise ConflictException(f"User {user_id} is still referenced: {e}")

        logger.info(f"Deleted user {user_id}")

    def _dependents(self, user: User) -> List[str]:
        dependents = []
        if user.cart_lines.exists():
            dependents.append("cart lines")
        if user.orders.exists():
            dependents.append("orders")
        if user.payments.exists():
            dependents.append("payments")
        if user.items.exists():
            dependents.append("listed items")
        return dependents
