"""
Tests for user registration, login and account management
"""
import pytest

from apps.core.exceptions import ConflictException
from apps.users.models import Role, User
from apps.users.services import UserService
from tests.conftest import PASSWORD, make_user

pytestmark = pytest.mark.django_db


class TestRegistration:

    def test_register_returns_created_user_without_credential(self, api_client, registration_payload):
        response = api_client.post('/api/v1/users/register', registration_payload, format='json')

        assert response.status_code == 201
        body = response.json()
        assert body['email'] == "meera@groceteria.test"
        assert body['isActive'] is True
        assert body['role'] == "USER"
        assert body['createdAt'] is not None
        assert 'password' not in body

    def test_password_is_stored_hashed(self, api_client, registration_payload):
        api_client.post('/api/v1/users/register', registration_payload, format='json')

        user = User.objects.get(email="meera@groceteria.test")
        assert user.password != PASSWORD
        assert user.check_password(PASSWORD)

    def test_duplicate_email_is_conflict(self, api_client, registration_payload):
        first = api_client.post('/api/v1/users/register', registration_payload, format='json')
        second = api_client.post('/api/v1/users/register', registration_payload, format='json')

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()['errorCode'] == "CONFLICT"
        assert second.json()['errors'] == ["Email already exists"]
        assert User.objects.filter(email="meera@groceteria.test").count() == 1

    def test_invalid_fields_are_all_reported(self, api_client, registration_payload):
        registration_payload.update({"email": "not-an-email", "password": "weak"})
        del registration_payload['firstName']

        response = api_client.post('/api/v1/users/register', registration_payload, format='json')

        assert response.status_code == 400
        body = response.json()
        assert body['errorCode'] == "VALIDATION_ERROR"
        assert body['message'] == "Validation failed"
        fields = {error.split(':')[0] for error in body['errors']}
        assert {'firstName', 'email', 'password'} <= fields


class TestLogin:

    def test_login_with_valid_credentials(self, api_client, shopper):
        response = api_client.post(
            '/api/v1/users/login',
            {"email": shopper.email, "password": PASSWORD},
            format='json'
        )

        assert response.status_code == 200
        assert response.json()['userId'] == shopper.id

    def test_wrong_password_looks_like_unknown_email(self, api_client, shopper):
        wrong_password = api_client.post(
            '/api/v1/users/login',
            {"email": shopper.email, "password": "Wrong@1234"},
            format='json'
        )
        unknown_email = api_client.post(
            '/api/v1/users/login',
            {"email": "nobody@groceteria.test", "password": PASSWORD},
            format='json'
        )

        assert wrong_password.status_code == 404
        assert unknown_email.status_code == 404
        assert wrong_password.json()['errorCode'] == unknown_email.json()['errorCode'] == "RESOURCE_NOT_FOUND"

    def test_deactivated_account_cannot_log_in(self, api_client, shopper):
        shopper.is_active = False
        shopper.save()

        response = api_client.post(
            '/api/v1/users/login',
            {"email": shopper.email, "password": PASSWORD},
            format='json'
        )

        assert response.status_code == 400
        assert response.json()['errors'] == ["User account is deactivated"]


class TestAccountManagement:

    def test_update_overwrites_profile_and_role(self, api_client, shopper, registration_payload):
        payload = {k: v for k, v in registration_payload.items() if k not in ('email', 'password')}
        payload['role'] = "VENDOR"

        response = api_client.put(f'/api/v1/users/{shopper.id}', payload, format='json')

        assert response.status_code == 200
        shopper.refresh_from_db()
        assert shopper.first_name == "Meera"
        assert shopper.district == "Chennai"
        assert shopper.role == Role.VENDOR
        assert shopper.email == "shopper@groceteria.test"

    def test_toggle_status_flips_active_flag(self, api_client, shopper):
        first = api_client.put(f'/api/v1/users/{shopper.id}/toggle-status')
        second = api_client.put(f'/api/v1/users/{shopper.id}/toggle-status')

        assert first.json()['isActive'] is False
        assert second.json()['isActive'] is True

    def test_check_email(self, api_client, shopper):
        assert api_client.get(f'/api/v1/users/check-email/{shopper.email}').json() is True
        assert api_client.get('/api/v1/users/check-email/ghost@groceteria.test').json() is False

    def test_forgot_password_returns_account(self, api_client, shopper):
        response = api_client.post('/api/v1/users/forgot-password', {"email": shopper.email}, format='json')

        assert response.status_code == 200
        assert response.json()['userId'] == shopper.id

    def test_role_listings(self, api_client, vendor, shopper):
        vendors = api_client.get('/api/v1/users/vendors').json()
        regulars = api_client.get('/api/v1/users/regular-users').json()

        assert [u['userId'] for u in vendors] == [vendor.id]
        assert [u['userId'] for u in regulars] == [shopper.id]

    def test_active_listing_filters_by_role(self, api_client, vendor, shopper):
        make_user("sleepy@groceteria.test", is_active=False)

        active = api_client.get('/api/v1/users/active').json()
        active_vendors = api_client.get('/api/v1/users/active?role=vendor').json()

        assert {u['userId'] for u in active} == {vendor.id, shopper.id}
        assert [u['userId'] for u in active_vendors] == [vendor.id]

    def test_district_listing(self, api_client, shopper):
        make_user("chennai@groceteria.test", district="Chennai")

        response = api_client.get('/api/v1/users/district/Pune')

        assert [u['userId'] for u in response.json()] == [shopper.id]

    def test_delete_user_without_dependents(self, api_client, shopper):
        response = api_client.delete(f'/api/v1/users/{shopper.id}')

        assert response.status_code == 200
        assert not response.content
        assert api_client.get(f'/api/v1/users/{shopper.id}').status_code == 404

    def test_delete_user_with_dependents_is_refused(self, api_client, item):
        response = api_client.delete(f'/api/v1/users/{item.vendor_id}')

        assert response.status_code == 409
        assert "listed items" in response.json()['errors'][0]
        assert User.objects.filter(pk=item.vendor_id).exists()

    def test_service_delete_raises_conflict(self, item):
        with pytest.raises(ConflictException):
            UserService().delete(item.vendor_id)
