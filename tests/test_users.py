import smtplib

import pytest

from api.exceptions import AuthorizationError, NotFoundError, ValidationError
from users import services
from users.models import User

pytestmark = pytest.mark.django_db


def test_approve_owner_activates_account(admin_user, pending_owner, mailoutbox, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        user = services.approve_owner(admin_user, pending_owner.pk)

    assert user.status == User.Status.ACTIVE
    pending_owner.refresh_from_db()
    assert pending_owner.status == User.Status.ACTIVE
    assert mailoutbox[0].to == ['pending.owner@example.com']
    assert mailoutbox[0].subject == 'Your Owner Account Has Been Approved!'


def test_only_owners_can_be_approved(admin_user, customer):
    with pytest.raises(ValidationError) as excinfo:
        services.approve_owner(admin_user, customer.pk)

    assert 'role' in excinfo.value.detail


def test_approve_unknown_user(admin_user):
    with pytest.raises(NotFoundError):
        services.approve_owner(admin_user, 9999)


def test_non_admin_cannot_approve(owner, pending_owner):
    with pytest.raises(AuthorizationError):
        services.approve_owner(owner, pending_owner.pk)

    pending_owner.refresh_from_db()
    assert pending_owner.status == User.Status.PENDING


def test_decline_deletes_and_notifies(admin_user, pending_owner, mailoutbox, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        services.decline_user(admin_user, pending_owner.pk)

    assert not User.objects.filter(pk=pending_owner.pk).exists()
    assert mailoutbox[0].to == ['pending.owner@example.com']
    assert mailoutbox[0].subject == 'Your Registration Has Been Declined'


def test_decline_unknown_user_sends_nothing(admin_user, mailoutbox, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        with pytest.raises(NotFoundError):
            services.decline_user(admin_user, 9999)

    assert mailoutbox == []


def test_decline_survives_mail_failure(admin_user, pending_owner, monkeypatch, django_capture_on_commit_callbacks):
    def broken_send_mail(*args, **kwargs):
        raise smtplib.SMTPException('relay down')

    monkeypatch.setattr('notifications.dispatcher.send_mail', broken_send_mail)

    with django_capture_on_commit_callbacks(execute=True):
        services.decline_user(admin_user, pending_owner.pk)

    assert not User.objects.filter(pk=pending_owner.pk).exists()


class TestAdminEndpoints:
    def test_list_users(self, admin_user, customer, client_for):
        response = client_for(admin_user).get('/api/users/')

        assert response.status_code == 200
        emails = {u['email'] for u in response.data}
        assert emails == {'admin@example.com', 'customer@example.com'}
        assert all('password' not in u for u in response.data)

    def test_list_users_requires_admin(self, customer, client_for):
        response = client_for(customer).get('/api/users/')

        assert response.status_code == 403

    def test_approve(self, admin_user, pending_owner, client_for):
        response = client_for(admin_user).put(f'/api/users/approve/{pending_owner.pk}/')

        assert response.status_code == 200
        assert response.data['message'] == 'Owner approved'
        assert response.data['user']['status'] == 'active'

    def test_approve_customer_is_a_validation_error(self, admin_user, customer, client_for):
        response = client_for(admin_user).put(f'/api/users/approve/{customer.pk}/')

        assert response.status_code == 400
        assert response.data['message'] == 'Validation failed'

    def test_decline(self, admin_user, pending_owner, client_for):
        response = client_for(admin_user).delete(f'/api/users/decline/{pending_owner.pk}/')

        assert response.status_code == 200
        assert response.data == {'message': 'User declined and deleted'}

    def test_decline_unknown(self, admin_user, client_for):
        response = client_for(admin_user).delete('/api/users/decline/9999/')

        assert response.status_code == 404
        assert response.data == {'message': 'User not found'}


class TestUserManager:
    def test_owner_starts_pending(self, pending_owner):
        assert pending_owner.status == User.Status.PENDING

    def test_customer_starts_active(self, customer):
        assert customer.status == User.Status.ACTIVE

    def test_email_is_lowercased(self, db):
        user = User.objects.create_user(email='Mixed@Example.COM', password='secret-pass', name='M', phone='1')

        assert user.email == 'mixed@example.com'

    def test_superuser_is_admin(self, admin_user):
        assert admin_user.role == User.Role.ADMIN
        assert admin_user.is_staff and admin_user.is_superuser
