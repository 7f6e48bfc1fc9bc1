import json

import pytest
from django.core.files.storage import default_storage

from api.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from cars import services
from cars.models import Car

from .conftest import car_draft, make_image

pytestmark = pytest.mark.django_db


class TestSubmitCar:
    def test_new_listing_waits_for_approval(self, owner):
        car = services.submit_car(owner, car_draft(), make_image())

        assert car.status == Car.Status.PENDING
        assert car.available is True
        assert car.rating == 0
        assert car.owner == owner
        assert list(car.features.values_list('name', flat=True)) == ['Air conditioning', 'Bluetooth']
        assert default_storage.exists(car.image.name)

    def test_customer_cannot_submit(self, customer):
        with pytest.raises(AuthorizationError):
            services.submit_car(customer, car_draft(), make_image())
        assert not Car.objects.exists()

    def test_image_is_required(self, owner):
        with pytest.raises(ValidationError) as excinfo:
            services.submit_car(owner, car_draft(), None)
        assert 'image' in excinfo.value.detail

    @pytest.mark.parametrize('features', [5, {'a': 1}])
    def test_features_must_be_a_list(self, owner, features):
        with pytest.raises(ValidationError) as excinfo:
            services.submit_car(owner, car_draft(features=features), make_image())

        assert 'features' in excinfo.value.detail
        assert not Car.objects.exists()

    def test_features_object_over_http(self, owner, client_for):
        data = car_draft(features={'a': 1})

        response = client_for(owner).post('/api/cars/', data, format='json')

        assert response.status_code == 400
        assert 'features' in response.data['errors']

    def test_bad_category_is_rejected(self, owner):
        with pytest.raises(ValidationError) as excinfo:
            services.submit_car(owner, car_draft(category='Spaceship'), make_image())
        assert 'category' in excinfo.value.detail
        assert not Car.objects.exists()

    def test_post_multipart(self, owner, client_for):
        data = car_draft(features=json.dumps(['GPS', 'Heated seats']))
        data['image'] = make_image()

        response = client_for(owner).post('/api/cars/', data, format='multipart')

        assert response.status_code == 201
        assert response.data['car']['status'] == 'pending'
        assert response.data['car']['features'] == ['GPS', 'Heated seats']
        assert response.data['car']['owner']['email'] == owner.email

    def test_post_requires_owner(self, customer, client_for):
        data = car_draft(features=json.dumps([]))
        data['image'] = make_image()

        response = client_for(customer).post('/api/cars/', data, format='multipart')

        assert response.status_code == 403
        assert response.data == {'message': 'Access denied'}


class TestListings:
    def test_public_catalogue_only_shows_approved(self, client_for, car, pending_car):
        response = client_for().get('/api/cars/')

        assert response.status_code == 200
        assert [c['id'] for c in response.data] == [car.pk]

    def test_owner_sees_own_cars_in_any_status(self, owner, other_owner, car, pending_car):
        assert set(services.list_owned_cars(owner)) == {car, pending_car}
        assert list(services.list_owned_cars(other_owner)) == []

    def test_pending_queue_is_admin_only(self, admin_user, owner, car, pending_car, client_for):
        assert list(services.list_pending_cars(admin_user)) == [pending_car]
        assert client_for(owner).get('/api/cars/pending/').status_code == 403


class TestReview:
    def test_approve_notifies_owner(self, admin_user, pending_car, mailoutbox, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            car = services.approve_car(admin_user, pending_car.pk)

        assert car.status == Car.Status.APPROVED
        assert len(mailoutbox) == 1
        assert mailoutbox[0].to == ['owner@example.com']
        assert mailoutbox[0].subject == 'Your Car Renault Clio Has Been Approved!'

    def test_approve_then_reject(self, admin_user, pending_car, client_for):
        client = client_for(admin_user)
        client.put(f'/api/cars/approve/{pending_car.pk}/')

        response = client.put(f'/api/cars/reject/{pending_car.pk}/', {'rejection_reason': 'bad photos'}, format='json')

        assert response.status_code == 200
        pending_car.refresh_from_db()
        assert pending_car.status == Car.Status.REJECTED
        assert pending_car.rejection_reason == 'bad photos'

    def test_definitive_rejection_default_reason(self, admin_user, pending_car, mailoutbox,
                                                 django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            car = services.reject_car(admin_user, pending_car.pk, definitive=True)

        assert car.rejection_reason == 'Permanently rejected'
        assert mailoutbox[0].subject == 'Update on Your Car Renault Clio'
        assert 'cannot be resubmitted' in mailoutbox[0].body

    def test_reject_without_reason(self, admin_user, pending_car):
        car = services.reject_car(admin_user, pending_car.pk)

        assert car.status == Car.Status.REJECTED
        assert car.rejection_reason is None

    def test_owner_cannot_review(self, owner, pending_car):
        with pytest.raises(AuthorizationError):
            services.approve_car(owner, pending_car.pk)
        pending_car.refresh_from_db()
        assert pending_car.status == Car.Status.PENDING

    def test_unknown_car(self, admin_user, client_for):
        response = client_for(admin_user).put('/api/cars/approve/9999/')

        assert response.status_code == 404
        assert response.data == {'message': 'Car not found'}


class TestEditCar:
    def test_edit_resubmits_rejected_car(self, owner, admin_user, pending_car, mailoutbox,
                                        django_capture_on_commit_callbacks):
        services.reject_car(admin_user, pending_car.pk, reason='bad photos')

        with django_capture_on_commit_callbacks(execute=True):
            car = services.edit_car(owner, pending_car.pk, car_draft(price='50.00', features=['GPS']))

        car.refresh_from_db()
        assert car.status == Car.Status.PENDING
        assert car.rejection_reason is None
        assert car.brand == 'Toyota'
        assert str(car.price) == '50.00'
        assert list(car.features.values_list('name', flat=True)) == ['GPS']
        assert mailoutbox[-1].subject == 'Your Car Toyota Yaris Has Been Resubmitted'

    def test_other_owner_cannot_edit(self, other_owner, pending_car):
        with pytest.raises(AuthorizationError) as excinfo:
            services.edit_car(other_owner, pending_car.pk, car_draft())

        assert excinfo.value.detail == 'Unauthorized to edit this car'
        pending_car.refresh_from_db()
        assert pending_car.brand == 'Renault'

    def test_approved_car_cannot_be_edited(self, owner, car):
        with pytest.raises(ConflictError):
            services.edit_car(owner, car.pk, car_draft(brand='Fiat'))
        car.refresh_from_db()
        assert car.brand == 'Toyota'

    def test_new_image_replaces_old_one(self, owner):
        car = services.submit_car(owner, car_draft(), make_image('first.png'))
        old_name = car.image.name

        car = services.edit_car(owner, car.pk, car_draft(), make_image('second.png', color='blue'))

        assert car.image.name != old_name
        assert default_storage.exists(car.image.name)
        assert not default_storage.exists(old_name)

    def test_edit_over_http(self, owner, pending_car, client_for):
        response = client_for(owner).put(
            f'/api/cars/edit/{pending_car.pk}/', car_draft(brand='Peugeot'), format='json'
        )

        assert response.status_code == 200
        assert response.data['car']['brand'] == 'Peugeot'
        assert response.data['car']['status'] == 'pending'


class TestDeleteByIds:
    def test_deletes_cars_and_images(self, admin_user, owner):
        first = services.submit_car(owner, car_draft(), make_image('a.png'))
        second = services.submit_car(owner, car_draft(), make_image('b.png'))
        image_name = first.image.name

        result = services.delete_cars_by_ids(admin_user, [first.pk, str(second.pk), 424242])

        assert result['deletedCount'] == 2
        assert sorted(result['deletedIds']) == sorted([first.pk, second.pk])
        assert not Car.objects.exists()
        assert not default_storage.exists(image_name)

    def test_malformed_ids(self, admin_user, car):
        with pytest.raises(ValidationError) as excinfo:
            services.delete_cars_by_ids(admin_user, [car.pk, 'abc', -3, True])

        assert len(excinfo.value.detail['ids']) == 3
        assert Car.objects.filter(pk=car.pk).exists()

    def test_id_beyond_primary_key_range(self, admin_user, car):
        with pytest.raises(ValidationError) as excinfo:
            services.delete_cars_by_ids(admin_user, [car.pk, 10 ** 20])

        assert len(excinfo.value.detail['ids']) == 1
        assert Car.objects.filter(pk=car.pk).exists()

    def test_largest_primary_key_is_accepted(self, admin_user):
        with pytest.raises(NotFoundError):
            services.delete_cars_by_ids(admin_user, [services.MAX_CAR_ID])

    def test_nothing_matched(self, admin_user):
        with pytest.raises(NotFoundError):
            services.delete_cars_by_ids(admin_user, [9999])

    def test_over_http(self, admin_user, car, client_for):
        response = client_for(admin_user).post('/api/cars/delete-by-ids/', {'ids': [car.pk]}, format='json')

        assert response.status_code == 200
        assert response.data == {
            'message': 'Cars deleted successfully',
            'deletedCount': 1,
            'deletedIds': [car.pk],
        }

    def test_empty_list(self, admin_user, client_for):
        response = client_for(admin_user).post('/api/cars/delete-by-ids/', {'ids': []}, format='json')

        assert response.status_code == 400
        assert response.data['message'] == 'Validation failed'
