import pytest

from testimonials.models import Testimonial

pytestmark = pytest.mark.django_db


def make_testimonial(**overrides):
    data = {
        'name': 'Carla',
        'location': 'Alger',
        'rating': 5,
        'comment': 'Smooth pickup, clean car.',
        'avatar': 'https://example.com/carla.png',
    }
    data.update(overrides)
    return data


def test_anyone_can_read(customer, client_for):
    Testimonial.objects.create(user=customer, **make_testimonial())

    response = client_for().get('/api/testimonials/')

    assert response.status_code == 200
    assert response.data[0]['name'] == 'Carla'
    assert response.data[0]['user']['id'] == customer.pk


def test_signed_in_user_can_post(customer, client_for):
    response = client_for(customer).post('/api/testimonials/', make_testimonial(), format='json')

    assert response.status_code == 201
    assert Testimonial.objects.get().user == customer


def test_anonymous_cannot_post(client_for):
    response = client_for().post('/api/testimonials/', make_testimonial(), format='json')

    assert response.status_code == 401
    assert not Testimonial.objects.exists()


@pytest.mark.parametrize('rating', [0, 6])
def test_rating_out_of_range(customer, client_for, rating):
    response = client_for(customer).post('/api/testimonials/', make_testimonial(rating=rating), format='json')

    assert response.status_code == 400
    assert 'rating' in response.data['errors']
