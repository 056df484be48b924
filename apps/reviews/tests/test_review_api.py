"""API tests for reviews."""

from __future__ import annotations

from datetime import date

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.places.models import Place
from apps.reservations.models import Reservation
from apps.reviews.models import Review
from apps.users.models import User


class ReviewAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(
            email='owner@example.com',
            username='owner',
            phone='+77000000001',
            password='StrongPass123',
            role=User.Role.OWNER,
        )
        self.guest = User.objects.create_user(
            email='guest@example.com',
            username='guest',
            phone='+77000000002',
            password='StrongPass123',
        )
        self.stranger = User.objects.create_user(
            email='stranger@example.com',
            username='stranger',
            phone='+77000000003',
            password='StrongPass123',
        )
        self.place = Place.objects.create(
            owner=self.owner,
            name='Desert camp',
            property_type=Place.PropertyType.CAMPSITE,
            description='Tents under the stars',
            cost=40,
            country='Morocco',
            city='Merzouga',
            address='Erg Chebbi',
            latitude=31.1,
            longitude=-4.0,
            area=30,
            guests=2,
            bedrooms=1,
            beds=1,
            bathrooms=1,
        )
        Reservation.objects.create(
            user=self.guest, place=self.place, check_in=date(2030, 3, 1), check_out=date(2030, 3, 4)
        )
        self.url = reverse('reviews:place-reviews', args=[self.place.id])

    def _review(self, user=None, **overrides) -> Review:
        data = {'user': user or self.guest, 'place': self.place, 'rating': Review.Rating.FOUR_STARS, 'comment': 'Nice'}
        data.update(overrides)
        return Review.objects.create(**data)

    def test_guest_with_reservation_reviews(self) -> None:
        self.client.force_authenticate(self.guest)
        response = self.client.post(self.url, {'rating': 'FIVE_STARS', 'comment': 'Magical'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data['rating'], 'FIVE_STARS')
        self.assertEqual(response.data['stars'], 5)
        self.assertEqual(response.data['username'], 'guest')

    def test_review_requires_reservation(self) -> None:
        self.client.force_authenticate(self.stranger)
        response = self.client.post(self.url, {'rating': 'ONE_STAR'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertFalse(Review.objects.exists())

    def test_duplicate_review_conflicts(self) -> None:
        self._review()
        self.client.force_authenticate(self.guest)
        response = self.client.post(self.url, {'rating': 'TWO_STARS'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(Review.objects.count(), 1)

    def test_unknown_rating(self) -> None:
        self.client.force_authenticate(self.guest)
        response = self.client.post(self.url, {'rating': 'SIX_STARS'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertTrue(response.data['message'].startswith('Invalid rating.'))

    def test_listing_by_place_user_and_globally(self) -> None:
        review = self._review()
        self.client.force_authenticate(self.stranger)

        by_place = self.client.get(self.url)
        self.assertEqual([r['id'] for r in by_place.data], [review.id])

        by_user = self.client.get(reverse('reviews:user-reviews', args=[self.guest.id]))
        self.assertEqual([r['id'] for r in by_user.data], [review.id])

        everything = self.client.get(reverse('reviews:review-list'))
        self.assertEqual(everything.status_code, status.HTTP_200_OK, everything.data)
        self.assertEqual(len(everything.data), 1)

        none = self.client.get(reverse('reviews:user-reviews', args=[self.stranger.id]))
        self.assertEqual(none.data, [])

    def test_detail_scoped_to_parent(self) -> None:
        review = self._review()
        self.client.force_authenticate(self.guest)
        ok = self.client.get(reverse('reviews:place-review-detail', args=[self.place.id, review.id]))
        self.assertEqual(ok.status_code, status.HTTP_200_OK, ok.data)

        wrong_user = self.client.get(reverse('reviews:user-review-detail', args=[self.stranger.id, review.id]))
        self.assertEqual(wrong_user.status_code, status.HTTP_404_NOT_FOUND)

    def test_author_of_review(self) -> None:
        review = self._review()
        self.client.force_authenticate(self.owner)
        response = self.client.get(reverse('reviews:review-author', args=[review.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data['id'], self.guest.id)

        missing = self.client.get(reverse('reviews:review-author', args=[9999]))
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)

    def test_author_updates_and_deletes(self) -> None:
        review = self._review()
        detail = reverse('reviews:user-review-detail', args=[self.guest.id, review.id])
        self.client.force_authenticate(self.guest)

        response = self.client.put(detail, {'comment': 'Even better'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        review.refresh_from_db()
        self.assertEqual(review.comment, 'Even better')
        self.assertEqual(review.rating, Review.Rating.FOUR_STARS)

        deleted = self.client.delete(detail)
        self.assertEqual(deleted.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Review.objects.exists())

    def test_other_users_cannot_modify(self) -> None:
        review = self._review()
        detail = reverse('reviews:user-review-detail', args=[self.guest.id, review.id])
        self.client.force_authenticate(self.stranger)

        response = self.client.put(detail, {'comment': 'Spam'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN, response.data)
        deleted = self.client.delete(detail)
        self.assertEqual(deleted.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Review.objects.filter(pk=review.id, comment='Nice').exists())
