from django.urls import reverse
from rest_framework import status

from releases.models import Release
from releases.tests.factories import ReleaseFactory
from trackball.tests.base import TrackballAPITestCase


class TakedownAPITestCase(TrackballAPITestCase):
    def setUp(self):
        self.user = self.login()
        self.release = ReleaseFactory(user=self.user, status=Release.STATUS_APPROVED)
        self.url = reverse('release-takedown', args=[self.release.pk])

    def test_request_takedown(self):
        response = self.client.post(self.url)

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.release.refresh_from_db()
        self.assertTrue(self.release.takedown_requested)

    def test_request_takedown_twice(self):
        self.client.post(self.url)

        response = self.client.post(self.url)

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(response.data['display_code'], 'takedown_error_in_progress')

    def test_request_takedown_of_pending_release(self):
        self.release.status = Release.STATUS_PENDING
        self.release.save()

        response = self.client.post(self.url)

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(response.data['display_code'], 'takedown_error_generic')

    def test_missing_release(self):
        response = self.client.post(
            reverse('release-takedown', args=[self.release.pk + 1000])
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class TakedownReviewAPITestCase(TrackballAPITestCase):
    def setUp(self):
        self.login_admin()
        self.release = ReleaseFactory(
            status=Release.STATUS_APPROVED, takedown_requested=True
        )
        self.url = reverse('admin-release-takedown', args=[self.release.pk])

    def test_list_requests(self):
        ReleaseFactory(status=Release.STATUS_APPROVED)

        response = self.client.get(reverse('admin-takedowns'))

        self.assertEqual([r['id'] for r in response.data], [self.release.pk])

    def test_approve(self):
        response = self.client.post(self.url, {'approved': True}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], Release.STATUS_TAKEN_DOWN)
        self.assertFalse(response.data['takedown_requested'])
        self.assertEqual(self.release.user.notifications.count(), 1)

    def test_deny(self):
        response = self.client.post(
            self.url, {'approved': False, 'admin_notes': 'Under contract'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], Release.STATUS_APPROVED)

    def test_review_without_request(self):
        self.client.post(self.url, {'approved': True}, format='json')

        response = self.client.post(self.url, {'approved': True}, format='json')

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(response.data['display_code'], 'takedown_error_no_request')
