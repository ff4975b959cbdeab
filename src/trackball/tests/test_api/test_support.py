from django.core import mail
from django.urls import reverse
from rest_framework import status

from trackball.models import SupportTicket
from trackball.tests.base import TrackballAPITestCase
from trackball.tests.factories import SupportTicketFactory


class SupportTicketAPITestCase(TrackballAPITestCase):
    def setUp(self):
        self.user = self.login()

    def test_open_ticket(self):
        response = self.client.post(
            reverse('support-tickets'),
            {
                'subject': 'Release stuck',
                'description': 'My release is pending for weeks',
                'priority': SupportTicket.PRIORITY_HIGH,
            },
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], SupportTicket.STATUS_OPEN)
        self.assertEqual(response.data['priority'], SupportTicket.PRIORITY_HIGH)
        self.assertEqual(len(response.data['messages']), 1)

    def test_other_users_ticket_is_hidden(self):
        ticket = SupportTicketFactory()

        response = self.client.get(reverse('support-ticket', args=[ticket.pk]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_add_message(self):
        ticket = SupportTicketFactory(user=self.user)

        response = self.client.post(
            reverse('support-ticket-messages', args=[ticket.pk]), {'message': 'Ping'}
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertFalse(response.data['is_admin_reply'])


class AdminSupportAPITestCase(TrackballAPITestCase):
    def setUp(self):
        self.admin = self.login_admin()
        self.ticket = SupportTicketFactory()

    def test_reply(self):
        response = self.client.post(
            reverse('admin-support-ticket-reply', args=[self.ticket.pk]),
            {'message': 'Fixed now', 'status': SupportTicket.STATUS_RESOLVED},
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['is_admin_reply'])
        self.ticket.refresh_from_db()
        self.assertEqual(self.ticket.status, SupportTicket.STATUS_RESOLVED)
        self.assertEqual(len(mail.outbox), 1)

    def test_list_by_status(self):
        SupportTicketFactory(status=SupportTicket.STATUS_CLOSED)

        response = self.client.get(
            reverse('admin-support-tickets'), {'status': SupportTicket.STATUS_OPEN}
        )

        self.assertEqual([t['id'] for t in response.data], [self.ticket.pk])
