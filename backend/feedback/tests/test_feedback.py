"""
Feedback Tests

Submission, the staff-wide FEEDBACK notification and the staff review
endpoints.
"""
import pytest

from feedback.exceptions import FeedbackError, FeedbackNotFoundError
from feedback.models import Feedback
from feedback.services import FeedbackService
from notifications.models import Notification


@pytest.mark.django_db
class TestFeedbackService:

    def test_submit_notifies_every_active_staff_member(
        self, student, staff_user, second_staff_user, django_capture_on_commit_callbacks
    ):
        with django_capture_on_commit_callbacks(execute=True):
            feedback = FeedbackService.submit_feedback(student, "The samosas were great today", 4)

        assert feedback.rating == 4
        notes = Notification.objects.filter(type=Notification.NotificationType.FEEDBACK)
        assert {note.recipient for note in notes} == {staff_user, second_staff_user}
        assert all(note.recipient_type == Notification.RecipientType.STAFF for note in notes)
        assert all(note.order is None for note in notes)
        assert not Notification.objects.filter(recipient=student).exists()

    def test_notification_quotes_first_30_characters(
        self, student, staff_user, django_capture_on_commit_callbacks
    ):
        message = "Please add more vegetarian options to the lunch menu"

        with django_capture_on_commit_callbacks(execute=True):
            FeedbackService.submit_feedback(student, message)

        note = Notification.objects.get(recipient=staff_user)
        assert note.message == f'New feedback received from Test Student: "{message[:30]}..."'

    def test_no_notification_before_commit(self, student, staff_user, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=False) as callbacks:
            FeedbackService.submit_feedback(student, "Queue was long")

        assert len(callbacks) == 1
        assert not Notification.objects.exists()

    def test_rating_defaults_to_five(self, student):
        assert FeedbackService.submit_feedback(student, "Nice").rating == 5

    @pytest.mark.parametrize('message, rating', [('   ', 3), ('Fine', 0), ('Fine', 6)])
    def test_invalid_submission_rejected(self, student, message, rating):
        with pytest.raises(FeedbackError):
            FeedbackService.submit_feedback(student, message, rating)
        assert not Feedback.objects.exists()

    def test_notification_failure_keeps_feedback(
        self, student, staff_user, monkeypatch, django_capture_on_commit_callbacks
    ):
        def broken_create(**kwargs):
            raise RuntimeError("notification store unavailable")

        monkeypatch.setattr('notifications.models.Notification.objects.create', broken_create)

        with django_capture_on_commit_callbacks(execute=True):
            feedback = FeedbackService.submit_feedback(student, "Still saved")

        assert Feedback.objects.filter(pk=feedback.pk).exists()

    def test_delete_missing_feedback(self, db):
        with pytest.raises(FeedbackNotFoundError):
            FeedbackService.delete_feedback(999999)


@pytest.mark.django_db
class TestFeedbackAPI:

    def test_student_submits(self, student_client, student):
        response = student_client.post(
            '/api/feedback/submit/', {'message': 'Tea was cold', 'rating': 2}, format='json'
        )

        assert response.status_code == 201
        assert response.data['message'] == 'Feedback submitted successfully'
        assert Feedback.objects.get().student == student

    def test_message_required(self, student_client):
        response = student_client.post('/api/feedback/submit/', {'rating': 2}, format='json')

        assert response.status_code == 400
        assert response.data['errors']['message'] == ['Feedback message is required']

    def test_staff_cannot_submit(self, staff_client):
        response = staff_client.post('/api/feedback/submit/', {'message': 'Hi'}, format='json')
        assert response.status_code == 403

    def test_staff_lists_newest_first(self, staff_client, student, other_student):
        FeedbackService.submit_feedback(student, "First")
        FeedbackService.submit_feedback(other_student, "Second")

        response = staff_client.get('/api/feedback/all/')

        assert response.status_code == 200
        assert [entry['message'] for entry in response.data] == ['Second', 'First']
        assert response.data[1]['student_identifier'] == 'CS2024001'

    def test_students_cannot_list(self, student_client):
        assert student_client.get('/api/feedback/all/').status_code == 403

    def test_staff_deletes(self, staff_client, student):
        feedback = FeedbackService.submit_feedback(student, "Remove me")

        response = staff_client.delete(f'/api/feedback/{feedback.id}/')

        assert response.status_code == 200
        assert not Feedback.objects.exists()
        assert staff_client.delete(f'/api/feedback/{feedback.id}/').status_code == 404
