"""
Custom exceptions for student feedback.
"""


class FeedbackError(ValueError):
    """Base exception for feedback errors."""
    pass


class FeedbackNotFoundError(FeedbackError):
    def __init__(self, feedback_id, message=None):
        self.feedback_id = feedback_id
        super().__init__(message or "Feedback not found")
