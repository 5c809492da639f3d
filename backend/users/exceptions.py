"""
Custom exceptions for staff-side student management.
"""


class StudentNotFoundError(ValueError):
    def __init__(self, student_id, message=None):
        self.student_id = student_id
        super().__init__(message or "Student not found")
