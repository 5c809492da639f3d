from rest_framework import serializers
from .models import Feedback


class FeedbackSerializer(serializers.ModelSerializer):
    student_id = serializers.IntegerField(read_only=True)
    student_name = serializers.CharField(source="student.display_name", read_only=True)
    student_identifier = serializers.CharField(source="student.student_number", read_only=True)

    class Meta:
        model = Feedback
        fields = [
            "id",
            "student_id",
            "student_name",
            "student_identifier",
            "message",
            "rating",
            "created_at",
        ]
        read_only_fields = fields


class SubmitFeedbackSerializer(serializers.Serializer):
    message = serializers.CharField(
        error_messages={
            "required": "Feedback message is required",
            "blank": "Feedback message is required",
        }
    )
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False, allow_null=True)
