from django.apps import AppConfig


class TimeslotsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "timeslots"
    verbose_name = "Pickup Time Slots"
