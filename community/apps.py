from django.apps import AppConfig

class CommunityConfig(AppConfig):
    """Django app config for the FlavorWorld community backend."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'community'
