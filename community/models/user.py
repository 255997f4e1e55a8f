"""Custom user model with profile metadata and avatar helpers."""

from django.core.validators import RegexValidator, MaxLengthValidator
from django.contrib.auth.models import AbstractUser
from django.db import models
from libgravatar import Gravatar

class User(AbstractUser):
    """Model for user auth and the public cook profile."""

    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=r'^\w{3,}$',
            message='Username must consist of at least three alphanumericals'
        )]
    )
    first_name = models.CharField(max_length=50, blank=True)
    last_name = models.CharField(max_length=50, blank=True)
    email = models.EmailField(unique=True, blank=False)
    bio = models.TextField(
        max_length=500,
        blank=True,
        help_text="short user bio shown on profile",
        validators=[MaxLengthValidator(500)]
    )
    avatar = models.ImageField(upload_to="avatars/", blank=True, null=True)

    class Meta:
        """Default ordering for users."""
        ordering = ['last_name', 'first_name']

    def full_name(self):
        """Return full name string."""
        return f'{self.first_name} {self.last_name}'

    @property
    def display_name(self):
        """Name shown in chat lists and comments; username when no name is set."""
        return self.full_name().strip() or self.username

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        gravatar_url = gravatar_object.get_image(size=size, default='mp')
        return gravatar_url

    def avatar_or_gravatar(self, size=120):
        """Return uploaded avatar URL or a gravatar fallback."""
        if self.avatar:
            try:
                return self.avatar.url
            except ValueError:
                pass
        return self.gravatar(size=size)

    @property
    def avatar_url(self):
        """Preferred avatar URL for profile display."""
        return self.avatar_or_gravatar(size=200)
