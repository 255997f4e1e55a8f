"""Account lifecycle: sign up, credential checks and password changes."""

import logging
import re

from django.contrib.auth import authenticate
from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator, validate_email
from django.db import IntegrityError, transaction

from community.errors import ValidationFailed
from community.models import User
from community.utils.names import split_full_name

logger = logging.getLogger(__name__)

PASSWORD_RULE_MESSAGE = (
    "Password must contain at least 8 characters, including uppercase and "
    "lowercase letters, a number and a special character"
)

password_validator = RegexValidator(
    regex=r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[^\da-zA-Z]).{8,}$",
    message=PASSWORD_RULE_MESSAGE,
)


def username_from_email(email):
    base = re.sub(r"\W", "", email.split("@")[0].lower())[:24]
    if len(base) < 3:
        base = f"cook{base}"
    candidate, suffix = base, 1
    while User.objects.filter(username=candidate).exists():
        suffix += 1
        candidate = f"{base}{suffix}"
    return candidate


def check_password_rule(password):
    try:
        password_validator(password)
    except ValidationError:
        raise ValidationFailed(PASSWORD_RULE_MESSAGE)


class AccountService:
    def register(self, full_name, email, password):
        """Create a user from the sign-up form fields; the username is derived from the email."""
        full_name = (full_name or "").strip()
        email = (email or "").strip().lower()
        if not full_name or not email or not password:
            raise ValidationFailed("All fields are required")
        try:
            validate_email(email)
        except ValidationError:
            raise ValidationFailed("Invalid email address")
        if User.objects.filter(email__iexact=email).exists():
            raise ValidationFailed("User already exists")
        check_password_rule(password)

        first_name, last_name = split_full_name(full_name)
        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    username_from_email(email),
                    email=email,
                    password=password,
                    first_name=first_name,
                    last_name=last_name,
                )
        except IntegrityError:
            raise ValidationFailed("Email already exists")
        logger.info("User %s registered", user.pk)
        return user

    def check_credentials(self, email, password):
        """Return the user for an email/password pair, or raise ValidationFailed."""
        email = (email or "").strip()
        if not email or not password:
            raise ValidationFailed("Email and password are required")
        user = User.objects.filter(email__iexact=email).first()
        authed = authenticate(username=user.username, password=password) if user else None
        if authed is None:
            logger.info("Failed login for %s", email)
            raise ValidationFailed("Invalid credentials")
        return authed

    def change_password(self, user, current_password, new_password):
        if not current_password or not new_password:
            raise ValidationFailed("Current password and new password are required")
        if not user.check_password(current_password):
            raise ValidationFailed("Current password is incorrect")
        check_password_rule(new_password)
        user.set_password(new_password)
        user.save(update_fields=["password"])
        logger.info("User %s changed their password", user.pk)
        return user
