# users/models.py

from django.db import models
from django.contrib.auth.hashers import make_password, check_password


class User(models.Model):
    email = models.EmailField(max_length=255, unique=True)
    name = models.CharField(max_length=255)
    password = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    is_active = models.BooleanField(default=True)

    REQUIRED_FIELDS = ['name']
    USERNAME_FIELD = 'email'

    class Meta:
        ordering = ['name']

    @property
    def is_authenticated(self):
        return self.is_active

    @property
    def is_anonymous(self):
        return not self.is_authenticated

    def get_username(self):
        return self.email

    def get_email_field_name(self):
        return 'email'

    def __str__(self):
        return self.email

    def set_password(self, unencrypted_password):
        self.password = make_password(unencrypted_password)

    def check_password(self, unencrypted_password):
        return check_password(unencrypted_password, self.password)
