from uuid import uuid4
from enum import Enum

from django.db import models


class UsersRole(Enum):
    """Группы пользователей."""

    SUPERUSER = "superuser"
    ADMIN = "admin"
    USER = "user"

    @classmethod
    def choices(cls) -> list[tuple[str, str]]:
        return [(item.value, item.name.capitalize()) for item in cls]


class UUIDMixin(models.Model):
    """Mixin - ID(UUID)."""

    id = models.UUIDField(primary_key=True, default=uuid4, editable=False)

    class Meta:
        abstract = True


class DatetimeStampedMixin(models.Model):
    """Mixin - DatetimeStamped."""

    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Время создания сущности",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Время обновления сущности",
    )

    class Meta:
        abstract = True


class User(UUIDMixin, DatetimeStampedMixin):
    """Модель - Пользователь."""

    first_name = models.CharField(max_length=64, null=False, help_text="Имя")
    last_name = models.CharField(
        max_length=64,
        null=False,
        help_text="Фамилия",
    )
    username = models.CharField(
        max_length=128,
        null=False,
        unique=True,
        help_text="Логин",
    )
    password_hash = models.CharField(
        max_length=256,
        null=False,
        help_text="Пароль (хеш)",
    )
    role = models.CharField(
        max_length=32,
        choices=UsersRole.choices(),
        null=False,
        default=UsersRole.USER.value,
        help_text="Роль",
    )

    class Meta:
        db_table = "users"
        verbose_name = "Пользователь"
        verbose_name_plural = "Пользователи"

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.username})"
