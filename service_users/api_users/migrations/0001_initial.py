import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        help_text="Время создания сущности",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Время обновления сущности",
                    ),
                ),
                (
                    "first_name",
                    models.CharField(help_text="Имя", max_length=64),
                ),
                (
                    "last_name",
                    models.CharField(help_text="Фамилия", max_length=64),
                ),
                (
                    "username",
                    models.CharField(
                        help_text="Логин",
                        max_length=128,
                        unique=True,
                    ),
                ),
                (
                    "password_hash",
                    models.CharField(help_text="Пароль (хеш)", max_length=256),
                ),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("superuser", "Superuser"),
                            ("admin", "Admin"),
                            ("user", "User"),
                        ],
                        default="user",
                        help_text="Роль",
                        max_length=32,
                    ),
                ),
            ],
            options={
                "verbose_name": "Пользователь",
                "verbose_name_plural": "Пользователи",
                "db_table": "users",
            },
        ),
    ]
