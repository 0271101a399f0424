from typing import Any

from rest_framework import serializers

from .models import User


# --- User --- #
class UserSerializer(serializers.ModelSerializer):
    """Serializer - Пользователь для ответа (без хеша пароля)."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "firstName",
            "lastName",
            "username",
            "role",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


class UserCreateSerializer(serializers.Serializer):
    """Serializer - регистрация Пользователя."""

    firstName = serializers.CharField(source="first_name", max_length=64)
    lastName = serializers.CharField(source="last_name", max_length=64)
    username = serializers.CharField(max_length=128)
    password = serializers.CharField(
        write_only=True,
        max_length=128,
        trim_whitespace=False,
    )

    def validate_username(self, value: str) -> str:
        """
        Проверка уникальности логина Пользователя.

        :param value:
        :type value: str

        :return:
        :rtype: str
        """
        if self.context["store"].username_taken(value):
            raise serializers.ValidationError(
                "Пользователь с таким логином уже существует",
            )

        return value


class UserUpdateSerializer(serializers.Serializer):
    """Serializer - обновление Пользователя (частичное)."""

    firstName = serializers.CharField(
        source="first_name",
        max_length=64,
        required=False,
    )
    lastName = serializers.CharField(
        source="last_name",
        max_length=64,
        required=False,
    )
    username = serializers.CharField(max_length=128, required=False)

    def validate_username(self, value: str) -> str:
        if self.context["store"].username_taken(
            value,
            exclude_id=self.context["user_id"],
        ):
            raise serializers.ValidationError(
                "Пользователь с таким логином уже существует",
            )

        return value

    def validate(self, data: dict[str, Any]) -> dict[str, Any]:
        if not data:
            raise serializers.ValidationError("Нет полей для обновления")

        return data


# --- Auth --- #
class LoginSerializer(serializers.Serializer):
    """Serializer - авторизация Пользователя."""

    username = serializers.CharField(write_only=True, max_length=128)
    password = serializers.CharField(
        write_only=True,
        max_length=128,
        trim_whitespace=False,
    )


class TokensSerializer(serializers.Serializer):
    """Serializer - пара токенов для ответа."""

    token = serializers.CharField(source="access_token.token")
    tokenExpireAt = serializers.DateTimeField(source="access_token.expires_at")
    refresh = serializers.CharField(source="refresh_token.token")
    refreshExpireAt = serializers.DateTimeField(
        source="refresh_token.expires_at",
    )
