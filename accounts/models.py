# accounts/models.py
from __future__ import annotations

from django.contrib.auth.models import AbstractUser
from django.contrib.auth.models import UserManager as DjangoUserManager
from django.db import models
from django.utils.translation import gettext_lazy as _


class UserType(models.TextChoices):
    ROOT = "root", "Root"
    ADMIN = "admin", "Admin"
    OPERADOR = "operador", "Operador"
    FINANCEIRO = "financeiro", "Financeiro"
    CONVIDADO = "convidado", "Convidado"


class CustomUserManager(DjangoUserManager):
    """User manager que utiliza o email como identificador principal."""

    def _create_user(self, email: str, username: str, password: str | None, **extra_fields):
        if not email:
            raise ValueError("Users must have an email address")
        email = self.normalize_email(email)
        user = self.model(email=email, username=username, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(
        self,
        email: str,
        username: str,
        password: str | None = None,
        user_type: UserType = UserType.CONVIDADO,
        **extra_fields,
    ):
        extra_fields.setdefault("user_type", user_type)
        return self._create_user(email, username, password, **extra_fields)

    def create_superuser(self, email: str, username: str, password: str, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("user_type", UserType.ROOT)
        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")
        return self._create_user(email, username, password, **extra_fields)

    def get_by_natural_key(self, email: str):
        return self.get(email__iexact=email)


class User(AbstractUser):
    """
    Usuário do painel administrativo.
    O tipo de usuário é usado como papel nas permissões do menu.
    """

    email = models.EmailField(
        _("email address"),
        unique=True,
        blank=False,
        null=False,
        db_index=True,
    )
    user_type = models.CharField(
        _("tipo de usuário"),
        max_length=20,
        choices=UserType.choices,
        default=UserType.CONVIDADO,
    )

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["username"]

    objects = CustomUserManager()

    class Meta:
        verbose_name = _("usuário")
        verbose_name_plural = _("usuários")

    def __str__(self) -> str:
        return self.get_full_name() or self.username

    @property
    def get_tipo_usuario(self) -> str:
        if self.is_superuser:
            return UserType.ROOT.value
        return self.user_type
