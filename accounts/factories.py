import factory
from django.contrib.auth import get_user_model
from factory.django import DjangoModelFactory

from .models import UserType

User = get_user_model()


class UserFactory(DjangoModelFactory):
    class Meta:
        model = User
        django_get_or_create = ("email",)

    username = factory.Sequence(lambda n: f"usuario{n}")
    email = factory.LazyAttribute(lambda o: f"{o.username}@example.com")
    first_name = factory.Faker("first_name", locale="pt_BR")
    last_name = factory.Faker("last_name", locale="pt_BR")
    user_type = UserType.CONVIDADO
    is_active = True
    password = factory.django.Password("pass")
