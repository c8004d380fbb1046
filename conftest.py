import logging
import os

import django
import pytest

# Configurar o Django antes de qualquer operação
if not django.apps.apps.ready:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "Painel.settings_test")
    django.setup()

# Configurar logging para depuração
logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


@pytest.fixture(autouse=True)
def tests_urlconf(settings):
    """Usa as rotas de teste, que incluem rotas extras com argumentos."""
    settings.ROOT_URLCONF = "tests.urls"


@pytest.fixture(scope="function", autouse=True)
def enable_db_access_for_all_tests(db):
    """Habilita o acesso ao banco de dados para todos os testes."""
    pass


@pytest.fixture
def admin_user(django_user_model):
    """Cria um superusuário compatível com o modelo customizado."""
    return django_user_model.objects.create_superuser(
        email="admin@example.com",
        username="admin",
        password="password",
    )
