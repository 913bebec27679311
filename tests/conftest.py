import os, sys, pytest
# Ensure project root is on path so 'tests' and 'scripts' can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from remoting_swagger import create_app
from tests.test_utils_registry import sample_registry


@pytest.fixture()
def registry():
    return sample_registry()


@pytest.fixture(scope='session')
def app_instance():
    app = create_app(
        {'SWAGGER_NAME': 'swagger', 'SWAGGER_API_VERSION': '1.0', 'SWAGGER_BASE_PATH': '/api'},
        registry=sample_registry(),
    )
    yield app


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()
