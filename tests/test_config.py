"""
Tests for environment-based configuration and the app factory
"""

import logging

import pytest
from sqlalchemy.engine import make_url

from studyconnect import create_app
from studyconnect.config import Config

DB_VARS = ['DATABASE_URL', 'DB_HOST', 'DB_PORT', 'DB_USERNAME', 'DB_PASSWORD', 'DB_NAME',
           'DB_SSL_REQUIRE', 'ADMIN_EMAIL', 'BCRYPT_ROUNDS', 'LOG_LEVEL']


@pytest.fixture
def env(monkeypatch):
    """Testing environment with no database variables set"""
    monkeypatch.setenv('FLASK_ENV', 'testing')
    for name in DB_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfig:

    def test_defaults(self, env):
        config = Config()
        assert config.DB_HOST == '127.0.0.1'
        assert config.DB_PORT == 5432
        assert config.DB_NAME == 'studyconnect'
        assert config.DB_SSL_REQUIRE is False
        assert config.SQLALCHEMY_ENGINE_OPTIONS == {'pool_pre_ping': True}
        assert config.ADMIN_EMAIL == 'admin@studyconnect.com'
        assert config.BCRYPT_ROUNDS == 12
        assert config.LOG_LEVEL == 'INFO'

    def test_uri_composed_from_parts(self, env):
        env.setenv('DB_HOST', 'db.internal')
        env.setenv('DB_PORT', '6543')
        env.setenv('DB_USERNAME', 'study')
        env.setenv('DB_PASSWORD', 'p@ss word')
        env.setenv('DB_NAME', 'studyconnect_dev')

        url = make_url(Config().SQLALCHEMY_DATABASE_URI)

        assert url.drivername == 'postgresql'
        assert url.host == 'db.internal'
        assert url.port == 6543
        assert url.username == 'study'
        assert url.password == 'p@ss word'
        assert url.database == 'studyconnect_dev'

    def test_database_url_overrides_parts(self, env):
        env.setenv('DB_HOST', 'ignored')
        env.setenv('DATABASE_URL', 'postgresql://u:p@elsewhere/db')
        assert Config().SQLALCHEMY_DATABASE_URI == 'postgresql://u:p@elsewhere/db'

    @pytest.mark.parametrize('value', ['true', 'True', '1', 'yes'])
    def test_ssl_required(self, env, value):
        env.setenv('DB_SSL_REQUIRE', value)
        config = Config()
        assert config.DB_SSL_REQUIRE is True
        assert config.SQLALCHEMY_ENGINE_OPTIONS['connect_args'] == {'sslmode': 'require'}

    def test_log_level_is_upper_cased(self, env):
        env.setenv('LOG_LEVEL', 'debug')
        assert Config().LOG_LEVEL == 'DEBUG'


class TestCreateApp:

    def test_test_config_is_applied(self, app):
        assert app.config['TESTING'] is True
        assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'
        assert 'sqlalchemy' in app.extensions

    def test_env_config(self, env):
        env.setenv('DATABASE_URL', 'sqlite://')
        env.setenv('LOG_LEVEL', 'warning')
        app = create_app()
        assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite://'
        assert logging.getLogger('studyconnect').level == logging.WARNING

    def test_cli_groups_registered(self, app):
        assert {'schema', 'seed', 'repair'} <= set(app.cli.commands)

    def test_logging_handler_installed_once(self, app):
        create_app({'TESTING': True, 'SQLALCHEMY_DATABASE_URI': 'sqlite://'})
        logger = logging.getLogger('studyconnect')
        assert len([h for h in logger.handlers if getattr(h, '_studyconnect', False)]) == 1
