"""
Application Configuration

FLOW OVERVIEW
- Config.__init__
  • Reads FLASK_ENV to select which .env file to load (dev/prod). Testing bypasses file load.
- Properties expose configuration values, defaulting to development-safe values.
- SQLALCHEMY_DATABASE_URI is DATABASE_URL when set, otherwise composed from the DB_* settings.
"""

import os
from dotenv import load_dotenv
from sqlalchemy.engine import URL


def _env_flag(name, default='False'):
    return os.getenv(name, default).lower() in ('true', '1', 'yes')


class Config:
    """Base configuration class"""

    def __init__(self):
        # Load environment variables based on FLASK_ENV
        env_file = os.getenv('FLASK_ENV', 'development')
        if env_file == 'testing':
            # For testing, don't load config files, use environment variables directly
            pass
        elif env_file == 'production':
            load_dotenv('config.prod.env')
        else:
            load_dotenv('config.env')  # Default to development

    @property
    def SECRET_KEY(self):
        """Application secret key"""
        return os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')

    @property
    def DB_HOST(self):
        """Database server hostname"""
        return os.getenv('DB_HOST', '127.0.0.1')

    @property
    def DB_PORT(self):
        """Database server port"""
        return int(os.getenv('DB_PORT', 5432))

    @property
    def DB_USERNAME(self):
        """Database user"""
        return os.getenv('DB_USERNAME', 'postgres')

    @property
    def DB_PASSWORD(self):
        """Database password"""
        return os.getenv('DB_PASSWORD')

    @property
    def DB_NAME(self):
        """Database name"""
        return os.getenv('DB_NAME', 'studyconnect')

    @property
    def DB_SSL_REQUIRE(self):
        """Whether the database connection must use TLS"""
        return _env_flag('DB_SSL_REQUIRE')

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        """Database connection URI"""
        explicit = os.getenv('DATABASE_URL')
        if explicit:
            return explicit
        url = URL.create(
            'postgresql',
            username=self.DB_USERNAME,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )
        return url.render_as_string(hide_password=False)

    @property
    def SQLALCHEMY_ENGINE_OPTIONS(self):
        """Engine options; TLS is requested through the driver's sslmode"""
        options = {'pool_pre_ping': True}
        if self.DB_SSL_REQUIRE:
            options['connect_args'] = {'sslmode': 'require'}
        return options

    @property
    def SQLALCHEMY_TRACK_MODIFICATIONS(self):
        """SQLAlchemy track modifications setting"""
        return False

    @property
    def ADMIN_EMAIL(self):
        """Email of the bootstrap administrator account"""
        return os.getenv('ADMIN_EMAIL', 'admin@studyconnect.com')

    @property
    def ADMIN_PASSWORD(self):
        """Initial password of the bootstrap administrator account"""
        return os.getenv('ADMIN_PASSWORD', 'password123')

    @property
    def BCRYPT_ROUNDS(self):
        """bcrypt cost factor used when hashing passwords"""
        return int(os.getenv('BCRYPT_ROUNDS', 12))

    @property
    def LOG_LEVEL(self):
        """Root log level for the studyconnect loggers"""
        return os.getenv('LOG_LEVEL', 'INFO').upper()
