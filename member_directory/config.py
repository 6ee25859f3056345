"""
Configuration settings for the Member Directory
"""
import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

basedir = os.path.abspath(os.path.dirname(__file__))
rootdir = os.path.dirname(basedir)

load_dotenv(os.path.join(rootdir, '.env'))


def _database_uri():
    """Build the database URI from DATABASE_URL or the PG_* variables."""
    if os.environ.get('DATABASE_URL'):
        return os.environ['DATABASE_URL']

    if os.environ.get('PG_HOST'):
        port = os.environ.get('PG_PORT')
        url = URL.create(
            'postgresql+psycopg2',
            username=os.environ.get('PG_USER'),
            password=os.environ.get('PG_PASSWORD'),
            host=os.environ['PG_HOST'],
            port=int(port) if port else None,
            database=os.environ.get('PG_DATABASE'),
        )
        return url.render_as_string(hide_password=False)

    return 'sqlite:///' + os.path.join(rootdir, 'instance', 'members.db')


class Config:
    """Flask application configuration"""

    # Session signing secret
    SECRET_KEY = os.environ.get('SECRET') or os.environ.get('SECRET_KEY') or \
        'dev-secret-key-change-in-production-12345'

    # Database configuration
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Uploaded member photos
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(basedir, 'static', 'uploads')
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB

    # werkzeug.security hash method for admin passwords
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD') or 'pbkdf2:sha256'

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Development server; the debugger stays off unless FLASK_DEBUG=1
    DEBUG = os.environ.get('FLASK_DEBUG') == '1'
    HOST = os.environ.get('HOST') or '127.0.0.1'
    PORT = int(os.environ.get('PORT') or 3000)


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'WARNING'
