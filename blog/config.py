"""
Configuration settings for the ALTech Blog
"""
import os
from datetime import timedelta


def _env_flag(name, default='false'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Flask application configuration"""
    
    # Flask secret key for signing the flash-message cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'blog.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Login sessions: opaque token cookie resolved against the sessions table
    SESSION_TTL = timedelta(seconds=int(os.environ.get('SESSION_TTL_SECONDS', 3600)))
    SESSION_COOKIE_TOKEN_NAME = 'blog_session'
    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE')
    
    # Argon2id cost parameters (argon2-cffi defaults)
    ARGON2_TIME_COST = int(os.environ.get('ARGON2_TIME_COST', 3))
    ARGON2_MEMORY_COST = int(os.environ.get('ARGON2_MEMORY_COST', 65536))
    ARGON2_PARALLELISM = int(os.environ.get('ARGON2_PARALLELISM', 4))
    
    # When false, the is_admin checkbox on the register form is ignored
    ALLOW_ADMIN_REGISTRATION = _env_flag('ALLOW_ADMIN_REGISTRATION')
    
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    
    # Static page content
    HOME_STARTING_CONTENT = (
        'Welcome to the ALTech blog! We are a tech company dedicated to providing '
        'cutting-edge solutions and innovations. Our team of experts is passionate about '
        'technology and committed to delivering exceptional products and services.'
    )
    ABOUT_CONTENT = (
        'At ALTech, we strive to revolutionize the tech industry. With a strong focus on '
        'research and development, we aim to create groundbreaking solutions that address '
        'the challenges of today and shape the future.'
    )
    CONTACT_CONTENT = (
        "We'd love to hear from you! Whether you have questions, feedback, or partnership "
        'inquiries, feel free to get in touch with us.'
    )


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    ALLOW_ADMIN_REGISTRATION = True
    # Cheap hashes keep the suite fast
    ARGON2_TIME_COST = 1
    ARGON2_MEMORY_COST = 1024
    ARGON2_PARALLELISM = 1
