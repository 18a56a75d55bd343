"""
Configuration settings for the blog site
"""
import os


class Config:
    """Flask application configuration"""
    
    # Flask secret key for signing the session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'blog.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Storage backend: 'sql' (relational) or 'memory' (process-local lists)
    STORAGE_BACKEND = os.environ.get('BLOG_STORAGE') or 'sql'
    
    # Application settings
    SITE_NAME = 'Aaronblog'
    PORT = int(os.environ.get('PORT') or 3000)
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    
    # Lengths used when writing post previews to the log
    LOG_TITLE_PREVIEW = 100
    LOG_CONTENT_PREVIEW = 250


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    STORAGE_BACKEND = 'sql'


class MemoryTestConfig(TestConfig):
    """Testing configuration for the in-memory backend"""
    STORAGE_BACKEND = 'memory'
