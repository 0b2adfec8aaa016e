"""
Security Configuration Module for the QuickCheck form
Centralizes security-related configurations and utilities
"""

import os
import html
from dotenv import load_dotenv

from core.input_validator import InvalidInput

load_dotenv()


class SecurityConfig:
    """Security configuration for the application."""

    # Flask Secret Key - MUST be set in environment
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY', None)

    # CORS Configuration - Set your production domain
    ALLOWED_ORIGINS = os.getenv('ALLOWED_ORIGINS', 'http://localhost:5000').split(',')

    # Debug Mode - ALWAYS False in production
    DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'

    # Longest raw value accepted for a single form field
    MAX_FIELD_LENGTH = 32

    SECURITY_HEADERS = {
        'X-Content-Type-Options': 'nosniff',
        'X-Frame-Options': 'SAMEORIGIN',
        'X-XSS-Protection': '1; mode=block',
        'Strict-Transport-Security': 'max-age=31536000; includeSubDomains',
        # The form page loads Tailwind and Font Awesome from CDNs
        'Content-Security-Policy': (
            "default-src 'self'; "
            "script-src 'self' 'unsafe-inline' https://cdn.tailwindcss.com; "
            "style-src 'self' 'unsafe-inline' https://cdnjs.cloudflare.com; "
            "font-src 'self' https://cdnjs.cloudflare.com; "
            "img-src 'self' data:; "
            "connect-src 'self';"
        )
    }

    @classmethod
    def validate(cls):
        """Validate that required security configurations are set."""
        errors = []

        if not cls.SECRET_KEY or cls.SECRET_KEY == 'your_secret_key_here':
            errors.append("FLASK_SECRET_KEY must be set to a strong random value")

        if cls.DEBUG:
            errors.append("Debug mode is enabled - disable for production")

        return errors


def sanitize_input(value, max_length=SecurityConfig.MAX_FIELD_LENGTH):
    """
    Sanitize a raw form field before it is parsed.

    Numbers and None pass through untouched. Strings longer than
    max_length are rejected rather than cut, since a shortened number is a
    different number.
    """
    if value is None or isinstance(value, (int, float)):
        return value

    text = str(value)
    if len(text) > max_length:
        raise InvalidInput(f"Please enter at most {max_length} characters per field.")
    return text.replace('\x00', '')


def sanitize_html_output(text):
    """
    Escape HTML entities in text to prevent XSS when rendering.

    Args:
        text: Text that may contain HTML

    Returns:
        HTML-escaped string
    """
    if not text:
        return ""
    return html.escape(str(text))


def add_security_headers(response):
    """Add security headers to response."""
    for header, value in SecurityConfig.SECURITY_HEADERS.items():
        response.headers[header] = value
    return response
