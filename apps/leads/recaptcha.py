"""
Google reCAPTCHA verification for the public contact form.
"""

import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


def verify_recaptcha(token: str, remote_ip: str = None) -> bool:
    """
    Verify a reCAPTCHA response token with the siteverify endpoint.

    Returns False on any failure (network, bad JSON, rejected token);
    failures are logged, never raised.
    """
    if not token:
        return False

    payload = {
        'secret': settings.RECAPTCHA_SECRET_KEY,
        'response': token,
    }
    if remote_ip:
        payload['remoteip'] = remote_ip

    try:
        response = requests.post(
            settings.RECAPTCHA_VERIFY_URL,
            data=payload,
            timeout=settings.RECAPTCHA_TIMEOUT,
        )
        response.raise_for_status()
        result = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("reCAPTCHA verification error: %s", e)
        return False

    if result.get('success') is not True:
        logger.info("reCAPTCHA rejected token: %s", result.get('error-codes'))
        return False
    return True
