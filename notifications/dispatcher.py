import logging
import smtplib
from functools import partial

from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction
from django.template.loader import render_to_string
from django.utils.html import strip_tags

from api.exceptions import NotificationError

logger = logging.getLogger(__name__)


def send(notice):
    """Render ``notice`` and hand it to the mail backend.

    Raises ``NotificationError`` when the transport fails.
    """
    subject = notice.subject
    html = render_to_string(notice.template_name, notice.context())
    try:
        send_mail(
            subject,
            strip_tags(html),
            settings.DEFAULT_FROM_EMAIL,
            [notice.to],
            html_message=html,
        )
    except (smtplib.SMTPException, OSError) as exc:
        logger.warning('Error sending %s to %s: %s', type(notice).__name__, notice.to, exc)
        raise NotificationError() from exc
    logger.info('%s sent to %s', type(notice).__name__, notice.to)


def deliver(notice, attempts=None):
    """Try ``send`` up to ``attempts`` times. Returns whether it went out."""
    attempts = attempts or settings.NOTIFICATION_MAX_ATTEMPTS
    for attempt in range(1, attempts + 1):
        try:
            send(notice)
            return True
        except NotificationError:
            logger.warning('Delivery attempt %d/%d of %s to %s failed',
                           attempt, attempts, type(notice).__name__, notice.to)
    logger.error('Giving up on %s to %s after %d attempts',
                 type(notice).__name__, notice.to, attempts)
    return False


def dispatch(notice):
    """
    Queue ``notice`` for delivery once the current transaction commits.

    The state change that triggered the notice is already persisted by the
    time the mail goes out, and a delivery failure is logged instead of
    failing the request. A notice with an unknown status raises
    ``ValueError`` here, before anything is queued.
    """
    _ = notice.subject  # raises ValueError for an unknown status
    transaction.on_commit(partial(deliver, notice))
