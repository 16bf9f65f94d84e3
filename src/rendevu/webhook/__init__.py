"""Cal.com webhook relay: lifecycle events in, AI-generated briefs, emails and summaries out."""

from rendevu.webhook.handler import EventHandler, WebhookHandler, WebhookResult
from rendevu.webhook.models import BookingPayload, Person, WebhookEvent, WebhookPayload

__all__ = [
    "BookingPayload",
    "EventHandler",
    "Person",
    "WebhookEvent",
    "WebhookHandler",
    "WebhookPayload",
    "WebhookResult",
]
