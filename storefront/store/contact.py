"""Contact page: store details and the message form."""
from typing import Optional

from pydantic import ValidationError

from storefront.client import StorefrontClient
from storefront.errors import ERROR_SEND_MESSAGE, SUCCESS_MESSAGE_SENT, StorefrontError
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.models import ContactMessage, Store
from storefront.notifications import Notifier
from storefront.store.layout import load_store

logger = get_logger(__name__)


class ContactViewModel:
    def __init__(self, client: StorefrontClient, domain: str, notifier: Optional[Notifier] = None):
        self.client = client
        self.domain = domain
        self.notifier = notifier or Notifier()
        self.store: Optional[Store] = None
        self.loading = False
        self.sending = False
        self.error = ""

    async def load(self) -> Optional[Store]:
        self.loading = True
        try:
            self.store = await load_store(self.client, self.domain)
        finally:
            self.loading = False
        return self.store

    @property
    def not_found(self) -> bool:
        return not self.loading and self.store is None

    async def submit(self, name: str, email: str, subject: str, message: str) -> bool:
        """Send the form. Failure is shown inline through `error`, success as a notification."""
        self.sending = True
        self.error = ""
        try:
            payload = ContactMessage(name=name, email=email, subject=subject, message=message)
            await self.client.send_contact_message(self.domain, payload)
        except (StorefrontError, ValidationError) as e:
            logger.error(
                f"Failed to send message to {sanitize_string_for_logging(self.domain)}: {e}"
            )
            self.error = ERROR_SEND_MESSAGE
            return False
        finally:
            self.sending = False

        self.notifier.success(SUCCESS_MESSAGE_SENT)
        return True
