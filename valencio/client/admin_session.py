"""
Admin session context.

Owns everything the storefront UI needs to know about admin access: the
pending hub token, the PIN modal, admin/edit mode and the pending-changes
store. The UI reads from it and calls into it; it keeps no state of its own.
"""
import logging
from typing import Callable, Optional

from valencio.client.auth_client import AuthClient, clear_token_from_url, get_token_from_url
from valencio.client.pending_changes import PendingChangesStore
from valencio.client.pin_entry import PinEntry
from valencio.client.store_client import StoreClient

logger = logging.getLogger(__name__)


class AdminSession:
    """Admin access state for one browser session"""

    def __init__(
        self,
        auth_client: AuthClient,
        store_client: StoreClient,
        url: str = "",
        on_alert: Optional[Callable[[str], None]] = None,
    ):
        self.auth_client = auth_client
        self.url = url
        self.pending_token: Optional[str] = None
        self.show_pin_modal = False
        self.pin_entry: Optional[PinEntry] = None
        self.has_admin_access = False
        self.is_editing = False
        self.onboarding_pending = False
        self.is_loading = True
        self.changes = PendingChangesStore(store_client, can_edit=self.can_edit, on_alert=on_alert)

    def can_edit(self) -> bool:
        return self.has_admin_access and self.is_editing

    def initialize(self) -> None:
        """
        Startup sequence, strictly in order: URL token and PIN modal,
        then the admin check, then hydration of the store data.
        """
        self.is_loading = True

        token = get_token_from_url(self.url)
        if token:
            # Strip it before anything else so it never lingers in history.
            self.url = clear_token_from_url(self.url)
            result = self.auth_client.validate_token(token)
            if result.get("valid"):
                self.pending_token = token
                self.pin_entry = PinEntry(self.validate_pin, on_success=self.close_pin_modal)
                self.show_pin_modal = True
            elif result.get("alreadyAssociated"):
                logger.info("Store already has an admin; ignoring URL token")
            else:
                logger.warning("URL admin token rejected: %s", result.get("error"))

        status = self.auth_client.check_auth()
        self.has_admin_access = bool(status.get("isAdmin"))
        self.onboarding_pending = bool(status.get("onboardingPending"))

        self.changes.hydrate()
        self.is_loading = False

    def validate_pin(self, pin: str) -> bool:
        """Activate with the pending token. Success switches straight into edit mode."""
        if not self.pending_token:
            return False
        result = self.auth_client.activate_admin(self.pending_token, pin)
        if result.get("success"):
            self.has_admin_access = True
            self.is_editing = True
            self.pending_token = None
            return True
        return False

    def close_pin_modal(self) -> None:
        self.show_pin_modal = False

    def toggle_editing(self) -> bool:
        """Switch edit mode on or off; only an admin can enter it."""
        if not self.has_admin_access:
            return False
        self.is_editing = not self.is_editing
        return self.is_editing

    def logout(self) -> None:
        self.auth_client.logout()
        self.has_admin_access = False
        self.is_editing = False
