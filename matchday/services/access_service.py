"""
Shared-secret gate for the coach-only screens.

This keeps casual visitors out of lineup generation and member
administration; it is not an access-control mechanism.
"""
import hmac
import logging

from ..utils.constants import DEFAULT_ACCESS_CODE

logger = logging.getLogger(__name__)


class AccessGate:
    """
    Session context recording whether the coach areas are unlocked.

    Attributes:
        unlocked: Whether the coach areas are currently open
    """

    def __init__(self, access_code: str = DEFAULT_ACCESS_CODE):
        self._access_code = access_code
        self.unlocked = False

    def unlock(self, code: str) -> bool:
        """
        Try to unlock with the given code.

        Returns:
            True if the code matched (the gate stays locked otherwise)
        """
        if hmac.compare_digest(str(code or "").encode("utf-8"), self._access_code.encode("utf-8")):
            self.unlocked = True
            return True
        logger.info("Rejected access code attempt")
        return False

    def lock(self) -> None:
        self.unlocked = False
