"""
Authorization exceptions.

Raised by the authority resolver after the role list is fetched and
before any instruction is built.
"""

from swig_agent.domain.exceptions.base import SwigAgentError


class AuthorizationError(SwigAgentError):
    """Base exception for role and authority checks."""


class NotAnAuthorityError(AuthorizationError):
    """Caller holds no role on the wallet."""

    def __init__(
        self, caller: str, purpose: str = "an authority to initiate transfers"
    ):
        super().__init__(
            "No roles found for your wallet in this Swig. "
            f"You need to be {purpose}.",
            details={"caller": caller},
        )
        self.caller = caller


class RoleNotFoundError(AuthorizationError):
    """Role id is not present in the wallet's role list."""

    def __init__(self, role_id: int):
        super().__init__(
            f"Role ID {role_id} not found in this Swig wallet.",
            details={"role_id": role_id},
        )
        self.role_id = role_id


class AddressNotAuthorityError(AuthorizationError):
    """Address is not bound to any role on the wallet."""

    def __init__(self, address: str, removal: bool = False):
        if removal:
            message = f"Authority {address} is not found in this Swig wallet."
        else:
            message = f"Address {address} is not an authority on this Swig wallet."
        super().__init__(message, details={"address": address, "removal": removal})
        self.address = address
        self.removal = removal


class LastAuthorityError(AuthorizationError):
    """Removal would leave the wallet without any role."""

    def __init__(self):
        super().__init__("Cannot remove the last authority from the Swig wallet.")


class SelfRemovalError(AuthorizationError):
    """Caller attempted to remove their own authority."""

    def __init__(self):
        super().__init__(
            "Cannot remove your own authority. "
            "Use another authority to remove this one."
        )
