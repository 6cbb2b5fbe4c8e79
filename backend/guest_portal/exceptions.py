"""
Domain exceptions raised by the services layer.
Routes translate these into HTTP responses.
"""


class GuestPortalError(Exception):
    """Base class for provisioning engine errors"""


class MissingHardwareAddressError(GuestPortalError):
    """Request carried no client MAC address (client error, nothing was written)"""

    def __init__(self, message: str = "MAC address is required"):
        super().__init__(message)


class ProvisioningError(GuestPortalError):
    """The provisioning unit of work failed and was rolled back"""


class DisconnectError(GuestPortalError):
    """Administrative disconnect failed and was rolled back"""
