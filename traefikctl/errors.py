"""Exception types raised by traefikctl."""


class TraefikctlError(Exception):
    """Base class for every error reported by traefikctl."""


class ValidationError(TraefikctlError):
    """A user-supplied value (name, host, URL, address) is not acceptable."""