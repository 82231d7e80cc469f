"""Exception types for the Hue client and action adapter.

Discovery and registration problems are raised so that installation can
abort. Light operations never raise these; see BridgeClient.do_request().
"""


class HueError(Exception):
    """Base exception for all smith-hue errors."""
    pass


class DiscoveryError(HueError):
    """Raised when the discovery service reports no bridge on the network."""

    def __init__(self, message: str = 'Unable to discover Hue Bridge on network'):
        super().__init__(message)


class RegistrationError(HueError):
    """Raised when the bridge does not hand out a username.

    error_type and description are filled in when the bridge returned an
    error object (e.g. type 101, link button not pressed).
    """

    def __init__(self, message: str = 'Unable to register to Bridge API',
                 error_type: int | None = None, description: str | None = None):
        self.error_type = error_type
        self.description = description
        super().__init__(message)


class TransportError(HueError):
    """Raised when a failed bridge request is unwrapped."""

    def __init__(self, method: str, url: str, cause: Exception):
        self.method = method
        self.url = url
        self.cause = cause
        super().__init__(f"{method.upper()} {url} failed: {cause}")


class InstallCancelled(HueError):
    """Raised when the link button wait is cancelled."""
    pass


class UnknownActionError(HueError):
    """Raised when no action is registered under a name."""

    def __init__(self, name: str, suggestions: list[str] | None = None):
        self.name = name
        self.suggestions = suggestions or []
        super().__init__(f"No such action '{name}'")


class ConfigError(HueError):
    """Raised when the module config is missing or malformed."""
    pass
