"""Guest WiFi provisioning bridge: captive-portal logins to FreeRADIUS credentials."""

__version__ = "1.0.0"
