"""Test configuration and fixtures."""

import os

# Settings are read from the environment when the container first resolves
# them; these defaults keep tests off the network.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("MAIL__CHECK_DELIVERABILITY", "false")
os.environ.setdefault("MAIL__SUPPRESS_SEND", "true")
os.environ.setdefault("AUTH__JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("AUTH__TOKEN_SECRET", "test-token-secret")
