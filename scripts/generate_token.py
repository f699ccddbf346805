#!/usr/bin/env python3
"""Generate an access token for local development.

The FAF OAuth server issues access tokens in production. This script signs
one with the configured secret so the API can be exercised locally:

    python scripts/generate_token.py --user-id <uuid> --role ROLE_USER \\
        --scope write_account_data
"""

import argparse
import sys
from datetime import timedelta

from faf.config import Settings
from faf.domain.value import OAuthScope, Role
from faf.util.jwt import create_access_token


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--user-id", default=None, help="Omit for a client token")
    parser.add_argument(
        "--role",
        action="append",
        default=[],
        choices=[role.value for role in Role],
    )
    parser.add_argument(
        "--scope",
        action="append",
        default=[],
        choices=[scope.value for scope in OAuthScope],
    )
    parser.add_argument("--hours", type=int, default=1, help="Token lifetime")
    args = parser.parse_args()

    settings = Settings()
    token = create_access_token(
        settings.auth,
        user_id=args.user_id,
        roles=args.role,
        scopes=args.scope,
        lifetime=timedelta(hours=args.hours),
    )
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
