#!/usr/bin/env python3
"""
Print a session token for an existing account.

Handy for calling the API with curl without going through /api/login.
The token is identical to the one login issues and expires after the
configured lifetime (one hour by default).

Usage:
    python create_token.py --email ash@example.com
    curl -H "Authorization: Bearer $(python create_token.py --email ash@example.com)" \
        http://localhost:5000/api/user/pokemon
"""

import argparse
import asyncio
import sys

from pokemon_adoption_api.app.core.db import init_db
from pokemon_adoption_api.app.core.errors import NotFoundError
from pokemon_adoption_api.app.services.user_service import UserService


def main() -> int:
    parser = argparse.ArgumentParser(description="Mint a session token for a registered user")
    parser.add_argument("--email", required=True, help="Email of the registered user")
    args = parser.parse_args()

    init_db()
    try:
        token = asyncio.run(UserService.issue_token_for(args.email))
    except NotFoundError as exc:
        print(exc.message, file=sys.stderr)
        return 1
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
