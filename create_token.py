#!/usr/bin/env python3
"""
Print a signed bearer token for manual testing of protected routes.

The token is signed with the ``JWT_SECRET`` from the environment, so it
is accepted by a server started with the same secret.  The user does
not have to exist for ``POST /api/posts``; ``/api/auth/profile`` will
answer 404 for an unknown id.

Usage:
    python create_token.py --id 1 --username john
    python create_token.py --id 1 --username john --hours 1
"""

import argparse

from social_media_api.app.core.config import settings
from social_media_api.app.core.security import create_access_token


def main():
    ap = argparse.ArgumentParser(description="Issue a bearer token for the Social Media Platform API.")
    ap.add_argument("--id", type=int, required=True, help="User id to embed in the token")
    ap.add_argument("--username", required=True, help="Username to embed in the token")
    ap.add_argument("--hours", type=int, default=settings.access_token_expire_minutes // 60,
                    help="Token lifetime in hours (default: 24)")
    args = ap.parse_args()

    token = create_access_token(
        {"id": args.id, "username": args.username},
        expires_delta=args.hours * 60 * 60,
        secret_key=settings.secret_key,
    )
    print(token)


if __name__ == "__main__":
    main()
