"""
Token cache demo — how a CLI keeps an auth token between invocations.

Usage:
    python examples/token_cache/run.py you@example.com
    python examples/token_cache/run.py you@example.com --logout
"""
from __future__ import annotations

import sys
import time
import uuid

from stash_core import open_store


def main() -> None:
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    email = sys.argv[1]
    tokens = open_store("tokens")

    if "--logout" in sys.argv:
        tokens.remove(email)
        print(f"Logged out {email}")
        return

    cached = tokens.get(email)
    if cached and cached.get("expires_at", 0) > time.time():
        print(f"Reusing cached token for {email}: {cached['token'][:8]}...")
        return

    token = {"token": uuid.uuid4().hex, "expires_at": time.time() + 3600}
    tokens.set(email, token)
    print(f"Issued new token for {email}, cached at {tokens.path_for(email)}")


if __name__ == "__main__":
    main()
