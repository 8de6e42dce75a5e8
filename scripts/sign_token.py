"""Sign a JSON payload, or check a token, with the configured secret."""

from __future__ import annotations

import json
import sys

from dotenv import load_dotenv

from token_signer.config import configure_from_env


def main() -> None:
    load_dotenv()
    signer = configure_from_env()
    if signer.null_mode:
        raise SystemExit("TOKEN_SIGNER_SECRET env var required")
    if len(sys.argv) == 3 and sys.argv[1] == "--verify":
        signer.reconstruct(sys.argv[2]).when_valid(
            lambda payload, _: print(json.dumps(payload))
        ).when_invalid(
            lambda: sys.exit("Invalid or expired token")
        )
        return
    if len(sys.argv) != 2:
        raise SystemExit("usage: sign_token.py '<json payload>' | --verify <token>")
    print(signer.generate(json.loads(sys.argv[1])))


if __name__ == "__main__":
    main()
