# generate_wallet.py

import sys

from solders.keypair import Keypair

from settings import Settings
from wallet import save_keypair


def main(settings=None):
    settings = settings or Settings.from_env()
    keypair = Keypair()
    try:
        save_keypair(settings.wallet_path, keypair)
    except FileExistsError:
        print(f"{settings.wallet_path} already exists. Refusing to overwrite it.", file=sys.stderr)
        sys.exit(1)

    print("New wallet created.")
    print(f"Public key: {keypair.pubkey()}")
    print(f"Secret key saved to {settings.wallet_path}")
    return keypair


if __name__ == "__main__":
    main()
