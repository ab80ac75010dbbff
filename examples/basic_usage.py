"""
sealshare — Basic Usage Example

Splits a secret into signed shares, recovers it from a subset, keeps the
shares in a local store, and shows a tampered share being rejected.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sealshare import IntegrityViolation, SecretSharing, Share, SharingConfig, SharingContext
from sealshare.stores import LocalShareStore


def main():
    print("=" * 50)
    print("  sealshare — Signed Shamir Secret Sharing")
    print("=" * 50)

    # One context per deployment: prime modulus + signing key pair
    config = SharingConfig(bit_size=1024, max_shares=20)
    sharing = SecretSharing(SharingContext.generate(config))

    secret = "The launch code is 0000"
    shares = sharing.split_secret(3, 5, secret)

    print(f"\nSplit into {len(shares)} shares (any 3 recover)")
    for share in shares:
        print(f"  share {share.index}: {str(share.value)[:24]}... sig {len(share.signature)}B")

    recovered = sharing.recover_secret([shares[0], shares[2], shares[4]])
    print(f"\nRecovered from shares 0, 2, 4: {recovered!r}")

    # Keep the shares together on disk
    store = LocalShareStore("./example-shares")
    receipt = store.save_group("launch-codes", shares)
    print(f"Stored at {receipt['location']}")
    loaded = store.load_group("launch-codes")
    print(f"Reloaded and recovered: {sharing.recover_secret(loaded[1:4])!r}")

    # Forge a share: change its value without re-signing
    print("\nAttempting recovery with a forged share...")
    forged = Share(index=1, value=shares[1].value + 1, signature=shares[1].signature)
    try:
        sharing.recover_secret([shares[0], forged, shares[2]])
        print("  ERROR: Should have failed!")
    except IntegrityViolation as e:
        print(f"  Correctly rejected — {e}")

    # Cleanup
    import shutil
    shutil.rmtree("./example-shares", ignore_errors=True)
    print("\nCleaned up example files.")


if __name__ == "__main__":
    main()
