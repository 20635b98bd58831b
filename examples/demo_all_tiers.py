"""
message_crypto - Live Demo: All Five Tiers
===========================================
Run:  python examples/demo_all_tiers.py

Generates a key pair, seals and opens a message, signs and verifies it,
and shows what each rejection path looks like. Sizes and timings are
printed for each tier.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from message_crypto.errors                 import MessageCryptoError
from message_crypto.tiers.tier1_keys       import KeyPairGenerator, match_keys
from message_crypto.tiers.tier2_aes_cbc    import AESCBCCipher
from message_crypto.tiers.tier3_rsa_wrap   import RSAKeyWrapper
from message_crypto.tiers.tier4_envelope   import MessageCodec
from message_crypto.tiers.tier5_signatures import DigitalSigner

LINE = "═" * 70
MSG  = b"Only the holder of the private key can read this."

def header(tier, name):
    print(f"\n{LINE}")
    print(f"  Tier {tier}: {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def rejected(label, exc):
    print(f"  ✗  {label}: {type(exc).__name__}: {exc}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  message_crypto - Five-Tier Demo")
print(LINE)
print(f"  Message: {MSG.decode()}\n")

# ── TIER 1 ───────────────────────────────────────────────────────────────────
header(1, "KEYS - RSA-2048 key pairs")
t0         = time.perf_counter()
pub, priv  = KeyPairGenerator().generate()
other_pub, other_priv = KeyPairGenerator().generate()
elapsed    = time.perf_counter() - t0
ok("Generated two pairs",    f"{elapsed*1000:.0f} ms")
ok("Public key",             pub.splitlines()[0])
ok("Private key",            priv.splitlines()[0])
ok("Own pair matches",       str(match_keys(pub, priv)))
ok("Foreign pair matches",   str(match_keys(pub, other_priv)))

# ── TIER 2 ───────────────────────────────────────────────────────────────────
header(2, "SYMMETRIC - AES-256-CBC")
c   = AESCBCCipher()
key = os.urandom(c.KEY_SIZE)
iv  = os.urandom(c.IV_SIZE)
ct  = c.encrypt(key, iv, MSG)
ok("Ciphertext", f"{len(ct)} bytes for {len(MSG)} bytes of input")
ok("Decrypted",  c.decrypt(key, iv, ct).decode())

# ── TIER 3 ───────────────────────────────────────────────────────────────────
header(3, "WRAPPING - RSA-OAEP")
w       = RSAKeyWrapper()
wrapped = w.wrap(key, pub)
ok("Wrapped key", f"{len(wrapped)} bytes (one modulus)")
ok("Unwrapped",   str(w.unwrap(wrapped, priv) == key))

# ── TIER 4 ───────────────────────────────────────────────────────────────────
header(4, "ENVELOPE - MARKER || wrapped key || IV || ciphertext")
codec   = MessageCodec()
t0      = time.perf_counter()
blob    = codec.seal(MSG, pub)
pt      = codec.open(blob, priv)
elapsed = time.perf_counter() - t0
ok("Envelope",   f"{len(blob)} bytes (predicted {codec.envelope_size(len(MSG))})")
ok("Marker",     blob[:8].decode())
ok("Round-trip", f"{elapsed*1000:.1f} ms")
ok("Decrypted",  pt.decode())

try:
    codec.open(blob, other_priv)
except MessageCryptoError as e:
    rejected("Wrong private key", e)

tampered = bytearray(blob)
tampered[-1] ^= 0x01
try:
    codec.open(bytes(tampered), priv)
except MessageCryptoError as e:
    rejected("Tampered ciphertext", e)

try:
    codec.open(b"plain text, not an envelope", priv)
except MessageCryptoError as e:
    rejected("Not an envelope", e)

# ── TIER 5 ───────────────────────────────────────────────────────────────────
header(5, "SIGNATURES - RSA PKCS#1 v1.5 + SHA-256")
s       = DigitalSigner()
t0      = time.perf_counter()
sig     = s.sign(priv, MSG)
valid   = s.verify(pub, MSG, sig)
elapsed = time.perf_counter() - t0
ok("Signature size",   f"{len(sig)} bytes")
ok("Valid message",    str(valid))
ok("Tampered message", str(s.verify(pub, b"tampered", sig)))
ok("Truncated sig",    str(s.verify(pub, MSG, sig[:-1])))
ok("Round-trip",       f"{elapsed*1000:.1f} ms")

# ── Summary ───────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  ALL TIERS COMPLETE")
print(f"  {LINE}")
print("  Tier 1  RSA-2048 key pairs           Keys and matching")
print("  Tier 2  AES-256-CBC                  Payload encryption")
print("  Tier 3  RSA-OAEP                     Session key wrapping")
print("  Tier 4  Envelope codec               Seal / open")
print("  Tier 5  PKCS#1 v1.5 + SHA-256        Detached signatures")
print(LINE + "\n")
