"""Legacy login-page "fake RSA" encoder.

Not encryption in any security sense: it reproduces a browser client's
obfuscation of credentials so a form submission is accepted.
"""

from .cipher import CipherError, InvalidCharacter, InvalidLength, InvalidPermutationTable
from .cipher.cascade import decrypt_string as decrypt
from .cipher.cascade import encrypt_string as encrypt

__all__ = [
    "encrypt",
    "decrypt",
    "CipherError",
    "InvalidCharacter",
    "InvalidLength",
    "InvalidPermutationTable",
]

__version__ = "0.1.0"
