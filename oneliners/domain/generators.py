"""
Random value generators.

Hex colors and IP addresses come from a non-cryptographic RandomPort;
random strings always come from ``secrets``.
"""

from __future__ import annotations

import math
import secrets
from functools import lru_cache

from oneliners.adapters.randomness import SystemRandomAdapter
from oneliners.ports.randomness import RandomPort
from oneliners.rules.loader import default_rules
from oneliners.rules.models import GeneratorRules


class RandomValueGenerator:
    def __init__(
        self,
        rules: GeneratorRules | None = None,
        source: RandomPort | None = None,
    ) -> None:
        self.rules = rules or GeneratorRules()
        self.source: RandomPort = source or SystemRandomAdapter()

    def hex_color(self) -> str:
        """Random ``#``-prefixed hex color, lowercase, ``hex_color_digits`` long."""
        digits = self.rules.hex_color_digits
        value = self.source.randbelow(16**digits)
        return f"#{value:0{digits}x}"

    def ip(self) -> str:
        """
        Random dotted-quad address.

        Each octet is floor(random * 255); the first gets
        ``ip_first_octet_offset`` added so it is never 0 by default.
        """
        octets = [math.floor(self.source.random() * 255) for _ in range(4)]
        octets[0] += self.rules.ip_first_octet_offset
        return ".".join(str(octet) for octet in octets)

    def random_string(self) -> str:
        """Hex string from the OS CSPRNG, two characters per configured byte."""
        return secrets.token_hex(self.rules.random_string_bytes)


@lru_cache(maxsize=1)
def default_generator() -> RandomValueGenerator:
    """
    Generator behind the module functions; cached.

    Always uses the built-in GeneratorRules so gen_hex_color(), gen_ip() and
    gen_random_string() keep their fixed shapes whatever $ONELINERS_RULES says.
    """
    return RandomValueGenerator()


def configured_generator(source: RandomPort | None = None) -> RandomValueGenerator:
    """New generator using the generators section of default_rules()."""
    return RandomValueGenerator(default_rules().generators, source)


def gen_hex_color() -> str:
    return default_generator().hex_color()


def gen_ip() -> str:
    return default_generator().ip()


def gen_random_string() -> str:
    """64-character hex string suitable for tokens."""
    return default_generator().random_string()
