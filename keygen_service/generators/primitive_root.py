"""
Modular-exponentiation key generation.

Each counter value ``c`` is mapped to ``R ** ((c + S) mod P) mod P``. When R
is a primitive root of the prime P this walks every non-zero residue of P
once before repeating, so consecutive counter values give scattered,
non-colliding keys.

Neither the primality of P nor the primitive-root property of R is checked
unless verification is explicitly requested; with a bad root the mapping is
not a permutation and keys will collide.
"""
from dataclasses import dataclass
from typing import List

from ..logger import logger
from .base import NumberStrategy
from .counter import RedisCounter
from .encoder import KeyEncoder
from .errors import GeneratorConfigurationError


def modular_pow(base: int, exponent: int, modulus: int) -> int:
    """
    Compute ``base ** exponent % modulus`` by square-and-multiply.

    Args:
        base: Non-negative base.
        exponent: Non-negative exponent.
        modulus: Modulus (>= 1).
    """
    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result


def is_prime(number: int) -> bool:
    """Trial-division primality test."""
    if number < 2:
        return False
    if number < 4:
        return True
    if number % 2 == 0:
        return False
    divisor = 3
    while divisor * divisor <= number:
        if number % divisor == 0:
            return False
        divisor += 2
    return True


def prime_factors(number: int) -> List[int]:
    """Distinct prime factors of number, ascending."""
    factors = []
    divisor = 2
    while divisor * divisor <= number:
        if number % divisor == 0:
            factors.append(divisor)
            while number % divisor == 0:
                number //= divisor
        divisor += 1 if divisor == 2 else 2
    if number > 1:
        factors.append(number)
    return factors


def is_primitive_root(root: int, prime: int) -> bool:
    """
    Check whether root generates the multiplicative group modulo prime.

    ``root`` is a primitive root iff ``root ** ((prime - 1) / q) != 1 (mod prime)``
    for every prime factor ``q`` of ``prime - 1``.
    """
    if root % prime == 0:
        return False
    order = prime - 1
    return all(modular_pow(root, order // q, prime) != 1 for q in prime_factors(order))


@dataclass(frozen=True)
class PrimitiveRootParams:
    """Modulus, base and counter offset of the exponentiation."""
    prime: int = 1000003
    primitive_root: int = 2
    start: int = 0


class PrimitiveRootStrategy(NumberStrategy):
    """Scrambles counter values through modular exponentiation."""

    name = "primitive_root_redis"

    def __init__(
        self,
        counter: RedisCounter,
        encoder: KeyEncoder,
        params: PrimitiveRootParams,
        verify: bool = False,
    ):
        """
        Args:
            counter: Source of counter values.
            encoder: Encoder whose key space bounds the modulus.
            params: Prime modulus, primitive root and start offset.
            verify: Check that the modulus is prime and the root primitive.

        Raises:
            GeneratorConfigurationError: If the modulus exceeds the key space,
                or verification was requested and fails.
        """
        if params.prime > encoder.max_number:
            raise GeneratorConfigurationError(
                f"Generator prime {params.prime} is larger than max number {encoder.max_number}"
            )

        if verify:
            if not is_prime(params.prime):
                raise GeneratorConfigurationError(f"Generator modulus {params.prime} is not prime")
            if not is_primitive_root(params.primitive_root, params.prime):
                raise GeneratorConfigurationError(
                    f"{params.primitive_root} is not a primitive root of {params.prime}"
                )
            logger.generator(
                "Primitive root verified",
                prime=params.prime,
                primitive_root=params.primitive_root
            )

        self._counter = counter
        self._params = params

    @property
    def params(self) -> PrimitiveRootParams:
        return self._params

    @property
    def max_number(self) -> int:
        return self._params.prime - 1

    def calculate_key(self, counter_value: int) -> int:
        """Map a counter value to ``R ** ((c + S) mod P) mod P``."""
        exponent = (counter_value + self._params.start) % self._params.prime
        return modular_pow(self._params.primitive_root, exponent, self._params.prime)

    async def next_number(self) -> int:
        value = await self._counter.next_value()
        return self.calculate_key(value)
