"""Parser configuration.

ParserConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from typing import Literal

from cookieparse.errors import ConfigurationError

type EmptyPolicy = Literal["keep", "ignore", "reject"]

_POLICIES: frozenset[str] = frozenset({"keep", "ignore", "reject"})


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Set-Cookie parser policy. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ParserConfig(ascii_only=True, empty_path="reject")

    Empty-value policies decide what happens to ``Domain=``, ``Path=``
    and ``Max-Age=`` with nothing after the ``=``:

    - ``"keep"`` stores the empty string
    - ``"ignore"`` skips the attribute as if it were absent
    - ``"reject"`` fails the parse
    """

    # Octets
    ascii_only: bool = False  # Also reject 0x80-0xFF in names and values

    # Empty attribute values
    empty_domain: EmptyPolicy = "keep"
    empty_path: EmptyPolicy = "keep"
    empty_max_age: EmptyPolicy = "reject"  # "keep" has no integer to store

    def __post_init__(self) -> None:
        for field in ("empty_domain", "empty_path", "empty_max_age"):
            policy = getattr(self, field)
            if policy not in _POLICIES:
                msg = f"{field} must be one of {sorted(_POLICIES)}, got {policy!r}"
                raise ConfigurationError(msg)
        if self.empty_max_age == "keep":
            msg = "empty_max_age cannot be 'keep': an empty Max-Age has no integer value"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = ParserConfig()
