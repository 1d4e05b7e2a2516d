"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base for the relay's environment-driven settings dataclasses.

    Each field is read from ``{_prefix}_{FIELD}`` (upper-cased), or from
    ``FIELD`` alone when ``_prefix`` is empty.  Subclasses hook cross-field
    checks into :meth:`_validate`, which runs right after construction so an
    invalid instance never escapes the factory.
    """

    # must be spelled typing.ClassVar, or dataclasses turns it into a field
    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise :class:`InvalidSettingValueError` on a bad combination."""

    @classmethod
    def env_prefix(cls) -> str:
        return cls._prefix.upper()


__all__ = ["Settings"]
