"""The Content-Transfer-Encoding header field value."""

from __future__ import annotations

from typing import ClassVar

__all__ = ["CaseInsensitiveStr", "ContentTransferEncoding"]


class CaseInsensitiveStr(str):
    """A string that compares and hashes without regard to letter case."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, str):
            return NotImplemented
        return self.lower() == other.lower()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self.lower())


class ContentTransferEncoding:
    """Value of a Content-Transfer-Encoding field: the encoding mechanism."""

    label: ClassVar[str] = "Content-Transfer-Encoding"
    base64: ClassVar[str] = "base64"
    quoted_printable: ClassVar[str] = "quoted-printable"
    binary: ClassVar[str] = "binary"
    sevenbit: ClassVar[str] = "7bit"
    eightbit: ClassVar[str] = "8bit"

    __slots__ = ("_mechanism",)

    def __init__(self, mechanism: str = "") -> None:
        self._mechanism = CaseInsensitiveStr(mechanism)

    @property
    def mechanism(self) -> CaseInsensitiveStr:
        """The encoding mechanism, compared case-insensitively."""
        return self._mechanism

    @mechanism.setter
    def mechanism(self, value: str) -> None:
        self._mechanism = CaseInsensitiveStr(value)

    def set(self, value: str) -> None:
        """Replace the value with the text of a field body."""
        self.mechanism = value

    def copy(self) -> ContentTransferEncoding:
        """Return an independent copy of this value."""
        return ContentTransferEncoding(self._mechanism)

    def __str__(self) -> str:
        return str.__str__(self._mechanism)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ContentTransferEncoding):
            return self._mechanism == other._mechanism
        if isinstance(other, str):
            return self._mechanism == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]