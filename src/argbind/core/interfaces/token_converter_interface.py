from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from argbind.core.domain.conversion_result import ConversionResult

T_co = TypeVar("T_co", covariant=True)


class ITokenConverter(Protocol[T_co]):
    """Converts one raw command-line token into a typed value.

    Implementations should be pure and side-effect free. They report bad
    input through the returned result rather than by raising.
    """

    def convert(self, text: str) -> ConversionResult[T_co]:
        """Convert a token.

        Args:
            text: The raw token, exactly as it appeared on the command line

        Returns:
            A successful result holding the value, or a failed result holding
            the reason the text was rejected.
        """
        ...
