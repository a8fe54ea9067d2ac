"""
Exceptions raised by the ABI binding generator.

Every error aborts the generation pass for the ABI being processed; no
partial class list is ever returned to the caller.
"""

from typing import Optional


class AbiBindError(Exception):
    """Base class for all generator errors."""
    pass


class UnsupportedAbiType(AbiBindError):
    """An ABI type string outside the supported type grammar."""

    def __init__(self, abi_type: str, context: Optional[str] = None):
        self.abi_type = abi_type
        self.context = context
        message = f'Unsupported ABI type "{abi_type}"'
        if context:
            message += f' in {context}'
        super().__init__(message)


class MalformedAbiMember(AbiBindError):
    """An ABI member missing fields required for its kind."""

    def __init__(self, message: str, member: Optional[str] = None):
        self.member = member
        if member:
            message = f'{member}: {message}'
        super().__init__(message)
