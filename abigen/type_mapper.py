"""Type mapping from Solidity ABI types to TypeScript types"""

import re
from typing import Optional

from .logging import get_logger

logger = get_logger("type_mapper")


class TypeMapper:
    """Maps Solidity ABI type strings to TypeScript type names"""

    # Direct TypeScript type mappings
    TS_TYPES = {
        'address': 'string',
        'string': 'string',
        'bool': 'boolean',
    }

    SMALL_INT_TYPE = 'number'
    BIG_INT_TYPE = 'BigNumber'
    BYTES_TYPE = 'string'

    # int<M> / uint<M> wider than this need arbitrary precision in JS
    MAX_SAFE_INT_BITS = 32

    # element type and the outermost [N] of an array
    ARRAY_RE = re.compile(r'^(\w+(?:\[\d*\])*)\[\d*\]$')
    TUPLE_ARRAY_RE = re.compile(r'^(tuple(?:\[\d*\])*)\[\d*\]$')
    TUPLE_RE = re.compile(r'^tuple(?:\[\d*\])*$')
    INT_RE = re.compile(r'^u?int(\d*)$')
    BYTES_RE = re.compile(r'^bytes\d*$')
    PREFIX_RE = re.compile(r'^\w+')

    @classmethod
    def to_ts(cls, abi_type: str) -> str:
        """Convert a non-tuple ABI type to a TypeScript type.

        Arrays of any dimension are peeled one bracket pair at a time, so
        ``uint8[2][3]`` becomes ``number[][]``. Unknown types map to ``''``.
        """
        if m := cls.ARRAY_RE.match(abi_type):
            return f'{cls.to_ts(m.group(1))}[]'

        if abi_type in cls.TS_TYPES:
            return cls.TS_TYPES[abi_type]

        if m := cls.INT_RE.match(abi_type):
            bits = int(m.group(1)) if m.group(1) else 256
            return cls.SMALL_INT_TYPE if bits <= cls.MAX_SAFE_INT_BITS else cls.BIG_INT_TYPE

        if cls.BYTES_RE.match(abi_type):
            return cls.BYTES_TYPE

        logger.debug("No TypeScript mapping for ABI type %r", abi_type)
        return ''

    @classmethod
    def is_tuple(cls, abi_type: str) -> bool:
        """Check if type is a tuple or a (possibly nested) tuple array"""
        return cls.TUPLE_RE.match(abi_type) is not None

    @classmethod
    def tuple_array_inner(cls, abi_type: str) -> Optional[str]:
        """Strip the outermost dimension of a tuple array: tuple[2][] -> tuple[2]"""
        if m := cls.TUPLE_ARRAY_RE.match(abi_type):
            return m.group(1)
        return None

    @classmethod
    def name_prefix(cls, abi_type: str) -> str:
        """Leading word characters of a type, used for generated names"""
        if m := cls.PREFIX_RE.match(abi_type):
            return m.group(0)
        return ''

    @classmethod
    def struct_name(cls, internal_type: str) -> Optional[str]:
        """Get the qualified struct name from an internal type.

        ``struct Contract.Foo[]`` gives ``Foo``; returns None when there is no
        dotted segment.
        """
        _, dot, qualified = internal_type.partition('.')
        if not dot:
            return None
        name = qualified.split('[', 1)[0].strip()
        return name or None
