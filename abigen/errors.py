"""Errors raised while reading an ABI or generating definitions"""


class AbiGenError(ValueError):
    """Base class for abigen errors"""


class ABIFormatError(AbiGenError):
    """Document is neither an ABI list nor a compilation output"""


class MalformedTupleReference(AbiGenError):
    """Tuple internal type has no qualified (dotted) struct name"""

    def __init__(self, internal_type: str):
        self.internal_type = internal_type
        super().__init__(f"Tuple definition {internal_type!r} is unsupported")


class InvalidStructureSynthesis(AbiGenError):
    """Struct generation requested for a type that is not a struct"""

    def __init__(self, internal_type: str):
        self.internal_type = internal_type
        super().__init__(
            f"Unsupported operation: cannot generate struct definition for non-struct type {internal_type!r}"
        )
