"""Data types for ABI parsing and TypeScript generation"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class AbiParam:
    """Function/event parameter, tuple component or return slot"""
    type: str
    name: Optional[str] = None
    components: list['AbiParam'] = field(default_factory=list)
    internal_type: Optional[str] = None
    indexed: bool = False
    generated_name: bool = False  # set by the resolver only


@dataclass
class FunctionDef:
    """Callable member: function, constructor, receive or fallback"""
    type: str = 'function'
    name: Optional[str] = None
    inputs: list[AbiParam] = field(default_factory=list)
    outputs: list[AbiParam] = field(default_factory=list)
    state_mutability: Optional[str] = None

    @property
    def is_read_only(self) -> bool:
        return self.state_mutability in ('pure', 'view')


@dataclass
class EventDef:
    """Event definition"""
    name: str
    inputs: list[AbiParam] = field(default_factory=list)
    anonymous: bool = False


@dataclass
class ErrorDef:
    """Custom error definition"""
    name: str
    inputs: list[AbiParam] = field(default_factory=list)
    anonymous: bool = False


@dataclass
class ParsedABI:
    """Complete parsed ABI, split by descriptor kind"""
    functions: list[FunctionDef] = field(default_factory=list)
    events: list[EventDef] = field(default_factory=list)
    errors: list[ErrorDef] = field(default_factory=list)


@dataclass
class TSType:
    """TypeScript type resolved for one parameter"""
    param: AbiParam
    type_name: str
    definition: Optional[str] = None  # None for primitive TS types


@dataclass
class TSObject:
    """Named TypeScript value: an identifier and its type"""
    identifier: str
    ts_type: TSType


@dataclass
class GenerationState:
    """Per-pass state: struct registry and generated name counter"""
    structs: dict[str, str] = field(default_factory=dict)
    name_counter: int = 0

    def next_name_index(self) -> int:
        self.name_counter += 1
        return self.name_counter
