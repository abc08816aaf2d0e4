"""
Solidity ABI to TypeScript Generator Package

Parses Solidity ABI descriptors and generates:
  1. A TypeScript interface with every contract function signature
  2. TypeScript interfaces for the struct (tuple) types those functions use
"""

from .types import (
    AbiParam, FunctionDef, EventDef, ErrorDef, ParsedABI,
    TSType, TSObject, GenerationState,
)
from .errors import AbiGenError, ABIFormatError, MalformedTupleReference, InvalidStructureSynthesis
from .parser import ABIParser, extract_abi
from .type_mapper import TypeMapper
from .resolver import TypeResolver
from .typescript_generator import TypeScriptGenerator


def generate_definitions(abi: list, **options) -> str:
    """Generate TypeScript definitions for a bare ABI descriptor list"""
    return TypeScriptGenerator(ABIParser(abi).parse(), **options).generate()


__all__ = [
    'AbiParam', 'FunctionDef', 'EventDef', 'ErrorDef', 'ParsedABI',
    'TSType', 'TSObject', 'GenerationState',
    'AbiGenError', 'ABIFormatError', 'MalformedTupleReference', 'InvalidStructureSynthesis',
    'ABIParser', 'extract_abi', 'TypeMapper', 'TypeResolver',
    'TypeScriptGenerator', 'generate_definitions',
]
