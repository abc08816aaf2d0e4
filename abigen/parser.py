"""Solidity ABI parser"""

from collections.abc import Mapping
from typing import Any, Optional

from .errors import ABIFormatError
from .types import AbiParam, FunctionDef, EventDef, ErrorDef, ParsedABI


def extract_abi(document: Any) -> list:
    """Return the descriptor list of a bare ABI or a compilation output.

    Build tools (Hardhat, Truffle) write artifacts shaped like
    ``{"contractName": ..., "abi": [...], "bytecode": ...}``.
    """
    if isinstance(document, list) and document:
        return document
    if isinstance(document, Mapping):
        abi = document.get('abi')
        if isinstance(abi, list) and abi:
            return abi
    raise ABIFormatError('ABI is not a valid ABI definition or compilation output file')


def is_compilation_output(document: Any) -> bool:
    return isinstance(document, Mapping) and 'abi' in document


class ABIParser:
    """Splits a Solidity ABI into functions, events and errors"""

    def __init__(self, abi: list):
        if not isinstance(abi, list):
            raise ABIFormatError(f'ABI must be a list of descriptors, got {type(abi).__name__}')
        self.abi = abi

    def parse(self) -> ParsedABI:
        result = ParsedABI()
        for i, entry in enumerate(self.abi):
            if not isinstance(entry, Mapping):
                raise ABIFormatError(f'ABI entry {i} is not an object')

            kind = _string(entry, 'type')
            if kind == 'event':
                result.events.append(EventDef(
                    name=_string(entry, 'name') or '',
                    inputs=self._parse_params(entry.get('inputs')),
                    anonymous=bool(entry.get('anonymous', False)),
                ))
            elif kind == 'error':
                result.errors.append(ErrorDef(
                    name=_string(entry, 'name') or '',
                    inputs=self._parse_params(entry.get('inputs')),
                    anonymous=bool(entry.get('anonymous', False)),
                ))
            else:
                # function, constructor, receive, fallback - or no tag at all
                result.functions.append(FunctionDef(
                    type=kind or 'function',
                    name=_string(entry, 'name') or None,
                    inputs=self._parse_params(entry.get('inputs')),
                    outputs=self._parse_params(entry.get('outputs')),
                    state_mutability=_string(entry, 'stateMutability'),
                ))
        return result

    def _parse_params(self, params) -> list[AbiParam]:
        if not params:
            return []
        if not isinstance(params, list):
            raise ABIFormatError(f'ABI parameter list {params!r} is not an array')
        return [self._parse_param(p) for p in params]

    def _parse_param(self, param) -> AbiParam:
        if not isinstance(param, Mapping):
            raise ABIFormatError(f'ABI parameter {param!r} is not an object')
        return AbiParam(
            type=_string(param, 'type') or '',
            name=_string(param, 'name') or None,
            components=self._parse_params(param.get('components')),
            internal_type=_string(param, 'internalType') or None,
            indexed=bool(param.get('indexed', False)),
        )


def _string(obj: Mapping, key: str) -> Optional[str]:
    """Get an optional string field; null counts as absent"""
    value = obj.get(key)
    if value is not None and not isinstance(value, str):
        raise ABIFormatError(f'ABI field {key!r} must be a string, got {value!r}')
    return value
