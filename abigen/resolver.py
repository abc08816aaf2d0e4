"""Resolves ABI parameters to TypeScript types, discovering struct definitions"""

from dataclasses import replace
from typing import Optional

from .errors import InvalidStructureSynthesis, MalformedTupleReference
from .logging import get_logger
from .type_mapper import TypeMapper
from .types import AbiParam, GenerationState, TSObject, TSType

logger = get_logger("resolver")


class TypeResolver:
    """Maps ABI parameters to TypeScript objects for one generation pass.

    Tuples become named interfaces stored in ``state.structs`` in the order
    they are discovered. A struct name is registered once; later tuples that
    resolve to the same name reuse the first definition as-is. Input
    parameters are never modified, the returned ``TSType.param`` is an
    enriched copy carrying the backfilled name and internal type.
    """

    def __init__(self, state: Optional[GenerationState] = None):
        self.state = state if state is not None else GenerationState()

    @property
    def structs(self) -> dict[str, str]:
        return self.state.structs

    def resolve(self, param: AbiParam) -> TSObject:
        """Resolve one parameter, registering any structs it needs"""
        param = self._enrich(param)

        if (inner := TypeMapper.tuple_array_inner(param.type)) is not None:
            element = self.resolve(replace(param, type=inner))
            return self._object(param, f'{element.ts_type.type_name}[]', element.ts_type.definition)

        if param.type == 'tuple':
            type_name = TypeMapper.struct_name(param.internal_type)
            if type_name is None:
                logger.error("Unsupported tuple definition: %r", param)
                raise MalformedTupleReference(param.internal_type)

            definition = self.structs.get(type_name)
            if definition is None:
                definition = self._generate_struct(type_name, param)
                # a component may have registered the same name first; it keeps
                # its position but this definition replaces it
                self.structs[type_name] = definition
                logger.debug("Registered struct %s", type_name)
            return self._object(param, type_name, definition)

        return self._object(param, TypeMapper.to_ts(param.type))

    def resolve_all(self, params: list[AbiParam]) -> list[TSObject]:
        return [self.resolve(p) for p in params]

    def _enrich(self, param: AbiParam) -> AbiParam:
        """Backfill internal type, then name.

        The internal type must come first so generated struct names only
        ever use a name the author wrote.
        """
        changes = {}
        if not param.internal_type:
            changes['internal_type'] = self._internal_type_name(param)
        if not param.name:
            index = self.state.next_name_index()
            prefix = TypeMapper.name_prefix(param.type)
            changes['name'] = f'{prefix}{index}' if prefix else f'var{index}'
            changes['generated_name'] = True
        return replace(param, **changes) if changes else param

    def _internal_type_name(self, param: AbiParam) -> str:
        if not TypeMapper.is_tuple(param.type):
            return param.type

        name = ''
        if param.name and not param.generated_name:
            name = param.name[0].upper() + param.name[1:]
        # numbered by how many structs exist right now, not by tuples seen
        return f'struct Contract.{name}Struct{len(self.structs) + 1}'

    def _generate_struct(self, type_name: str, param: AbiParam) -> str:
        if not param.internal_type.startswith('struct'):
            raise InvalidStructureSynthesis(param.internal_type)

        lines = [f'interface {type_name} {{']
        for component in self.resolve_all(param.components):
            lines.append(f'  {component.identifier}: {component.ts_type.type_name}')
        lines.append('}')
        return '\n'.join(lines)

    @staticmethod
    def _object(param: AbiParam, type_name: str, definition: Optional[str] = None) -> TSObject:
        return TSObject(
            identifier=param.name,
            ts_type=TSType(param=param, type_name=type_name, definition=definition),
        )
