"""TypeScript Generator - generates contract type definitions from a parsed ABI"""

from typing import Optional

from .logging import get_logger
from .resolver import TypeResolver
from .types import ParsedABI, FunctionDef, GenerationState

logger = get_logger("typescript_generator")


class TypeScriptGenerator:
    """Generates a TypeScript contract interface plus struct interfaces"""

    def __init__(
        self,
        abi: ParsedABI,
        interface_name: str = "SolidityContract",
        response_type: str = "TransactionResponse",
    ):
        self.abi = abi
        self.interface_name = interface_name
        self.response_type = response_type

    def generate(self) -> str:
        """Generate the complete definitions document.

        Each call starts from an empty struct registry and name counter.
        """
        state = GenerationState()
        resolver = TypeResolver(state)

        lines = [f"interface {self.interface_name} {{"]
        for function in self.abi.functions:
            signature = self._generate_signature(resolver, function)
            if signature is not None:
                lines.append(f"  {signature}")
        lines.append("}")

        result = "\n".join(lines) + "\n"
        for definition in state.structs.values():
            result += f"\n{definition}\n"

        logger.debug(
            "Generated %d signatures and %d structs (%d events, %d errors not emitted)",
            len(lines) - 2, len(state.structs), len(self.abi.events), len(self.abi.errors),
        )
        return result

    def _generate_signature(self, resolver: TypeResolver, function: FunctionDef) -> Optional[str]:
        """Build ``name(a: T, ...): Promise<R>``.

        Nameless members are still resolved, so any structs they use are
        registered, but no line is returned for them.
        """
        params = resolver.resolve_all(function.inputs)
        param_list = ", ".join(f"{p.identifier}: {p.ts_type.type_name}" for p in params)
        return_type = self._return_type(resolver, function)

        if not function.name:
            logger.debug("Skipping nameless %s", function.type)
            return None
        return f"{function.name}({param_list}): {return_type}"

    def _return_type(self, resolver: TypeResolver, function: FunctionDef) -> str:
        if not function.is_read_only:
            return f"Promise<{self.response_type}>"

        outputs = resolver.resolve_all(function.outputs)
        if not outputs:
            return "Promise<void>"
        type_list = ", ".join(o.ts_type.type_name for o in outputs)
        if len(outputs) == 1:
            return f"Promise<{type_list}>"
        return f"Promise<[{type_list}]>"
