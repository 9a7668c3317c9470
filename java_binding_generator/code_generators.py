"""
Code generation functions for JNI glue and Java stub classes
"""

from .constants import DEFAULT_SYMBOL_PREFIX
from .errors import DuplicateSymbolError, UnsupportedArgumentType
from .model import Captured, Entity, Method
from .type_mapper import TypeMapper


class CodeGenerator:
    """Generates Rust JNI glue and Java declarations from the method model"""

    def __init__(self, type_mapper: TypeMapper, symbol_prefix: str = DEFAULT_SYMBOL_PREFIX):
        self.type_mapper = type_mapper
        self.symbol_prefix = symbol_prefix

    def native_symbol(self, entity_name: str, method: Method) -> str:
        """Exported symbol name the JVM resolves for a method"""
        return f"{self.symbol_prefix}_{entity_name}_{method.java_name}"

    def check_symbol_collisions(self, entity: Entity):
        """Reject entities where two methods would export the same symbol"""
        seen = {}
        for method in entity.methods:
            symbol = self.native_symbol(entity.name, method)
            seen.setdefault(symbol, []).append(method.name)
        for symbol, names in seen.items():
            if len(names) > 1:
                raise DuplicateSymbolError(symbol, names)

    def _arg_mapping(self, method: Method, arg: Captured):
        mapping = self.type_mapper.map_type(arg.ty)
        if mapping is None:
            raise UnsupportedArgumentType(method.name, arg.name, arg.ty)
        return mapping

    def generate_native_function(self, entity_name: str, method: Method) -> str:
        """Generate one exported extern "system" function for a method"""
        mapper = self.type_mapper
        ret_mapping = mapper.jni_return_mapping(method)

        params = []
        call_args = []
        for arg in method.captured_args:
            mapping = self._arg_mapping(method, arg)
            params.append(f"{arg.name}: {mapper.qualify(mapping.boundary)}")
            call_args.append(f"{mapper.converter_path(mapping.arg_converter)}(&env, {arg.name})")

        # The env handle is only referenced when something has to be converted
        env_name = "env" if ret_mapping is not None or call_args else "_env"
        if method.is_static:
            receiver = f"_class: {mapper.qualify('JClass')}"
        else:
            receiver = f"_obj: {mapper.qualify('JObject')}"
        params = [f"{env_name}: {mapper.qualify('JNIEnv')}", receiver] + params

        call = f"{entity_name}::{method.name}({', '.join(call_args)})"
        symbol = self.native_symbol(entity_name, method)

        if ret_mapping is None:
            signature = f"pub extern \"system\" fn {symbol}({', '.join(params)})"
            body = call
        else:
            signature = (
                f"pub extern \"system\" fn {symbol}({', '.join(params)})"
                f" -> {mapper.qualify(ret_mapping.return_boundary)}"
            )
            body = f"{mapper.converter_path(ret_mapping.retval_converter)}(&env, {call})"

        return f"""#[no_mangle]
{signature} {{
    {body}
}}
"""

    def generate_java_method(self, method: Method) -> str:
        """Generate the Java native method declaration for a method"""
        return_type = self.type_mapper.java_return_type(method)
        args = []
        for arg in method.captured_args:
            mapping = self._arg_mapping(method, arg)
            args.append(f"{mapping.host} {self._escape_keyword(arg.java_name)}")

        static_qualifier = " static" if method.is_static else ""
        return f"\tpublic{static_qualifier} native {return_type} {method.java_name}({', '.join(args)});"

    @staticmethod
    def _escape_keyword(name: str) -> str:
        """Escape Java reserved words by appending an underscore"""
        # Java reserved words and literals
        java_keywords = {
            'abstract', 'assert', 'boolean', 'break', 'byte', 'case', 'catch',
            'char', 'class', 'const', 'continue', 'default', 'do', 'double',
            'else', 'enum', 'extends', 'false', 'final', 'finally', 'float',
            'for', 'goto', 'if', 'implements', 'import', 'instanceof', 'int',
            'interface', 'long', 'native', 'new', 'null', 'package', 'private',
            'protected', 'public', 'return', 'short', 'static', 'strictfp',
            'super', 'switch', 'synchronized', 'this', 'throw', 'throws',
            'transient', 'true', 'try', 'void', 'volatile', 'while'
        }
        if name in java_keywords:
            return f"{name}_"
        return name

    def emit_native_glue(self, entity: Entity) -> str:
        """Render the JNI glue for every method of an entity"""
        self.check_symbol_collisions(entity)
        functions = [self.generate_native_function(entity.name, method) for method in entity.methods]
        return OutputBuilder.build_glue(functions)

    def emit_java_class(self, entity: Entity, library_name: str, package: str = None) -> str:
        """Render the Java stub class for an entity"""
        self.check_symbol_collisions(entity)
        methods = [self.generate_java_method(method) for method in entity.methods]
        return OutputBuilder.build_java_class(entity.name, library_name, methods, package)


class OutputBuilder:
    """Builds the final output files"""

    @staticmethod
    def build_glue(functions: list[str]) -> str:
        """Join exported functions, separated by a blank line"""
        return "\n".join(functions)

    @staticmethod
    def build_java_class(class_name: str, library_name: str, methods: list[str],
                         package: str = None) -> str:
        """Build a Java class with a library loading block and native declarations"""
        parts = []

        if package:
            parts.append(f"package {package};")
            parts.append("")

        parts.append(f"public class {class_name} {{")
        parts.append("")
        parts.append("\tstatic {")
        parts.append(f"\t\tSystem.loadLibrary(\"{library_name}\");")
        parts.append("\t}")

        for method in methods:
            parts.append("")
            parts.append(method)

        parts.append("")
        parts.append("}")

        return "\n".join(parts) + "\n"
