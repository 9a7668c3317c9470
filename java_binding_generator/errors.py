"""
Exceptions raised while generating JNI bindings
"""


class BindingGeneratorError(Exception):
    """Base class for every generation failure"""


class UnsupportedReturnType(BindingGeneratorError):
    """A method returns a type that has no JNI/Java mapping"""

    def __init__(self, method: str, raw_type: str):
        self.method = method
        self.raw_type = raw_type
        super().__init__(f"Unsupported return type {raw_type} on function {method}")


class GenerationAborted(BindingGeneratorError):
    """Input the generator does not expect to see; generation stops immediately"""


class SourceParseError(GenerationAborted):
    """A Rust source file could not be read or parsed"""

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Unable to parse {path}: {reason}")


class UnsupportedArgumentShape(GenerationAborted):
    """A signature uses a pattern or type form discovery cannot handle"""


class UnsupportedArgumentType(GenerationAborted):
    """A captured argument has a type outside the mapping table"""

    def __init__(self, method: str, argument: str, raw_type: str):
        self.method = method
        self.argument = argument
        self.raw_type = raw_type
        super().__init__(
            f"Unsupported argument type {raw_type} for argument {argument} on function {method}"
        )


class DuplicateSymbolError(GenerationAborted):
    """Two methods of one entity mangle to the same native symbol"""

    def __init__(self, symbol: str, methods: list[str]):
        self.symbol = symbol
        self.methods = methods
        super().__init__(
            f"Native symbol {symbol} would be exported by more than one method: {', '.join(methods)}"
        )


class OutputWriteError(GenerationAborted):
    """A generated artifact could not be written"""


class BuildError(BindingGeneratorError):
    """Building the crate or installing its artifacts failed"""
