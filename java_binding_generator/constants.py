"""
Constants and mappings for Java/JNI bindings generation
"""


# Mapping from Rust types to (JNI boundary type, Java type, arg converter, retval converter).
# Converter names refer to functions in the runtime crate's `convert` module.
JNI_TYPE_MAP = {
    "i8": ("jbyte", "byte", "convert_arg_jbyte", "convert_retval_i8"),
    "bool": ("jboolean", "boolean", "convert_arg_jboolean", "convert_retval_bool"),
    "i16": ("jshort", "short", "convert_arg_jshort", "convert_retval_i16"),
    "u16": ("jchar", "char", "convert_arg_jchar", "convert_retval_u16"),
    "i32": ("jint", "int", "convert_arg_jint", "convert_retval_i32"),
    "u32": ("jlong", "long", "convert_arg_jlong_u32", "convert_retval_u32"),  # widened
    "i64": ("jlong", "long", "convert_arg_jlong", "convert_retval_i64"),
    "f32": ("jfloat", "float", "convert_arg_jfloat", "convert_retval_f32"),
    "f64": ("jdouble", "double", "convert_arg_jdouble", "convert_retval_f64"),
    "String": ("JString", "String", "convert_arg_jstring", "convert_retval_string"),
    "Vec<u8>": ("jbyteArray", "byte[]", "convert_arg_jbytearray", "convert_retval_vecu8"),
}

# Boundary types that differ when the value travels back to Java
RETURN_BOUNDARY_OVERRIDES = {
    "JString": "jstring",
}

# The only generic type accepted as an argument
BYTE_SEQUENCE_TYPE = "Vec<u8>"

# Rust source file extension
RUST_SOURCE_SUFFIX = ".rs"

# Default prefix for exported native symbols
DEFAULT_SYMBOL_PREFIX = "Host"

# Default crate path providing JNIEnv, JClass, boundary types and converters
DEFAULT_RUNTIME_CRATE = "jnirt"

# Derive marker identifying exported structs
DEFAULT_EXPORT_MARKER = "JavaExport"

# Default output locations
DEFAULT_OUTPUT_DIR = "generated"
GLUE_FILE_NAME = "jni_bindings.rs"
JAVA_DIR_NAME = "java"
JAVA_SOURCE_SUFFIX = ".java"

# Build record file written at the project root
BUILD_RECORD_FILE = "jbind.json"
