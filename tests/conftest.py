"""
Pytest configuration and fixtures
"""

import pytest
from pathlib import Path


LIB_RS = """
#[derive(Debug, JavaExport)]
pub struct Primitive {}

impl Primitive {
    pub fn add_int(a: i32, b: i32) -> i32 {
        a + b
    }

    pub fn compare_bool(a: bool, b: bool) -> bool {
        a == b
    }

    fn private_helper() {}

    pub(crate) fn crate_only() {}
}

#[derive(Debug, JavaExport)]
pub struct Strings {}

impl Strings {
    pub fn hello_world() -> String {
        String::from("Hello, World!")
    }

    pub fn reverse(input: String) -> String {
        input.chars().rev().collect()
    }

    pub fn count_chars(chars_to_count: String) -> i32 {
        chars_to_count.chars().count() as i32
    }
}

#[derive(Debug)]
pub struct NotExported {}

impl NotExported {
    pub fn takes_slice(data: &[u8]) -> usize {
        data.len()
    }
}
"""

COUNTER_RS = """
pub struct Counter {
    value: i64,
}

impl Counter {
    pub fn get(&self) -> i64 {
        self.value
    }

    pub fn set_value(&mut self, new_value: i64) {
        self.value = new_value;
    }

    pub fn consume(self) {}

    pub fn consume_mut(mut self) -> bool {
        self.value += 1;
        true
    }
}

impl std::fmt::Display for Counter {
    fn fmt(&self, f: &mut std::fmt::Formatter) -> std::fmt::Result {
        write!(f, "{}", self.value)
    }
}
"""


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory as a Path"""
    return tmp_path


@pytest.fixture
def rust_crate(tmp_path):
    """Create a small Rust crate with exported types"""
    root = tmp_path / "crate"
    src = root / "src"
    src.mkdir(parents=True)
    (root / "Cargo.toml").write_text("""
[package]
name = "native-lab"
version = "0.1.0"

[lib]
crate-type = ["cdylib"]
""")
    (src / "lib.rs").write_text(LIB_RS)
    (src / "counter.rs").write_text(COUNTER_RS)
    return root


@pytest.fixture
def write_rust(tmp_path):
    """Write Rust sources below a fresh root and return the root"""
    root = tmp_path / "src_root"
    root.mkdir()

    def write(files: dict[str, str]) -> Path:
        for name, content in files.items():
            path = root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return root

    return write
