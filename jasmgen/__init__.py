"""Symbol tables, expression trees and Java assembly code generation for a small language."""

__version__ = "0.1.0"
__all__ = ["ast", "symbol_table", "codegen"]