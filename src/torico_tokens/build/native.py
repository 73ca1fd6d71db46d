"""
Native runtime and type-declaration artifacts.

The native entry point and the type stub only forward the token
namespace; ``tokens/index.js`` carries the actual values so the
re-exports resolve inside the dist tree.
"""

from __future__ import annotations

import json

from torico_tokens.tokens.namespace import token_namespace

from .banner import file_banner

TOKENS_IMPORT = "../tokens/index"


def render_native_module(timestamp: str) -> str:
    """``native/index.js``: re-export of the full token namespace."""
    return (
        file_banner("React Native Tokens", timestamp)
        + "\n"
        + "// Re-export all tokens from source\n"
        + f"export * from '{TOKENS_IMPORT}';\n"
        + "\n"
        + "// Additional React Native specific utilities can be added here\n"
    )


def render_native_declaration() -> str:
    """``native/index.d.ts``."""
    return f"export * from '{TOKENS_IMPORT}';"


def render_type_declarations(timestamp: str) -> str:
    """``types/index.d.ts``: declaration-only re-export, no runtime behaviour."""
    return file_banner("Type Definitions", timestamp) + "\n" + f"export * from '{TOKENS_IMPORT}';\n"


def render_token_module(timestamp: str) -> str:
    """``tokens/index.js``: one named export per token table plus a default export."""
    namespace = token_namespace()
    parts = [file_banner("Token Values", timestamp)]
    for name, table in namespace.items():
        parts.append(f"export const {name} = {json.dumps(table, indent=2, ensure_ascii=False)};\n")
    parts.append("export default {\n" + "".join(f"  {name},\n" for name in namespace) + "};\n")
    return "\n".join(parts)
