"""Ambient TypeScript declaration for the generated routes module."""

from litestar_file_router.codegen._utils import escape_ts_string

DEFAULT_MODULE_NAME = "virtual:file-routes"


def generate_module_declaration(module_name: str = DEFAULT_MODULE_NAME) -> str:
    """Generate a ``declare module`` block typing the routes module.

    The declaration lets application code ``import routes from '<module_name>'``
    with ``VirtualRoute[]`` as the default export.

    Returns:
        The generated ``.d.ts`` source.
    """
    return f"""// AUTO-GENERATED by litestar-file-router. Do not edit.
/* eslint-disable */

declare module "{escape_ts_string(module_name)}" {{
  import type {{ ReactNode }} from "react";

  export interface VirtualRoute {{
    path: string;
    element: ReactNode;
    children?: VirtualRoute[];
  }}

  const routes: VirtualRoute[];
  export default routes;
}}
"""
