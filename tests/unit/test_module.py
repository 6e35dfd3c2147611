"""Tests for the routes module serializer."""

import re
from unittest.mock import patch

import pytest

from litestar_file_router.codegen import (
    RouteNode,
    append_not_found,
    build_route_tree,
    count_route_nodes,
    iter_route_nodes,
    serialize_route_tree,
)
from litestar_file_router.codegen._module import GeneratedModule, route_object_path
from litestar_file_router.exceptions import SerializationMismatchError

ROOT = "/root/pages"
SCENARIO_FILES = [
    "/root/pages/index.tsx",
    "/root/pages/about.tsx",
    "/root/pages/blog/index.tsx",
    "/root/pages/blog/[slug].tsx",
]


def test_serialize_single_route_exact_output() -> None:
    module = serialize_route_tree([RouteNode(path="/about", import_path="app/pages/about.tsx")])

    assert module.source == (
        "// AUTO-GENERATED by litestar-file-router. Do not edit.\n"
        "/* eslint-disable */\n"
        "\n"
        "import React from 'react';\n"
        "\n"
        "const FileRoute0 = React.lazy(() => import('app/pages/about.tsx'));\n"
        "\n"
        "export default [\n"
        "  {\n"
        "    path: 'about',\n"
        "    element: (\n"
        "      <React.Suspense fallback={<></>}>\n"
        "        <FileRoute0 />\n"
        "      </React.Suspense>\n"
        "    )\n"
        "  }\n"
        "];\n"
    )
    assert str(module) == module.source


def test_serialize_nested_route_exact_routes() -> None:
    tree = [RouteNode(path="/docs", children=[RouteNode(path="/:docId", import_path="pages/docs/[docId].tsx")])]

    module = serialize_route_tree(tree)

    assert module.bindings == [
        "const FileRoute0 = React.Fragment;",
        "const FileRoute1 = React.lazy(() => import('pages/docs/[docId].tsx'));",
    ]
    assert module.routes == (
        "  {\n"
        "    path: 'docs',\n"
        "    element: (\n"
        "      <React.Suspense fallback={<></>}>\n"
        "        <FileRoute0 />\n"
        "      </React.Suspense>\n"
        "    ),\n"
        "    children: [\n"
        "      {\n"
        "        path: ':docId',\n"
        "        element: (\n"
        "          <React.Suspense fallback={<></>}>\n"
        "            <FileRoute1 />\n"
        "          </React.Suspense>\n"
        "        )\n"
        "      }\n"
        "    ]\n"
        "  }"
    )


def test_serialize_scenario_tree() -> None:
    tree = append_not_found(build_route_tree(SCENARIO_FILES, root=ROOT), "src/pages/404.tsx")

    module = serialize_route_tree(tree)

    assert module.bindings == [
        "const FileRoute0 = React.lazy(() => import('root/pages/index.tsx'));",
        "const FileRoute1 = React.lazy(() => import('root/pages/about.tsx'));",
        "const FileRoute2 = React.lazy(() => import('root/pages/blog/index.tsx'));",
        "const FileRoute3 = React.lazy(() => import('root/pages/blog/[slug].tsx'));",
        "const FileRoute4 = React.lazy(() => import('src/pages/404.tsx'));",
    ]
    assert re.findall(r"path: '([^']*)'", module.routes) == ["/", "about", "blog", ":slug", "*"]
    assert module.source.endswith("];\n")


def test_binding_and_route_positions_line_up() -> None:
    files = [
        "/root/pages/index.tsx",
        "/root/pages/a/b/c.tsx",
        "/root/pages/a/index.tsx",
        "/root/pages/a/[x]/y/index.tsx",
        "/root/pages/d.tsx",
        "/root/pages/e/f/g/h.tsx",
    ]
    tree = build_route_tree(files, root=ROOT)
    nodes = [node for _, node in iter_route_nodes(tree)]

    module = serialize_route_tree(tree)

    assert len(module.bindings) == count_route_nodes(tree) == len(nodes)
    referenced = re.findall(r"<(FileRoute\d+) />", module.routes)
    assert referenced == [f"FileRoute{i}" for i in range(len(nodes))]
    paths = re.findall(r"path: '([^']*)'", module.routes)
    assert paths == [route_object_path(node.path) for node in nodes]
    for index, node in enumerate(nodes):
        if node.import_path is None:
            assert module.bindings[index] == f"const FileRoute{index} = React.Fragment;"
        else:
            assert f"import('{node.import_path}')" in module.bindings[index]


def test_serialize_is_deterministic() -> None:
    first = serialize_route_tree(build_route_tree(SCENARIO_FILES, root=ROOT)).source
    second = serialize_route_tree(build_route_tree(SCENARIO_FILES, root=ROOT)).source

    assert first == second


def test_counter_is_scoped_per_call() -> None:
    tree = build_route_tree(SCENARIO_FILES, root=ROOT)

    serialize_route_tree(tree)
    module = serialize_route_tree(tree)

    assert module.bindings[0].startswith("const FileRoute0 ")


def test_custom_binding_prefix() -> None:
    module = serialize_route_tree([RouteNode(path="/", import_path="pages/index.tsx")], binding_prefix="Binding")

    assert module.bindings == ["const Binding0 = React.lazy(() => import('pages/index.tsx'));"]
    assert "<Binding0 />" in module.routes


def test_fallback_component() -> None:
    module = serialize_route_tree(
        [RouteNode(path="/", import_path="pages/index.tsx")], fallback="src/components/Loading.tsx"
    )

    assert module.imports == [
        "import React from 'react';",
        "import FileRouteFallback from 'src/components/Loading.tsx';",
    ]
    assert "<React.Suspense fallback={<FileRouteFallback />}>" in module.routes


def test_empty_tree() -> None:
    module = serialize_route_tree([])

    assert module.bindings == []
    assert module.source.endswith("import React from 'react';\n\nexport default [];\n")


def test_reserved_characters_are_escaped() -> None:
    tree = [RouteNode(path="/it's", import_path="pages/it's\\odd\n.tsx")]

    module = serialize_route_tree(tree)

    assert module.bindings == ["const FileRoute0 = React.lazy(() => import('pages/it\\'s\\\\odd\\n.tsx'));"]
    assert "path: 'it\\'s'," in module.routes


def test_mismatch_is_detected() -> None:
    tree = build_route_tree(SCENARIO_FILES, root=ROOT)

    with (
        patch("litestar_file_router.codegen._module.count_route_nodes", return_value=99),
        pytest.raises(SerializationMismatchError) as exc_info,
    ):
        serialize_route_tree(tree)

    assert exc_info.value.expected == 99
    assert exc_info.value.emitted == 4


@pytest.mark.parametrize(
    ("path", "expected"),
    [("/", "/"), ("*", "*"), ("/about", "about"), ("/:slug", ":slug")],
)
def test_route_object_path(path: str, expected: str) -> None:
    assert route_object_path(path) == expected


def test_generated_module_defaults() -> None:
    assert GeneratedModule().source.endswith("export default [];\n")
