from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from crosspath_mcp.resources import platform_info
from crosspath_mcp.tools import (
    basename,
    describe,
    dirname,
    extname,
    is_absolute,
    join,
    normalize,
    relative,
    resolve,
)
from crosspath_mcp.tools.common import DEFAULT_CFG, preferred_sep

logger = logging.getLogger(__name__)

mcp = FastMCP("crosspath-mcp")


def _result(value: str | bool, sep: str | None) -> dict:
    return {"result": value, "sep": preferred_sep(sep)}


@mcp.tool()
def normalize_tool(path: str, sep: str | None = None) -> dict:
    return _result(normalize(path, sep=sep), sep)


@mcp.tool()
def resolve_tool(paths: list[str], cwd: str | None = None, sep: str | None = None) -> dict:
    return _result(resolve(*paths, cwd=cwd, sep=sep), sep)


@mcp.tool()
def join_tool(paths: list[str], sep: str | None = None) -> dict:
    return _result(join(*paths, sep=sep), sep)


@mcp.tool()
def dirname_tool(path: str, sep: str | None = None) -> dict:
    return _result(dirname(path, sep=sep), sep)


@mcp.tool()
def basename_tool(path: str, ext: str | None = None) -> dict:
    args = (path,) if ext is None else (path, ext)
    return _result(basename(*args), None)


@mcp.tool()
def extname_tool(path: str) -> dict:
    return _result(extname(path), None)


@mcp.tool()
def is_absolute_tool(path: str) -> dict:
    return _result(is_absolute(path), None)


@mcp.tool()
def relative_tool(from_path: str, to_path: str, cwd: str | None = None, sep: str | None = None) -> dict:
    return _result(relative(from_path, to_path, cwd=cwd, sep=sep), sep)


@mcp.tool()
def describe_tool(path: str, sep: str | None = None) -> dict:
    return describe(path, sep=sep)


@mcp.resource("path://sep")
def sep_resource() -> dict:
    return platform_info()


def main() -> None:
    # stdout carries the stdio transport
    logging.basicConfig(level=DEFAULT_CFG.log_level.upper())
    logger.info("starting crosspath-mcp (sep=%r)", DEFAULT_CFG.sep)
    mcp.run()


if __name__ == "__main__":
    main()
