# SPDX-License-Identifier: MIT
"""MCP server exposing OpenAI Sora video generation as tools."""

__version__ = "1.0.0"
