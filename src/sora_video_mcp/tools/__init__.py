# SPDX-License-Identifier: MIT
"""Tool implementations for the Sora video MCP server.

- video: create, remix, status, list, download instructions, save, delete

Functions here raise on failure; ``server`` wraps them into result envelopes.
"""
