"""
MCP (Model Context Protocol) Server Package

Tools that let an agent manage a user's tasks and tags. Every tool is
scoped by ``userID``; agents never talk to the database directly.
"""
