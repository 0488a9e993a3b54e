"""
ZenHub MCP - ZenHub's GraphQL API as tools for an LLM agent.

The server exposes ZenHub operations over the Model Context Protocol:
- Issues, epics, sprints, pipelines and milestones
- Workspaces, repositories, labels and users
- A raw GraphQL fallback for anything the specific tools don't cover
"""

__version__ = "1.0.0"
