"""
Models for recordkit.

- domain: the concrete data entries (users, roles, plugins, security incidents)
- io: pydantic request/response schemas used by the API
"""
