"""
Pydantic schema definitions for API payloads.

The same models describe request bodies, response bodies and the
records handed to and returned by the stores.  Fields are exposed on
the wire in camelCase (``accountId``, ``postedBy``) while Python code
uses snake_case attribute names.
"""
