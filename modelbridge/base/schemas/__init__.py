"""Typed provider wire schemas (pydantic).

Each provider family decodes JSON objects through these models with
``model_validate``. Read-path fields are lenient (see ``fields``), so a
``pydantic.ValidationError`` only signals a payload that is not a JSON
object at all or a listing entry without its identifier.
"""
