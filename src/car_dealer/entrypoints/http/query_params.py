from __future__ import annotations

from starlette.datastructures import QueryParams


def query_params_to_mapping(query_params: QueryParams) -> dict[str, str | list[str]]:
    """
    Flatten query parameters to one entry per key.

    Keys given once map to their string value; repeated keys map to the list
    of all their values so schema validation can reject them.
    """
    flattened: dict[str, str | list[str]] = {}
    for key in query_params.keys():
        values = query_params.getlist(key)
        flattened[key] = values[0] if len(values) == 1 else values
    return flattened
